import json
from pathlib import Path
from typing import Any

import yaml


class JsonDeclarationHandler:
    def match(self, path: Path) -> bool:
        return path.suffix.lower() == ".json"

    def decode(self, text: str) -> Any:
        return json.loads(text)


class YamlDeclarationHandler:
    def match(self, path: Path) -> bool:
        return path.suffix.lower() in (".yaml", ".yml")

    def decode(self, text: str) -> Any:
        return yaml.safe_load(text)
