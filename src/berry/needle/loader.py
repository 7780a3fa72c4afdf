from pathlib import Path
from typing import Dict, List, Optional

from .interfaces import FileHandler
from .handlers import JsonHandler


class Loader:
    def __init__(self, handlers: Optional[List[FileHandler]] = None):
        self.handlers = handlers or [JsonHandler()]

    def load_file(self, path: Path) -> Dict[str, str]:
        handler = next((h for h in self.handlers if h.match(path)), None)
        if handler is None:
            return {}
        try:
            content = handler.load(path)
        except (OSError, ValueError):
            # A broken catalog must never take diagnostics down with it.
            return {}
        if not isinstance(content, dict):
            return {}
        return {str(key): str(value) for key, value in content.items()}

    def load_directory(self, root_path: Path) -> Dict[str, str]:
        registry: Dict[str, str] = {}
        if not root_path.is_dir():
            return registry

        # Sorted so that a key defined twice resolves the same way every run.
        for path in sorted(p for p in root_path.rglob("*") if p.is_file()):
            registry.update(self.load_file(path))
        return registry
