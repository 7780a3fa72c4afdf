import json
from pathlib import Path
from textwrap import dedent
from typing import Dict, Any, List, Optional

import yaml
import tomli_w

from berry.config.loader import DEFAULT_DECLARATION_FILE


class WorkspaceFactory:
    """
    Builds a fake Composer project on disk: a root ``composer.json``,
    ``vendor/<name>/`` package roots and ``vendor/composer/installed.json``
    listing them in the order they were added.
    """

    def __init__(self, root_path: Path):
        self.root_path = root_path
        self._files_to_create: List[Dict[str, Any]] = []
        self._pyproject_data: Dict[str, Any] = {}
        self._installed: List[Dict[str, Any]] = []
        self._root_name: Optional[str] = None

    def with_config(self, berry_config: Dict[str, Any]) -> "WorkspaceFactory":
        tool = self._pyproject_data.setdefault("tool", {})
        tool["berry"] = berry_config
        return self

    def with_root_package(self, name: str) -> "WorkspaceFactory":
        self._root_name = name
        return self

    def with_file(self, path: str, content: str) -> "WorkspaceFactory":
        self._files_to_create.append(
            {"path": path, "content": dedent(content), "format": "raw"}
        )
        return self

    def with_package(
        self,
        name: str,
        extensions: Optional[List[Dict[str, Any]]] = None,
        raw: Optional[str] = None,
        filename: str = DEFAULT_DECLARATION_FILE,
    ) -> "WorkspaceFactory":
        """
        Registers an installed package. ``extensions`` becomes its
        declaration document; ``raw`` is written verbatim instead.
        A package with neither ships no declaration file.
        """
        self._installed.append({"name": name, "install-path": f"../{name}"})
        self._add_declarations(f"vendor/{name}/{filename}", extensions, raw)
        return self

    def with_root_declarations(
        self,
        extensions: Optional[List[Dict[str, Any]]] = None,
        raw: Optional[str] = None,
        filename: str = DEFAULT_DECLARATION_FILE,
    ) -> "WorkspaceFactory":
        self._add_declarations(filename, extensions, raw)
        return self

    def _add_declarations(
        self,
        path: str,
        extensions: Optional[List[Dict[str, Any]]],
        raw: Optional[str],
    ) -> None:
        if raw is not None:
            self._files_to_create.append({"path": path, "content": raw, "format": "raw"})
        elif extensions is not None:
            fmt = "yaml" if path.endswith((".yaml", ".yml")) else "json"
            self._files_to_create.append(
                {"path": path, "content": {"extensions": extensions}, "format": fmt}
            )

    def build(self) -> Path:
        if self._pyproject_data:
            self._files_to_create.append(
                {
                    "path": "pyproject.toml",
                    "content": self._pyproject_data,
                    "format": "toml",
                }
            )

        self._files_to_create.append(
            {
                "path": "composer.json",
                "content": {"name": self._root_name or "acme/app"},
                "format": "json",
            }
        )
        self._files_to_create.append(
            {
                "path": "vendor/composer/installed.json",
                "content": {"packages": self._installed},
                "format": "json",
            }
        )
        for package in self._installed:
            (self.root_path / "vendor" / package["name"]).mkdir(
                parents=True, exist_ok=True
            )

        for file_spec in self._files_to_create:
            output_path = self.root_path / file_spec["path"]
            output_path.parent.mkdir(parents=True, exist_ok=True)

            fmt = file_spec["format"]
            content = file_spec["content"]

            if fmt == "toml":
                with output_path.open("wb") as f:
                    tomli_w.dump(content, f)
            elif fmt == "yaml":
                output_path.write_text(yaml.safe_dump(content), encoding="utf-8")
            elif fmt == "json":
                output_path.write_text(json.dumps(content, indent=2), encoding="utf-8")
            else:
                output_path.write_text(content, encoding="utf-8")

        return self.root_path
