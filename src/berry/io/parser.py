import json
import os
from pathlib import Path
from typing import Any, List, Optional

import yaml

from berry.spec import (
    Argument,
    ClassExtension,
    DeclarationHandlerProtocol,
    ExtensionDocument,
    Method,
    ParseError,
    split_namespace,
)
from .handlers import JsonDeclarationHandler, YamlDeclarationHandler


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        # YAML/JSON booleans should read back as PHP/Python literals, not "True".
        return "true" if value else "false"
    return str(value)


_PATH_SEPARATORS = tuple(sep for sep in ("/", "\\", os.sep, os.altsep) if sep)


def _is_safe_path_part(part: str) -> bool:
    # Segments and class names become directory and file names.
    if part in ("", ".", ".."):
        return False
    return not any(sep in part for sep in _PATH_SEPARATORS)


def _require_mapping(value: Any, where: str) -> dict:
    if not isinstance(value, dict):
        raise ParseError(f"expected an object at '{where}'")
    return value


def _require_list(value: Any, where: str) -> list:
    if not isinstance(value, list):
        raise ParseError(f"expected a list at '{where}'")
    return value


def _require_name(data: dict, where: str) -> str:
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise ParseError(f"missing or empty 'name' at '{where}'")
    return name


class DeclarationParser:
    """
    Turns the raw bytes of one declaration file into an ExtensionDocument.

    Only structure is checked here. Name uniqueness is the merger's job.
    """

    def __init__(self, handlers: Optional[List[DeclarationHandlerProtocol]] = None):
        self.handlers = handlers or [JsonDeclarationHandler(), YamlDeclarationHandler()]

    def _select_handler(self, path: Optional[Path]) -> DeclarationHandlerProtocol:
        if path is not None:
            for handler in self.handlers:
                if handler.match(path):
                    return handler
        return self.handlers[0]

    def parse(self, raw: bytes, path: Optional[Path] = None) -> ExtensionDocument:
        source = str(path) if path is not None else ""
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"not valid UTF-8 ({e.reason})", source) from e

        handler = self._select_handler(path)
        try:
            data = handler.decode(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ParseError(f"malformed document: {e}", source) from e

        try:
            return self.build_document(data)
        except ParseError as e:
            raise ParseError(str(e), source) from e

    def build_document(self, data: Any) -> ExtensionDocument:
        root = _require_mapping(data, "<root>")
        if "extensions" not in root:
            raise ParseError("missing 'extensions'")
        entries = _require_list(root["extensions"], "extensions")
        return ExtensionDocument(
            extensions=[
                self._build_extension(entry, f"extensions[{i}]")
                for i, entry in enumerate(entries)
            ]
        )

    def _build_extension(self, entry: Any, where: str) -> ClassExtension:
        data = _require_mapping(entry, where)
        for key in ("namespace", "class", "methods"):
            if key not in data:
                raise ParseError(f"missing '{key}' at '{where}'")

        namespace = data["namespace"]
        if not isinstance(namespace, str):
            raise ParseError(f"'namespace' must be a string at '{where}'")
        for segment in split_namespace(namespace):
            if not _is_safe_path_part(segment):
                raise ParseError(
                    f"invalid namespace segment '{segment}' at '{where}'"
                )

        classes = data["class"]
        if isinstance(classes, str):
            classes = [classes]
        if not isinstance(classes, list) or not all(
            isinstance(c, str) and _is_safe_path_part(c) for c in classes
        ):
            raise ParseError(
                f"'class' must be a name or a list of names at '{where}'"
            )

        uses = data.get("uses") or []
        uses = [str(u) for u in _require_list(uses, f"{where}.uses")]

        methods = _require_list(data["methods"], f"{where}.methods")
        return ClassExtension(
            namespace=namespace,
            classes=list(classes),
            uses=uses,
            methods=[
                self._build_method(m, f"{where}.methods[{i}]")
                for i, m in enumerate(methods)
            ],
        )

    def _build_method(self, entry: Any, where: str) -> Method:
        data = _require_mapping(entry, where)
        args = data.get("args") or []
        return Method(
            name=_require_name(data, where),
            doc=_optional_str(data.get("doc")),
            returns=_optional_str(data.get("returns")),
            args=[
                self._build_argument(a, f"{where}.args[{i}]")
                for i, a in enumerate(_require_list(args, f"{where}.args"))
            ],
        )

    def _build_argument(self, entry: Any, where: str) -> Argument:
        data = _require_mapping(entry, where)
        return Argument(
            name=_require_name(data, where),
            type=_optional_str(data.get("type")),
            default_value=_optional_str(data.get("defaultValue")),
        )
