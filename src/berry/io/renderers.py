from typing import Dict, List, Type

from berry.spec import Argument, MergedClass, Method, StubRendererProtocol

BANNER = "This file was automatically generated by berry-stubgen, please don't edit it"


def _sorted_methods(merged: MergedClass) -> List[Method]:
    # Name order, not contribution order: output must not depend on
    # which package was processed first.
    return sorted(merged.methods, key=lambda m: m.name)


class PhpStubRenderer:
    """Renders a class as a PHP stub carrying ``@method`` docblock tags."""

    file_extension = "php"

    def render(self, merged: MergedClass) -> str:
        lines = ["<?php declare(strict_types=1);", "", f"/** {BANNER} */", ""]

        if merged.segments:
            lines.append(f"namespace {merged.namespace};")
            lines.append("")

        uses = sorted(set(merged.uses))
        if uses:
            lines.extend(f"use {use};" for use in uses)
            lines.append("")

        lines.append("/**")
        for method in _sorted_methods(merged):
            lines.append(f" * @method {self._render_method(method)}")
        lines.append(" */")

        lines.extend([f"class {merged.name}", "{", "    // stub", "}"])
        return "\n".join(lines) + "\n"

    def _render_method(self, method: Method) -> str:
        signature = f"{method.name}({self._render_args(method.args)})"
        if method.returns:
            signature = f"{method.returns} {signature}"
        if method.doc:
            # A docblock tag cannot span lines.
            signature += " " + " ".join(method.doc.split())
        return signature

    def _render_args(self, args: List[Argument]) -> str:
        parts = []
        for arg in args:
            name = arg.name if arg.name.startswith("$") else f"${arg.name}"
            part = f"{arg.type} {name}" if arg.type else name
            if arg.default_value is not None:
                part += f" = {arg.default_value}"
            parts.append(part)
        return ", ".join(parts)


class PythonStubRenderer:
    """Renders a class as a ``.pyi`` stub; the namespace is the directory path."""

    file_extension = "pyi"

    def __init__(self, indent_spaces: int = 4):
        self._indent_str = " " * indent_spaces

    def render(self, merged: MergedClass) -> str:
        lines = [f"# {BANNER}", ""]

        imports = sorted({self._import_line(use) for use in merged.uses})
        if imports:
            lines.extend(imports)
            lines.append("")

        lines.append(self._generate_class(merged))
        return "\n".join(lines).strip() + "\n"

    def _import_line(self, use: str) -> str:
        use = use.strip()
        if use.startswith(("import ", "from ")):
            return use

        path, _, alias = use.replace("\\", ".").strip(".").partition(" as ")
        suffix = f" as {alias.strip()}" if alias else ""
        module, _, name = path.strip().rpartition(".")
        if not module:
            return f"import {name}{suffix}"
        return f"from {module} import {name}{suffix}"

    def _format_docstring(self, doc: str, level: int) -> str:
        indent = self._indent_str * level
        if "\n" in doc:
            body = "\n".join(
                f"{indent}{line}" if line else "" for line in doc.splitlines()
            )
            return f'{indent}"""\n{body}\n{indent}"""'
        return f'{indent}"""{doc}"""'

    def _generate_args(self, args: List[Argument]) -> str:
        parts = ["self"]
        for arg in args:
            part = arg.name.lstrip("$")
            if arg.type:
                part += f": {arg.type}"
            if arg.default_value is not None:
                part += f" = {arg.default_value}"
            parts.append(part)
        return ", ".join(parts)

    def _generate_method(self, method: Method, level: int) -> str:
        indent = self._indent_str * level
        ret_str = f" -> {method.returns}" if method.returns else ""
        def_line = f"{indent}def {method.name}({self._generate_args(method.args)}){ret_str}:"

        if method.doc:
            return "\n".join(
                [
                    def_line,
                    self._format_docstring(method.doc, level + 1),
                    f"{self._indent_str * (level + 1)}...",
                ]
            )
        return f"{def_line} ..."

    def _generate_class(self, merged: MergedClass) -> str:
        lines = [f"class {merged.name}:"]
        methods = _sorted_methods(merged)
        if not methods:
            lines.append(f"{self._indent_str}...")
            return "\n".join(lines)

        for i, method in enumerate(methods):
            lines.append(self._generate_method(method, 1))
            if i < len(methods) - 1:
                lines.append("")
        return "\n".join(lines)


RENDERERS: Dict[str, Type[StubRendererProtocol]] = {
    "php": PhpStubRenderer,
    "pyi": PythonStubRenderer,
}


def make_renderer(fmt: str) -> StubRendererProtocol:
    try:
        return RENDERERS[fmt]()
    except KeyError:
        raise ValueError(f"Unknown stub format '{fmt}'") from None
