from pathlib import Path
from typing import List

from berry.common import TransactionManager
from berry.spec import (
    MergedClass,
    NamespaceNode,
    StubRendererProtocol,
    UnsafeStubPathError,
)


class StubEmitter:
    def __init__(self, renderer: StubRendererProtocol):
        self.renderer = renderer

    def stub_path(self, current: Path, merged: MergedClass) -> Path:
        return current / f"{merged.name}.{self.renderer.file_extension}"

    def emit(
        self, tree: NamespaceNode, root_path: Path, tm: TransactionManager
    ) -> List[Path]:
        """
        Stages one directory per namespace segment and one file per class.

        Keys are visited in sorted order so the staged operations, and
        therefore the files and diagnostics, are identical between runs.
        Every staged path must resolve inside ``root_path``; otherwise
        UnsafeStubPathError is raised before anything is staged.
        Returns the staged file paths.
        """
        staging = TransactionManager(tm.root_path)
        written: List[Path] = []
        self._emit_node(tree, root_path, staging, written)

        stub_root = (tm.root_path / root_path).resolve()
        for op in staging.operations:
            self._check_inside(stub_root, tm.root_path / op.path)

        tm.extend(staging.operations)
        return written

    def _check_inside(self, stub_root: Path, path: Path) -> None:
        resolved = path.resolve()
        if resolved != stub_root and stub_root not in resolved.parents:
            raise UnsafeStubPathError(str(path), str(stub_root))

    def _emit_node(
        self,
        node: NamespaceNode,
        current: Path,
        tm: TransactionManager,
        written: List[Path],
    ) -> None:
        for class_name in sorted(node.classes):
            merged = node.classes[class_name]
            path = self.stub_path(current, merged)
            tm.add_write(path, self.renderer.render(merged))
            written.append(path)

        for segment in sorted(node.children):
            directory = current / segment
            tm.add_ensure_dir(directory)
            self._emit_node(node.children[segment], directory, tm, written)
