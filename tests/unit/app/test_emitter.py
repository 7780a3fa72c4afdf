from pathlib import Path

import pytest

from berry.app.services import NamespaceTreeMerger, StubEmitter
from berry.common import TransactionManager
from berry.io import PhpStubRenderer
from berry.spec import (
    ClassExtension,
    ExtensionDocument,
    MergedClass,
    Method,
    NamespaceNode,
    UnsafeStubPathError,
)


def _tree() -> NamespaceNode:
    tree = NamespaceNode()
    NamespaceTreeMerger().merge(
        tree,
        "acme/a",
        ExtensionDocument(
            extensions=[
                ClassExtension("App\\Models", ["User"], [Method(name="save")]),
                ClassExtension("App", ["Kernel"], [Method(name="boot")]),
                ClassExtension("Vendor\\Empty", [], []),
            ]
        ),
    )
    return tree


def test_emit_stages_directories_and_files_in_sorted_order(tmp_path: Path):
    tm = TransactionManager(tmp_path)

    written = StubEmitter(PhpStubRenderer()).emit(_tree(), Path("stubs"), tm)

    assert tm.preview() == [
        "[MKDIR] stubs/App",
        "[WRITE] stubs/App/Kernel.php",
        "[MKDIR] stubs/App/Models",
        "[WRITE] stubs/App/Models/User.php",
        "[MKDIR] stubs/Vendor",
        "[MKDIR] stubs/Vendor/Empty",
    ]
    assert written == [Path("stubs/App/Kernel.php"), Path("stubs/App/Models/User.php")]


def test_emit_writes_on_commit(tmp_path: Path):
    tm = TransactionManager(tmp_path)
    StubEmitter(PhpStubRenderer()).emit(_tree(), Path("stubs"), tm)

    tm.commit()

    user = tmp_path / "stubs" / "App" / "Models" / "User.php"
    assert "@method save()" in user.read_text(encoding="utf-8")
    assert (tmp_path / "stubs" / "Vendor" / "Empty").is_dir()


@pytest.mark.parametrize(
    "tree",
    [
        NamespaceNode(
            classes={"escaped": MergedClass(segments=(), name="../../escaped")}
        ),
        NamespaceNode(children={"/abs": NamespaceNode(segment="/abs")}),
        NamespaceNode(
            children={
                "..": NamespaceNode(
                    segment="..",
                    classes={"X": MergedClass(segments=("..",), name="X")},
                )
            }
        ),
    ],
)
def test_emit_refuses_paths_outside_the_stub_root(tmp_path: Path, tree):
    tm = TransactionManager(tmp_path)

    with pytest.raises(UnsafeStubPathError):
        StubEmitter(PhpStubRenderer()).emit(tree, Path("stubs"), tm)

    assert tm.pending_count == 0
    tm.commit()
    assert list(tmp_path.iterdir()) == []
