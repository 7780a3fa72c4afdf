from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union, Protocol, Optional


class FileSystemAdapter(Protocol):
    def write_text(self, path: Path, content: str) -> None: ...
    def ensure_dir(self, path: Path) -> None: ...


class RealFileSystem:
    def write_text(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps "\n" on every platform so output is byte-stable.
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(content)

    def ensure_dir(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)


@dataclass
class FileOp(ABC):
    path: Path

    @abstractmethod
    def execute(self, fs: FileSystemAdapter, root: Path) -> None: ...

    @abstractmethod
    def describe(self) -> str: ...


@dataclass
class WriteFileOp(FileOp):
    content: str

    def execute(self, fs: FileSystemAdapter, root: Path) -> None:
        fs.write_text(root / self.path, self.content)

    def describe(self) -> str:
        return f"[WRITE] {self.path.as_posix()}"


@dataclass
class EnsureDirectoryOp(FileOp):
    def execute(self, fs: FileSystemAdapter, root: Path) -> None:
        fs.ensure_dir(root / self.path)

    def describe(self) -> str:
        return f"[MKDIR] {self.path.as_posix()}"


class TransactionManager:
    """
    Stages filesystem operations and applies them in order on commit.

    There is no rollback: a failure halfway through ``commit`` leaves the
    operations executed so far on disk. Regeneration is idempotent, so
    rerunning completes the tree.
    """

    def __init__(self, root_path: Path, fs: Optional[FileSystemAdapter] = None):
        self.root_path = root_path
        self.fs = fs or RealFileSystem()
        self._ops: List[FileOp] = []

    @property
    def pending_count(self) -> int:
        return len(self._ops)

    @property
    def operations(self) -> List[FileOp]:
        return list(self._ops)

    def extend(self, ops: List[FileOp]) -> None:
        self._ops.extend(ops)

    def add_write(self, path: Union[str, Path], content: str) -> None:
        self._ops.append(WriteFileOp(Path(path), content))

    def add_ensure_dir(self, path: Union[str, Path]) -> None:
        self._ops.append(EnsureDirectoryOp(Path(path)))

    def preview(self) -> List[str]:
        return [op.describe() for op in self._ops]

    def commit(self) -> None:
        for op in self._ops:
            op.execute(self.fs, self.root_path)
        self._ops.clear()
