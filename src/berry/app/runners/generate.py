from pathlib import Path
from typing import Dict, List, Optional, Tuple

from berry.common import bus, TransactionManager
from berry.config import BerryConfig
from berry.io import DeclarationParser
from berry.needle import L
from berry.spec import (
    ConflictError,
    GenerateResult,
    NamespaceNode,
    PackageResult,
    ParseError,
    StubDirectoryError,
)
from berry.app.services import NamespaceTreeMerger, StubEmitter


class GenerateRunner:
    def __init__(
        self,
        root_path: Path,
        config: BerryConfig,
        parser: DeclarationParser,
        merger: NamespaceTreeMerger,
        emitter: StubEmitter,
    ):
        self.root_path = root_path
        self.config = config
        self.parser = parser
        self.merger = merger
        self.emitter = emitter

    @property
    def stub_root(self) -> Path:
        return self.root_path / self.config.stub_dir

    def _process_package(
        self, tree: NamespaceNode, name: str, package_root: Optional[Path]
    ) -> PackageResult:
        if package_root is None:
            bus.debug(L.generate.package.skipped, name=name)
            return PackageResult(name=name, path=None)

        declaration_path = package_root / self.config.declaration_file
        bus.info(L.generate.package.processing, name=name)

        try:
            raw = declaration_path.read_bytes()
            document = self.parser.parse(raw, declaration_path)
            self.merger.merge(tree, name, document)
        except ParseError as e:
            bus.error(L.error.package.parse, name=name, path=declaration_path, error=e)
            return PackageResult(name, declaration_path, success=False, error=str(e))
        except ConflictError as e:
            bus.error(
                L.error.package.conflict, name=name, path=declaration_path, error=e
            )
            return PackageResult(name, declaration_path, success=False, error=str(e))
        except OSError as e:
            bus.error(L.error.package.read, name=name, path=declaration_path, error=e)
            return PackageResult(name, declaration_path, success=False, error=str(e))
        except Exception as e:
            # One broken package must never stop the others from being merged.
            bus.error(
                L.error.package.generic, name=name, path=declaration_path, error=e
            )
            return PackageResult(name, declaration_path, success=False, error=str(e))

        count = len(document.extensions)
        bus.debug(L.generate.package.merged, name=name, count=count)
        return PackageResult(name, declaration_path, entries_merged=count)

    def merge_packages(
        self, packages: Dict[str, Optional[Path]]
    ) -> Tuple[NamespaceNode, List[PackageResult]]:
        tree = NamespaceNode()
        results = [
            self._process_package(tree, name, path) for name, path in packages.items()
        ]
        return tree, results

    def _ensure_stub_root(self) -> None:
        try:
            self.stub_root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StubDirectoryError(str(self.stub_root), e.strerror or str(e)) from e

    def run(
        self, packages: Dict[str, Optional[Path]], dry_run: bool = False
    ) -> GenerateResult:
        bus.info(L.generate.run.start)

        tree, results = self.merge_packages(packages)
        result = GenerateResult(packages=results, dry_run=dry_run)

        if tree.is_empty():
            bus.warning(L.generate.run.empty)

        tm = TransactionManager(self.root_path)
        staged = self.emitter.emit(tree, Path(self.config.stub_dir), tm)

        if dry_run:
            for op in tm.preview():
                bus.info(L.generate.dry_run.op, op=op)
        else:
            self._ensure_stub_root()
            tm.commit()
            for path in staged:
                bus.success(L.generate.file.success, path=path.as_posix())

        result.generated_files = [self.root_path / path for path in staged]

        if result.failed_packages:
            bus.warning(L.generate.run.failures, count=len(result.failed_packages))
        if not dry_run:
            bus.success(L.generate.run.complete, count=len(staged))
        return result
