from pathlib import Path
from typing import Dict, Optional

from berry.common import bus
from berry.config import BerryConfig, load_config_from_path
from berry.io import DeclarationParser, RENDERERS, make_renderer
from berry.needle import L
from berry.spec import (
    GenerateResult,
    PackageDiscoveryProtocol,
    StubRendererProtocol,
)
from .runners import GenerateRunner
from .services import ComposerPackageDiscovery, NamespaceTreeMerger, StubEmitter


class BerryApp:
    def __init__(
        self,
        root_path: Path,
        config: Optional[BerryConfig] = None,
        discovery: Optional[PackageDiscoveryProtocol] = None,
        parser: Optional[DeclarationParser] = None,
        renderer: Optional[StubRendererProtocol] = None,
    ):
        self.root_path = root_path
        self.config = config or load_config_from_path(root_path)
        self.discovery = discovery or ComposerPackageDiscovery(
            root_path,
            vendor_dir=self.config.vendor_dir,
            declaration_file=self.config.declaration_file,
        )
        self.renderer = renderer or self._make_renderer()
        self.generate_runner = GenerateRunner(
            root_path,
            self.config,
            parser or DeclarationParser(),
            NamespaceTreeMerger(),
            StubEmitter(self.renderer),
        )

    def _make_renderer(self) -> StubRendererProtocol:
        if self.config.format not in RENDERERS:
            bus.warning(L.warning.config.format, format=self.config.format)
            return make_renderer("php")
        return make_renderer(self.config.format)

    def run_list(self) -> Dict[str, Optional[Path]]:
        return self.discovery.discover()

    def run_generate(self, dry_run: bool = False) -> GenerateResult:
        packages = self.discovery.discover()
        return self.generate_runner.run(packages, dry_run=dry_run)
