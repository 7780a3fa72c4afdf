import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from berry.common import bus
from berry.config.loader import DEFAULT_DECLARATION_FILE
from berry.needle import L


class StaticPackageDiscovery:
    def __init__(self, packages: Dict[str, Optional[Path]]):
        self._packages = dict(packages)

    def discover(self) -> Dict[str, Optional[Path]]:
        return dict(self._packages)


class ComposerPackageDiscovery:
    """
    Finds the installed Composer packages, plus the root project, that
    ship a declaration file.

    Installed packages come first, in the order Composer lists them;
    the root project is last so it can extend anything a dependency
    declared.
    """

    def __init__(
        self,
        root_path: Path,
        vendor_dir: str = "vendor",
        declaration_file: str = DEFAULT_DECLARATION_FILE,
    ):
        self.root_path = root_path
        self.vendor_path = root_path / vendor_dir
        self.declaration_file = declaration_file

    @property
    def installed_json(self) -> Path:
        return self.vendor_path / "composer" / "installed.json"

    def _load_installed(self) -> List[Dict[str, Any]]:
        path = self.installed_json
        if not path.is_file():
            return []
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            bus.warning(L.discovery.installed.unreadable, path=path, error=e)
            return []

        # Composer 2 wraps the list, Composer 1 writes it bare.
        packages = data.get("packages", []) if isinstance(data, dict) else data
        if not isinstance(packages, list):
            return []
        return [p for p in packages if isinstance(p, dict) and p.get("name")]

    def _install_path(self, package: Dict[str, Any]) -> Path:
        install_path = package.get("install-path")
        if install_path:
            # Relative to vendor/composer/, as Composer writes it.
            return (self.installed_json.parent / install_path).resolve()
        return (self.vendor_path / package["name"]).resolve()

    def _root_package_name(self) -> str:
        composer_json = self.root_path / "composer.json"
        try:
            data = json.loads(composer_json.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return self.root_path.resolve().name
        if isinstance(data, dict) and isinstance(data.get("name"), str):
            return data["name"]
        return self.root_path.resolve().name

    def contains_declarations(self, package_root: Path) -> bool:
        return (package_root / self.declaration_file).is_file()

    def discover(self) -> Dict[str, Optional[Path]]:
        packages: Dict[str, Optional[Path]] = {}

        for package in self._load_installed():
            path = self._install_path(package)
            if not path.is_dir():
                continue
            if self.contains_declarations(path):
                bus.info(L.discovery.package.found, name=package["name"])
                packages[package["name"]] = path

        root = self.root_path.resolve()
        if self.contains_declarations(root):
            name = self._root_package_name()
            bus.info(L.discovery.package.found, name=name)
            packages[name] = root

        return packages
