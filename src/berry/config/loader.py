import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib

DEFAULT_STUB_DIR = ".berry/stubs"
DEFAULT_DECLARATION_FILE = "berry-method-extensions.json"

_PROJECT_MARKERS = ("pyproject.toml", "composer.json")


@dataclass
class BerryConfig:
    stub_dir: str = DEFAULT_STUB_DIR
    declaration_file: str = DEFAULT_DECLARATION_FILE
    vendor_dir: str = "vendor"
    format: str = "php"


def _find_pyproject_toml(search_path: Path) -> Optional[Path]:
    current_dir = search_path.resolve()
    while True:
        pyproject_path = current_dir / "pyproject.toml"
        if pyproject_path.is_file():
            return pyproject_path
        if current_dir.parent == current_dir:
            return None
        current_dir = current_dir.parent


def find_project_root(search_path: Path) -> Path:
    current_dir = search_path.resolve()
    while True:
        if any((current_dir / marker).is_file() for marker in _PROJECT_MARKERS):
            return current_dir
        if current_dir.parent == current_dir:
            return search_path.resolve()
        current_dir = current_dir.parent


def load_config_from_path(search_path: Path) -> BerryConfig:
    config_path = _find_pyproject_toml(search_path)
    if config_path is None:
        return BerryConfig()

    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    berry_data: Dict[str, Any] = data.get("tool", {}).get("berry", {})

    defaults = BerryConfig()
    return BerryConfig(
        stub_dir=str(berry_data.get("stub_dir", defaults.stub_dir)),
        declaration_file=str(
            berry_data.get("declaration_file", defaults.declaration_file)
        ),
        vendor_dir=str(berry_data.get("vendor_dir", defaults.vendor_dir)),
        format=str(berry_data.get("format", defaults.format)),
    )
