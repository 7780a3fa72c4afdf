from pathlib import Path

from berry.app import BerryApp
from berry.config import find_project_root


def get_project_root() -> Path:
    return find_project_root(Path.cwd())


def make_app() -> BerryApp:
    return BerryApp(root_path=get_project_root())
