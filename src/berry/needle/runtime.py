import os
from pathlib import Path
from typing import Dict, Iterator, Optional, Union, List

from .loader import Loader
from .pointer import SemanticPointer

LANG_ENV_VAR = "BERRY_LANG"


class Needle:
    """
    Resolves semantic pointers to message templates.

    Each root contributes ``<root>/needle/<lang>`` (packaged catalogs) and
    ``<root>/.berry/needle/<lang>`` (project overrides). Roots are read in
    order and later entries win, so packaged assets go first.
    """

    def __init__(self, roots: Optional[List[Path]] = None):
        self.default_lang = "en"
        self.roots = list(roots) if roots else [self._find_project_root()]
        self._loader = Loader()
        self._catalogs: Dict[str, Dict[str, str]] = {}

    def add_root(self, path: Path):
        """Registers a lowest-priority root, e.g. a package's bundled assets."""
        if path not in self.roots:
            self.roots.insert(0, path)
            self._catalogs.clear()

    def _find_project_root(self) -> Path:
        start = Path.cwd().resolve()
        for directory in (start, *start.parents):
            if (directory / "pyproject.toml").is_file():
                return directory
            if (directory / "composer.json").is_file():
                return directory
        return start

    def _catalog_dirs(self, lang: str) -> Iterator[Path]:
        for root in self.roots:
            yield root / "needle" / lang
            yield root / ".berry" / "needle" / lang

    def catalog(self, lang: str) -> Dict[str, str]:
        if lang not in self._catalogs:
            merged: Dict[str, str] = {}
            for directory in self._catalog_dirs(lang):
                merged.update(self._loader.load_directory(directory))
            self._catalogs[lang] = merged
        return self._catalogs[lang]

    def get(
        self, pointer: Union[SemanticPointer, str], lang: Optional[str] = None
    ) -> str:
        """
        Returns the template for ``pointer`` in the requested language,
        then in the default language, and finally the id itself.
        """
        key = str(pointer)
        target_lang = lang or os.getenv(LANG_ENV_VAR, self.default_lang)

        for candidate in dict.fromkeys((target_lang, self.default_lang)):
            value = self.catalog(candidate).get(key)
            if value is not None:
                return value
        return key


# Global Runtime Instance
needle = Needle()
