from .merger import NamespaceTreeMerger
from .emitter import StubEmitter
from .discovery import ComposerPackageDiscovery, StaticPackageDiscovery

__all__ = [
    "NamespaceTreeMerger",
    "StubEmitter",
    "ComposerPackageDiscovery",
    "StaticPackageDiscovery",
]
