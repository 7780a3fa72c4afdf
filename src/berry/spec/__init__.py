from .models import (
    Argument,
    Method,
    ClassExtension,
    ExtensionDocument,
    MergedClass,
    NamespaceNode,
    PackageResult,
    GenerateResult,
    split_namespace,
)
from .errors import (
    BerryError,
    ParseError,
    ConflictError,
    StubDirectoryError,
    UnsafeStubPathError,
)
from .protocols import (
    DeclarationHandlerProtocol,
    StubRendererProtocol,
    PackageDiscoveryProtocol,
)

__all__ = [
    "Argument",
    "Method",
    "ClassExtension",
    "ExtensionDocument",
    "MergedClass",
    "NamespaceNode",
    "PackageResult",
    "GenerateResult",
    "split_namespace",
    "BerryError",
    "ParseError",
    "ConflictError",
    "StubDirectoryError",
    "UnsafeStubPathError",
    "DeclarationHandlerProtocol",
    "StubRendererProtocol",
    "PackageDiscoveryProtocol",
]
