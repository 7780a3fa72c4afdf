from .handlers import JsonDeclarationHandler, YamlDeclarationHandler
from .parser import DeclarationParser
from .renderers import PhpStubRenderer, PythonStubRenderer, make_renderer, RENDERERS

__all__ = [
    "JsonDeclarationHandler",
    "YamlDeclarationHandler",
    "DeclarationParser",
    "PhpStubRenderer",
    "PythonStubRenderer",
    "make_renderer",
    "RENDERERS",
]
