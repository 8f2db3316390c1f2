"""Symbol oracle contract and an in-memory implementation."""

from .compilation import InMemoryCompilation
from .model import (
    Compilation,
    EventSymbol,
    MemberSymbol,
    MethodSymbol,
    NamedTypeSymbol,
    PropertySymbol,
    SymbolKind,
    SymbolResolver,
    TypeRef,
)

__all__ = [
    "Compilation",
    "EventSymbol",
    "InMemoryCompilation",
    "MemberSymbol",
    "MethodSymbol",
    "NamedTypeSymbol",
    "PropertySymbol",
    "SymbolKind",
    "SymbolResolver",
    "TypeRef",
]
