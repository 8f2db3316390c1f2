"""Host-supplied syntax model consumed by the generation pipeline."""

from .model import (
    AttributeSyntax,
    BaseTypeKind,
    BaseTypeSyntax,
    CompilationUnit,
    ContainingType,
    TypeDeclaration,
    TypeKind,
    UsingDirective,
)

__all__ = [
    "AttributeSyntax",
    "BaseTypeKind",
    "BaseTypeSyntax",
    "CompilationUnit",
    "ContainingType",
    "TypeDeclaration",
    "TypeKind",
    "UsingDirective",
]
