"""Public package entrypoint for the interface auto-implementation generator."""

from .cancellation import CancellationToken
from .config import GeneratorConfig, Strategy, TypeRendering
from .errors import (
    AutoImplError,
    CancelledError,
    ErrorCode,
    HostContractError,
    ValidationError,
)
from .generators import (
    AutoImplementGenerator,
    InheritedAutoImplementGenerator,
    QualifiedAutoImplementGenerator,
    get_generator,
)
from .models import (
    AnnotatedDeclaration,
    Found,
    GenerationResult,
    GenerationTarget,
    GenerationUnit,
    InterfaceProperty,
    NotFound,
    ResolvedInterface,
)
from .observability import StructuredLogger
from .symbols import InMemoryCompilation, NamedTypeSymbol, PropertySymbol, TypeRef
from .syntax import (
    AttributeSyntax,
    BaseTypeSyntax,
    CompilationUnit,
    ContainingType,
    TypeDeclaration,
    UsingDirective,
)

__all__ = [
    "AnnotatedDeclaration",
    "AttributeSyntax",
    "AutoImplError",
    "AutoImplementGenerator",
    "BaseTypeSyntax",
    "CancellationToken",
    "CancelledError",
    "CompilationUnit",
    "ContainingType",
    "ErrorCode",
    "Found",
    "GenerationResult",
    "GenerationTarget",
    "GenerationUnit",
    "GeneratorConfig",
    "HostContractError",
    "InMemoryCompilation",
    "InheritedAutoImplementGenerator",
    "InterfaceProperty",
    "NamedTypeSymbol",
    "NotFound",
    "PropertySymbol",
    "QualifiedAutoImplementGenerator",
    "ResolvedInterface",
    "Strategy",
    "StructuredLogger",
    "TypeDeclaration",
    "TypeRef",
    "TypeRendering",
    "UsingDirective",
    "ValidationError",
    "get_generator",
]
