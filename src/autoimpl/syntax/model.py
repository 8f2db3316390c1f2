"""Syntax records supplied by the host compiler adapter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

TypeKind = Literal["class", "struct", "record", "record struct", "interface"]
BaseTypeKind = Literal["identifier", "qualified", "generic", "alias_qualified", "predefined"]


@dataclass(frozen=True, slots=True)
class UsingDirective:
    text: str


@dataclass(frozen=True, slots=True)
class AttributeSyntax:
    name: str
    arguments: tuple[str, ...] | None = None


@dataclass(frozen=True, slots=True)
class BaseTypeSyntax:
    text: str
    kind: BaseTypeKind = "identifier"


@dataclass(frozen=True, slots=True)
class ContainingType:
    name: str
    kind: TypeKind = "class"


@dataclass(frozen=True, slots=True)
class TypeDeclaration:
    name: str
    kind: TypeKind = "class"
    namespace: tuple[str, ...] = ()
    containing_types: tuple[ContainingType, ...] = ()
    type_parameters: tuple[str, ...] = ()
    attributes: tuple[AttributeSyntax, ...] = ()
    base_list: tuple[BaseTypeSyntax, ...] = ()

    @property
    def namespace_name(self) -> str:
        return ".".join(self.namespace)


@dataclass(frozen=True, slots=True)
class CompilationUnit:
    """One source file: its using directives and type declarations in source order."""

    path: str
    usings: tuple[UsingDirective, ...] = ()
    declarations: tuple[TypeDeclaration, ...] = ()

    @classmethod
    def with_usings(
        cls,
        path: str,
        *directives: str,
        declarations: tuple[TypeDeclaration, ...] = (),
    ) -> CompilationUnit:
        return cls(
            path=path,
            usings=tuple(UsingDirective(text=directive) for directive in directives),
            declarations=declarations,
        )
