"""Symbol records and the resolution contract the host compiler provides."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal, Protocol

from autoimpl.syntax.model import CompilationUnit

SymbolKind = Literal["interface", "class", "struct", "enum", "delegate"]


@dataclass(frozen=True, slots=True)
class TypeRef:
    """A type printed as source text.

    ``display`` is the minimally qualified form that relies on the declaring
    file's imports; ``qualified`` is the ``global::`` form that needs none.
    Keyword aliases such as ``int`` print the same way in both.
    """

    display: str
    qualified: str

    @classmethod
    def keyword(cls, name: str) -> TypeRef:
        return cls(display=name, qualified=name)


@dataclass(frozen=True, slots=True)
class PropertySymbol:
    name: str
    type: TypeRef
    has_setter: bool = False
    is_indexer: bool = False
    is_static: bool = False


@dataclass(frozen=True, slots=True)
class MethodSymbol:
    name: str


@dataclass(frozen=True, slots=True)
class EventSymbol:
    name: str


MemberSymbol = PropertySymbol | MethodSymbol | EventSymbol


@dataclass(frozen=True, slots=True)
class NamedTypeSymbol:
    name: str
    namespace: str = ""
    kind: SymbolKind = "interface"
    members: tuple[MemberSymbol, ...] = ()
    attributes: tuple[str, ...] = ()
    declaring_units: tuple[CompilationUnit, ...] = ()

    @property
    def metadata_name(self) -> str:
        if not self.namespace:
            return self.name
        return f"{self.namespace}.{self.name}"

    @property
    def is_interface(self) -> bool:
        return self.kind == "interface"

    @property
    def properties(self) -> tuple[PropertySymbol, ...]:
        return tuple(member for member in self.members if isinstance(member, PropertySymbol))


class SymbolResolver(Protocol):
    def get_type_by_metadata_name(self, metadata_name: str) -> NamedTypeSymbol | None:
        """Return the single type declared under this fully qualified name, if any."""


class Compilation(SymbolResolver, Protocol):
    @property
    def syntax_trees(self) -> Sequence[CompilationUnit]:
        """Every source file of the program, in host order."""
