"""Immutable records passed between generation stages.

Every record is frozen and hashable so a host's incremental engine can memoize
a stage by structural equality of its inputs.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, Literal, TypeVar

import cbor2

from autoimpl.syntax.model import ContainingType, TypeKind

T = TypeVar("T")

UnitKind = Literal["marker", "implementation"]


@dataclass(frozen=True, slots=True)
class Found(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class NotFound:
    name: str
    reason: str = "unresolved"


Resolution = Found[T] | NotFound


@dataclass(frozen=True, slots=True)
class AnnotatedDeclaration:
    namespace: str
    name: str
    references: tuple[str, ...] = ()
    imports: tuple[str, ...] = ()
    kind: TypeKind = "class"
    containing_types: tuple[ContainingType, ...] = ()
    type_parameters: tuple[str, ...] = ()

    @property
    def display_name(self) -> str:
        names = [container.name for container in self.containing_types]
        names.append(self.name)
        qualified = ".".join(names)
        if self.namespace:
            return f"{self.namespace}.{qualified}"
        return qualified

    @property
    def metadata_name(self) -> str:
        """Display name plus the CLR arity suffix, so ``Box`` and ``Box<T>`` differ."""
        if self.type_parameters:
            return f"{self.display_name}`{len(self.type_parameters)}"
        return self.display_name


@dataclass(frozen=True, slots=True)
class InterfaceProperty:
    type: str
    name: str
    has_setter: bool


@dataclass(frozen=True, slots=True)
class ResolvedInterface:
    name: str
    namespace: str
    metadata_name: str
    import_directives: tuple[str, ...] = ()
    properties: tuple[InterfaceProperty, ...] = ()

    @property
    def simple_name(self) -> str:
        if self.namespace:
            return self.metadata_name[len(self.namespace) + 1 :]
        return self.metadata_name


@dataclass(frozen=True, slots=True)
class GenerationTarget:
    declaration: AnnotatedDeclaration
    interfaces: tuple[ResolvedInterface, ...] = ()
    skipped: tuple[NotFound, ...] = ()


@dataclass(frozen=True, slots=True)
class GenerationUnit:
    hint_name: str
    source: str
    target_name: str = ""
    target_namespace: str = ""
    interface_name: str = ""
    kind: UnitKind = "implementation"

    @property
    def sha256(self) -> str:
        return hashlib.sha256(self.source.encode("utf-8")).hexdigest()


@dataclass(frozen=True, slots=True)
class GenerationResult:
    strategy: str
    units: tuple[GenerationUnit, ...] = ()
    schema_version: int = 1

    @property
    def sources(self) -> dict[str, str]:
        return {unit.hint_name: unit.source for unit in self.units}

    @property
    def implementation_units(self) -> tuple[GenerationUnit, ...]:
        return tuple(unit for unit in self.units if unit.kind == "implementation")

    def unit(self, hint_name: str) -> GenerationUnit | None:
        for candidate in self.units:
            if candidate.hint_name == hint_name:
                return candidate
        return None

    def digest(self) -> str:
        return hashlib.sha256(self.to_cbor()).hexdigest()

    def to_json(self, path: str | Path | None = None) -> str:
        payload = self._payload()
        encoded = json.dumps(payload, indent=2, sort_keys=True) + "\n"
        if path is not None:
            Path(path).write_text(encoded, encoding="utf-8")
        return encoded

    def to_cbor(self, path: str | Path | None = None) -> bytes:
        payload = self._payload()
        encoded = cbor2.dumps(payload, canonical=True)
        if path is not None:
            Path(path).write_bytes(encoded)
        return encoded

    def _payload(self) -> dict[str, object]:
        return {
            "schema_version": self.schema_version,
            "strategy": self.strategy,
            "units": [
                {
                    "hint_name": unit.hint_name,
                    "kind": unit.kind,
                    "target": unit.target_name,
                    "namespace": unit.target_namespace,
                    "interface": unit.interface_name,
                    "sha256": unit.sha256,
                }
                for unit in self.units
            ],
        }


__all__ = [
    "AnnotatedDeclaration",
    "Found",
    "GenerationResult",
    "GenerationTarget",
    "GenerationUnit",
    "InterfaceProperty",
    "NotFound",
    "Resolution",
    "ResolvedInterface",
    "UnitKind",
]
