"""Interface reference extraction from marker arguments and base lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from autoimpl.config import GeneratorConfig
from autoimpl.errors import HostContractError
from autoimpl.syntax.model import AttributeSyntax, BaseTypeSyntax, TypeDeclaration

NAMEOF_PREFIX = "nameof("
GLOBAL_ALIAS = "global::"

_BASE_KINDS = frozenset({"identifier", "qualified", "generic", "alias_qualified", "predefined"})
_NAME_KINDS = frozenset({"identifier", "qualified"})


def marker_spellings(config: GeneratorConfig) -> frozenset[str]:
    short = config.attribute_name
    full = config.attribute_class_name
    namespace = config.attribute_namespace
    return frozenset(
        {
            short,
            full,
            f"{namespace}.{short}",
            f"{namespace}.{full}",
        }
    )


def is_marker_attribute(attribute: AttributeSyntax, config: GeneratorConfig) -> bool:
    name = attribute.name.strip()
    if name.startswith(GLOBAL_ALIAS):
        name = name[len(GLOBAL_ALIAS) :]
    return name in marker_spellings(config)


def find_marker_attribute(
    declaration: TypeDeclaration,
    config: GeneratorConfig,
) -> AttributeSyntax | None:
    for attribute in declaration.attributes:
        if is_marker_attribute(attribute, config):
            return attribute
    return None


def is_annotated_candidate(declaration: TypeDeclaration, config: GeneratorConfig) -> bool:
    """Host predicate for the attribute-driven strategies."""
    if declaration.kind == "interface":
        return False
    return find_marker_attribute(declaration, config) is not None


def is_base_list_candidate(declaration: TypeDeclaration) -> bool:
    """Host predicate for the inheritance-driven strategy."""
    if declaration.kind == "interface":
        return False
    return bool(declaration.base_list)


def interface_name_from_argument(expression: str) -> str:
    # Whitespace-only arguments are kept as written and later fail to resolve.
    if not expression.strip():
        return expression

    text = expression.strip()
    if text.startswith(NAMEOF_PREFIX) and text.endswith(")"):
        return text[len(NAMEOF_PREFIX) : -1].strip()

    if text.startswith('@"'):
        text = text[1:]
    return text.strip('"')


def extract_attribute_references(
    declaration: TypeDeclaration,
    config: GeneratorConfig,
) -> tuple[str, ...]:
    attribute = find_marker_attribute(declaration, config)
    if attribute is None or attribute.arguments is None:
        return ()
    return tuple(interface_name_from_argument(argument) for argument in attribute.arguments)


def interface_name_from_base(entry: BaseTypeSyntax) -> str | None:
    if entry.kind not in _BASE_KINDS:
        raise HostContractError(
            "Unknown base-list entry kind supplied by host.",
            hint="Map the host syntax node to one of: " + ", ".join(sorted(_BASE_KINDS)) + ".",
            context={"kind": str(entry.kind), "text": entry.text},
        )
    if entry.kind not in _NAME_KINDS:
        return None
    return "".join(entry.text.split())


def extract_base_list_references(declaration: TypeDeclaration) -> tuple[str, ...]:
    references: list[str] = []
    for entry in declaration.base_list:
        name = interface_name_from_base(entry)
        if name is not None:
            references.append(name)
    return tuple(references)


class ReferenceDiscovery(Protocol):
    def is_candidate(self, declaration: TypeDeclaration, config: GeneratorConfig) -> bool:
        """Cheap syntactic filter applied before any symbol lookup."""

    def references(self, declaration: TypeDeclaration, config: GeneratorConfig) -> tuple[str, ...]:
        """Interface names written on a candidate, in source order."""


@dataclass(frozen=True, slots=True)
class AttributeDiscovery:
    """Interfaces named in the marker arguments of a class or struct."""

    def is_candidate(self, declaration: TypeDeclaration, config: GeneratorConfig) -> bool:
        return is_annotated_candidate(declaration, config)

    def references(self, declaration: TypeDeclaration, config: GeneratorConfig) -> tuple[str, ...]:
        return extract_attribute_references(declaration, config)


@dataclass(frozen=True, slots=True)
class BaseListDiscovery:
    """Every simple or qualified name in a type's base list."""

    def is_candidate(self, declaration: TypeDeclaration, config: GeneratorConfig) -> bool:
        return is_base_list_candidate(declaration)

    def references(self, declaration: TypeDeclaration, config: GeneratorConfig) -> tuple[str, ...]:
        return extract_base_list_references(declaration)
