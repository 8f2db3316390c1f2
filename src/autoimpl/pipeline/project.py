"""Projection of a resolved interface symbol into emission-ready records."""

from __future__ import annotations

from autoimpl.cancellation import CancellationToken, observe
from autoimpl.config import TypeRendering
from autoimpl.models import InterfaceProperty, ResolvedInterface
from autoimpl.pipeline.imports import extract_import_directives
from autoimpl.symbols.model import NamedTypeSymbol, PropertySymbol, TypeRef


def render_type(type_ref: TypeRef, rendering: TypeRendering) -> str:
    # Keyword aliases must keep their source spelling: 'Int32' is not valid without 'using System;'.
    if rendering == "qualified":
        return type_ref.qualified
    return type_ref.display


def project_property(symbol: PropertySymbol, rendering: TypeRendering) -> InterfaceProperty:
    return InterfaceProperty(
        type=render_type(symbol.type, rendering),
        name=symbol.name,
        has_setter=symbol.has_setter,
    )


def interface_import_directives(symbol: NamedTypeSymbol) -> tuple[str, ...]:
    """Using directives of the first file that declares the interface."""
    if not symbol.declaring_units:
        return ()
    return extract_import_directives(symbol.declaring_units[0])


def project_interface(
    requested_name: str,
    symbol: NamedTypeSymbol,
    rendering: TypeRendering,
    cancellation: CancellationToken | None = None,
) -> ResolvedInterface:
    properties: list[InterfaceProperty] = []
    for member in symbol.properties:
        observe(cancellation, "project_interface")
        # Indexers and static members have no auto-property form.
        if member.is_indexer or member.is_static:
            continue
        properties.append(project_property(member, rendering))

    directives = interface_import_directives(symbol) if rendering == "display" else ()
    return ResolvedInterface(
        name=requested_name,
        namespace=symbol.namespace,
        metadata_name=symbol.metadata_name,
        import_directives=directives,
        properties=tuple(properties),
    )
