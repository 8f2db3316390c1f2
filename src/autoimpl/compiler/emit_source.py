"""Rendering of one partial type declaration per (target, interface) pair.

The generated unit is laid out as:
- an auto-generated comment (optional, see ``GeneratorConfig``)
- the using directives the rendering policy needs
- a file-scoped namespace matching the target (omitted for the global namespace)
- partial wrappers for every enclosing type of a nested target
- the partial declaration with one auto-property per interface property
"""

from __future__ import annotations

import re

from autoimpl.config import GeneratorConfig, TypeRendering
from autoimpl.models import (
    AnnotatedDeclaration,
    GenerationUnit,
    InterfaceProperty,
    ResolvedInterface,
)

AUTO_GENERATED_HEADER = "// <auto-generated/>"
INDENT = "    "
GLOBAL_USING_PREFIX = "global using "

_UNSAFE_HINT_CHARS = re.compile(r"[^\w.\-]")


def hint_name(target_name: str, interface_name: str, suffix: str) -> str:
    """File identity of a generated unit: ``<Target>_<Interface><suffix>``."""
    stem = f"{target_name}_{interface_name.replace('global::', '')}"
    return f"{_UNSAFE_HINT_CHARS.sub('_', stem)}{suffix}"


def required_usings(interface: ResolvedInterface, rendering: TypeRendering) -> tuple[str, ...]:
    if rendering == "qualified":
        return ()
    directives: list[str] = []
    # Global usings already apply to the whole compilation.
    for directive in interface.import_directives:
        if directive.startswith(GLOBAL_USING_PREFIX):
            continue
        if directive not in directives:
            directives.append(directive)
    if interface.namespace:
        own_namespace = f"using {interface.namespace};"
        if own_namespace not in directives:
            directives.append(own_namespace)
    return tuple(directives)


def implemented_name(interface: ResolvedInterface, rendering: TypeRendering) -> str:
    if rendering == "qualified":
        return f"global::{interface.metadata_name}"
    # required_usings always imports the interface namespace.
    return interface.simple_name


def render_property(prop: InterfaceProperty, visibility: str) -> str:
    setter = "set; " if prop.has_setter else ""
    return f"{visibility} {prop.type} {prop.name} {{ get; {setter}}}"


def render_type_header(
    declaration: AnnotatedDeclaration,
    interface: ResolvedInterface,
    *,
    rendering: TypeRendering,
    implement: bool,
) -> str:
    header = f"partial {declaration.kind} {declaration.name}"
    if declaration.type_parameters:
        header += f"<{', '.join(declaration.type_parameters)}>"
    if implement:
        header += f" : {implemented_name(interface, rendering)}"
    return header


def render_source(
    declaration: AnnotatedDeclaration,
    interface: ResolvedInterface,
    *,
    config: GeneratorConfig,
    rendering: TypeRendering,
    implement: bool,
) -> str:
    lines: list[str] = []
    if config.auto_generated_header:
        lines.append(AUTO_GENERATED_HEADER)

    usings = required_usings(interface, rendering)
    if usings:
        lines.extend(usings)
        lines.append("")

    if declaration.namespace:
        lines.append(f"namespace {declaration.namespace};")
        lines.append("")

    depth = 0
    for container in declaration.containing_types:
        lines.append(f"{INDENT * depth}partial {container.kind} {container.name}")
        lines.append(f"{INDENT * depth}{{")
        depth += 1

    indent = INDENT * depth
    type_header = render_type_header(
        declaration,
        interface,
        rendering=rendering,
        implement=implement,
    )
    lines.append(f"{indent}{type_header}")
    lines.append(f"{indent}{{")
    for prop in interface.properties:
        lines.append(f"{indent}{INDENT}{render_property(prop, config.visibility)}")
    lines.append(f"{indent}}}")

    while depth > 0:
        depth -= 1
        lines.append(f"{INDENT * depth}}}")

    lines.append("")
    return "\n".join(lines)


def emit_source(
    declaration: AnnotatedDeclaration,
    interface: ResolvedInterface,
    *,
    config: GeneratorConfig,
    rendering: TypeRendering,
    implement: bool,
) -> GenerationUnit:
    return GenerationUnit(
        hint_name=hint_name(declaration.name, interface.name, config.generated_suffix),
        source=render_source(
            declaration,
            interface,
            config=config,
            rendering=rendering,
            implement=implement,
        ),
        target_name=declaration.name,
        target_namespace=declaration.namespace,
        interface_name=interface.name,
    )
