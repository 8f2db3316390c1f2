"""Emission of the marker attribute declaration."""

from __future__ import annotations

from typing import Literal

from autoimpl.compiler.emit_source import AUTO_GENERATED_HEADER
from autoimpl.config import GeneratorConfig
from autoimpl.models import GenerationUnit

MarkerTarget = Literal["type", "interface"]

ATTRIBUTE_TARGETS: dict[MarkerTarget, str] = {
    "type": "AttributeTargets.Class | AttributeTargets.Struct",
    "interface": "AttributeTargets.Interface",
}


def render_marker_declaration(config: GeneratorConfig, target: MarkerTarget) -> str:
    class_name = config.attribute_class_name
    usage = f"{ATTRIBUTE_TARGETS[target]}, Inherited = false, AllowMultiple = false"
    lines: list[str] = []
    if config.auto_generated_header:
        lines.append(AUTO_GENERATED_HEADER)
    lines.extend(
        [
            "using System;",
            "",
            f"namespace {config.attribute_namespace};",
            "",
            f"[AttributeUsage({usage})]",
            f"sealed class {class_name} : Attribute",
            "{",
            "    public string[] InterfacesNames { get; }",
            "",
            f"    public {class_name}(params string[] interfacesNames)",
            "    {",
            "        InterfacesNames = interfacesNames;",
            "    }",
            "}",
            "",
        ]
    )
    return "\n".join(lines)


def emit_marker_declaration(config: GeneratorConfig, target: MarkerTarget) -> GenerationUnit:
    """Return the once-per-pass unit that declares the marker attribute."""
    return GenerationUnit(
        hint_name=f"{config.attribute_class_name}{config.generated_suffix}",
        source=render_marker_declaration(config, target),
        target_name=config.attribute_class_name,
        target_namespace=config.attribute_namespace,
        kind="marker",
    )
