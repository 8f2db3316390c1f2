"""Compiler interfaces for emitting generated C# sources."""

from .emit_marker import (
    ATTRIBUTE_TARGETS,
    MarkerTarget,
    emit_marker_declaration,
    render_marker_declaration,
)
from .emit_source import (
    AUTO_GENERATED_HEADER,
    emit_source,
    hint_name,
    render_property,
    render_source,
    required_usings,
)

__all__ = [
    "ATTRIBUTE_TARGETS",
    "AUTO_GENERATED_HEADER",
    "MarkerTarget",
    "emit_marker_declaration",
    "emit_source",
    "hint_name",
    "render_marker_declaration",
    "render_property",
    "render_source",
    "required_usings",
]
