"""Marker eligibility check for the inheritance-driven strategy."""

from __future__ import annotations

from autoimpl.config import GeneratorConfig
from autoimpl.symbols.model import NamedTypeSymbol


def is_marker_eligible(symbol: NamedTypeSymbol, config: GeneratorConfig) -> bool:
    """True iff the interface itself carries the marker attribute, matched by simple name."""
    accepted = {config.attribute_class_name, config.attribute_name}
    return any(attribute in accepted for attribute in symbol.attributes)
