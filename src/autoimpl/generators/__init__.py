"""Generation strategies and the strategy registry."""

from __future__ import annotations

from autoimpl.config import STRATEGIES, GeneratorConfig
from autoimpl.errors import ValidationError
from autoimpl.observability import StructuredLogger

from .base import GeneratorBase, SourceGenerator
from .by_name import AutoImplementGenerator
from .inherited import InheritedAutoImplementGenerator
from .qualified import QualifiedAutoImplementGenerator


def get_generator(
    strategy: str,
    config: GeneratorConfig | None = None,
    logger: StructuredLogger | None = None,
) -> GeneratorBase:
    config = config or GeneratorConfig()
    logger = logger or StructuredLogger()
    if strategy == "by_name":
        return AutoImplementGenerator(config=config, logger=logger)
    if strategy == "by_name_qualified":
        return QualifiedAutoImplementGenerator(config=config, logger=logger)
    if strategy == "inherited":
        return InheritedAutoImplementGenerator(config=config, logger=logger)
    raise ValidationError(
        "Unsupported generation strategy.",
        hint="Use one of: " + ", ".join(STRATEGIES) + ".",
        context={"strategy": strategy},
    )


__all__ = [
    "AutoImplementGenerator",
    "GeneratorBase",
    "InheritedAutoImplementGenerator",
    "QualifiedAutoImplementGenerator",
    "SourceGenerator",
    "get_generator",
]
