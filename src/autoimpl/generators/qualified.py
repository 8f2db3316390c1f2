"""Attribute-driven generator that prints fully qualified property types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from autoimpl.config import Strategy

from .by_name import AutoImplementGenerator


@dataclass(slots=True)
class QualifiedAutoImplementGenerator(AutoImplementGenerator):
    """Same discovery as ``AutoImplementGenerator`` but emits ``global::`` names.

    Generated units carry no using directives, so they compile even when the
    target file lacks the imports the interface file relies on.
    """

    strategy: ClassVar[Strategy] = "by_name_qualified"
