"""Inheritance-driven generator: the marker sits on the interface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from autoimpl.compiler import MarkerTarget
from autoimpl.config import Strategy
from autoimpl.pipeline import BaseListDiscovery, ReferenceDiscovery, is_marker_eligible
from autoimpl.symbols.model import NamedTypeSymbol

from .base import GeneratorBase


@dataclass(slots=True)
class InheritedAutoImplementGenerator(GeneratorBase):
    """``[AutoImplement] interface IBar`` plus ``partial class Foo : IBar``.

    Every base-list entry of every type is probed; only interfaces that carry
    the marker themselves produce a unit. The type already lists the interface,
    so the generated declaration only adds members.
    """

    strategy: ClassVar[Strategy] = "inherited"
    discovery: ClassVar[ReferenceDiscovery] = BaseListDiscovery()
    marker_target: ClassVar[MarkerTarget] = "interface"
    implement: ClassVar[bool] = False

    def accepts(self, symbol: NamedTypeSymbol) -> bool:
        return is_marker_eligible(symbol, self.config)
