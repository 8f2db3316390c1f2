"""Attribute-driven generator: interfaces are named in the marker arguments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from autoimpl.compiler import MarkerTarget
from autoimpl.config import Strategy
from autoimpl.pipeline import AttributeDiscovery, ReferenceDiscovery

from .base import GeneratorBase


@dataclass(slots=True)
class AutoImplementGenerator(GeneratorBase):
    """``[AutoImplement("IBar", nameof(IBaz))] partial class Foo``.

    Property types print in display form and the interface file's imports are
    copied into each generated unit so the short form resolves.
    """

    strategy: ClassVar[Strategy] = "by_name"
    discovery: ClassVar[ReferenceDiscovery] = AttributeDiscovery()
    marker_target: ClassVar[MarkerTarget] = "type"
    implement: ClassVar[bool] = True
