"""Generator configuration and host build-option parsing."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, cast, get_args

from autoimpl.errors import ValidationError

Strategy = Literal["by_name", "by_name_qualified", "inherited"]
TypeRendering = Literal["display", "qualified"]
Visibility = Literal["public", "internal", "protected internal"]

STRATEGIES: tuple[Strategy, ...] = get_args(Strategy)

DEFAULT_RENDERING: dict[Strategy, TypeRendering] = {
    "by_name": "display",
    "by_name_qualified": "qualified",
    "inherited": "display",
}

OPTION_PREFIX = "autoimpl_"

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
_FALSE_VALUES = frozenset({"false", "0", "no", "off"})


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Settings shared by every generation strategy."""

    attribute_namespace: str = "AttributeGenerator"
    attribute_name: str = "AutoImplement"
    generated_suffix: str = ".g.cs"
    visibility: Visibility = "public"
    type_rendering: TypeRendering | None = None
    auto_generated_header: bool = True

    def __post_init__(self) -> None:
        segments = self.attribute_namespace.split(".")
        if not all(_IDENTIFIER.match(segment) for segment in segments):
            raise ValidationError(
                "Attribute namespace must be a dotted identifier path.",
                context={"attribute_namespace": self.attribute_namespace},
            )
        if not _IDENTIFIER.match(self.attribute_name):
            raise ValidationError(
                "Attribute name must be a plain identifier.",
                hint="Drop the 'Attribute' suffix and any namespace qualifier.",
                context={"attribute_name": self.attribute_name},
            )
        if self.attribute_name.endswith("Attribute"):
            raise ValidationError(
                "Attribute name must not carry the 'Attribute' suffix.",
                context={"attribute_name": self.attribute_name},
            )
        if not self.generated_suffix.endswith(".cs"):
            raise ValidationError(
                "Generated file suffix must end with '.cs'.",
                context={"generated_suffix": self.generated_suffix},
            )
        if self.visibility not in get_args(Visibility):
            raise ValidationError(
                "Unsupported member visibility.",
                context={"visibility": str(self.visibility)},
            )
        if self.type_rendering is not None and self.type_rendering not in get_args(TypeRendering):
            raise ValidationError(
                "Unsupported type rendering policy.",
                hint="Use 'display' or 'qualified'.",
                context={"type_rendering": str(self.type_rendering)},
            )

    @property
    def attribute_class_name(self) -> str:
        return f"{self.attribute_name}Attribute"

    @property
    def attribute_metadata_name(self) -> str:
        return f"{self.attribute_namespace}.{self.attribute_class_name}"

    def rendering_for(self, strategy: Strategy) -> TypeRendering:
        if self.type_rendering is not None:
            return self.type_rendering
        return DEFAULT_RENDERING[strategy]

    @classmethod
    def from_options(cls, options: Mapping[str, str]) -> GeneratorConfig:
        """Build a config from host build options such as ``autoimpl_attribute_name``.

        Keys without the ``autoimpl_`` prefix are ignored so the whole option
        bag of a project can be passed through unchanged.
        """
        values: dict[str, object] = {}
        for raw_key, raw_value in options.items():
            key = raw_key.strip().lower()
            if not key.startswith(OPTION_PREFIX):
                continue
            name = key[len(OPTION_PREFIX) :]
            value = raw_value.strip()
            if name in {"attribute_namespace", "attribute_name", "generated_suffix"}:
                values[name] = value
            elif name == "visibility":
                values[name] = cast(Visibility, value)
            elif name == "type_rendering":
                values[name] = cast(TypeRendering, value) if value else None
            elif name == "auto_generated_header":
                values[name] = _parse_bool(raw_key, value)
            else:
                raise ValidationError(
                    "Unknown generator option.",
                    context={"option": raw_key},
                )
        return cls(**values)  # type: ignore[arg-type]


def _parse_bool(key: str, value: str) -> bool:
    lowered = value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValidationError(
        "Boolean generator option has an invalid value.",
        hint="Use 'true' or 'false'.",
        context={"option": key, "value": value},
    )


__all__ = [
    "DEFAULT_RENDERING",
    "GeneratorConfig",
    "STRATEGIES",
    "Strategy",
    "TypeRendering",
    "Visibility",
]
