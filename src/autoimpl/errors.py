"""Generator errors with stable, machine-readable codes.

Only bad configuration, malformed host input and cancellation are errors.
An interface reference that does not resolve is a skipped result, never an
exception.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import ClassVar


class ErrorCode(StrEnum):
    VALIDATION = "E_VALIDATION"
    CANCELLED = "E_CANCELLED"
    HOST_CONTRACT = "E_HOST_CONTRACT"


class AutoImplError(Exception):
    """Base error; each subclass pins one ``ErrorCode``."""

    error_code: ClassVar[ErrorCode]

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.context = dict(context or {})

    @property
    def code(self) -> str:
        return self.error_code.value

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message} {self.hint}"
        return self.message

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "code": self.code,
            "message": self.message,
            "context": dict(self.context),
        }
        if self.hint is not None:
            payload["hint"] = self.hint
        return payload


class ValidationError(AutoImplError):
    """Invalid generator configuration or strategy name."""

    error_code = ErrorCode.VALIDATION


class CancelledError(AutoImplError):
    error_code = ErrorCode.CANCELLED


class HostContractError(AutoImplError):
    """The host handed over a syntax node the generator cannot interpret."""

    error_code = ErrorCode.HOST_CONTRACT


__all__ = [
    "AutoImplError",
    "CancelledError",
    "ErrorCode",
    "HostContractError",
    "ValidationError",
]
