"""Cooperative cancellation signal supplied by the host."""

from __future__ import annotations

from dataclasses import dataclass, field

from autoimpl.errors import CancelledError


@dataclass(slots=True)
class CancellationToken:
    _cancelled: bool = field(default=False, repr=False)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def raise_if_cancelled(self, operation: str) -> None:
        """Abort the current pass when the host has requested cancellation."""
        if self._cancelled:
            raise CancelledError(
                "Generation was cancelled by the host.",
                hint="Partial output is discarded; the host re-runs the pass on its next edit.",
                context={"operation": operation},
            )


def observe(cancellation: CancellationToken | None, operation: str) -> None:
    if cancellation is not None:
        cancellation.raise_if_cancelled(operation)


__all__ = ["CancellationToken", "observe"]
