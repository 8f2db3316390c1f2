"""Structured generation log.

Each record describes one event of a pass: a discovered candidate, a skipped
interface reference, an emitted unit, or a unit dropped as a duplicate. The
level follows from the event, so skips stay at ``debug`` and never reach the
host as diagnostics.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

Event = Literal["candidate", "skipped", "emitted", "dropped"]

EVENT_LEVELS: dict[str, str] = {
    "candidate": "info",
    "skipped": "debug",
    "emitted": "info",
    "dropped": "warning",
}


@dataclass(slots=True)
class StructuredLogger:
    records: list[dict[str, Any]] = field(default_factory=list)

    def log(
        self,
        event: Event,
        *,
        operation: str,
        strategy: str,
        target: str,
        interface: str | None,
        message: str,
        extra: dict[str, Any] | None = None,
    ) -> None:
        record: dict[str, Any] = {
            "event": event,
            "level": EVENT_LEVELS[event],
            "operation": operation,
            "strategy": strategy,
            "target": target,
            "interface": interface,
            "message": message,
        }
        if extra is not None:
            record["extra"] = extra
        self.records.append(record)

    def records_for_target(self, target: str) -> list[dict[str, Any]]:
        return [record for record in self.records if record["target"] == target]

    def events(self, event: Event) -> list[dict[str, Any]]:
        return [record for record in self.records if record["event"] == event]

    def skip_reasons(self) -> dict[str, str]:
        """Map each skipped reference, as written, to why it was skipped."""
        return {record["interface"]: record["extra"]["reason"] for record in self.events("skipped")}

    def to_json_lines(self, path: str | Path) -> Path:
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding="utf-8") as handle:
            for record in self.records:
                handle.write(json.dumps(record, sort_keys=True) + "\n")
        return output_path
