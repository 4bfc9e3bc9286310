"""Data models for tracing infrastructure.

Records are JSON-serializable so any history backend can persist them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class TickRecord:
    """Record of what the generators did during a single tick.

    Attributes:
        tick: The tick number.
        timestamp: Unix timestamp when the tick completed.
        events: Events that occurred during this tick, in order.
        metadata: Optional arbitrary metadata for annotations.

    Example:
        record = TickRecord(
            tick=200,
            timestamp=1704067200.0,
            events=[{"type": "emitted", "entity": "#1.0", "item_id": "minecraft:diamond"}],
        )
    """

    tick: int
    timestamp: float
    events: list[dict[str, Any]] = field(default_factory=list)
    metadata: dict[str, Any] | None = None

    def events_of(self, event_type: str) -> list[dict[str, Any]]:
        return [e for e in self.events if e.get("type") == event_type]

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        result: dict[str, Any] = {
            "tick": self.tick,
            "timestamp": self.timestamp,
            "events": self.events,
        }
        if self.metadata is not None:
            result["metadata"] = self.metadata
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TickRecord:
        """Create from dictionary (for deserialization)."""
        return cls(
            tick=data["tick"],
            timestamp=data["timestamp"],
            events=data.get("events", []),
            metadata=data.get("metadata"),
        )
