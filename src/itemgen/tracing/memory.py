"""Bounded in-memory history store."""

from __future__ import annotations

from collections import deque
from typing import Any

from itemgen.tracing.models import TickRecord


class InMemoryHistoryStore:
    """Keeps the last ``max_ticks`` tick records in memory.

    Args:
        max_ticks: Capacity; the oldest records are evicted first.
    """

    def __init__(self, max_ticks: int = 1000) -> None:
        self._records: deque[TickRecord] = deque(maxlen=max_ticks)

    def record_tick(self, record: TickRecord) -> None:
        self._records.append(record)

    def get_tick(self, tick: int) -> TickRecord | None:
        for record in self._records:
            if record.tick == tick:
                return record
        return None

    def get_events(self, start_tick: int, end_tick: int) -> list[dict[str, Any]]:
        events: list[dict[str, Any]] = []
        for record in self._records:
            if start_tick <= record.tick <= end_tick:
                events.extend(record.events)
        return events

    def all_events(self, event_type: str | None = None) -> list[dict[str, Any]]:
        """Every stored event, optionally filtered by type."""
        return [
            event
            for record in self._records
            for event in record.events
            if event_type is None or event.get("type") == event_type
        ]

    def get_tick_range(self) -> tuple[int, int] | None:
        if not self._records:
            return None
        return self._records[0].tick, self._records[-1].tick

    def clear(self) -> None:
        self._records.clear()

    @property
    def tick_count(self) -> int:
        return len(self._records)
