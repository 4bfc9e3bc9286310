"""Tracing infrastructure for recording what generators did each tick.

Usage:
    from itemgen.tracing import InMemoryHistoryStore

    history = InMemoryHistoryStore(max_ticks=500)
    world = World(history=history)
    world.tick()
    history.all_events("emitted")
"""

from itemgen.tracing.memory import InMemoryHistoryStore
from itemgen.tracing.models import TickRecord
from itemgen.tracing.protocol import HistoryStore

__all__ = [
    "HistoryStore",
    "InMemoryHistoryStore",
    "TickRecord",
]
