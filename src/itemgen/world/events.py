"""Host events and a small signal implementation.

Usage:
    world.before_events.player_break_block.subscribe(on_break)

    def on_break(event: PlayerBreakBlockBeforeEvent) -> None:
        if not allowed(event):
            event.cancel = True
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from itemgen.core.items import ItemStack
from itemgen.core.types import BlockPos, Region
from itemgen.world.actors import Player


@dataclass
class PlayerBreakBlockBeforeEvent:
    """Fired before a block is removed; setting cancel vetoes the removal."""

    player: Player
    region: Region
    pos: BlockPos
    block_type: str
    cancel: bool = False


@dataclass
class ItemUseEvent:
    """Fired when a player uses an item; setting cancel consumes the use."""

    source: Player
    item_stack: ItemStack
    cancel: bool = False


E = TypeVar("E")


class EventSignal(Generic[E]):
    """Ordered list of subscribers for one event type.

    Subscribers may be plain functions or coroutine functions. ``emit`` only
    accepts plain subscribers; ``emit_async`` awaits coroutine results.
    """

    def __init__(self) -> None:
        self._callbacks: list[Callable[[E], Any]] = []

    def subscribe(self, callback: Callable[[E], Any]) -> Callable[[E], Any]:
        self._callbacks.append(callback)
        return callback

    def unsubscribe(self, callback: Callable[[E], Any]) -> None:
        self._callbacks.remove(callback)

    def __len__(self) -> int:
        return len(self._callbacks)

    def emit(self, event: E) -> E:
        """Run every subscriber synchronously, in subscription order.

        Raises:
            TypeError: If a subscriber returns an awaitable.
        """
        for callback in list(self._callbacks):
            result = callback(event)
            if inspect.isawaitable(result):
                if inspect.iscoroutine(result):
                    result.close()
                raise TypeError(
                    f"Subscriber {callback!r} is async; use emit_async for this signal"
                )
        return event

    async def emit_async(self, event: E) -> E:
        """Run every subscriber in order, awaiting async ones."""
        for callback in list(self._callbacks):
            result = callback(event)
            if inspect.isawaitable(result):
                await result
        return event


@dataclass
class BeforeEvents:
    player_break_block: EventSignal[PlayerBreakBlockBeforeEvent] = field(
        default_factory=EventSignal
    )


@dataclass
class AfterEvents:
    item_use: EventSignal[ItemUseEvent] = field(default_factory=EventSignal)
