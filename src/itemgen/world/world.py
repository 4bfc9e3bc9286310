"""World: central coordinator for the store, the generators and host events.

Usage:
    world = World()

    # Place a generator directly (bypassing the form)
    request = GeneratorRequest(interval_ticks=200, item_id="minecraft:diamond", item_count=1)
    world.place_generator(Region.OVERWORLD, BlockPos(0, 64, 0), request)

    # Or let a player configure one with the trigger item
    world.use_item(player, ItemStack("minecraft:trial_key"))

    # Advance time
    world.tick()  # or await world.tick_async()

    # Breaking is guarded
    world.break_block(player, Region.OVERWORLD, BlockPos(0, 64, 0))
"""

from __future__ import annotations

import asyncio
import logging
import time
from functools import partial
from typing import TYPE_CHECKING, Any

from itemgen.config import GeneratorSettings
from itemgen.core.generator import GeneratorRequest
from itemgen.core.identity import EntityId
from itemgen.core.items import ItemStack
from itemgen.core.system import SystemDescriptor
from itemgen.core.types import BlockPos, Region
from itemgen.storage.local import LocalStorage
from itemgen.storage.protocol import AIR, WorldStore
from itemgen.tracing import HistoryStore, InMemoryHistoryStore, TickRecord
from itemgen.world.actors import Player
from itemgen.world.events import (
    AfterEvents,
    BeforeEvents,
    ItemUseEvent,
    PlayerBreakBlockBeforeEvent,
)
from itemgen.world.registry import GeneratorRecord, GeneratorRegistry

if TYPE_CHECKING:
    from itemgen.core.system import ExecutionStrategy
    from itemgen.ui.forms import FormPresenter

logger = logging.getLogger(__name__)


class World:
    """Owns the store, the generator registry, the scheduler and host events.

    On construction the generator tick system is registered and the break
    guard and trigger item handlers are subscribed, unless
    ``install_generators=False``.

    Args:
        store: Host world backend. Defaults to a fresh LocalStorage.
        settings: Generator settings. Defaults to GeneratorSettings().
        execution: System execution strategy. Defaults to SimpleScheduler.
        history: Tick history store. Defaults to an InMemoryHistoryStore
            keeping ``settings.history_size`` ticks, or none when that is 0.
        presenter: Form presenter used by the trigger item.
        install_generators: Wire the generator systems and handlers.
    """

    def __init__(
        self,
        store: WorldStore | None = None,
        settings: GeneratorSettings | None = None,
        execution: ExecutionStrategy | None = None,
        history: HistoryStore | None = None,
        presenter: FormPresenter | None = None,
        install_generators: bool = True,
    ):
        self._settings = settings or GeneratorSettings()
        self._store: WorldStore = store or LocalStorage(item_entity=self._settings.item_entity)
        # Import here to avoid circular dependency at module level
        if execution is None:
            from itemgen.scheduling import SimpleScheduler

            execution = SimpleScheduler()
        if presenter is None:
            from itemgen.ui.forms import DefaultValuesPresenter

            presenter = DefaultValuesPresenter()
        self._execution = execution
        self._presenter = presenter
        if history is None and self._settings.history_size > 0:
            history = InMemoryHistoryStore(max_ticks=self._settings.history_size)
        self._history = history
        self._registry = GeneratorRegistry(self._settings)
        self._tick = 0
        self._events: list[dict[str, Any]] = []

        self.before_events = BeforeEvents()
        self.after_events = AfterEvents()

        if install_generators:
            self._install_generators()

    def _install_generators(self) -> None:
        from itemgen.ui.forms import handle_item_use
        from itemgen.world.guard import guard_block_break
        from itemgen.world.processor import process_generators

        self.register_system(process_generators)
        self.before_events.player_break_block.subscribe(partial(guard_block_break, self))
        self.after_events.item_use.subscribe(partial(handle_item_use, self))

    @property
    def store(self) -> WorldStore:
        return self._store

    @property
    def settings(self) -> GeneratorSettings:
        return self._settings

    @property
    def registry(self) -> GeneratorRegistry:
        return self._registry

    @property
    def presenter(self) -> FormPresenter:
        return self._presenter

    @property
    def history(self) -> HistoryStore | None:
        return self._history

    @property
    def current_tick(self) -> int:
        """Number of the tick being run, or of the last completed one."""
        return self._tick

    def generators(self) -> list[GeneratorRecord]:
        """Generators known to the registry as of the last tick or placement."""
        return list(self._registry)

    def record_event(self, event_type: str, **data: Any) -> None:
        """Attach an event to the current tick's history record."""
        self._events.append({"type": event_type, "tick": self._tick, **data})

    def register_system(self, descriptor: SystemDescriptor) -> None:
        """Register system for execution.

        Delegates to the injected execution strategy.
        """
        self._execution.register_system(descriptor)

    def register_systems(self, *descriptors: SystemDescriptor) -> None:
        for d in descriptors:
            self.register_system(d)

    async def tick_async(self) -> None:
        """Advance the world by one tick, running every due system to completion."""
        self._tick += 1
        await self._execution.tick_async(self)
        self._store.tick_effects()
        self._flush_events()

    def tick(self, count: int = 1) -> None:
        """Advance ``count`` ticks synchronously (wrapper for tick_async)."""

        async def run() -> None:
            for _ in range(count):
                await self.tick_async()

        asyncio.run(run())

    def _flush_events(self) -> None:
        events, self._events = self._events, []
        if self._history is not None:
            self._history.record_tick(
                TickRecord(tick=self._tick, timestamp=time.time(), events=events)
            )

    def place_generator(
        self, region: Region, block: BlockPos, request: GeneratorRequest
    ) -> EntityId:
        """Create or reconfigure the generator targeting block."""
        from itemgen.world.placement import place_generator

        return place_generator(self, region, block, request)

    def break_block(self, player: Player, region: Region, pos: BlockPos) -> bool:
        """Have player break the block at pos, unless a subscriber vetoes it.

        Returns:
            True if the block was removed.
        """
        event = PlayerBreakBlockBeforeEvent(
            player=player,
            region=region,
            pos=pos,
            block_type=self._store.get_block(region, pos),
        )
        self.before_events.player_break_block.emit(event)
        if event.cancel:
            return False
        self._store.set_block(region, pos, AIR)
        return True

    async def use_item_async(self, player: Player, item_stack: ItemStack) -> ItemUseEvent:
        """Have player use an item, running every item-use subscriber."""
        return await self.after_events.item_use.emit_async(ItemUseEvent(player, item_stack))

    def use_item(self, player: Player, item_stack: ItemStack) -> ItemUseEvent:
        """Synchronous wrapper for use_item_async."""
        return asyncio.run(self.use_item_async(player, item_stack))

    def snapshot(self) -> bytes:
        """Serialize world state (the registry is run-time state and is not saved)."""
        return self._store.snapshot()

    def restore(self, data: bytes) -> None:
        """Restore from snapshot, starting a fresh run for every generator."""
        self._store.restore(data)
        self._registry.clear()
