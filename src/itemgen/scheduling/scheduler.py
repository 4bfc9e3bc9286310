"""Tick scheduler: runs due systems one after another, to completion.

Usage:
    scheduler = SimpleScheduler()
    scheduler.register_system(process_generators)
    await scheduler.tick_async(world)

    # Surface system errors instead of logging them
    scheduler = SimpleScheduler(config=SchedulerConfig(fail_fast=True))
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from itemgen.core.system import PHASES, SystemDescriptor
from itemgen.scheduling.models import SchedulerConfig

if TYPE_CHECKING:
    from itemgen.world.world import World

logger = logging.getLogger(__name__)


class SimpleScheduler:
    """Sequential scheduler ordered by phase, then by registration.

    Every system finishes before the next one starts, so no world mutation
    is ever observed mid-step. A system only runs on ticks where
    ``descriptor.is_due(tick)`` holds. Systems of "pre_update" run before
    "update" systems, which run before "post_update" ones.

    Args:
        config: Scheduler configuration.
    """

    def __init__(self, config: SchedulerConfig | None = None) -> None:
        self._config = config or SchedulerConfig()
        self._systems: list[SystemDescriptor] = []

    @property
    def systems(self) -> list[SystemDescriptor]:
        return list(self._systems)

    def register_system(self, descriptor: SystemDescriptor) -> None:
        """Register system for execution."""
        if descriptor.phase not in PHASES:
            raise ValueError(f"Unknown system phase {descriptor.phase!r}")
        if any(s.name == descriptor.name for s in self._systems):
            raise ValueError(f"System {descriptor.name!r} is already registered")
        self._systems.append(descriptor)
        # Stable: registration order holds within a phase
        self._systems.sort(key=lambda s: PHASES.index(s.phase))

    async def tick_async(self, world: World) -> None:
        """Execute every due system once."""
        for descriptor in self._systems:
            if not descriptor.is_due(world.current_tick):
                continue
            await self._execute(world, descriptor)

    async def _execute(self, world: World, descriptor: SystemDescriptor) -> None:
        try:
            if descriptor.is_async:
                await descriptor.run(world)
            else:
                descriptor.run(world)
        except Exception:
            if self._config.fail_fast:
                raise
            logger.exception(
                "System %s failed on tick %d; continuing", descriptor.name, world.current_tick
            )

    def tick(self, world: World) -> None:
        """Synchronous wrapper for tick_async."""
        asyncio.run(self.tick_async(world))

    def get_execution_plan_info(self) -> list[str]:
        """System names in execution order (for debugging)."""
        return [s.name for s in self._systems]
