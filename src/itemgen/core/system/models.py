"""System models: descriptors and the execution strategy protocol."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

PHASES = ("pre_update", "update", "post_update")
"""Execution phases in the order the scheduler runs them."""


@dataclass(frozen=True)
class SystemDescriptor:
    """Metadata about a registered system.

    Attributes:
        name: Human-readable name used in logs and tick records.
        run: Callable receiving the World.
        is_async: Whether run is a coroutine function.
        interval: Run every N ticks (1 = every tick).
        phase: One of PHASES; earlier phases run first within a tick.
    """

    name: str
    run: Callable[..., Any]
    is_async: bool = False
    interval: int = 1
    phase: str = "update"

    def is_due(self, tick: int) -> bool:
        """Check if the system runs on this tick."""
        return tick % self.interval == 0


@runtime_checkable
class ExecutionStrategy(Protocol):
    """Protocol for pluggable system execution strategies.

    The strategy is injected into World and handles all system registration
    and execution logic.
    """

    def register_system(self, descriptor: SystemDescriptor) -> None:
        """Register a system for execution."""
        ...

    async def tick_async(self, world: Any) -> None:
        """Execute all due systems once."""
        ...
