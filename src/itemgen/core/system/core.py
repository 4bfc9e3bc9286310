"""System decorator.

Usage:
    @system()
    def every_tick(world: World) -> None:
        ...

    @system(interval=20, name="autosave")
    async def save(world: World) -> None:
        ...
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from itemgen.core.system.models import PHASES, SystemDescriptor


def system(
    interval: int = 1,
    phase: str = "update",
    name: str | None = None,
) -> Callable[[Callable[..., Any]], SystemDescriptor]:
    """Turn a function of the world into a schedulable system.

    Args:
        interval: Run every N ticks. Must be positive.
        phase: Execution phase the system belongs to, one of PHASES.
        name: Override for the system name (defaults to function name).

    Returns:
        Decorator producing the system's descriptor.

    Raises:
        ValueError: If interval is not positive or phase is unknown.
    """
    if interval < 1:
        raise ValueError(f"System interval must be positive, got {interval}")
    if phase not in PHASES:
        raise ValueError(f"Unknown system phase {phase!r}, expected one of {PHASES}")

    def decorator(fn: Callable[..., Any]) -> SystemDescriptor:
        return SystemDescriptor(
            name=name or fn.__name__,
            run=fn,
            is_async=inspect.iscoroutinefunction(fn),
            interval=interval,
            phase=phase,
        )

    return decorator
