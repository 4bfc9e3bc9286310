"""World state, generator lifecycle and host event handling.

Architecture Note:
    world/ is a stateful service layer. Unlike core/ (stateless
    functionalities), it owns the run-time generator registry and mutates
    the host world every tick.
"""

from itemgen.world.actors import Player
from itemgen.world.events import (
    AfterEvents,
    BeforeEvents,
    EventSignal,
    ItemUseEvent,
    PlayerBreakBlockBeforeEvent,
)
from itemgen.world.guard import guard_block_break, is_protected
from itemgen.world.placement import place_generator
from itemgen.world.processor import process_generator, process_generators, retire_generator
from itemgen.world.registry import (
    GeneratorHandle,
    GeneratorRecord,
    GeneratorRegistry,
    find_generator_markers,
    scan_generators,
)
from itemgen.world.world import World

__all__ = [
    "World",
    "Player",
    # Events
    "EventSignal",
    "BeforeEvents",
    "AfterEvents",
    "PlayerBreakBlockBeforeEvent",
    "ItemUseEvent",
    # Registry
    "GeneratorHandle",
    "GeneratorRecord",
    "GeneratorRegistry",
    "scan_generators",
    "find_generator_markers",
    # Lifecycle
    "process_generators",
    "process_generator",
    "retire_generator",
    "place_generator",
    "is_protected",
    "guard_block_break",
]
