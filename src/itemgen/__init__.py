"""itemgen: block-anchored item generators for a voxel game world.

A generator is a block the operator targeted, an invisible anchor block
high above it and a marker entity on top of the anchor. The marker's tag
carries the configuration; every interval the generator drops a stack of
the configured item just above the anchor.

Usage:
    from itemgen import BlockPos, GeneratorRequest, Region, World

    world = World()
    world.store.set_block(Region.OVERWORLD, BlockPos(0, 64, 0), "minecraft:stone")
    request = GeneratorRequest(interval_ticks=20, item_id="minecraft:emerald", item_count=2)
    world.place_generator(Region.OVERWORLD, BlockPos(0, 64, 0), request)
    world.tick(20)
    world.store.dropped_items(Region.OVERWORLD)  # [(ItemStack('minecraft:emerald', 2), ...)]
"""

__version__ = "0.1.0"

# Configuration
from itemgen.config import GeneratorSettings

# Core primitives
from itemgen.core import (
    BlockPos,
    EntityId,
    GameMode,
    GeneratorConfig,
    GeneratorPhase,
    GeneratorRequest,
    InvalidRequestError,
    ItemCatalog,
    ItemConstructionError,
    ItemStack,
    Region,
    TagFormatError,
    Vec3,
    component,
    decode,
    encode,
    system,
)

# Scheduling
from itemgen.scheduling import SchedulerConfig, SimpleScheduler

# Storage
from itemgen.storage import LocalStorage, WorldStore

# Tracing (optional)
from itemgen.tracing import HistoryStore, InMemoryHistoryStore, TickRecord

# Forms
from itemgen.ui import (
    DefaultValuesPresenter,
    FormPresenter,
    FormResponse,
    QueuedFormPresenter,
)

# World
from itemgen.world import (
    GeneratorRecord,
    GeneratorRegistry,
    ItemUseEvent,
    Player,
    PlayerBreakBlockBeforeEvent,
    World,
)

__all__ = [
    "__version__",
    # Config
    "GeneratorSettings",
    # Core
    "BlockPos",
    "Vec3",
    "Region",
    "GameMode",
    "EntityId",
    "ItemStack",
    "ItemCatalog",
    "ItemConstructionError",
    "GeneratorConfig",
    "GeneratorPhase",
    "GeneratorRequest",
    "InvalidRequestError",
    "TagFormatError",
    "encode",
    "decode",
    "component",
    "system",
    # Scheduling
    "SimpleScheduler",
    "SchedulerConfig",
    # Storage
    "WorldStore",
    "LocalStorage",
    # Tracing
    "HistoryStore",
    "InMemoryHistoryStore",
    "TickRecord",
    # Forms
    "FormPresenter",
    "FormResponse",
    "DefaultValuesPresenter",
    "QueuedFormPresenter",
    # World
    "World",
    "Player",
    "GeneratorRegistry",
    "GeneratorRecord",
    "PlayerBreakBlockBeforeEvent",
    "ItemUseEvent",
]
