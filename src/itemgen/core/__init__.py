"""Core functionalities: stateless primitives.

Architecture Note:
    core/ contains pure, stateless building blocks: value types, identity,
    components, the item system, the generator tag codec and request
    validation. For stateful services, see world/, storage/ and scheduling/.
"""

from itemgen.core.component import component, get_registry
from itemgen.core.generator import (
    GeneratorConfig,
    GeneratorPhase,
    GeneratorRequest,
    InvalidRequestError,
    TagFormatError,
    decode,
    encode,
)
from itemgen.core.identity import EntityId
from itemgen.core.items import ItemCatalog, ItemConstructionError, ItemStack
from itemgen.core.system import ExecutionStrategy, SystemDescriptor, system
from itemgen.core.types import BlockPos, GameMode, Region, Vec3

__all__ = [
    # Types
    "BlockPos",
    "Vec3",
    "Region",
    "GameMode",
    # Identity
    "EntityId",
    # Component
    "component",
    "get_registry",
    # Items
    "ItemCatalog",
    "ItemStack",
    "ItemConstructionError",
    # Generator
    "GeneratorConfig",
    "GeneratorPhase",
    "GeneratorRequest",
    "InvalidRequestError",
    "TagFormatError",
    "encode",
    "decode",
    # System
    "system",
    "SystemDescriptor",
    "ExecutionStrategy",
]
