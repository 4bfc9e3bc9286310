"""World store protocol for swappable hosts.

The store abstracts the host world the generators live in, enabling:
- Local in-memory world (default, tests and headless runs)
- A bridge to a real game server's scripting API

Usage:
    store = LocalStorage()
    world = World(store=store)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from itemgen.core.identity import EntityId
from itemgen.core.items import ItemCatalog, ItemStack
from itemgen.core.types import BlockPos, Region, Vec3

AIR = "minecraft:air"


class InvalidEntityError(LookupError):
    """Raised when an operation targets a killed or unknown entity."""

    pass


class WorldStore(Protocol):
    """Blocks, entities and chat of a host world."""

    @property
    def items(self) -> ItemCatalog:
        """Item system used to construct stacks."""
        ...

    # Blocks

    def get_block(self, region: Region, pos: BlockPos) -> str:
        """Type of the block at pos; air when nothing was placed."""
        ...

    def set_block(self, region: Region, pos: BlockPos, type_id: str) -> None:
        """Place a block, or clear it when type_id is air."""
        ...

    # Entities

    def spawn_entity(self, type_id: str, region: Region, position: Vec3) -> EntityId:
        """Spawn a typed entity and return its handle."""
        ...

    def kill(self, entity: EntityId) -> bool:
        """Remove entity. Returns True if it was alive."""
        ...

    def is_valid(self, entity: EntityId) -> bool:
        """Check if entity handle still refers to a live entity."""
        ...

    def entities(self, region: Region, type_id: str | None = None) -> Iterator[EntityId]:
        """Iterate live entities of a region, optionally filtered by type."""
        ...

    def get_type(self, entity: EntityId) -> str:
        ...

    def get_location(self, entity: EntityId) -> tuple[Region, Vec3]:
        ...

    def get_tags(self, entity: EntityId) -> list[str]:
        """Entity tags in insertion order."""
        ...

    def add_tag(self, entity: EntityId, tag: str) -> bool:
        ...

    def remove_tag(self, entity: EntityId, tag: str) -> bool:
        ...

    def has_tag(self, entity: EntityId, tag: str) -> bool:
        ...

    def get_name_tag(self, entity: EntityId) -> str:
        ...

    def set_name_tag(self, entity: EntityId, text: str) -> None:
        ...

    def add_effect(
        self, entity: EntityId, effect_id: str, duration: int, show_particles: bool = True
    ) -> None:
        """Apply or refresh a status effect."""
        ...

    def spawn_item(self, stack: ItemStack, region: Region, position: Vec3) -> EntityId:
        """Drop an item stack into the world."""
        ...

    def tick_effects(self) -> None:
        """Age status effects by one tick. Hosts with their own clock may no-op."""
        ...

    # Chat

    def broadcast(self, message: str) -> None:
        """Send a message to every player."""
        ...

    # Persistence

    def snapshot(self) -> bytes:
        """Serialize the whole world."""
        ...

    def restore(self, data: bytes) -> None:
        """Restore from snapshot."""
        ...
