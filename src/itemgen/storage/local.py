"""Local in-memory world implementation.

Simple dict-based world suitable for single-process use, headless runs and
testing. Entities are bags of components keyed by component type, blocks
are a sparse map per region.

Usage:
    store = LocalStorage()
    store.set_block(Region.OVERWORLD, BlockPos(0, 64, 0), "minecraft:stone")
    marker = store.spawn_entity("minecraft:armor_stand", Region.OVERWORLD, Vec3(0.5, 65, 0.5))
    store.add_tag(marker, "gen:200,minecraft:diamond,1,0,64,0")
"""

from __future__ import annotations

import copy as cp
import logging
import pickle  # nosec B403 - Used only for local save/reload emulation
from collections.abc import Iterator
from typing import Any, TypeVar

from itemgen.core.component import (
    EntityType,
    ItemPayload,
    Location,
    NameTag,
    StatusEffect,
    StatusEffects,
    Tags,
    get_registry,
)
from itemgen.core.identity import EntityId
from itemgen.core.items import ItemCatalog, ItemStack
from itemgen.core.types import BlockPos, Region, Vec3
from itemgen.storage.allocator import EntityAllocator
from itemgen.storage.protocol import AIR, InvalidEntityError

logger = logging.getLogger(__name__)

T = TypeVar("T")

ITEM_ENTITY = "minecraft:item"


class LocalStorage:
    """In-memory host world.

    Structure:
        _components[entity][component_type] = component_instance
        _blocks[(region, pos)] = block type id (air is never stored)

    Args:
        items: Item catalog used to build stacks (vanilla defaults if None).
        item_entity: Entity type of dropped items.
    """

    def __init__(
        self, items: ItemCatalog | None = None, item_entity: str = ITEM_ENTITY
    ) -> None:
        self._items = items or ItemCatalog()
        self._item_entity = item_entity
        self._allocator = EntityAllocator()
        self._components: dict[EntityId, dict[type, Any]] = {}
        self._blocks: dict[tuple[Region, BlockPos], str] = {}
        self.chat: list[str] = []

    @property
    def items(self) -> ItemCatalog:
        return self._items

    # Blocks

    def get_block(self, region: Region, pos: BlockPos) -> str:
        return self._blocks.get((region, pos), AIR)

    def set_block(self, region: Region, pos: BlockPos, type_id: str) -> None:
        if type_id == AIR:
            self._blocks.pop((region, pos), None)
        else:
            self._blocks[(region, pos)] = type_id

    # Components

    def _require(self, entity: EntityId) -> dict[type, Any]:
        if not self.is_valid(entity):
            raise InvalidEntityError(f"Entity {entity} is not alive")
        return self._components[entity]

    def get_component(
        self, entity: EntityId, component_type: type[T], copy: bool = True
    ) -> T | None:
        """Get a component from an entity, deep-copied unless copy=False."""
        if not self.is_valid(entity):
            return None
        component = self._components[entity].get(component_type)
        if component is None:
            return None
        return cp.deepcopy(component) if copy else component

    def set_component(self, entity: EntityId, component: Any) -> None:
        """Attach a component, replacing any of the same type.

        Raises:
            TypeError: If the component type was not registered with @component.
        """
        if not get_registry().is_registered(type(component)):
            raise TypeError(f"{type(component).__name__} is not a registered component")
        self._require(entity)[type(component)] = component

    def _component(self, entity: EntityId, component_type: type[T]) -> T:
        components = self._require(entity)
        component = components.get(component_type)
        if component is None:
            component = component_type()
            components[component_type] = component
        return component

    # Entities

    def spawn_entity(self, type_id: str, region: Region, position: Vec3) -> EntityId:
        entity = self._allocator.allocate()
        self._components[entity] = {
            EntityType: EntityType(type_id),
            Location: Location(region, position),
            NameTag: NameTag(),
            Tags: Tags(),
            StatusEffects: StatusEffects(),
        }
        logger.debug("Spawned %s %s in %s at %s", type_id, entity, region.value, position)
        return entity

    def kill(self, entity: EntityId) -> bool:
        if not self.is_valid(entity):
            return False
        del self._components[entity]
        self._allocator.deallocate(entity)
        logger.debug("Killed %s", entity)
        return True

    def is_valid(self, entity: EntityId) -> bool:
        return entity in self._components and self._allocator.is_alive(entity)

    def entities(self, region: Region, type_id: str | None = None) -> Iterator[EntityId]:
        """Iterate live entities of a region in spawn order.

        Iterates over a copy so callers may kill entities while iterating.
        """
        for entity, components in list(self._components.items()):
            if not self._allocator.is_alive(entity):
                continue
            if components[Location].region is not region:
                continue
            if type_id is not None and components[EntityType].type_id != type_id:
                continue
            yield entity

    def get_type(self, entity: EntityId) -> str:
        return self._component(entity, EntityType).type_id

    def get_location(self, entity: EntityId) -> tuple[Region, Vec3]:
        location = self._component(entity, Location)
        return location.region, location.position

    def teleport(self, entity: EntityId, position: Vec3) -> None:
        self._component(entity, Location).position = position

    def get_tags(self, entity: EntityId) -> list[str]:
        return list(self._component(entity, Tags).values)

    def add_tag(self, entity: EntityId, tag: str) -> bool:
        return self._component(entity, Tags).add(tag)

    def remove_tag(self, entity: EntityId, tag: str) -> bool:
        return self._component(entity, Tags).remove(tag)

    def has_tag(self, entity: EntityId, tag: str) -> bool:
        return tag in self._component(entity, Tags).values

    def get_name_tag(self, entity: EntityId) -> str:
        return self._component(entity, NameTag).text

    def set_name_tag(self, entity: EntityId, text: str) -> None:
        self._component(entity, NameTag).text = text

    def add_effect(
        self, entity: EntityId, effect_id: str, duration: int, show_particles: bool = True
    ) -> None:
        effects = self._component(entity, StatusEffects)
        effects.active[effect_id] = StatusEffect(effect_id, duration, show_particles)

    def get_effect(self, entity: EntityId, effect_id: str) -> StatusEffect | None:
        return self._component(entity, StatusEffects).active.get(effect_id)

    def tick_effects(self) -> None:
        """Age every status effect by one tick, dropping expired ones."""
        for components in self._components.values():
            effects = components.get(StatusEffects)
            if effects is None:
                continue
            for effect_id, effect in list(effects.active.items()):
                effect.duration -= 1
                if effect.duration <= 0:
                    del effects.active[effect_id]

    def spawn_item(self, stack: ItemStack, region: Region, position: Vec3) -> EntityId:
        entity = self.spawn_entity(self._item_entity, region, position)
        self.set_component(entity, ItemPayload(stack))
        return entity

    def get_item(self, entity: EntityId) -> ItemStack | None:
        payload = self.get_component(entity, ItemPayload, copy=False)
        return payload.stack if payload is not None else None

    def dropped_items(self, region: Region) -> list[tuple[ItemStack, Vec3]]:
        """Every dropped stack of a region with its position."""
        result = []
        for entity in self.entities(region, self._item_entity):
            stack = self.get_item(entity)
            if stack is not None:
                result.append((stack, self.get_location(entity)[1]))
        return result

    # Chat

    def broadcast(self, message: str) -> None:
        self.chat.append(message)
        logger.info("[broadcast] %s", message)

    # Persistence

    def snapshot(self) -> bytes:
        """Pickle blocks, entities and allocator state.

        Chat and the item catalog are runtime state and are not saved.
        """
        return pickle.dumps(
            {
                "components": self._components,
                "blocks": self._blocks,
                "allocator": self._allocator.state(),
            }
        )

    def restore(self, data: bytes) -> None:
        state = pickle.loads(data)  # nosec B301 - Only loads snapshots produced by snapshot()
        self._components = state["components"]
        self._blocks = state["blocks"]
        self._allocator = EntityAllocator()
        self._allocator.load(state["allocator"])
