"""Components carried by host entities.

Every entity in the store is a bag of these: its type, where it is, the
label floating above it, its ordered tag list, active status effects and,
for dropped items, the stack it carries.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from itemgen.core.component.core import component
from itemgen.core.items import ItemStack
from itemgen.core.types import Region, Vec3


@component
@dataclass(slots=True)
class EntityType:
    type_id: str


@component
@dataclass(slots=True)
class Location:
    region: Region
    position: Vec3


@component
@dataclass(slots=True)
class NameTag:
    text: str = ""


@component
@dataclass(slots=True)
class Tags:
    """Insertion-ordered, duplicate-free tag list."""

    values: list[str] = field(default_factory=list)

    def add(self, tag: str) -> bool:
        if tag in self.values:
            return False
        self.values.append(tag)
        return True

    def remove(self, tag: str) -> bool:
        if tag not in self.values:
            return False
        self.values.remove(tag)
        return True


@component
@dataclass(slots=True)
class StatusEffect:
    effect_id: str
    duration: int
    show_particles: bool = True


@component
@dataclass(slots=True)
class StatusEffects:
    active: dict[str, StatusEffect] = field(default_factory=dict)


@component
@dataclass(slots=True)
class ItemPayload:
    """Stack held by a dropped item entity."""

    stack: ItemStack
