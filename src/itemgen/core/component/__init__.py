"""Component functionality: registry, decorator and host entity components."""

from itemgen.core.component.core import ComponentRegistry, component, get_registry
from itemgen.core.component.models import (
    EntityType,
    ItemPayload,
    Location,
    NameTag,
    StatusEffect,
    StatusEffects,
    Tags,
)

__all__ = [
    # Core
    "component",
    "get_registry",
    "ComponentRegistry",
    # Models
    "EntityType",
    "Location",
    "NameTag",
    "Tags",
    "StatusEffect",
    "StatusEffects",
    "ItemPayload",
]
