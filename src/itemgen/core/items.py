"""Item system: known item identifiers and validated stack construction.

Usage:
    catalog = ItemCatalog()
    stack = catalog.create_stack("minecraft:diamond", 3)

    catalog.create_stack("minecraft:not_an_item", 1)  # raises ItemConstructionError
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

ITEM_ID_PATTERN = re.compile(r"^[a-z0-9_.\-]+:[a-z0-9_.\-/]+$")
MAX_STACK_AMOUNT = 255

VANILLA_ITEMS: frozenset[str] = frozenset(
    f"minecraft:{name}"
    for name in (
        "amethyst_shard",
        "apple",
        "arrow",
        "bone",
        "bread",
        "coal",
        "cobblestone",
        "copper_ingot",
        "diamond",
        "dirt",
        "emerald",
        "ender_pearl",
        "experience_bottle",
        "glowstone_dust",
        "gold_ingot",
        "gold_nugget",
        "golden_apple",
        "gunpowder",
        "iron_ingot",
        "iron_nugget",
        "lapis_lazuli",
        "netherite_ingot",
        "oak_log",
        "quartz",
        "redstone",
        "slime_ball",
        "stick",
        "stone",
        "string",
        "torch",
        "trial_key",
        "wheat",
    )
)


class ItemConstructionError(ValueError):
    """Raised when an item stack cannot be built from an identifier and amount."""

    pass


@dataclass(frozen=True, slots=True)
class ItemStack:
    """Stack of a single item type."""

    type_id: str
    amount: int = 1


class ItemCatalog:
    """Set of item identifiers the host knows how to construct.

    Args:
        items: Initial identifiers. Defaults to a set of vanilla items.
    """

    def __init__(self, items: Iterable[str] | None = None) -> None:
        self._items: set[str] = set(VANILLA_ITEMS if items is None else items)

    def register(self, item_id: str) -> None:
        """Make a custom item constructible.

        Raises:
            ItemConstructionError: If the identifier is not namespaced.
        """
        if not ITEM_ID_PATTERN.match(item_id):
            raise ItemConstructionError(f"Malformed item identifier: {item_id!r}")
        self._items.add(item_id)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    def create_stack(self, item_id: str, amount: int) -> ItemStack:
        """Build a stack, validating identifier and amount.

        Args:
            item_id: Namespaced item identifier.
            amount: Stack size, 1..255.

        Returns:
            The constructed ItemStack.

        Raises:
            ItemConstructionError: If the identifier is malformed or unknown,
                or the amount is out of range.
        """
        if not isinstance(item_id, str) or not ITEM_ID_PATTERN.match(item_id):
            raise ItemConstructionError(f"Malformed item identifier: {item_id!r}")
        if item_id not in self._items:
            raise ItemConstructionError(f"Unknown item: {item_id}")
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise ItemConstructionError(f"Item amount must be an integer, got {amount!r}")
        if not 1 <= amount <= MAX_STACK_AMOUNT:
            raise ItemConstructionError(
                f"Item amount must be between 1 and {MAX_STACK_AMOUNT}, got {amount}"
            )
        return ItemStack(type_id=item_id, amount=amount)
