"""Entity allocation service.

EntityAllocator is a stateful service that manages entity ID lifecycle.
"""

from __future__ import annotations

from itemgen.core.identity import EntityId


class EntityAllocator:
    """Allocates entity IDs with generation tracking for recycling.

    Killed entities return their index to a free list with an incremented
    generation, so a handle kept across a kill never matches the next entity
    occupying the slot.
    """

    def __init__(self) -> None:
        self._next_index = 1
        self._free_list: list[tuple[int, int]] = []  # (index, generation)
        self._generations: dict[int, int] = {}

    def allocate(self) -> EntityId:
        """Allocate new entity ID, reusing recycled slots when available."""
        if self._free_list:
            index, gen = self._free_list.pop()
            return EntityId(index=index, generation=gen)

        index = self._next_index
        self._next_index += 1
        self._generations[index] = 0
        return EntityId(index=index, generation=0)

    def deallocate(self, entity: EntityId) -> None:
        """Return entity ID for reuse with incremented generation."""
        new_gen = entity.generation + 1
        self._generations[entity.index] = new_gen
        self._free_list.append((entity.index, new_gen))

    def is_alive(self, entity: EntityId) -> bool:
        """Check if entity ID is still valid (not recycled)."""
        return self._generations.get(entity.index, -1) == entity.generation

    def state(self) -> dict[str, object]:
        return {
            "next_index": self._next_index,
            "free_list": list(self._free_list),
            "generations": dict(self._generations),
        }

    def load(self, state: dict[str, object]) -> None:
        self._next_index = state["next_index"]  # type: ignore[assignment]
        self._free_list = list(state["free_list"])  # type: ignore[call-overload]
        self._generations = dict(state["generations"])  # type: ignore[call-overload]
