"""Entity identity models.

Usage:
    entity = EntityId(index=42, generation=1)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EntityId:
    """Opaque entity handle with a generation for safe slot reuse.

    A killed entity's index may be handed out again; the bumped generation
    keeps stale handles (e.g. a marker retired earlier in the same tick)
    from resolving to the newcomer.
    """

    index: int = 0
    generation: int = 0

    def __hash__(self) -> int:
        return hash((self.index, self.generation))

    def __str__(self) -> str:
        return f"#{self.index}.{self.generation}"
