"""Protection guard: only creative players may break a generator."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from itemgen.core.types import BlockPos, Region
from itemgen.world import messages
from itemgen.world.events import PlayerBreakBlockBeforeEvent
from itemgen.world.registry import find_generator_markers

if TYPE_CHECKING:
    from itemgen.config import GeneratorSettings
    from itemgen.storage.protocol import WorldStore
    from itemgen.world.world import World

logger = logging.getLogger(__name__)


def is_protected(
    store: WorldStore,
    region: Region,
    pos: BlockPos,
    settings: GeneratorSettings,
) -> bool:
    """Check if pos is a generator's base block or its anchor.

    A base block has the anchor ``anchor_offset`` above it; either way a
    generator marker must sit right above the anchor.
    """
    for anchor_pos in (pos.above(settings.anchor_offset), pos):
        if store.get_block(region, anchor_pos) != settings.anchor_block:
            continue
        if find_generator_markers(store, region, anchor_pos.above(1), settings):
            return True
    return False


def guard_block_break(world: World, event: PlayerBreakBlockBeforeEvent) -> None:
    """Cancel removal of a protected block by a non-creative player."""
    if not is_protected(world.store, event.region, event.pos, world.settings):
        return
    if event.player.is_creative:
        logger.info("%s removed generator block at %s", event.player.name, event.pos)
        return

    event.cancel = True
    event.player.send_message(messages.BREAK_DENIED)
    logger.info("Denied %s breaking generator block at %s", event.player.name, event.pos)
    world.record_event(
        "break_vetoed",
        player=event.player.name,
        region=event.region.value,
        pos=(event.pos.x, event.pos.y, event.pos.z),
    )
