"""Placement setup: turn a validated request into an anchor and a marker."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from itemgen.core.generator import GeneratorRequest, encode
from itemgen.core.identity import EntityId
from itemgen.core.types import BlockPos, Region
from itemgen.world.registry import find_generator_markers

if TYPE_CHECKING:
    from itemgen.world.world import World

logger = logging.getLogger(__name__)


def place_generator(
    world: World,
    region: Region,
    block: BlockPos,
    request: GeneratorRequest,
) -> EntityId:
    """Create, or reconfigure, the generator targeting block.

    The anchor goes ``anchor_offset`` above block and the marker one block
    above the anchor, centered. Any generator marker already occupying that
    spot is killed first, so a column never holds two generators.

    Args:
        world: World to build in.
        region: Region of the targeted block.
        block: Block the operator targeted.
        request: Validated configuration.

    Returns:
        The new marker entity.
    """
    store = world.store
    settings = world.settings
    anchor_pos = block.above(settings.anchor_offset)
    marker_block = anchor_pos.above(1)

    for prior in find_generator_markers(store, region, marker_block, settings):
        logger.info("Replacing generator %s at %s", prior, block)
        store.kill(prior)
        world.registry.retire(prior)

    tag = encode(
        request.interval_ticks,
        request.item_id,
        request.item_count,
        block,
        prefix=settings.tag_prefix,
    )
    store.set_block(region, anchor_pos, settings.anchor_block)
    marker = store.spawn_entity(settings.marker_entity, region, marker_block.center())
    store.set_name_tag(marker, str(request.interval_ticks))
    store.add_tag(marker, tag)
    world.registry.register(marker, region, tag)

    logger.info("Placed generator %s in %s: %s", marker, region.value, tag)
    world.record_event("placed", entity=str(marker), region=region.value, tag=tag)
    return marker
