"""Generator tick processor.

Runs once per tick over a snapshot of the registry. Each generator goes
through, in order: invisibility refresh, structural validation, countdown
initialization, countdown tick, emission, label projection. A broken
structure or an item the host refuses to build retires the generator;
nothing a single generator does can stop the others from being processed.

State machine per generator:
    UNINITIALIZED -> COUNTING -> EMITTING (within one tick) -> COUNTING
    any -> DESTROYED
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from itemgen.core.generator import GeneratorPhase, normalize_countdown
from itemgen.core.system import system
from itemgen.storage.protocol import AIR
from itemgen.world import messages
from itemgen.world.registry import GeneratorRecord

if TYPE_CHECKING:
    from itemgen.world.world import World

logger = logging.getLogger(__name__)

INVISIBILITY = "invisibility"


def retire_generator(
    world: World,
    record: GeneratorRecord,
    reason: str,
    *announcements: str,
) -> None:
    """Remove a generator's anchor and marker, then announce it.

    The anchor is only cleared when it still is an anchor block.
    """
    store = world.store
    settings = world.settings
    if store.is_valid(record.entity):
        _, position = store.get_location(record.entity)
        anchor_pos = position.floored().below(1)
        if store.get_block(record.region, anchor_pos) == settings.anchor_block:
            store.set_block(record.region, anchor_pos, AIR)
        store.kill(record.entity)
    world.registry.retire(record.entity)
    record.phase = GeneratorPhase.DESTROYED

    logger.warning("Retired generator %s (%s): %s", record.entity, record.tag, reason)
    world.record_event("retired", entity=str(record.entity), tag=record.tag, reason=reason)
    for message in announcements:
        store.broadcast(message)


def _structure_intact(world: World, record: GeneratorRecord) -> bool:
    """Anchor right below the marker, and something solid where it was placed."""
    store = world.store
    settings = world.settings
    _, position = store.get_location(record.entity)
    marker_block = position.floored()
    anchor = store.get_block(record.region, marker_block.below(1))
    base = store.get_block(record.region, marker_block.below(settings.marker_height))
    return anchor == settings.anchor_block and base != AIR


def process_generator(world: World, record: GeneratorRecord) -> None:
    """Advance one generator by one tick."""
    store = world.store
    settings = world.settings
    entity = record.entity

    store.add_effect(entity, INVISIBILITY, settings.invisibility_ticks, show_particles=False)

    if not _structure_intact(world, record):
        retire_generator(world, record, "anchor missing", messages.ANCHOR_MISSING)
        return

    config = record.config
    if config is None or not config.is_valid:
        retire_generator(
            world,
            record,
            record.error or "invalid configuration",
            messages.INVALID_CONFIG,
        )
        return
    interval = cast(int, config.interval_ticks)
    count = cast(int, config.item_count)

    if record.phase is GeneratorPhase.UNINITIALIZED:
        record.remaining = interval
        record.phase = GeneratorPhase.COUNTING
        store.add_tag(entity, settings.initialized_tag)
    else:
        record.remaining = normalize_countdown(record.remaining, interval)

    record.remaining -= 1
    if record.remaining <= 0:
        record.phase = GeneratorPhase.EMITTING
        record.remaining = interval
        region, position = store.get_location(entity)
        drop_at = position.offset(dy=-settings.item_spawn_offset)
        try:
            stack = store.items.create_stack(config.item_id, count)
            store.spawn_item(stack, region, drop_at)
        except Exception as e:
            retire_generator(
                world,
                record,
                str(e),
                messages.INVALID_GENERATOR,
                messages.INVALID_ITEM,
            )
            return
        record.phase = GeneratorPhase.COUNTING
        world.record_event(
            "emitted",
            entity=str(entity),
            region=region.value,
            item_id=stack.type_id,
            amount=stack.amount,
            position=(drop_at.x, drop_at.y, drop_at.z),
        )

    store.set_name_tag(entity, str(record.remaining))


@system(name="generator_tick")
def process_generators(world: World) -> None:
    """Discover every generator and advance each by one tick."""
    records = world.registry.refresh(world.store)
    for record in records:
        if record.phase is GeneratorPhase.DESTROYED or not world.store.is_valid(record.entity):
            continue
        try:
            process_generator(world, record)
        except Exception:
            logger.exception("Generator %s failed on tick %d", record.entity, world.current_tick)
