"""Tests for the per-tick generator processor.

Critical Invariants:
- Exactly one emission per interval, at the configured position
- A generator with a broken structure never emits and is removed
- One generator's failure never affects another
- The marker label always shows the remaining countdown
"""

import pytest

from itemgen.core.generator import GeneratorPhase
from itemgen.core.items import ItemStack
from itemgen.core.types import BlockPos, Region, Vec3
from itemgen.storage import AIR, LocalStorage
from itemgen.world import messages

TARGET = BlockPos(0, 64, 0)
ANCHOR = TARGET.above(99)
DROP = Vec3(0.5, 66.0, 0.5)


def drops(world, region=Region.OVERWORLD):
    return world.store.dropped_items(region)


def test_emits_once_per_interval(world, place) -> None:
    place(interval=5, item_id="minecraft:diamond", count=1)

    world.tick(4)
    assert drops(world) == []

    world.tick()
    assert drops(world) == [(ItemStack("minecraft:diamond", 1), DROP)]

    world.tick(5)
    assert len(drops(world)) == 2


def test_emission_ticks_are_multiples_of_interval(world, history, place) -> None:
    place(interval=7)
    world.tick(30)

    assert [e["tick"] for e in history.all_events("emitted")] == [7, 14, 21, 28]


def test_interval_one_emits_every_tick(world, place) -> None:
    marker = place(interval=1, item_id="minecraft:iron_ingot", count=4)

    world.tick()
    assert drops(world) == [(ItemStack("minecraft:iron_ingot", 4), DROP)]
    assert world.store.get_name_tag(marker) == "1"

    world.tick(2)
    assert drops(world) == [(ItemStack("minecraft:iron_ingot", 4), DROP)] * 3


def test_item_appears_two_blocks_above_the_base_block(world, place) -> None:
    place(interval=1)
    world.tick()

    (_, position) = drops(world)[0]
    assert position.floored() == TARGET.above(2)


def test_label_counts_down(world, place) -> None:
    marker = place(interval=5)
    assert world.store.get_name_tag(marker) == "5"

    labels = []
    for _ in range(6):
        world.tick()
        labels.append(world.store.get_name_tag(marker))

    assert labels == ["4", "3", "2", "1", "5", "4"]


def test_initialization_marks_the_marker(world, settings, place) -> None:
    marker = place()
    assert not world.store.has_tag(marker, settings.initialized_tag)

    world.tick()

    assert world.store.has_tag(marker, settings.initialized_tag)
    assert world.registry.get(marker).phase is GeneratorPhase.COUNTING


def test_external_label_edit_does_not_change_countdown(world, place) -> None:
    marker = place(interval=5)
    world.tick()
    world.store.set_name_tag(marker, "1")

    world.tick()

    assert drops(world) == []
    assert world.store.get_name_tag(marker) == "3"


def test_marker_stays_invisible(world, place) -> None:
    marker = place()
    for _ in range(50):
        world.tick()
        effect = world.store.get_effect(marker, "invisibility")
        assert effect is not None
        assert effect.show_particles is False


def test_anchor_removed_retires_without_emitting(world, history, place) -> None:
    marker = place(interval=5)
    world.tick(4)
    world.store.set_block(Region.OVERWORLD, ANCHOR, AIR)

    world.tick()

    assert drops(world) == []
    assert not world.store.is_valid(marker)
    assert marker not in world.registry
    assert world.store.chat == [messages.ANCHOR_MISSING]
    assert history.all_events("retired")[0]["reason"] == "anchor missing"


def test_anchor_replaced_by_other_block_retires_and_keeps_block(world, place) -> None:
    marker = place(interval=5)
    world.store.set_block(Region.OVERWORLD, ANCHOR, "minecraft:glass")

    world.tick()

    assert not world.store.is_valid(marker)
    assert world.store.get_block(Region.OVERWORLD, ANCHOR) == "minecraft:glass"


def test_base_block_removed_retires_and_clears_anchor(world, place) -> None:
    marker = place(interval=5)
    world.store.set_block(Region.OVERWORLD, TARGET, AIR)

    world.tick()

    assert not world.store.is_valid(marker)
    assert world.store.get_block(Region.OVERWORLD, ANCHOR) == AIR
    assert world.store.chat == [messages.ANCHOR_MISSING]


def test_unknown_item_retires_generator(world, place) -> None:
    marker = place(interval=2, item_id="minecraft:not_an_item")

    world.tick()
    assert world.store.is_valid(marker)

    world.tick()

    assert drops(world) == []
    assert not world.store.is_valid(marker)
    assert world.store.get_block(Region.OVERWORLD, ANCHOR) == AIR
    assert world.store.chat == [messages.INVALID_GENERATOR, messages.INVALID_ITEM]


def test_oversized_stack_retires_generator(world, place) -> None:
    marker = place(interval=1, count=256)
    world.tick()
    assert not world.store.is_valid(marker)
    assert drops(world) == []


def test_invalid_tag_retires_generator(world, settings) -> None:
    store = world.store
    store.set_block(Region.OVERWORLD, ANCHOR, settings.anchor_block)
    marker = store.spawn_entity(settings.marker_entity, Region.OVERWORLD, ANCHOR.above().center())
    store.add_tag(marker, "gen:soon,minecraft:diamond,1,0,64,0")

    world.tick()

    assert not store.is_valid(marker)
    assert store.chat == [messages.INVALID_CONFIG]
    assert drops(world) == []


class RefusingStore(LocalStorage):
    """Store whose host refuses every item drop."""

    def spawn_item(self, stack, region, position):
        raise ValueError("host refused the drop")


def test_host_spawn_failure_retires_generator(settings, history) -> None:
    from itemgen import GeneratorRequest, World

    world = World(store=RefusingStore(), settings=settings, history=history)
    world.store.set_block(Region.OVERWORLD, TARGET, "minecraft:stone")
    request = GeneratorRequest(interval_ticks=1, item_id="minecraft:diamond", item_count=1)
    marker = world.place_generator(Region.OVERWORLD, TARGET, request)

    world.tick()

    assert not world.store.is_valid(marker)
    assert marker not in world.registry
    assert world.store.get_block(Region.OVERWORLD, ANCHOR) == AIR
    assert world.store.chat == [messages.INVALID_GENERATOR, messages.INVALID_ITEM]
    assert history.all_events("retired")[0]["reason"] == "host refused the drop"

    world.tick(3)

    assert world.store.chat == [messages.INVALID_GENERATOR, messages.INVALID_ITEM]
    assert history.all_events("emitted") == []
    assert len(history.all_events("retired")) == 1


def test_failing_generator_does_not_stop_others(world, place) -> None:
    place(interval=1, item_id="minecraft:not_an_item", block=BlockPos(10, 64, 10))
    place(interval=1, item_id="minecraft:emerald", block=BlockPos(20, 64, 20))

    world.tick(3)

    assert [stack.type_id for stack, _ in drops(world)] == ["minecraft:emerald"] * 3


def test_unexpected_error_is_isolated(world, place, monkeypatch, caplog) -> None:
    from itemgen.world import processor

    broken = place(interval=1, block=BlockPos(10, 64, 10))
    place(interval=1, item_id="minecraft:emerald", block=BlockPos(20, 64, 20))
    original = processor.process_generator

    def flaky(w, record):
        if record.entity == broken:
            raise RuntimeError("host hiccup")
        original(w, record)

    monkeypatch.setattr(processor, "process_generator", flaky)
    world.tick()

    assert [stack.type_id for stack, _ in drops(world)] == ["minecraft:emerald"]
    assert "host hiccup" in caplog.text


def test_regions_are_isolated(world, place) -> None:
    place(interval=2, item_id="minecraft:diamond", region=Region.OVERWORLD)
    place(interval=3, item_id="minecraft:quartz", region=Region.NETHER)

    world.tick(6)

    assert [s.type_id for s, _ in drops(world, Region.OVERWORLD)] == ["minecraft:diamond"] * 3
    assert [s.type_id for s, _ in drops(world, Region.NETHER)] == ["minecraft:quartz"] * 2
    assert drops(world, Region.THE_END) == []



def test_equal_intervals_in_different_regions_emit_together(world, history, place) -> None:
    place(interval=2, item_id="minecraft:diamond", region=Region.OVERWORLD)
    place(interval=2, item_id="minecraft:quartz", count=3, region=Region.NETHER)

    world.tick(6)

    assert drops(world, Region.OVERWORLD) == [(ItemStack("minecraft:diamond", 1), DROP)] * 3
    assert drops(world, Region.NETHER) == [(ItemStack("minecraft:quartz", 3), DROP)] * 3
    assert drops(world, Region.THE_END) == []
    emitted = sorted((e["tick"], e["region"]) for e in history.all_events("emitted"))
    regions = sorted((Region.OVERWORLD.value, Region.NETHER.value))
    assert emitted == [(tick, region) for tick in (2, 4, 6) for region in regions]


def test_generators_in_unscanned_regions_are_ignored(settings) -> None:
    from itemgen import GeneratorRequest, World

    world = World(settings=settings.model_copy(update={"regions": (Region.NETHER,)}))
    world.store.set_block(Region.OVERWORLD, TARGET, "minecraft:stone")
    request = GeneratorRequest(interval_ticks=1, item_id="minecraft:diamond", item_count=1)
    world.place_generator(Region.OVERWORLD, TARGET, request)

    world.tick(3)

    assert drops(world) == []


@pytest.mark.parametrize("interval", [1, 2, 13])
def test_emission_count_over_many_ticks(world, place, interval) -> None:
    place(interval=interval)
    world.tick(60)
    assert len(drops(world)) == 60 // interval
