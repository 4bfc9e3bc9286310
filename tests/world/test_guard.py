"""Tests for the block-break protection guard."""

import pytest

from itemgen import GameMode, Player
from itemgen.core.types import BlockPos, Region
from itemgen.storage import AIR
from itemgen.world import messages
from itemgen.world.guard import is_protected

TARGET = BlockPos(0, 64, 0)
ANCHOR = BlockPos(0, 163, 0)


def test_survival_break_of_base_is_vetoed(world, player, history, place) -> None:
    marker = place()

    assert world.break_block(player, Region.OVERWORLD, TARGET) is False

    assert world.store.get_block(Region.OVERWORLD, TARGET) == "minecraft:stone"
    assert player.messages == [messages.BREAK_DENIED]
    world.tick()
    assert world.store.is_valid(marker)
    (event,) = history.all_events("break_vetoed")
    assert event["player"] == "steve"
    assert event["pos"] == (0, 64, 0)


@pytest.mark.parametrize("mode", [GameMode.SURVIVAL, GameMode.ADVENTURE, GameMode.SPECTATOR])
def test_only_creative_may_break(world, place, mode) -> None:
    place()
    player = Player("p", game_mode=mode)
    assert world.break_block(player, Region.OVERWORLD, TARGET) is False


def test_survival_break_of_anchor_is_vetoed(world, player, place) -> None:
    place()
    assert world.break_block(player, Region.OVERWORLD, ANCHOR) is False
    assert world.store.get_block(Region.OVERWORLD, ANCHOR) == "minecraft:barrier"


def test_creative_break_proceeds_and_generator_is_retired(world, creative_player, place) -> None:
    marker = place()

    assert world.break_block(creative_player, Region.OVERWORLD, TARGET) is True
    assert creative_player.messages == []
    assert world.store.get_block(Region.OVERWORLD, TARGET) == AIR

    world.tick()

    assert not world.store.is_valid(marker)
    assert world.store.get_block(Region.OVERWORLD, ANCHOR) == AIR
    assert world.store.chat == [messages.ANCHOR_MISSING]


def test_ordinary_blocks_are_not_protected(world, player, place) -> None:
    place()
    other = BlockPos(1, 64, 0)
    world.store.set_block(Region.OVERWORLD, other, "minecraft:dirt")

    assert world.break_block(player, Region.OVERWORLD, other) is True
    assert player.messages == []


def test_barrier_without_marker_is_not_protected(world, player) -> None:
    world.store.set_block(Region.OVERWORLD, ANCHOR, "minecraft:barrier")
    assert world.break_block(player, Region.OVERWORLD, TARGET) is True


def test_marker_without_generator_tag_does_not_protect(world, settings, player) -> None:
    world.store.set_block(Region.OVERWORLD, ANCHOR, settings.anchor_block)
    world.store.spawn_entity(settings.marker_entity, Region.OVERWORLD, ANCHOR.above().center())

    assert not is_protected(world.store, Region.OVERWORLD, TARGET, settings)


def test_protection_is_per_region(world, player, place) -> None:
    place(region=Region.NETHER)
    assert world.break_block(player, Region.OVERWORLD, TARGET) is True


def test_guard_uses_floored_marker_position(world, settings, place) -> None:
    place(block=BlockPos(-1, 64, -1))
    assert is_protected(world.store, Region.OVERWORLD, BlockPos(-1, 64, -1), settings)
    assert not is_protected(world.store, Region.OVERWORLD, BlockPos(-2, 64, -2), settings)


def test_other_subscribers_still_run(world, player, place) -> None:
    seen = []
    world.before_events.player_break_block.subscribe(seen.append)
    place()

    world.break_block(player, Region.OVERWORLD, TARGET)

    assert len(seen) == 1
    assert seen[0].cancel is True
