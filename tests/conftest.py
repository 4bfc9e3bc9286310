"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from itemgen import (
    BlockPos,
    GameMode,
    GeneratorRequest,
    GeneratorSettings,
    InMemoryHistoryStore,
    Player,
    QueuedFormPresenter,
    Region,
    World,
)

BASE_BLOCK = "minecraft:stone"
TARGET = BlockPos(0, 64, 0)


@pytest.fixture
def settings():
    """Default settings, isolated from ITEMGEN_* variables of the host."""
    return GeneratorSettings(_env_file=None)


@pytest.fixture
def history():
    return InMemoryHistoryStore(max_ticks=5000)


@pytest.fixture
def presenter():
    return QueuedFormPresenter()


@pytest.fixture
def world(settings, history, presenter):
    """Fresh World with a stone block at TARGET in the overworld."""
    w = World(settings=settings, history=history, presenter=presenter)
    w.store.set_block(Region.OVERWORLD, TARGET, BASE_BLOCK)
    return w


@pytest.fixture
def player():
    return Player("steve", view_target=TARGET)


@pytest.fixture
def creative_player():
    return Player("alex", game_mode=GameMode.CREATIVE, view_target=TARGET)


@pytest.fixture
def place(world):
    """Place a generator on an existing block: place(interval, item_id, count, region, block)."""

    def _place(
        interval=5,
        item_id="minecraft:diamond",
        count=1,
        region=Region.OVERWORLD,
        block=TARGET,
    ):
        if world.store.get_block(region, block) == "minecraft:air":
            world.store.set_block(region, block, BASE_BLOCK)
        request = GeneratorRequest(interval_ticks=interval, item_id=item_id, item_count=count)
        return world.place_generator(region, block, request)

    return _place
