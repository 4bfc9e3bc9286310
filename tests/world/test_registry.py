"""Tests for generator discovery and the run-time registry."""

from itemgen.config import GeneratorSettings
from itemgen.core.generator import GeneratorPhase
from itemgen.core.types import BlockPos, Region, Vec3
from itemgen.storage import LocalStorage
from itemgen.world.registry import GeneratorRegistry, find_generator_markers, scan_generators

MARKER = "minecraft:armor_stand"
TAG = "gen:5,minecraft:diamond,1,0,64,0"
POS = Vec3(0.5, 164.0, 0.5)


def spawn_marker(store: LocalStorage, *tags: str, region: Region = Region.OVERWORLD):
    entity = store.spawn_entity(MARKER, region, POS)
    for tag in tags:
        store.add_tag(entity, tag)
    return entity


def test_scan_finds_tagged_entities_in_every_region() -> None:
    store = LocalStorage()
    a = spawn_marker(store, TAG)
    b = spawn_marker(store, TAG, region=Region.NETHER)
    spawn_marker(store, "unrelated")

    handles = scan_generators(store, list(Region), "gen:")

    assert {(h.entity, h.region) for h in handles} == {
        (a, Region.OVERWORLD),
        (b, Region.NETHER),
    }


def test_scan_skips_unlisted_regions() -> None:
    store = LocalStorage()
    spawn_marker(store, TAG, region=Region.THE_END)
    assert scan_generators(store, [Region.OVERWORLD], "gen:") == []


def test_first_matching_tag_wins() -> None:
    store = LocalStorage()
    spawn_marker(store, "count_initialized", TAG, "gen:garbage")

    (handle,) = scan_generators(store, [Region.OVERWORLD], "gen:")

    assert handle.tag == TAG


def test_scan_matches_any_entity_type() -> None:
    store = LocalStorage()
    entity = store.spawn_entity("minecraft:pig", Region.OVERWORLD, POS)
    store.add_tag(entity, TAG)

    assert [h.entity for h in scan_generators(store, [Region.OVERWORLD], "gen:")] == [entity]


def test_find_generator_markers_compares_floored_positions() -> None:
    settings = GeneratorSettings(_env_file=None)
    store = LocalStorage()
    marker = spawn_marker(store, TAG)
    untagged = store.spawn_entity(MARKER, Region.OVERWORLD, POS)
    pig = store.spawn_entity("minecraft:pig", Region.OVERWORLD, POS)
    store.add_tag(pig, TAG)

    found = find_generator_markers(store, Region.OVERWORLD, BlockPos(0, 164, 0), settings)

    assert found == [marker]
    assert untagged not in found
    assert find_generator_markers(store, Region.OVERWORLD, BlockPos(0, 165, 0), settings) == []


def test_refresh_adopts_and_drops() -> None:
    store = LocalStorage()
    registry = GeneratorRegistry(GeneratorSettings(_env_file=None))
    marker = spawn_marker(store, TAG)

    (record,) = registry.refresh(store)

    assert record.entity == marker
    assert record.phase is GeneratorPhase.UNINITIALIZED
    assert record.config is not None and record.config.interval_ticks == 5
    assert marker in registry

    store.kill(marker)
    assert registry.refresh(store) == []
    assert len(registry) == 0


def test_refresh_keeps_state_of_known_markers() -> None:
    store = LocalStorage()
    registry = GeneratorRegistry(GeneratorSettings(_env_file=None))
    spawn_marker(store, TAG)

    (record,) = registry.refresh(store)
    record.phase = GeneratorPhase.COUNTING
    record.remaining = 3

    (again,) = registry.refresh(store)
    assert again is record
    assert again.remaining == 3


def test_refresh_redecodes_changed_tag() -> None:
    store = LocalStorage()
    registry = GeneratorRegistry(GeneratorSettings(_env_file=None))
    marker = spawn_marker(store, TAG)
    (record,) = registry.refresh(store)
    record.phase = GeneratorPhase.COUNTING

    store.remove_tag(marker, TAG)
    store.add_tag(marker, "gen:10,minecraft:emerald,2,0,64,0")
    (fresh,) = registry.refresh(store)

    assert fresh is not record
    assert fresh.phase is GeneratorPhase.UNINITIALIZED
    assert fresh.config.item_id == "minecraft:emerald"  # type: ignore[union-attr]


def test_malformed_tag_becomes_invalid_record() -> None:
    store = LocalStorage()
    registry = GeneratorRegistry(GeneratorSettings(_env_file=None))
    spawn_marker(store, "gen:5,minecraft:diamond")

    (record,) = registry.refresh(store)

    assert record.config is None
    assert not record.is_valid
    assert record.error is not None and "fields" in record.error


def test_resume_from_label_when_enabled() -> None:
    store = LocalStorage()
    registry = GeneratorRegistry(
        GeneratorSettings(_env_file=None, resume_countdown_from_label=True)
    )
    marker = spawn_marker(store, TAG, "count_initialized")
    store.set_name_tag(marker, "3")

    (record,) = registry.refresh(store)

    assert record.phase is GeneratorPhase.COUNTING
    assert record.remaining == 3


def test_resume_normalizes_garbage_label() -> None:
    store = LocalStorage()
    registry = GeneratorRegistry(
        GeneratorSettings(_env_file=None, resume_countdown_from_label=True)
    )
    marker = spawn_marker(store, TAG, "count_initialized")
    store.set_name_tag(marker, "-40")

    (record,) = registry.refresh(store)

    assert record.remaining == 5


def test_no_resume_by_default() -> None:
    store = LocalStorage()
    registry = GeneratorRegistry(GeneratorSettings(_env_file=None))
    marker = spawn_marker(store, TAG, "count_initialized")
    store.set_name_tag(marker, "3")

    (record,) = registry.refresh(store)

    assert record.phase is GeneratorPhase.UNINITIALIZED


def test_retire() -> None:
    store = LocalStorage()
    registry = GeneratorRegistry(GeneratorSettings(_env_file=None))
    marker = spawn_marker(store, TAG)
    (record,) = registry.refresh(store)

    assert registry.retire(marker) is record
    assert record.phase is GeneratorPhase.DESTROYED
    assert registry.get(marker) is None
    assert registry.retire(marker) is None
