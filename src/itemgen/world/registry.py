"""Generator discovery and the run-time generator registry.

Every tick the registry rescans all regions for marker entities carrying a
generator tag (O(entities x tags)); markers created or killed out-of-band are
picked up the same tick. What the registry adds on top of the scan is state:
the decoded configuration and the explicit countdown phase of each marker,
so the marker label is only ever a projection of that state.

Usage:
    registry = GeneratorRegistry(settings)
    for record in registry.refresh(store):
        ...
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from itemgen.config import GeneratorSettings
from itemgen.core.generator import (
    GeneratorConfig,
    GeneratorPhase,
    TagFormatError,
    decode,
    is_generator_tag,
    normalize_countdown,
    parse_countdown,
)
from itemgen.core.identity import EntityId
from itemgen.core.types import BlockPos, Region
from itemgen.storage.protocol import WorldStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GeneratorHandle:
    """One scan hit: a marker, its region and its first generator tag."""

    entity: EntityId
    region: Region
    tag: str


@dataclass
class GeneratorRecord:
    """Run-time state of one generator.

    Attributes:
        entity: Marker entity.
        region: Region the marker lives in.
        tag: Tag the config was decoded from.
        config: Decoded config, None if the tag is malformed.
        phase: Countdown phase.
        remaining: Ticks left before the next emission (COUNTING only).
        error: Why the tag could not be decoded, if it could not.
    """

    entity: EntityId
    region: Region
    tag: str
    config: GeneratorConfig | None
    phase: GeneratorPhase = GeneratorPhase.UNINITIALIZED
    remaining: int = 0
    error: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.config is not None and self.config.is_valid


def scan_generators(
    store: WorldStore,
    regions: Iterable[Region],
    prefix: str,
) -> list[GeneratorHandle]:
    """Find every marker in every region carrying a generator tag.

    Only the first matching tag of an entity counts; later ones are ignored
    even if malformed.
    """
    handles: list[GeneratorHandle] = []
    for region in regions:
        for entity in store.entities(region):
            for tag in store.get_tags(entity):
                if is_generator_tag(tag, prefix):
                    handles.append(GeneratorHandle(entity, region, tag))
                    break
    return handles


def find_generator_markers(
    store: WorldStore,
    region: Region,
    marker_block: BlockPos,
    settings: GeneratorSettings,
) -> list[EntityId]:
    """Generator markers whose floored position is marker_block."""
    found = []
    for entity in store.entities(region, settings.marker_entity):
        if not any(is_generator_tag(t, settings.tag_prefix) for t in store.get_tags(entity)):
            continue
        _, position = store.get_location(entity)
        if position.floored() == marker_block:
            found.append(entity)
    return found


class GeneratorRegistry:
    """Map from marker entity to decoded config and countdown state.

    Args:
        settings: Generator settings (tag prefix, regions, resume policy).
    """

    def __init__(self, settings: GeneratorSettings) -> None:
        self._settings = settings
        self._records: dict[EntityId, GeneratorRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, entity: object) -> bool:
        return entity in self._records

    def __iter__(self) -> Iterator[GeneratorRecord]:
        return iter(list(self._records.values()))

    def get(self, entity: EntityId) -> GeneratorRecord | None:
        return self._records.get(entity)

    def clear(self) -> None:
        """Forget all state, as on a fresh run after a world reload."""
        self._records.clear()

    def _decode(self, entity: EntityId, region: Region, tag: str) -> GeneratorRecord:
        try:
            config = decode(tag, self._settings.tag_prefix)
        except TagFormatError as e:
            logger.warning("Generator %s has a malformed tag: %s", entity, e)
            return GeneratorRecord(entity, region, tag, config=None, error=str(e))
        return GeneratorRecord(entity, region, tag, config=config)

    def register(self, entity: EntityId, region: Region, tag: str) -> GeneratorRecord:
        """Track a freshly placed marker, replacing any previous state."""
        record = self._decode(entity, region, tag)
        self._records[entity] = record
        return record

    def _adopt(self, store: WorldStore, handle: GeneratorHandle) -> GeneratorRecord:
        record = self._decode(handle.entity, handle.region, handle.tag)
        if (
            self._settings.resume_countdown_from_label
            and record.is_valid
            and store.has_tag(handle.entity, self._settings.initialized_tag)
        ):
            interval = record.config.interval_ticks  # type: ignore[union-attr]
            label = parse_countdown(store.get_name_tag(handle.entity))
            record.remaining = normalize_countdown(label, interval)  # type: ignore[arg-type]
            record.phase = GeneratorPhase.COUNTING
            logger.debug("Resumed %s at %d/%s", handle.entity, record.remaining, interval)
        return record

    def refresh(self, store: WorldStore) -> list[GeneratorRecord]:
        """Rescan the world and return this tick's records, in scan order.

        New markers are adopted; a marker whose tag changed is re-decoded
        and restarts its countdown; records of vanished markers are dropped.
        The returned list is a snapshot: retiring a record does not affect it.
        """
        handles = scan_generators(store, self._settings.regions, self._settings.tag_prefix)
        records: dict[EntityId, GeneratorRecord] = {}
        for handle in handles:
            record = self._records.get(handle.entity)
            if record is None or record.tag != handle.tag or record.region is not handle.region:
                record = self._adopt(store, handle)
            records[handle.entity] = record

        dropped = self._records.keys() - records.keys()
        if dropped:
            logger.debug("Dropped %d generators no longer in the world", len(dropped))
        self._records = records
        return list(records.values())

    def retire(self, entity: EntityId) -> GeneratorRecord | None:
        """Mark a generator DESTROYED and stop tracking it."""
        record = self._records.pop(entity, None)
        if record is not None:
            record.phase = GeneratorPhase.DESTROYED
        return record
