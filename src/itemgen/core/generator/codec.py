"""Configuration codec: one generator per marker tag.

Tag layout:
    gen:<interval>,<item_id>,<count>,<x>,<y>,<z>

Usage:
    tag = encode(200, "minecraft:diamond", 1, BlockPos(0, 64, 0))
    # "gen:200,minecraft:diamond,1,0,64,0"
    config = decode(tag)
"""

from __future__ import annotations

import re

from itemgen.core.generator.models import GeneratorConfig
from itemgen.core.types import BlockPos

TAG_PREFIX = "gen:"
FIELD_SEPARATOR = ","
FIELD_COUNT = 6
_INTEGER = re.compile(r"^[+-]?\d+$")


class TagFormatError(ValueError):
    """Raised when a tag does not follow the generator layout."""

    pass


def _parse_int(text: str) -> int | None:
    """Parse a decimal integer field, None when it is not a number."""
    text = text.strip()
    if not _INTEGER.match(text):
        return None
    return int(text)


def encode(
    interval_ticks: int,
    item_id: str,
    item_count: int,
    anchor: BlockPos,
    prefix: str = TAG_PREFIX,
) -> str:
    """Encode a generator configuration as a marker tag.

    Raises:
        TagFormatError: If the item identifier contains the field separator.
    """
    if FIELD_SEPARATOR in item_id:
        raise TagFormatError(f"Item identifier cannot contain {FIELD_SEPARATOR!r}: {item_id!r}")
    fields = (interval_ticks, item_id, item_count, anchor.x, anchor.y, anchor.z)
    return prefix + FIELD_SEPARATOR.join(str(f) for f in fields)


def is_generator_tag(tag: str, prefix: str = TAG_PREFIX) -> bool:
    return tag.startswith(prefix)


def decode(tag: str, prefix: str = TAG_PREFIX) -> GeneratorConfig:
    """Decode a marker tag.

    Unparseable integer fields decode as None; the resulting config reports
    ``is_valid == False``. The anchor is None unless all three coordinates
    parse.

    Raises:
        TagFormatError: If the prefix is missing or the field count is wrong.
    """
    if not tag.startswith(prefix):
        raise TagFormatError(f"Missing {prefix!r} prefix: {tag!r}")
    fields = tag[len(prefix) :].split(FIELD_SEPARATOR)
    if len(fields) != FIELD_COUNT:
        raise TagFormatError(f"Expected {FIELD_COUNT} fields, got {len(fields)}: {tag!r}")

    interval, item_id, count, x, y, z = fields
    coords = [_parse_int(c) for c in (x, y, z)]
    anchor = None
    if all(c is not None for c in coords):
        anchor = BlockPos(*coords)  # type: ignore[arg-type]

    return GeneratorConfig(
        interval_ticks=_parse_int(interval),
        item_id=item_id,
        item_count=_parse_int(count),
        anchor=anchor,
    )


def parse_countdown(label: str) -> int | None:
    """Read a countdown from a marker label, None when it is not a number."""
    return _parse_int(label)


def normalize_countdown(value: int | None, interval_ticks: int) -> int:
    """Clamp a countdown into [1, interval_ticks], restarting on garbage.

    Values outside the range are not corruption: they restart the interval.
    """
    if value is None or not 1 <= value <= interval_ticks:
        return interval_ticks
    return value
