"""Core value types: coordinates, regions and game modes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class Region(Enum):
    """Parallel dimensions a generator can live in."""

    OVERWORLD = "minecraft:overworld"
    NETHER = "minecraft:nether"
    THE_END = "minecraft:the_end"

    @classmethod
    def parse(cls, value: str | Region) -> Region:
        """Resolve a region from its identifier or short name.

        Args:
            value: Region instance, full identifier ("minecraft:nether") or
                short name ("nether").

        Returns:
            The matching Region.

        Raises:
            ValueError: If the value names no known region.
        """
        if isinstance(value, Region):
            return value
        for region in cls:
            if value in (region.value, region.value.split(":", 1)[1], region.name.lower()):
                return region
        raise ValueError(f"Unknown region: {value!r}")


class GameMode(Enum):
    """Actor privilege modes."""

    SURVIVAL = "survival"
    CREATIVE = "creative"
    ADVENTURE = "adventure"
    SPECTATOR = "spectator"


@dataclass(frozen=True, slots=True)
class BlockPos:
    """Integer, block-aligned world coordinates."""

    x: int
    y: int
    z: int

    def offset(self, dx: int = 0, dy: int = 0, dz: int = 0) -> BlockPos:
        return BlockPos(self.x + dx, self.y + dy, self.z + dz)

    def above(self, n: int = 1) -> BlockPos:
        return self.offset(dy=n)

    def below(self, n: int = 1) -> BlockPos:
        return self.offset(dy=-n)

    def center(self) -> Vec3:
        """Point at the horizontal center of the block, on its bottom face."""
        return Vec3(self.x + 0.5, float(self.y), self.z + 0.5)


@dataclass(frozen=True, slots=True)
class Vec3:
    """Continuous world position, as held by entities."""

    x: float
    y: float
    z: float

    def offset(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> Vec3:
        return Vec3(self.x + dx, self.y + dy, self.z + dz)

    def floored(self) -> BlockPos:
        """Block containing this point (floor on every axis)."""
        return BlockPos(math.floor(self.x), math.floor(self.y), math.floor(self.z))
