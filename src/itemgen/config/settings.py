"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from itemgen.config import GeneratorSettings

    # Load from environment variables (ITEMGEN_*)
    settings = GeneratorSettings()

    # Or override with explicit values
    settings = GeneratorSettings(anchor_offset=50, log_level="DEBUG")
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from itemgen.core.types import Region


class GeneratorSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the generator lifecycle engine.

    Attributes:
        tag_prefix: Prefix identifying the configuration tag on a marker.
        initialized_tag: Tag added once a marker's countdown was initialized.
        anchor_block: Block type placed as the generator anchor.
        marker_entity: Entity type spawned as the data-carrying marker.
        item_entity: Entity type of dropped items.
        trigger_item: Item that opens the settings form when used.
        item_namespace: Prefix every configured item identifier must carry.
        anchor_offset: Height of the anchor above the targeted block.
        item_spawn_offset: Distance below the marker at which items appear.
        invisibility_ticks: Duration of the invisibility applied each tick.
        regions: Regions scanned for generators.
        default_interval: Pre-filled interval in the settings form.
        default_item_id: Pre-filled item identifier in the settings form.
        default_item_count: Pre-filled item count in the settings form.
        resume_countdown_from_label: Resume adopted markers from their
            persisted label instead of restarting the interval.
        history_size: Tick records kept by the default history; 0 disables it.
        log_level: Root log level used by the CLI.

    Environment Variables:
        ITEMGEN_TAG_PREFIX
        ITEMGEN_ANCHOR_OFFSET
        ITEMGEN_ITEM_SPAWN_OFFSET
        ITEMGEN_RESUME_COUNTDOWN_FROM_LABEL
        ITEMGEN_LOG_LEVEL
        (one per attribute)
    """

    model_config = SettingsConfigDict(
        env_prefix="ITEMGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    tag_prefix: str = "gen:"
    initialized_tag: str = "count_initialized"
    anchor_block: str = "minecraft:barrier"
    marker_entity: str = "minecraft:armor_stand"
    item_entity: str = "minecraft:item"
    trigger_item: str = "minecraft:trial_key"
    item_namespace: str = "minecraft:"

    anchor_offset: int = Field(default=99, gt=0)
    item_spawn_offset: int = Field(default=98, gt=0)
    invisibility_ticks: int = Field(default=20, gt=0)

    regions: Annotated[tuple[Region, ...], NoDecode] = (
        Region.NETHER,
        Region.OVERWORLD,
        Region.THE_END,
    )

    default_interval: str = "200"
    default_item_id: str = "minecraft:diamond"
    default_item_count: str = "1"

    resume_countdown_from_label: bool = False
    history_size: int = Field(default=1000, ge=0)
    log_level: str = "INFO"

    @field_validator("regions", mode="before")
    @classmethod
    def _parse_regions(cls, value: object) -> object:
        if isinstance(value, str):
            value = [part.strip() for part in value.split(",") if part.strip()]
        if isinstance(value, list | tuple):
            return tuple(Region.parse(v) for v in value)
        return value

    @property
    def marker_height(self) -> int:
        """Height of the marker above the targeted block."""
        return self.anchor_offset + 1
