"""Players: the actors that place, configure and break generators."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from itemgen.core.types import BlockPos, GameMode, Region

logger = logging.getLogger(__name__)


@dataclass
class Player:
    """Minimal player view needed by the generator adapters.

    Attributes:
        name: Display name.
        game_mode: Privilege mode; only creative may break generators.
        is_sneaking: Sneaking players do not open the settings form.
        region: Region the player stands in.
        view_target: Block the player is looking at, if any.
        messages: Chat messages received by this player, oldest first.
    """

    name: str
    game_mode: GameMode = GameMode.SURVIVAL
    is_sneaking: bool = False
    region: Region = Region.OVERWORLD
    view_target: BlockPos | None = None
    messages: list[str] = field(default_factory=list)

    def send_message(self, message: str) -> None:
        self.messages.append(message)
        logger.debug("[to %s] %s", self.name, message)

    def get_block_from_view_direction(self) -> BlockPos | None:
        return self.view_target

    @property
    def is_creative(self) -> bool:
        return self.game_mode is GameMode.CREATIVE
