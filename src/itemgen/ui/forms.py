"""Settings form and the trigger item that opens it.

The form has three free-text fields (interval, item identifier, item count).
Its answers are validated by ``GeneratorRequest`` before anything touches
the world; bad input only earns the player a message.

Usage:
    world = World(presenter=QueuedFormPresenter([["20", "minecraft:emerald", "2"]]))
    player = Player("steve", view_target=BlockPos(0, 64, 0))
    world.use_item(player, ItemStack("minecraft:trial_key"))
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from itemgen.core.generator import GeneratorRequest, InvalidRequestError
from itemgen.core.identity import EntityId
from itemgen.core.types import BlockPos, Region
from itemgen.world import messages
from itemgen.world.actors import Player
from itemgen.world.events import ItemUseEvent
from itemgen.world.placement import place_generator

if TYPE_CHECKING:
    from itemgen.config import GeneratorSettings
    from itemgen.world.world import World

logger = logging.getLogger(__name__)

FORM_TITLE = "Generator Settings"


@dataclass(frozen=True, slots=True)
class TextField:
    label: str
    placeholder: str = ""
    default: str = ""


@dataclass(frozen=True, slots=True)
class ModalForm:
    title: str
    fields: tuple[TextField, ...]

    @property
    def defaults(self) -> tuple[str, ...]:
        return tuple(f.default for f in self.fields)


@dataclass(frozen=True, slots=True)
class FormResponse:
    """Raw answers of a form; canceled when the player closed it."""

    values: tuple[str, ...] = ()
    canceled: bool = False


class FormPresenter(Protocol):
    """Shows a form to a player and waits for the answers."""

    async def show(self, player: Player, form: ModalForm) -> FormResponse:
        ...


class DefaultValuesPresenter:
    """Headless presenter that submits every field's default."""

    async def show(self, player: Player, form: ModalForm) -> FormResponse:
        return FormResponse(values=form.defaults)


class QueuedFormPresenter:
    """Headless presenter answering from a queue of scripted responses.

    Each queued entry is either a FormResponse or a sequence of raw values.
    An empty queue answers as if the player closed the form.
    """

    def __init__(self, responses: Iterable[FormResponse | Sequence[str]] = ()) -> None:
        self._queue: deque[FormResponse] = deque()
        self.shown: list[tuple[Player, ModalForm]] = []
        for response in responses:
            self.push(response)

    def push(self, response: FormResponse | Sequence[str]) -> None:
        if not isinstance(response, FormResponse):
            response = FormResponse(values=tuple(response))
        self._queue.append(response)

    async def show(self, player: Player, form: ModalForm) -> FormResponse:
        self.shown.append((player, form))
        if not self._queue:
            return FormResponse(canceled=True)
        return self._queue.popleft()


def build_settings_form(settings: GeneratorSettings) -> ModalForm:
    return ModalForm(
        title=FORM_TITLE,
        fields=(
            TextField("Spawn interval (ticks)", "Enter an integer", settings.default_interval),
            TextField("Item ID", "", settings.default_item_id),
            TextField("Item count", "", settings.default_item_count),
        ),
    )


def apply_form_values(
    world: World,
    player: Player,
    region: Region,
    block: BlockPos,
    values: Sequence[str],
) -> EntityId | None:
    """Validate raw form answers and place the generator.

    Returns:
        The marker entity, or None when the input was rejected.
    """
    try:
        request = GeneratorRequest.from_form_values(values, world.settings.item_namespace)
    except InvalidRequestError as e:
        logger.info("Rejected generator settings from %s: %s", player.name, e)
        player.send_message(messages.INVALID_INPUT.format(reason=e))
        return None

    marker = place_generator(world, region, block, request)
    player.send_message(
        messages.GENERATOR_PLACED.format(
            count=request.item_count,
            item_id=request.item_id,
            interval=request.interval_ticks,
        )
    )
    return marker


async def show_settings_form(
    world: World,
    player: Player,
    region: Region,
    block: BlockPos,
) -> EntityId | None:
    """Ask player for generator settings and apply them to block."""
    form = build_settings_form(world.settings)
    try:
        response = await world.presenter.show(player, form)
    except Exception as e:
        logger.exception("Settings form failed for %s", player.name)
        player.send_message(messages.FORM_FAILED.format(error=e))
        return None

    if response.canceled:
        logger.debug("%s closed the settings form", player.name)
        return None
    return apply_form_values(world, player, region, block, response.values)


async def handle_item_use(world: World, event: ItemUseEvent) -> None:
    """Open the settings form when a standing player uses the trigger item."""
    player = event.source
    if event.item_stack.type_id != world.settings.trigger_item or player.is_sneaking:
        return
    event.cancel = True

    block = player.get_block_from_view_direction()
    if block is None:
        logger.debug("%s used the trigger item without a target block", player.name)
        return
    await show_settings_form(world, player, player.region, block)
