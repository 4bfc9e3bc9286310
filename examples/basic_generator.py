import logging

from itemgen import (
    BlockPos,
    GameMode,
    InMemoryHistoryStore,
    ItemStack,
    Player,
    QueuedFormPresenter,
    Region,
    World,
)
from itemgen.utils import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging("INFO")

    history = InMemoryHistoryStore()
    presenter = QueuedFormPresenter([["20", "minecraft:emerald", "2"]])
    world = World(history=history, presenter=presenter)

    base = BlockPos(8, 64, -3)
    world.store.set_block(Region.OVERWORLD, base, "minecraft:gold_block")

    # A survival player looks at the gold block and uses the trial key
    builder = Player("builder", view_target=base)
    world.use_item(builder, ItemStack("minecraft:trial_key"))
    print(*builder.messages, sep="\n")

    world.tick(60)
    for stack, position in world.store.dropped_items(Region.OVERWORLD):
        print(f"{stack.amount} x {stack.type_id} at {position}")

    # Survival players cannot break it, creative players can
    world.break_block(builder, Region.OVERWORLD, base)
    print(*builder.messages[1:], sep="\n")

    admin = Player("admin", game_mode=GameMode.CREATIVE)
    world.break_block(admin, Region.OVERWORLD, base)
    world.tick()
    print(f"Generators left: {len(world.generators())}")
    print(f"Chat: {world.store.chat}")

    for record in history.get_events(0, world.current_tick):
        logger.debug("%s", record)


if __name__ == "__main__":
    main()
