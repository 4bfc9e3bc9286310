"""Entry point: ``python -m itemgen``.

Runs a headless simulation: one generator is placed on a stone block, the
world is ticked, and every emission is printed at the end.

    python -m itemgen --ticks 600 --interval 200 --item minecraft:emerald --count 3
"""

from __future__ import annotations

import argparse
import logging
from typing import cast

logger = logging.getLogger(__name__)

BASE_BLOCK = "minecraft:stone"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Headless item generator simulation")
    parser.add_argument("--ticks", type=int, default=400)
    parser.add_argument("--interval", type=int, default=200)
    parser.add_argument("--item", type=str, default="minecraft:diamond")
    parser.add_argument("--count", type=int, default=1)
    parser.add_argument(
        "--region",
        type=str,
        default="overworld",
        choices=["overworld", "nether", "the_end"],
    )
    parser.add_argument("--x", type=int, default=0)
    parser.add_argument("--y", type=int, default=64)
    parser.add_argument("--z", type=int, default=0)
    parser.add_argument("--log-level", type=str, default=None, choices=["DEBUG", "INFO", "WARNING"])
    return parser


def _run(args: argparse.Namespace) -> int:
    from pydantic import ValidationError

    from itemgen.config import GeneratorSettings
    from itemgen.core.generator import GeneratorRequest
    from itemgen.core.types import BlockPos, Region
    from itemgen.tracing import InMemoryHistoryStore
    from itemgen.utils.logging import setup_logging
    from itemgen.world import World

    settings = GeneratorSettings()
    setup_logging(args.log_level or settings.log_level)

    try:
        request = GeneratorRequest.model_validate(
            {"interval_ticks": args.interval, "item_id": args.item, "item_count": args.count},
            context={"namespace": settings.item_namespace},
        )
    except ValidationError as e:
        logger.error("Invalid generator settings: %s", e)
        return 2

    # Every emission of the run is reported from the history
    history_size = max(args.ticks, settings.history_size, 1)
    world = World(settings=settings.model_copy(update={"history_size": history_size}))
    history = cast(InMemoryHistoryStore, world.history)
    region = Region.parse(args.region)
    block = BlockPos(args.x, args.y, args.z)
    world.store.set_block(region, block, BASE_BLOCK)
    world.place_generator(region, block, request)

    logger.info("Running %d ticks", args.ticks)
    world.tick(args.ticks)

    emitted = history.all_events("emitted")
    for event in emitted:
        print(
            f"tick {event['tick']:>6}: {event['amount']} x {event['item_id']} "
            f"at {event['position']} in {event['region']}"
        )
    print(f"{len(emitted)} emissions in {args.ticks} ticks")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    return _run(args)


if __name__ == "__main__":
    raise SystemExit(main())
