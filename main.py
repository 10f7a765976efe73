import sys
import random
import logging
import argparse

from archer.config import ConfigError, Settings, SCREEN_WIDTH, SCREEN_HEIGHT, TIME_LIMIT
from archer.game import Game


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Stickman Archer: hold off the zombies before time runs out"
    )
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH)
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT)
    parser.add_argument(
        "--time-limit", type=float, default=TIME_LIMIT, help="Seconds per run"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible spawns"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = Settings(
            width=args.width, height=args.height, time_limit=args.time_limit
        )
    except ConfigError as exc:
        logging.getLogger(__name__).error("Invalid settings: %s", exc)
        return 2
    logging.getLogger(__name__).info(
        "Aim with mouse/touch. Click, tap or press Space to shoot or restart."
    )
    Game(settings=settings, rng=random.Random(args.seed)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
