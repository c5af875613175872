"""Entry point: python -m flappy_core."""

import argparse
import logging
import random
import sqlite3
from dataclasses import replace

from .constants import DB_FILE
from .errors import ConfigurationError
from .profiles import select_profile
from .score_store import Database
from .session import GameSession


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play a round of Flappy.")
    parser.add_argument("--compact", action="store_true",
                        help="Use the compact (touch display) profile.")
    parser.add_argument("--landscape", action="store_true",
                        help="Compact profile in landscape orientation.")
    parser.add_argument("--gap", type=float, help="Override the pipe gap (px).")
    parser.add_argument("--speed", type=float, help="Override the base scroll speed (px/s).")
    parser.add_argument("--seed", type=int, help="Seed for deterministic pipe placement.")
    parser.add_argument("--db", default=DB_FILE, help="SQLite file for the best score.")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO).")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    profile = select_profile(args.compact, portrait=not args.landscape)
    overrides = {}
    if args.gap is not None:
        overrides["pipe_gap"] = args.gap
    if args.speed is not None:
        overrides["base_speed"] = args.speed
    if overrides:
        profile = replace(profile, **overrides)

    store = None
    try:
        store = Database(args.db)
    except sqlite3.Error as e:
        print(f"Best score storage unavailable ({e}); scores will not be kept.")

    rng = random.Random(args.seed)
    try:
        try:
            session = GameSession(profile, store=store, rng=rng)
        except ConfigurationError as e:
            print(f"Invalid configuration: {e}")
            return 2

        # pygame is only needed once there is something to draw.
        from .client import FlappyClient
        FlappyClient(session).run()
    finally:
        if store is not None:
            store.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
