#!/usr/bin/env python3
"""
Command-line entry point: pick a profile, open the score database, run the client.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import ConfigError, load_config
from .constants import DB_FILE, PROFILES
from .log import setup_logging
from .score_store import MemoryScoreStore, ScoreStoreError, SqliteScoreStore

logger = logging.getLogger("gapflyer")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="gapflyer", description="Fly through the gaps.")
    parser.add_argument("--profile", choices=sorted(PROFILES),
                        help="device profile (default: $GAPFLYER_PROFILE or desktop)")
    parser.add_argument("--width", type=float, help="playfield width override")
    parser.add_argument("--height", type=float, help="playfield height override")
    parser.add_argument("--db", default=DB_FILE, help="high score database file")
    parser.add_argument("--log-level", default="info",
                        choices=["debug", "info", "warning", "error"])
    parser.add_argument("--log-file", help="also write log lines to this file")
    return parser.parse_args(argv)


def open_store(db_file: str):
    """Falls back to an in-memory store so a broken database never blocks play."""
    try:
        return SqliteScoreStore(db_file)
    except ScoreStoreError as e:
        logger.warning("%s; high scores will not persist", e)
        return MemoryScoreStore()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        config = load_config(args.profile, args.width, args.height)
    except ConfigError as e:
        logger.error("%s", e)
        return 2

    # Imported late so --help works without opening a window
    from .client import GameClient

    store = open_store(args.db)
    try:
        GameClient(config, store).run()
    except KeyboardInterrupt:
        pass
    finally:
        if isinstance(store, SqliteScoreStore):
            store.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
