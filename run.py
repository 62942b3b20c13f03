"""
TechMart database initialization.

Usage:
    python run.py            # migrate, seed admin if needed, sync catalog
    python run.py --reseed   # same, but delete and re-insert every item (ids change)

Exit status is 1 if any step fails; nothing is published in that case.
An invalid configuration is reported on stderr before any file is created.
"""

import argparse
import asyncio
import logging
import sys

import config
from config import DatabaseConfig, SeedConfig
from bootstrap import init_db
from exceptions import TechMartException
from utils.logging_config import setup_console_logging, setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Initialize and seed the TechMart database")
    parser.add_argument(
        "--reseed",
        action="store_true",
        help="delete every item and insert the catalog again instead of syncing it by name",
    )
    return parser.parse_args(argv)


async def run(db_config: DatabaseConfig, seed_config: SeedConfig) -> None:
    store = await init_db(db_config, seed_config)
    await store.dispose()


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    # Configuration errors must not leave a log directory behind
    try:
        db_config = config.resolve_database_config()
        seed_config = config.resolve_seed_config(reseed=args.reseed)
    except TechMartException as e:
        setup_console_logging()
        logging.critical(f"TechMart database initialization failed: {e}")
        sys.exit(1)

    setup_logging()

    try:
        asyncio.run(run(db_config, seed_config))
    except TechMartException as e:
        logging.critical(f"TechMart database initialization failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
