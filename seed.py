#!/usr/bin/env python3
"""
Seed the atlas database from a JSON document.

Usage:
    python seed.py
    python seed.py --file data/seed.json
    python seed.py --file data/seed.json --reset
"""

import argparse
import asyncio
import json
import logging
import sys

from config import ApplicationConfig
from src.adapter.database import Database
from src.app.use_cases.seed import SeedDatabaseUseCase, SeedDocument

logger = logging.getLogger("seed")


async def run(path: str, reset: bool) -> int:
    with open(path, "r", encoding="utf-8") as r_file:
        document = SeedDocument.model_validate(json.load(r_file))

    database = Database(ApplicationConfig.DB_URI)
    try:
        if reset:
            await database.drop_all()
        await database.create_all()

        async with database.unit_of_work() as uow:
            use_case = SeedDatabaseUseCase(uow, bcrypt_rounds=ApplicationConfig.BCRYPT_ROUNDS)
            result = await use_case.execute(document)
    finally:
        await database.dispose()

    if result.is_err():
        logger.error(f"Seed failed: {result.error.code} {result.error.message}")
        return 1

    summary = result.value
    logger.info(
        f"Users: {summary.users}, Regions: {summary.regions}, Sources: {summary.sources}, "
        f"People: {summary.people}, Events: {summary.events_created} "
        f"({summary.events_skipped} skipped)"
    )
    return 0


def main():
    parser = argparse.ArgumentParser(description="Historical Events Atlas seeder")
    parser.add_argument(
        "--file", default=ApplicationConfig.SEED_FILE, help="Path to the seed JSON document"
    )
    parser.add_argument(
        "--reset", action="store_true", help="Drop all tables before seeding"
    )
    args = parser.parse_args()

    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL.upper(), format="%(levelname)s %(message)s")
    sys.exit(asyncio.run(run(args.file, args.reset)))


if __name__ == "__main__":
    main()
