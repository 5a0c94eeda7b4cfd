#!/usr/bin/env python3
"""
Seed the database with sample stocks and daily prices.
Existing rows in stocks and stock_prices are deleted first.
"""

import argparse
import asyncio
import logging
import random
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from finlens.config import settings
from finlens.core.logging import setup_logging
from finlens.infrastructure.data.sample_data import SampleDataGenerator
from finlens.infrastructure.data.seeder import seed_sample_data, summarize
from finlens.infrastructure.db.database import async_session_factory, close_db

logger = logging.getLogger(__name__)


async def seed(days: int, seed_value: int | None) -> None:
    generator = SampleDataGenerator(rng=random.Random(seed_value))
    stocks, prices = generator.generate_all(days=days)
    logger.info(f"🎲 Generated {len(stocks)} stocks and {len(prices)} price records")

    try:
        async with async_session_factory() as session:
            await seed_sample_data(session, stocks, prices)
            for line in await summarize(session):
                logger.info(f"   - {line}")
    finally:
        await close_db()

    logger.info("✨ Database seeding completed")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed sample market data")
    parser.add_argument("--days", type=int, default=settings.SEED_HISTORY_DAYS, help="Calendar days of history")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible data")
    args = parser.parse_args()

    setup_logging(settings.LOG_LEVEL)
    try:
        asyncio.run(seed(args.days, args.seed))
    except Exception as e:
        logger.error(f"💥 Seeding failed: {e}")
        sys.exit(1)
