"""
Sample data loader
Replaces the contents of stocks and stock_prices in a single transaction
"""

import logging
from dataclasses import asdict
from typing import List, Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from finlens.domain.models import PricePoint, StockRecord
from finlens.infrastructure.db.models import StockModel, StockPriceModel

logger = logging.getLogger(__name__)


async def clear_data(session: AsyncSession) -> None:
    # prices first, they reference stocks
    await session.execute(delete(StockPriceModel))
    await session.execute(delete(StockModel))
    logger.info("🗑️  Cleared stock_prices and stocks")


async def insert_stocks(session: AsyncSession, stocks: Sequence[StockRecord]) -> int:
    session.add_all([StockModel(**asdict(stock)) for stock in stocks])
    await session.flush()
    logger.info(f"📊 Inserted {len(stocks)} stocks")
    return len(stocks)


async def insert_prices(session: AsyncSession, prices: Sequence[PricePoint]) -> int:
    session.add_all([StockPriceModel(**asdict(price)) for price in prices])
    await session.flush()
    logger.info(f"💰 Inserted {len(prices)} price records")
    return len(prices)


async def seed_sample_data(
    session: AsyncSession,
    stocks: Sequence[StockRecord],
    prices: Sequence[PricePoint]
) -> None:
    """Clear both tables, then load stocks and prices. Nothing is kept unless all three steps succeed."""
    try:
        await clear_data(session)
        await insert_stocks(session, stocks)
        await insert_prices(session, prices)
        await session.commit()
    except Exception:
        await session.rollback()
        raise


async def summarize(session: AsyncSession) -> List[str]:
    """Human-readable lines describing what is loaded"""
    lines = []
    for label, column in (("sector", StockModel.sector), ("exchange", StockModel.exchange)):
        result = await session.execute(
            select(column, func.count()).group_by(column).order_by(func.count().desc(), column)
        )
        for key, count in result.all():
            lines.append(f"{label} {key}: {count} stocks")

    result = await session.execute(
        select(
            func.min(StockPriceModel.date),
            func.max(StockPriceModel.date),
            func.count(func.distinct(StockPriceModel.date)),
        )
    )
    earliest, latest, trading_days = result.one()
    lines.append(f"price range: {earliest} → {latest} ({trading_days} trading days)")
    return lines
