"""
Stock Price Repository
Read-only queries over stock_prices
"""

import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from finlens.domain.models import CohortMember, HistoricalPrice, Layer
from finlens.infrastructure.db.models import StockModel, StockPriceModel

logger = logging.getLogger(__name__)


class PriceRepository:
    """Repository for daily price rows; implements CohortPriceSource"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_latest_trading_date(self) -> Optional[date]:
        result = await self.session.execute(select(func.max(StockPriceModel.date)))
        return result.scalar_one_or_none()

    async def get_layer_members(self, layer: Layer, target_date: date) -> List[CohortMember]:
        return await self._get_cohort_members(StockModel.layer == layer, target_date)

    async def get_sector_members(self, sector: str, target_date: date) -> List[CohortMember]:
        return await self._get_cohort_members(
            func.upper(StockModel.sector) == sector.upper(), target_date
        )

    async def _get_cohort_members(self, cohort_filter, target_date: date) -> List[CohortMember]:
        """
        Current close on target_date (inner join) plus the most recent
        close strictly before it (correlated subquery, may be NULL).
        """
        today = aliased(StockPriceModel)
        prior = aliased(StockPriceModel)

        previous_close = (
            select(prior.close)
            .where(prior.symbol == StockModel.symbol, prior.date < target_date)
            .order_by(prior.date.desc())
            .limit(1)
            .correlate(StockModel)
            .scalar_subquery()
        )

        stmt = (
            select(
                StockModel.symbol,
                today.close.label("current_close"),
                previous_close.label("previous_close"),
            )
            .join(today, and_(today.symbol == StockModel.symbol, today.date == target_date))
            .where(cohort_filter)
            .order_by(StockModel.symbol)
        )

        result = await self.session.execute(stmt)
        rows = result.all()
        logger.debug(f"Cohort query for {target_date} returned {len(rows)} rows")
        return [
            CohortMember(
                symbol=row.symbol,
                current_close=Decimal(str(row.current_close)),
                previous_close=(
                    Decimal(str(row.previous_close))
                    if row.previous_close is not None else None
                ),
            )
            for row in rows
        ]

    async def get_history(self, symbol: str, days: int) -> List[HistoricalPrice]:
        """Last `days` rows for a symbol, newest first"""
        result = await self.session.execute(
            select(StockPriceModel)
            .where(StockPriceModel.symbol == symbol)
            .order_by(StockPriceModel.date.desc())
            .limit(days)
        )
        return [
            HistoricalPrice(
                date=row.date,
                open=row.open,
                high=row.high,
                low=row.low,
                close=row.close,
                volume=row.volume,
                adjusted_close=row.adjusted_close,
            )
            for row in result.scalars().all()
        ]

    async def get_total_volume(self, on_date: Optional[date]) -> int:
        if on_date is None:
            return 0
        result = await self.session.execute(
            select(func.coalesce(func.sum(StockPriceModel.volume), 0))
            .where(StockPriceModel.date == on_date)
        )
        return int(result.scalar_one())
