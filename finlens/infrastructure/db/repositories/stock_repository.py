"""
Stock Repository
Read-only queries over stocks
"""

from datetime import date
from typing import List, Optional

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from finlens.domain.models import ExchangeSummary, SectorCount, StockWithPrice
from finlens.infrastructure.db.models import StockModel, StockPriceModel


class StockRepository:
    """Repository for listed stocks"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_symbol(self, symbol: str) -> Optional[StockModel]:
        result = await self.session.execute(
            select(StockModel).where(StockModel.symbol == symbol)
        )
        return result.scalars().first()

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(StockModel))
        return int(result.scalar_one())

    async def list_latest_prices(self, limit: int) -> List[StockWithPrice]:
        """Each stock joined to its newest price row, ordered by symbol"""
        latest = (
            select(
                StockPriceModel.symbol.label("symbol"),
                func.max(StockPriceModel.date).label("latest_date"),
            )
            .group_by(StockPriceModel.symbol)
            .subquery()
        )
        price = aliased(StockPriceModel)

        result = await self.session.execute(
            select(StockModel, price)
            .join(latest, latest.c.symbol == StockModel.symbol)
            .join(price, and_(price.symbol == latest.c.symbol, price.date == latest.c.latest_date))
            .order_by(StockModel.symbol)
            .limit(limit)
        )
        return [
            StockWithPrice(
                symbol=stock.symbol,
                name=stock.name,
                exchange=stock.exchange,
                sector=stock.sector,
                latest_date=row_price.date,
                open=row_price.open,
                high=row_price.high,
                low=row_price.low,
                close=row_price.close,
                volume=row_price.volume,
            )
            for stock, row_price in result.all()
        ]

    async def exchange_summary(self, on_date: Optional[date]) -> List[ExchangeSummary]:
        """Stocks and traded volume per exchange on a date"""
        stock_count = func.count(StockModel.symbol)
        result = await self.session.execute(
            select(
                StockModel.exchange,
                stock_count.label("stock_count"),
                func.coalesce(func.sum(StockPriceModel.volume), 0).label("total_volume"),
            )
            .outerjoin(
                StockPriceModel,
                and_(StockPriceModel.symbol == StockModel.symbol, StockPriceModel.date == on_date),
            )
            .group_by(StockModel.exchange)
            .order_by(stock_count.desc(), StockModel.exchange)
        )
        return [
            ExchangeSummary(
                exchange=row.exchange,
                stock_count=int(row.stock_count),
                total_volume=int(row.total_volume),
            )
            for row in result.all()
        ]

    async def sector_counts(self) -> List[SectorCount]:
        stock_count = func.count()
        result = await self.session.execute(
            select(StockModel.sector, stock_count.label("stock_count"))
            .group_by(StockModel.sector)
            .order_by(stock_count.desc(), StockModel.sector)
        )
        return [
            SectorCount(sector=row.sector, stock_count=int(row.stock_count))
            for row in result.all()
        ]
