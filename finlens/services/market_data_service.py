"""
Market Data Service
Latest prices, per-symbol history and market-wide summary
"""

import logging
from typing import List, Optional

from finlens.domain.models import MarketSummary, StockHistory, StockWithPrice
from finlens.infrastructure.db.repositories.price_repository import PriceRepository
from finlens.infrastructure.db.repositories.stock_repository import StockRepository

logger = logging.getLogger(__name__)


class MarketDataService:

    def __init__(self, stock_repository: StockRepository, price_repository: PriceRepository):
        self.stocks = stock_repository
        self.prices = price_repository

    async def get_latest_prices(self, limit: int = 50) -> List[StockWithPrice]:
        return await self.stocks.list_latest_prices(limit)

    async def get_stock_history(self, symbol: str, days: int = 30) -> Optional[StockHistory]:
        """Stock info plus its last `days` price rows; None for an unknown symbol"""
        stock = await self.stocks.get_by_symbol(symbol)
        if stock is None:
            return None

        prices = await self.prices.get_history(symbol, days)
        return StockHistory(
            symbol=stock.symbol,
            name=stock.name,
            exchange=stock.exchange,
            sector=stock.sector,
            prices=prices,
        )

    async def get_market_summary(self) -> MarketSummary:
        latest_date = await self.prices.get_latest_trading_date()
        if latest_date is None:
            logger.info("Market summary requested with an empty price table")

        return MarketSummary(
            total_stocks=await self.stocks.count(),
            total_volume=await self.prices.get_total_volume(latest_date),
            exchanges=await self.stocks.exchange_summary(latest_date),
            sectors=await self.stocks.sector_counts(),
            date=latest_date,
        )
