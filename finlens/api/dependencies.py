"""
Request-scoped service wiring
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from finlens.infrastructure.db.database import get_db
from finlens.infrastructure.db.repositories.price_repository import PriceRepository
from finlens.infrastructure.db.repositories.stock_repository import StockRepository
from finlens.services.market_data_service import MarketDataService
from finlens.services.strength_service import StrengthCalculator


def get_strength_calculator(db: AsyncSession = Depends(get_db)) -> StrengthCalculator:
    return StrengthCalculator(PriceRepository(db))


def get_market_data_service(db: AsyncSession = Depends(get_db)) -> MarketDataService:
    return MarketDataService(StockRepository(db), PriceRepository(db))
