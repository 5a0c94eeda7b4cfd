import datetime
from typing import List, Optional

from pydantic import BaseModel


class StockWithPriceSchema(BaseModel):
    symbol: str
    name: str
    exchange: str
    sector: str
    latest_date: datetime.date
    open: float
    high: float
    low: float
    close: float
    volume: int


class HistoricalPriceSchema(BaseModel):
    date: datetime.date
    open: float
    high: float
    low: float
    close: float
    volume: int
    adjusted_close: Optional[float] = None


class StockHistorySchema(BaseModel):
    symbol: str
    name: str
    exchange: str
    sector: str
    prices: List[HistoricalPriceSchema]


class ExchangeSummarySchema(BaseModel):
    exchange: str
    stock_count: int
    total_volume: int


class SectorCountSchema(BaseModel):
    sector: str
    stock_count: int


class MarketSummarySchema(BaseModel):
    total_stocks: int
    total_volume: int
    exchanges: List[ExchangeSummarySchema]
    sectors: List[SectorCountSchema]
    date: Optional[datetime.date] = None


class LatestPricesResponse(BaseModel):
    success: bool = True
    count: int
    data: List[StockWithPriceSchema]


class StockHistoryResponse(BaseModel):
    success: bool = True
    data: StockHistorySchema


class MarketSummaryResponse(BaseModel):
    success: bool = True
    data: MarketSummarySchema
