"""
Domain Models - Entities
Pure domain objects with no infrastructure dependencies
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional


class Layer(str, Enum):
    """Market-capitalization tier"""
    BLUECHIP = "BLUECHIP"
    MIDCAP = "MIDCAP"
    PENNY = "PENNY"

    @classmethod
    def parse(cls, value: str) -> Optional["Layer"]:
        """Case-insensitive lookup, None when the value is not a layer"""
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


class StrengthStatus(str, Enum):
    """Cohort momentum label"""
    VERY_STRONG = "VERY_STRONG"
    STRONG = "STRONG"
    MODERATE = "MODERATE"
    WEAK = "WEAK"
    VERY_WEAK = "VERY_WEAK"


class CohortKind(str, Enum):
    """How a cohort is selected"""
    LAYER = "layer"
    SECTOR = "sector"


@dataclass(frozen=True)
class StockRecord:
    """Identity and classification of one traded instrument"""
    symbol: str
    name: str
    exchange: str
    industry: str
    sector: str
    layer: Layer
    listing_date: date
    outstanding_shares: int
    market_cap: int


@dataclass(frozen=True)
class PricePoint:
    """One trading day's OHLCV observation"""
    symbol: str
    date: date
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: int
    adjusted_close: Decimal


@dataclass(frozen=True)
class CohortMember:
    """Close-price pair for one cohort member on the target date"""
    symbol: str
    current_close: Decimal
    previous_close: Optional[Decimal] = None


@dataclass(frozen=True)
class CohortStrength:
    """
    Cohort momentum snapshot

    strength, avg_change and ad_ratio are already rounded to 2 decimals.
    """
    kind: CohortKind
    cohort_key: str
    target_date: date
    strength: Decimal
    avg_change: Decimal
    ad_ratio: Decimal
    total_stocks: int
    advancers: int
    decliners: int
    status: StrengthStatus

    @property
    def unchanged(self) -> int:
        return self.total_stocks - self.advancers - self.decliners


@dataclass(frozen=True)
class StockWithPrice:
    """Stock with its most recent price row"""
    symbol: str
    name: str
    exchange: str
    sector: str
    latest_date: date
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: int


@dataclass(frozen=True)
class HistoricalPrice:
    date: date
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: int
    adjusted_close: Optional[Decimal]


@dataclass(frozen=True)
class StockHistory:
    symbol: str
    name: str
    exchange: str
    sector: str
    prices: List[HistoricalPrice] = field(default_factory=list)


@dataclass(frozen=True)
class ExchangeSummary:
    exchange: str
    stock_count: int
    total_volume: int


@dataclass(frozen=True)
class SectorCount:
    sector: str
    stock_count: int


@dataclass(frozen=True)
class MarketSummary:
    """Market-wide counts as of the latest trading date"""
    total_stocks: int
    total_volume: int
    exchanges: List[ExchangeSummary]
    sectors: List[SectorCount]
    date: Optional[date]
