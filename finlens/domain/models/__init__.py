"""
Domain Models Package
Export all domain entities
"""

from .entities import (
    # Enums
    CohortKind,
    Layer,
    StrengthStatus,

    # Entities
    CohortMember,
    CohortStrength,
    ExchangeSummary,
    HistoricalPrice,
    MarketSummary,
    PricePoint,
    SectorCount,
    StockHistory,
    StockRecord,
    StockWithPrice,
)

__all__ = [
    # Enums
    "CohortKind",
    "Layer",
    "StrengthStatus",

    # Entities
    "CohortMember",
    "CohortStrength",
    "ExchangeSummary",
    "HistoricalPrice",
    "MarketSummary",
    "PricePoint",
    "SectorCount",
    "StockHistory",
    "StockRecord",
    "StockWithPrice",
]
