"""
Database Models (SQLAlchemy ORM)
Seeded once, read-only afterwards
"""

from sqlalchemy import (
    BigInteger, Column, Date, Enum as SQLEnum, ForeignKey, Index,
    Integer, Numeric, String, UniqueConstraint,
)
from sqlalchemy.orm import relationship

from finlens.domain.models import Layer
from finlens.infrastructure.db.database import Base


class StockModel(Base):
    """Listed instrument and its classification"""
    __tablename__ = "stocks"

    symbol = Column(String(10), primary_key=True)
    name = Column(String(255), nullable=False)
    exchange = Column(String(10), nullable=False, index=True)
    industry = Column(String(100), nullable=True)
    sector = Column(String(50), nullable=False, index=True)
    layer = Column(
        SQLEnum(Layer, name="stock_layer", values_callable=lambda e: [m.value for m in e]),
        nullable=True,
        index=True,
    )
    listing_date = Column(Date, nullable=True)
    outstanding_shares = Column(BigInteger, nullable=True)
    market_cap = Column(BigInteger, nullable=True)

    prices = relationship("StockPriceModel", back_populates="stock")


class StockPriceModel(Base):
    """One trading day OHLCV row"""
    __tablename__ = "stock_prices"

    id = Column(Integer, primary_key=True, autoincrement=True)
    symbol = Column(String(10), ForeignKey("stocks.symbol", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    open = Column(Numeric(12, 3), nullable=False)
    high = Column(Numeric(12, 3), nullable=False)
    low = Column(Numeric(12, 3), nullable=False)
    close = Column(Numeric(12, 3), nullable=False)
    volume = Column(BigInteger, nullable=False, default=0)
    adjusted_close = Column(Numeric(12, 3), nullable=True)

    stock = relationship("StockModel", back_populates="prices")

    __table_args__ = (
        UniqueConstraint("symbol", "date", name="uq_stock_prices_symbol_date"),
        Index("ix_stock_prices_symbol_date", "symbol", "date"),
    )
