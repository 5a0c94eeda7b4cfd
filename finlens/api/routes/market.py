"""
Market Data API Routes
Latest prices, history and summary
"""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Query

from finlens.api.dependencies import get_market_data_service
from finlens.api.validation import require_value
from finlens.domain.schemas.market import (
    LatestPricesResponse,
    MarketSummaryResponse,
    MarketSummarySchema,
    StockHistoryResponse,
    StockHistorySchema,
    StockWithPriceSchema,
)
from finlens.services.market_data_service import MarketDataService

logger = logging.getLogger(__name__)
router = APIRouter()

MAX_LATEST_LIMIT = 100
MAX_HISTORY_DAYS = 365


@router.get("/latest", response_model=LatestPricesResponse)
async def get_latest_prices(
    limit: int = Query(50),
    service: MarketDataService = Depends(get_market_data_service)
):
    """Latest price row of every stock"""
    if limit < 1 or limit > MAX_LATEST_LIMIT:
        raise HTTPException(status_code=400, detail=f"Limit must be between 1 and {MAX_LATEST_LIMIT}")

    try:
        stocks = await service.get_latest_prices(limit)
    except Exception as e:
        logger.exception(f"Error fetching latest prices: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch latest prices")

    return LatestPricesResponse(
        count=len(stocks),
        data=[StockWithPriceSchema(**asdict(s)) for s in stocks],
    )


@router.get("/history/{symbol}", response_model=StockHistoryResponse)
async def get_stock_history(
    symbol: str,
    days: int = Query(30),
    service: MarketDataService = Depends(get_market_data_service)
):
    """Daily OHLCV history of one stock, newest first"""
    symbol = require_value(symbol, "Stock symbol").upper()
    if days < 1 or days > MAX_HISTORY_DAYS:
        raise HTTPException(status_code=400, detail=f"Days must be between 1 and {MAX_HISTORY_DAYS}")

    try:
        history = await service.get_stock_history(symbol, days)
    except Exception as e:
        logger.exception(f"Error fetching history for {symbol}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch stock history")

    if history is None:
        raise HTTPException(status_code=404, detail=f"Stock with symbol '{symbol}' not found")

    return StockHistoryResponse(data=StockHistorySchema(**asdict(history)))


@router.get("/summary", response_model=MarketSummaryResponse)
async def get_market_summary(service: MarketDataService = Depends(get_market_data_service)):
    """Market-wide totals as of the latest trading date"""
    try:
        summary = await service.get_market_summary()
    except Exception as e:
        logger.exception(f"Error fetching market summary: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch market summary")

    return MarketSummaryResponse(data=MarketSummarySchema(**asdict(summary)))
