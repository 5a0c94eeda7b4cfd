"""
Calculation API Routes
Layer and sector strength snapshots
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from finlens.api.dependencies import get_strength_calculator
from finlens.api.validation import date_suffix, parse_date_param, require_value
from finlens.domain.models import Layer
from finlens.domain.schemas.strength import (
    LayerStrengthResponse,
    LayerStrengthSchema,
    SectorStrengthResponse,
    SectorStrengthSchema,
)
from finlens.services.strength_service import StrengthCalculator

logger = logging.getLogger(__name__)
router = APIRouter()

VALID_LAYERS = ", ".join(layer.value for layer in Layer)


@router.get("/layer/{layer}", response_model=LayerStrengthResponse)
async def get_layer_strength(
    layer: str,
    date: Optional[str] = Query(None, description="YYYY-MM-DD, defaults to the latest trading date"),
    calculator: StrengthCalculator = Depends(get_strength_calculator)
):
    """Strength of a market-cap layer (BLUECHIP, MIDCAP, PENNY)"""
    layer = require_value(layer, "Layer")
    if Layer.parse(layer) is None:
        raise HTTPException(status_code=400, detail=f"Layer must be one of: {VALID_LAYERS}")
    target_date = parse_date_param(date)

    try:
        result = await calculator.calculate_layer_strength(layer, target_date)
    except Exception as e:
        logger.exception(f"Error calculating layer strength for {layer}: {e}")
        raise HTTPException(status_code=500, detail="Failed to calculate layer strength")

    if result is None:
        raise HTTPException(
            status_code=404,
            detail=f"No data found for layer '{layer.upper()}'{date_suffix(target_date)}"
        )

    return LayerStrengthResponse(data=LayerStrengthSchema.from_domain(result))


@router.get("/sector/{sector}", response_model=SectorStrengthResponse)
async def get_sector_strength(
    sector: str,
    date: Optional[str] = Query(None, description="YYYY-MM-DD, defaults to the latest trading date"),
    calculator: StrengthCalculator = Depends(get_strength_calculator)
):
    """Strength of a sector (BDS, NGANHANG, ...)"""
    sector = require_value(sector, "Sector")
    target_date = parse_date_param(date)

    try:
        result = await calculator.calculate_sector_strength(sector, target_date)
    except Exception as e:
        logger.exception(f"Error calculating sector strength for {sector}: {e}")
        raise HTTPException(status_code=500, detail="Failed to calculate sector strength")

    if result is None:
        raise HTTPException(
            status_code=404,
            detail=f"No data found for sector '{sector.upper()}'{date_suffix(target_date)}"
        )

    return SectorStrengthResponse(data=SectorStrengthSchema.from_domain(result))
