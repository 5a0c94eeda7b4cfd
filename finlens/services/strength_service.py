"""
Strength Calculator
Resolves the trading date, loads the cohort and hands it to the engine
"""

import logging
from datetime import date
from typing import Optional

from finlens.domain.models import CohortKind, CohortStrength, Layer
from finlens.domain.ports import CohortPriceSource
from finlens.domain.services.strength_engine import StrengthEngine

logger = logging.getLogger(__name__)


class StrengthCalculator:
    """Layer and sector strength on demand, nothing cached"""

    def __init__(self, source: CohortPriceSource, engine: Optional[StrengthEngine] = None):
        self.source = source
        self.engine = engine or StrengthEngine()

    async def _resolve_date(self, target_date: Optional[date]) -> Optional[date]:
        if target_date is not None:
            return target_date
        return await self.source.get_latest_trading_date()

    async def calculate_layer_strength(
        self,
        layer: str,
        target_date: Optional[date] = None
    ) -> Optional[CohortStrength]:
        """
        Strength of a market-cap layer

        Returns None when the layer is unknown, no trading date exists,
        or no member has a price on the resolved date.
        """
        parsed = Layer.parse(layer)
        if parsed is None:
            return None

        resolved = await self._resolve_date(target_date)
        if resolved is None:
            logger.info("No price data available, cannot resolve trading date")
            return None

        members = await self.source.get_layer_members(parsed, resolved)
        logger.debug(f"Layer {parsed.value} on {resolved}: {len(members)} members")
        return self.engine.calculate(CohortKind.LAYER, parsed.value, resolved, members)

    async def calculate_sector_strength(
        self,
        sector: str,
        target_date: Optional[date] = None
    ) -> Optional[CohortStrength]:
        """
        Strength of a sector

        An unknown sector and a sector with no prices on the date are
        both reported as None.
        """
        resolved = await self._resolve_date(target_date)
        if resolved is None:
            logger.info("No price data available, cannot resolve trading date")
            return None

        key = sector.strip().upper()
        members = await self.source.get_sector_members(key, resolved)
        logger.debug(f"Sector {key} on {resolved}: {len(members)} members")
        return self.engine.calculate(CohortKind.SECTOR, key, resolved, members)
