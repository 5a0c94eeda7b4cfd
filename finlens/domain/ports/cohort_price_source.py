"""
Cohort price source protocol for type hints.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional, Protocol

from finlens.domain.models import CohortMember, Layer


class CohortPriceSource(Protocol):
    async def get_latest_trading_date(self) -> Optional[date]:
        ...

    async def get_layer_members(self, layer: Layer, target_date: date) -> List[CohortMember]:
        ...

    async def get_sector_members(self, sector: str, target_date: date) -> List[CohortMember]:
        ...
