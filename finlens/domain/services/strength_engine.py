"""
STRENGTH ENGINE
Cohort momentum score from close-price pairs

RESPONSIBILITIES:
- Per-member percentage change vs. the previous trading day
- Advance/decline breadth
- Composite strength score and its status label

RULES:
❌ No database access
❌ No date resolution
✅ Pure calculation on Decimals
✅ Deterministic output, ROUND_HALF_UP to 2 places
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Sequence

from finlens.domain.models import (
    CohortKind,
    CohortMember,
    CohortStrength,
    StrengthStatus,
)

ZERO = Decimal("0")
HUNDRED = Decimal("100")
TWO_PLACES = Decimal("0.01")

AVG_CHANGE_WEIGHT = Decimal("0.6")
BREADTH_WEIGHT = Decimal("0.4")
BREADTH_BASELINE = Decimal("0.5")
BREADTH_SCALE = Decimal("10")

# (exclusive lower bound, label), checked top-down
STATUS_THRESHOLDS = (
    (Decimal("3"), StrengthStatus.VERY_STRONG),
    (Decimal("1"), StrengthStatus.STRONG),
    (Decimal("-1"), StrengthStatus.MODERATE),
    (Decimal("-3"), StrengthStatus.WEAK),
)


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps float inputs at their shortest repr instead of binary noise
    return Decimal(str(value))


def round2(value: Decimal) -> Decimal:
    """Round half away from zero to 2 decimal places"""
    return _to_decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def classify(strength) -> StrengthStatus:
    """
    Map a strength score to its status label

    Logic:
    - VERY_STRONG: > 3
    - STRONG: > 1
    - MODERATE: > -1
    - WEAK: > -3
    - VERY_WEAK: otherwise
    """
    score = _to_decimal(strength)
    for lower_bound, status in STATUS_THRESHOLDS:
        if score > lower_bound:
            return status
    return StrengthStatus.VERY_WEAK


class StrengthEngine:
    """
    Strength Engine
    Turns a cohort's close-price pairs into a CohortStrength
    """

    @staticmethod
    def percentage_change(
        current_close: Decimal,
        previous_close: Optional[Decimal]
    ) -> Decimal:
        """
        Percentage change vs. the previous close

        Formula: ((current - previous) / previous) * 100
        A missing or non-positive previous close counts as no change.
        """
        if previous_close is None:
            return ZERO
        previous = _to_decimal(previous_close)
        if previous <= ZERO:
            return ZERO
        current = _to_decimal(current_close)
        return (current - previous) / previous * HUNDRED

    @staticmethod
    def composite_strength(avg_change: Decimal, ad_ratio: Decimal) -> Decimal:
        """
        Formula: avg_change * 0.6 + (ad_ratio - 0.5) * 10 * 0.4
        """
        breadth = (ad_ratio - BREADTH_BASELINE) * BREADTH_SCALE * BREADTH_WEIGHT
        return avg_change * AVG_CHANGE_WEIGHT + breadth

    def calculate(
        self,
        kind: CohortKind,
        cohort_key: str,
        target_date: date,
        members: Sequence[CohortMember]
    ) -> Optional[CohortStrength]:
        """
        Aggregate a cohort into a CohortStrength

        Args:
            kind: Whether the cohort is a layer or a sector
            cohort_key: Layer or sector identifier (uppercased on output)
            target_date: Trading date the closes belong to
            members: Members priced on target_date

        Returns:
            CohortStrength, or None for an empty cohort
        """
        if not members:
            return None

        changes = [
            self.percentage_change(m.current_close, m.previous_close)
            for m in members
        ]

        total_stocks = len(changes)
        advancers = sum(1 for c in changes if c > ZERO)
        decliners = sum(1 for c in changes if c < ZERO)

        avg_change = sum(changes, ZERO) / Decimal(total_stocks)
        ad_ratio = Decimal(advancers) / Decimal(total_stocks)
        strength = self.composite_strength(avg_change, ad_ratio)

        return CohortStrength(
            kind=kind,
            cohort_key=cohort_key.upper(),
            target_date=target_date,
            strength=round2(strength),
            avg_change=round2(avg_change),
            ad_ratio=round2(ad_ratio),
            total_stocks=total_stocks,
            advancers=advancers,
            decliners=decliners,
            status=classify(strength),
        )
