"""
Unit Tests for Strength Engine
"""

import pytest
from datetime import date
from decimal import Decimal

from finlens.domain.models import CohortKind, CohortMember, StrengthStatus
from finlens.domain.services.strength_engine import StrengthEngine, classify, round2

TARGET = date(2024, 1, 10)


@pytest.fixture
def engine():
    """Fixture for StrengthEngine"""
    return StrengthEngine()


def _member(symbol, current, previous):
    return CohortMember(
        symbol=symbol,
        current_close=Decimal(current),
        previous_close=Decimal(previous) if previous is not None else None,
    )


class TestClassify:

    @pytest.mark.parametrize("strength, expected", [
        (Decimal("3.01"), StrengthStatus.VERY_STRONG),
        (Decimal("3.0"), StrengthStatus.STRONG),
        (Decimal("1.6"), StrengthStatus.STRONG),
        (Decimal("1.0"), StrengthStatus.MODERATE),
        (Decimal("0"), StrengthStatus.MODERATE),
        (Decimal("-1.0"), StrengthStatus.WEAK),
        (Decimal("-2.0"), StrengthStatus.WEAK),
        (Decimal("-3.0"), StrengthStatus.VERY_WEAK),
        (Decimal("-12.5"), StrengthStatus.VERY_WEAK),
    ])
    def test_thresholds_are_exclusive(self, strength, expected):
        assert classify(strength) == expected

    def test_accepts_floats(self):
        assert classify(3.0) == StrengthStatus.STRONG
        assert classify(3.0000001) == StrengthStatus.VERY_STRONG


class TestRounding:

    def test_half_rounds_away_from_zero(self):
        assert round2(Decimal("1.005")) == Decimal("1.01")
        assert round2(Decimal("-1.005")) == Decimal("-1.01")
        assert round2(Decimal("2.675")) == Decimal("2.68")

    def test_repeating_decimal(self):
        assert round2(Decimal(5) / Decimal(3)) == Decimal("1.67")


class TestPercentageChange:

    def test_positive(self, engine):
        assert engine.percentage_change(Decimal("102"), Decimal("100")) == Decimal("2")

    def test_negative(self, engine):
        assert engine.percentage_change(Decimal("99"), Decimal("100")) == Decimal("-1")

    def test_missing_previous_is_zero(self, engine):
        assert engine.percentage_change(Decimal("50"), None) == Decimal("0")

    @pytest.mark.parametrize("previous", [Decimal("0"), Decimal("-5")])
    def test_non_positive_previous_is_zero(self, engine, previous):
        assert engine.percentage_change(Decimal("50"), previous) == Decimal("0")


class TestCalculate:

    def test_mixed_cohort(self, engine):
        """+2%, +2%, -1%, +1% -> avg 1.0, ratio 0.75, strength 1.6"""
        members = [
            _member("AAA", "102", "100"),
            _member("BBB", "51", "50"),
            _member("CCC", "198", "200"),
            _member("DDD", "10.1", "10"),
        ]
        result = engine.calculate(CohortKind.LAYER, "bluechip", TARGET, members)

        assert result.cohort_key == "BLUECHIP"
        assert result.target_date == TARGET
        assert result.avg_change == Decimal("1.00")
        assert result.advancers == 3
        assert result.decliners == 1
        assert result.total_stocks == 4
        assert result.ad_ratio == Decimal("0.75")
        assert result.strength == Decimal("1.60")
        assert result.status == StrengthStatus.STRONG

    def test_no_previous_closes(self, engine):
        members = [_member("AAA", "10", None), _member("BBB", "20", "0")]
        result = engine.calculate(CohortKind.SECTOR, "BDS", TARGET, members)

        assert result.avg_change == Decimal("0")
        assert result.ad_ratio == Decimal("0")
        assert result.advancers == 0
        assert result.decliners == 0
        assert result.strength == Decimal("-2.00")
        assert result.status == StrengthStatus.WEAK

    def test_ties_are_counted_in_mean_only(self, engine):
        members = [
            _member("AAA", "103", "100"),
            _member("BBB", "100", "100"),
            _member("CCC", "98", "100"),
        ]
        result = engine.calculate(CohortKind.SECTOR, "BDS", TARGET, members)

        assert result.advancers == 1
        assert result.decliners == 1
        assert result.unchanged == 1
        # (3 + 0 - 2) / 3 = 0.333..
        assert result.avg_change == Decimal("0.33")
        assert result.ad_ratio == Decimal("0.33")
        # 0.2 + (1/3 - 0.5) * 4 = -0.4666..
        assert result.strength == Decimal("-0.47")
        assert result.status == StrengthStatus.MODERATE

    def test_avg_change_rounds_to_two_places(self, engine):
        # +5% and 0% over 3 members -> 5/3
        members = [
            _member("AAA", "105", "100"),
            _member("BBB", "100", None),
            _member("CCC", "100", "100"),
        ]
        result = engine.calculate(CohortKind.SECTOR, "THEP", TARGET, members)
        assert result.avg_change == Decimal("1.67")

    def test_all_advancers(self, engine):
        members = [_member("AAA", "110", "100"), _member("BBB", "105", "100")]
        result = engine.calculate(CohortKind.SECTOR, "NGANHANG", TARGET, members)

        assert result.ad_ratio == Decimal("1.00")
        # 7.5 * 0.6 + 0.5 * 4
        assert result.strength == Decimal("6.50")
        assert result.status == StrengthStatus.VERY_STRONG

    def test_empty_cohort_returns_none(self, engine):
        assert engine.calculate(CohortKind.LAYER, "PENNY", TARGET, []) is None

    def test_counts_and_ratio_bounds(self, engine):
        members = [
            _member(f"S{i}", str(100 + i - 5), "100")
            for i in range(11)
        ]
        result = engine.calculate(CohortKind.SECTOR, "DIEN", TARGET, members)

        assert Decimal("0") <= result.ad_ratio <= Decimal("1")
        assert result.advancers + result.decliners <= result.total_stocks
        assert result.total_stocks == 11

    def test_repeatable(self, engine):
        members = [_member("AAA", "12.345", "12.1"), _member("BBB", "7.77", "7.9")]
        first = engine.calculate(CohortKind.SECTOR, "BDS", TARGET, members)
        second = engine.calculate(CohortKind.SECTOR, "BDS", TARGET, members)
        assert first == second
