import random
from datetime import date

from finlens.domain.models import Layer
from finlens.infrastructure.data.sample_data import SAMPLE_STOCKS, SECTORS, SampleDataGenerator

TODAY = date(2024, 1, 12)  # a Friday


def _generator(seed=7):
    return SampleDataGenerator(rng=random.Random(seed), today=TODAY)


def test_generates_full_universe_with_layers():
    stocks = _generator().generate_stocks()

    assert len(stocks) == len(SAMPLE_STOCKS) == 50
    assert len({s.symbol for s in stocks}) == 50
    assert all(isinstance(s.layer, Layer) for s in stocks)
    assert all(s.industry == SECTORS[s.sector] for s in stocks)


def test_market_cap_follows_layer():
    for stock in _generator().generate_stocks():
        if stock.layer == Layer.BLUECHIP:
            assert 100_000_000_000 <= stock.market_cap < 600_000_000_000
        elif stock.layer == Layer.MIDCAP:
            assert 10_000_000_000 <= stock.market_cap < 100_000_000_000
        else:
            assert 1_000_000_000 <= stock.market_cap < 10_000_000_000
        assert stock.outstanding_shares == stock.market_cap // 30_000
        assert stock.listing_date <= TODAY


def test_prices_skip_weekends_and_stay_consistent():
    prices = _generator().generate_prices("VCB", Layer.BLUECHIP, days=20)

    # 20 calendar days ending on a Friday hold 15 weekdays
    assert len(prices) == 15
    assert all(p.date.weekday() < 5 for p in prices)
    assert [p.date for p in prices] == sorted(p.date for p in prices)
    assert prices[-1].date == TODAY
    for p in prices:
        assert p.low <= p.close <= p.high
        assert p.low <= p.open <= p.high
        assert p.adjusted_close == p.close
        assert 1_000_000 <= p.volume < 3_000_000


def test_same_seed_same_data():
    first = _generator(seed=42).generate_all(days=10)
    second = _generator(seed=42).generate_all(days=10)
    assert first == second
