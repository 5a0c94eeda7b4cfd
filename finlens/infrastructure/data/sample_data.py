"""
Sample data generator for Vietnamese stocks
Generates realistic-looking stocks and daily prices for development
"""

import math
import random
from datetime import date, timedelta
from decimal import Decimal
from typing import List, Optional, Tuple

from finlens.domain.models import Layer, PricePoint, StockRecord

SECTORS = {
    "BDS": "Real Estate",
    "NGANHANG": "Banking",
    "CHUNGKHOAN": "Securities",
    "THEP": "Steel",
    "DAUKI": "Oil & Gas",
    "DIEN": "Energy",
    "THUCPHAM": "Food & Beverage",
    "CONGNGHE": "Technology",
}

# (symbol, name, exchange, sector, layer)
SAMPLE_STOCKS: List[Tuple[str, str, str, str, Layer]] = [
    # Banking
    ("VCB", "Vietcombank", "HOSE", "NGANHANG", Layer.BLUECHIP),
    ("BID", "BIDV", "HOSE", "NGANHANG", Layer.BLUECHIP),
    ("CTG", "VietinBank", "HOSE", "NGANHANG", Layer.BLUECHIP),
    ("TCB", "Techcombank", "HOSE", "NGANHANG", Layer.BLUECHIP),
    ("MBB", "MB Bank", "HOSE", "NGANHANG", Layer.BLUECHIP),
    ("ACB", "Asia Commercial Bank", "HOSE", "NGANHANG", Layer.MIDCAP),
    ("VPB", "VPBank", "HOSE", "NGANHANG", Layer.MIDCAP),
    ("TPB", "TPBank", "HOSE", "NGANHANG", Layer.MIDCAP),
    ("HDB", "HDBank", "HOSE", "NGANHANG", Layer.MIDCAP),
    ("STB", "Sacombank", "HOSE", "NGANHANG", Layer.PENNY),
    # Real estate
    ("VHM", "Vinhomes", "HOSE", "BDS", Layer.BLUECHIP),
    ("VIC", "Vingroup", "HOSE", "BDS", Layer.BLUECHIP),
    ("NVL", "Novaland", "HOSE", "BDS", Layer.MIDCAP),
    ("VRE", "Vincom Retail", "HOSE", "BDS", Layer.MIDCAP),
    ("DXG", "Dat Xanh Group", "HOSE", "BDS", Layer.MIDCAP),
    ("PDR", "Phat Dat Real Estate", "HOSE", "BDS", Layer.PENNY),
    ("KDH", "Khang Dien House", "HOSE", "BDS", Layer.PENNY),
    ("DIG", "DIC Corp", "HOSE", "BDS", Layer.PENNY),
    # Securities
    ("SSI", "SSI Securities", "HOSE", "CHUNGKHOAN", Layer.MIDCAP),
    ("VND", "VNDirect Securities", "HOSE", "CHUNGKHOAN", Layer.MIDCAP),
    ("HCM", "Ho Chi Minh Securities", "HOSE", "CHUNGKHOAN", Layer.MIDCAP),
    ("VCI", "Vietcap Securities", "HOSE", "CHUNGKHOAN", Layer.PENNY),
    ("FTS", "FPT Securities", "HOSE", "CHUNGKHOAN", Layer.PENNY),
    # Steel
    ("HPG", "Hoa Phat Group", "HOSE", "THEP", Layer.BLUECHIP),
    ("HSG", "Hoa Sen Group", "HOSE", "THEP", Layer.MIDCAP),
    ("NKG", "Nam Kim Steel", "HOSE", "THEP", Layer.MIDCAP),
    ("POM", "Pomina Steel", "HNX", "THEP", Layer.PENNY),
    # Oil & gas
    ("GAS", "PetroVietnam Gas", "HOSE", "DAUKI", Layer.BLUECHIP),
    ("PLX", "Petrolimex", "HOSE", "DAUKI", Layer.BLUECHIP),
    ("PVD", "PetroVietnam Drilling", "HOSE", "DAUKI", Layer.MIDCAP),
    ("PVS", "PetroVietnam Technical Services", "HOSE", "DAUKI", Layer.MIDCAP),
    ("PVT", "PetroVietnam Transportation", "HOSE", "DAUKI", Layer.PENNY),
    ("GMD", "Gemadept", "HOSE", "DAUKI", Layer.PENNY),
    ("BSR", "Binh Son Refining", "UPCOM", "DAUKI", Layer.PENNY),
    # Energy
    ("POW", "PetroVietnam Power", "HOSE", "DIEN", Layer.MIDCAP),
    ("NT2", "Nhon Trach 2 Power", "HOSE", "DIEN", Layer.MIDCAP),
    ("REE", "Refrigeration Electrical Engineering", "HOSE", "DIEN", Layer.MIDCAP),
    ("PC1", "Power Construction No.1", "HNX", "DIEN", Layer.PENNY),
    # Food & beverage
    ("VNM", "Vinamilk", "HOSE", "THUCPHAM", Layer.BLUECHIP),
    ("MSN", "Masan Group", "HOSE", "THUCPHAM", Layer.BLUECHIP),
    ("SAB", "Sabeco", "HOSE", "THUCPHAM", Layer.BLUECHIP),
    ("VHC", "Vinh Hoan Corp", "HOSE", "THUCPHAM", Layer.MIDCAP),
    ("MCH", "Masan Consumer Holdings", "HOSE", "THUCPHAM", Layer.MIDCAP),
    ("KDC", "Kinh Do Corporation", "HOSE", "THUCPHAM", Layer.PENNY),
    # Technology
    ("FPT", "FPT Corporation", "HOSE", "CONGNGHE", Layer.BLUECHIP),
    ("MWG", "Mobile World", "HOSE", "CONGNGHE", Layer.BLUECHIP),
    ("CMG", "CMC Corporation", "HOSE", "CONGNGHE", Layer.MIDCAP),
    ("VGI", "VGI Holdings", "UPCOM", "CONGNGHE", Layer.MIDCAP),
    ("VJC", "VietJet Air", "HOSE", "CONGNGHE", Layer.MIDCAP),
    ("ELC", "LILAMA Electro-Mechanical", "HOSE", "CONGNGHE", Layer.PENNY),
]

# VND ranges as (minimum, span)
MARKET_CAP_RANGES = {
    Layer.BLUECHIP: (100_000_000_000, 500_000_000_000),
    Layer.MIDCAP: (10_000_000_000, 90_000_000_000),
    Layer.PENNY: (1_000_000_000, 9_000_000_000),
}
BASE_PRICE_RANGES = {
    Layer.BLUECHIP: (50_000, 100_000),
    Layer.MIDCAP: (10_000, 40_000),
    Layer.PENNY: (1_000, 9_000),
}
AVERAGE_SHARE_PRICE = 30_000
MAX_DAILY_MOVE = 0.03
INTRADAY_VOLATILITY = 0.02
BASE_VOLUME = 1_000_000
LISTING_WINDOW_YEARS = 5
PRICE_UNIT = Decimal("1000")


class SampleDataGenerator:
    """
    Builds StockRecord and PricePoint fixtures

    Pass a seeded random.Random for reproducible output.
    """

    def __init__(self, rng: Optional[random.Random] = None, today: Optional[date] = None):
        self.rng = rng or random.Random()
        self.today = today or date.today()

    def _in_range(self, bounds: Tuple[int, int]) -> int:
        minimum, span = bounds
        return math.floor(self.rng.random() * span + minimum)

    def _listing_date(self) -> date:
        window_days = 365 * LISTING_WINDOW_YEARS
        return self.today - timedelta(days=self.rng.randint(0, window_days))

    def generate_stocks(self) -> List[StockRecord]:
        stocks = []
        for symbol, name, exchange, sector, layer in SAMPLE_STOCKS:
            market_cap = self._in_range(MARKET_CAP_RANGES[layer])
            stocks.append(StockRecord(
                symbol=symbol,
                name=name,
                exchange=exchange,
                industry=SECTORS[sector],
                sector=sector,
                layer=layer,
                listing_date=self._listing_date(),
                outstanding_shares=market_cap // AVERAGE_SHARE_PRICE,
                market_cap=market_cap,
            ))
        return stocks

    def generate_prices(self, symbol: str, layer: Layer, days: int = 20) -> List[PricePoint]:
        """
        Random walk over the last `days` calendar days, weekends skipped

        Daily move is within +/-3%, intraday range within 2% of the open.
        Prices are stored in thousands of VND.
        """
        prices = []
        current = self._in_range(BASE_PRICE_RANGES[layer])

        for offset in range(days - 1, -1, -1):
            day = self.today - timedelta(days=offset)
            if day.weekday() >= 5:
                continue

            move = 1 + (self.rng.random() * 2 * MAX_DAILY_MOVE - MAX_DAILY_MOVE)
            current = math.floor(current * move)

            open_ = current
            high = math.floor(open_ * (1 + self.rng.random() * INTRADAY_VOLATILITY))
            low = math.floor(open_ * (1 - self.rng.random() * INTRADAY_VOLATILITY))
            close = math.floor(low + self.rng.random() * (high - low))
            volume = math.floor(BASE_VOLUME + self.rng.random() * BASE_VOLUME * 2)

            prices.append(PricePoint(
                symbol=symbol,
                date=day,
                open=Decimal(open_) / PRICE_UNIT,
                high=Decimal(high) / PRICE_UNIT,
                low=Decimal(low) / PRICE_UNIT,
                close=Decimal(close) / PRICE_UNIT,
                volume=volume,
                adjusted_close=Decimal(close) / PRICE_UNIT,
            ))
            current = close

        return prices

    def generate_all(self, days: int = 20) -> Tuple[List[StockRecord], List[PricePoint]]:
        stocks = self.generate_stocks()
        prices: List[PricePoint] = []
        for stock in stocks:
            prices.extend(self.generate_prices(stock.symbol, stock.layer, days))
        return stocks, prices
