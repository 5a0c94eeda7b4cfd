from datetime import date
from decimal import Decimal
from typing import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from finlens.domain.models import Layer
from finlens.infrastructure.db.database import Base, get_db
from finlens.infrastructure.db.models import StockModel, StockPriceModel
from finlens.main import create_app

PREVIOUS_DAY = date(2024, 1, 9)
LATEST_DAY = date(2024, 1, 10)


@pytest.fixture()
async def db_engine(tmp_path):
    db_path = tmp_path / "test.db"
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{db_path}",
        echo=False
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture()
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    session_maker = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session


def _stock(symbol, exchange, sector, layer):
    return StockModel(
        symbol=symbol,
        name=f"{symbol} Corp",
        exchange=exchange,
        industry=sector.title(),
        sector=sector,
        layer=layer,
        listing_date=date(2020, 1, 1),
        outstanding_shares=1_000_000,
        market_cap=30_000_000_000,
    )


def _price(symbol, day, close):
    close = Decimal(close)
    return StockPriceModel(
        symbol=symbol,
        date=day,
        open=close,
        high=close,
        low=close,
        close=close,
        volume=1000,
        adjusted_close=close,
    )


@pytest.fixture()
async def market_data(db_session):
    """
    Two trading days of prices.

    On LATEST_DAY the BLUECHIP changes are +2, +2, -1, +1 percent.
    EEE has no earlier row, FFF has no LATEST_DAY row.
    """
    db_session.add_all([
        _stock("AAA", "HOSE", "NGANHANG", Layer.BLUECHIP),
        _stock("BBB", "HOSE", "NGANHANG", Layer.BLUECHIP),
        _stock("CCC", "HOSE", "BDS", Layer.BLUECHIP),
        _stock("DDD", "HNX", "BDS", Layer.BLUECHIP),
        _stock("EEE", "HNX", "BDS", Layer.MIDCAP),
        _stock("FFF", "UPCOM", "THEP", Layer.PENNY),
    ])
    await db_session.flush()
    db_session.add_all([
        _price("AAA", PREVIOUS_DAY, "100"), _price("AAA", LATEST_DAY, "102"),
        _price("BBB", PREVIOUS_DAY, "50"), _price("BBB", LATEST_DAY, "51"),
        _price("CCC", PREVIOUS_DAY, "200"), _price("CCC", LATEST_DAY, "198"),
        _price("DDD", PREVIOUS_DAY, "10"), _price("DDD", LATEST_DAY, "10.1"),
        _price("EEE", LATEST_DAY, "25"),
        _price("FFF", PREVIOUS_DAY, "3.5"),
    ])
    await db_session.commit()
    return db_session


@pytest.fixture()
async def app(db_session) -> FastAPI:
    app = create_app(use_lifespan=False)

    async def override_get_db():
        try:
            yield db_session
            await db_session.commit()
        except Exception:
            await db_session.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture()
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
