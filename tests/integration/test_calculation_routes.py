import pytest

from finlens.api.dependencies import get_strength_calculator
from finlens.services.strength_service import StrengthCalculator


class FailingSource:
    async def get_latest_trading_date(self):
        raise RuntimeError("connection refused")

    async def get_layer_members(self, layer, target_date):
        raise RuntimeError("connection refused")

    async def get_sector_members(self, sector, target_date):
        raise RuntimeError("connection refused")


@pytest.mark.asyncio
@pytest.mark.integration
async def test_layer_strength_latest_date(client, market_data):
    resp = await client.get("/api/v1/calculation/layer/bluechip")
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["data"] == {
        "layer": "BLUECHIP",
        "strength": 1.6,
        "avgChange": 1.0,
        "adRatio": 0.75,
        "totalStocks": 4,
        "advancers": 3,
        "decliners": 1,
        "status": "STRONG",
    }


@pytest.mark.asyncio
@pytest.mark.integration
async def test_layer_strength_on_first_day_has_no_previous_closes(client, market_data):
    resp = await client.get("/api/v1/calculation/layer/BLUECHIP", params={"date": "2024-01-09"})
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["strength"] == -2.0
    assert data["avgChange"] == 0.0
    assert data["adRatio"] == 0.0
    assert data["status"] == "WEAK"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_member_without_previous_close_only_affects_itself(client, market_data):
    resp = await client.get("/api/v1/calculation/sector/BDS")
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["sector"] == "BDS"
    assert data["totalStocks"] == 3
    assert data["advancers"] == 1
    assert data["decliners"] == 1
    assert data["avgChange"] == 0.0
    assert data["adRatio"] == 0.33
    assert data["strength"] == -0.67
    assert data["status"] == "MODERATE"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_sector_strength_lowercase_key(client, market_data):
    resp = await client.get("/api/v1/calculation/sector/nganhang")
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["sector"] == "NGANHANG"
    assert data["strength"] == 3.2
    assert data["status"] == "VERY_STRONG"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_invalid_layer_is_rejected(client, market_data):
    resp = await client.get("/api/v1/calculation/layer/LARGECAP")
    assert resp.status_code == 400
    assert resp.json() == {
        "error": "Bad Request",
        "message": "Layer must be one of: BLUECHIP, MIDCAP, PENNY",
    }


@pytest.mark.asyncio
@pytest.mark.integration
@pytest.mark.parametrize("bad_date", ["10-01-2024", "2024-1-10", "2024-02-30"])
async def test_malformed_date_is_rejected(client, market_data, bad_date):
    resp = await client.get("/api/v1/calculation/sector/BDS", params={"date": bad_date})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Bad Request"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_layer_without_prices_on_date_is_not_found(client, market_data):
    resp = await client.get("/api/v1/calculation/layer/PENNY", params={"date": "2024-01-10"})
    assert resp.status_code == 404
    assert resp.json() == {
        "error": "Not Found",
        "message": "No data found for layer 'PENNY' on date 2024-01-10",
    }


@pytest.mark.asyncio
@pytest.mark.integration
async def test_unknown_sector_is_not_found(client, market_data):
    resp = await client.get("/api/v1/calculation/sector/shipping")
    assert resp.status_code == 404
    assert resp.json()["message"] == "No data found for sector 'SHIPPING'"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_empty_price_table_is_not_found(client):
    resp = await client.get("/api/v1/calculation/layer/MIDCAP")
    assert resp.status_code == 404


@pytest.mark.asyncio
@pytest.mark.integration
async def test_store_failure_is_a_server_error(app, client):
    app.dependency_overrides[get_strength_calculator] = lambda: StrengthCalculator(FailingSource())

    resp = await client.get("/api/v1/calculation/sector/BDS")
    assert resp.status_code == 500
    assert resp.json() == {
        "error": "Internal Server Error",
        "message": "Failed to calculate sector strength",
    }
