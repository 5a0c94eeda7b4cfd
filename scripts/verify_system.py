#!/usr/bin/env python3
"""
FinLens - System Verification Script
Checks the database, seeded data and the running API
"""

import asyncio
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import httpx
from sqlalchemy import func, inspect, select, text

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from finlens.config import settings
from finlens.infrastructure.db.database import async_session_factory, close_db, engine
from finlens.infrastructure.db.models import StockModel, StockPriceModel

REQUIRED_TABLES = ("stocks", "stock_prices")
ICONS = {"pass": "✅", "warn": "⚠️ ", "fail": "❌"}


@dataclass
class CheckResult:
    name: str
    status: str
    message: str
    details: Optional[str] = None


def print_section(title: str) -> None:
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60 + "\n")


def print_result(result: CheckResult) -> None:
    print(f"{ICONS[result.status]} {result.name}: {result.message}")
    if result.details:
        print(f"   {result.details}")


async def check_database_connection() -> CheckResult:
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return CheckResult("Database Connection", "pass", "Connected")
    except Exception as e:
        return CheckResult("Database Connection", "fail", "Cannot connect", str(e))


async def check_tables() -> CheckResult:
    try:
        async with engine.connect() as conn:
            existing = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
    except Exception as e:
        return CheckResult("Database Tables", "fail", "Cannot inspect schema", str(e))

    missing = [t for t in REQUIRED_TABLES if t not in existing]
    if missing:
        return CheckResult(
            "Database Tables", "fail", f"Missing: {', '.join(missing)}",
            "Run: alembic upgrade head"
        )
    return CheckResult("Database Tables", "pass", "All required tables exist")


async def check_sample_data() -> CheckResult:
    try:
        async with async_session_factory() as session:
            stocks = (await session.execute(select(func.count()).select_from(StockModel))).scalar_one()
            prices = (await session.execute(select(func.count()).select_from(StockPriceModel))).scalar_one()
    except Exception as e:
        return CheckResult("Sample Data", "fail", "Cannot count rows", str(e))

    if stocks == 0 or prices == 0:
        return CheckResult(
            "Sample Data", "warn", f"{stocks} stocks, {prices} prices",
            "Run: python scripts/seed_database.py"
        )
    return CheckResult("Sample Data", "pass", f"{stocks} stocks, {prices} price records")


async def check_api(client: httpx.AsyncClient) -> CheckResult:
    try:
        resp = await client.get("/health")
    except httpx.HTTPError as e:
        return CheckResult("API Server", "fail", "Not reachable", f"{settings.API_URL}: {e}")
    if resp.status_code != 200:
        return CheckResult("API Server", "fail", f"Health returned {resp.status_code}")
    try:
        database = resp.json().get("database")
    except ValueError:
        return CheckResult("API Server", "fail", "Health returned a non-JSON body", resp.text[:200])
    return CheckResult("API Server", "pass", f"Healthy ({database})")


async def check_endpoints(client: httpx.AsyncClient) -> CheckResult:
    paths = [
        "/api/v1/market/latest?limit=5",
        "/api/v1/market/summary",
        "/api/v1/calculation/layer/BLUECHIP",
        "/api/v1/calculation/sector/NGANHANG",
    ]
    failures = []
    for path in paths:
        try:
            resp = await client.get(path)
        except httpx.HTTPError as e:
            failures.append(f"{path}: {e}")
            continue
        if resp.status_code != 200:
            failures.append(f"{path}: HTTP {resp.status_code}")
            continue
        try:
            body = resp.json()
        except ValueError:
            failures.append(f"{path}: non-JSON response")
            continue
        if not body.get("success"):
            failures.append(f"{path}: success is false")

    if failures:
        return CheckResult("API Endpoints", "fail", f"{len(failures)}/{len(paths)} failing", "; ".join(failures))
    return CheckResult("API Endpoints", "pass", f"{len(paths)} endpoints responding")


async def verify_system() -> int:
    results: List[CheckResult] = []

    print_section("Database")
    try:
        for check in (check_database_connection, check_tables, check_sample_data):
            result = await check()
            print_result(result)
            results.append(result)
    finally:
        await close_db()

    print_section("API")
    async with httpx.AsyncClient(base_url=settings.API_URL, timeout=10.0) as client:
        for check in (check_api, check_endpoints):
            result = await check(client)
            print_result(result)
            results.append(result)

    failed = [r for r in results if r.status == "fail"]
    print_section("Summary")
    print(f"{len(results) - len(failed)}/{len(results)} checks passed")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(asyncio.run(verify_system()))
