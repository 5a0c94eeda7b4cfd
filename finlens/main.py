"""
FastAPI Main Application
Read-only market data and strength metrics
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from finlens import __version__
from finlens.api.errors import register_exception_handlers
from finlens.api.routes import calculation, health, market
from finlens.config import settings
from finlens.core.logging import setup_logging
from finlens.infrastructure.db.database import close_db, init_db

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager
    Opens the connection pool on startup and disposes it on shutdown
    """
    logger.info("=" * 60)
    logger.info("🚀 Starting FinLens API")
    logger.info("=" * 60)

    await init_db()
    logger.info("✅ Database reachable")
    logger.info(f"   ✅ API Server: http://{settings.API_HOST}:{settings.API_PORT}")
    logger.info(f"   ✅ API Docs: http://{settings.API_HOST}:{settings.API_PORT}/docs")

    yield

    logger.info("📊 Closing database connections...")
    await close_db()
    logger.info("👋 FinLens API shutdown complete")


def create_app(use_lifespan: bool = True) -> FastAPI:
    app = FastAPI(
        title="FinLens Market Data API",
        description="Stock price history and layer/sector strength metrics",
        version=__version__,
        lifespan=lifespan if use_lifespan else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/")
    async def root():
        return {
            "message": "FinLens Market Data API",
            "version": __version__,
            "docs": "/docs",
        }

    app.include_router(health.router, tags=["Health"])
    app.include_router(market.router, prefix="/api/v1/market", tags=["Market Data"])
    app.include_router(calculation.router, prefix="/api/v1/calculation", tags=["Calculation"])
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("finlens.main:app", host=settings.API_HOST, port=settings.API_PORT, reload=settings.DEBUG)
