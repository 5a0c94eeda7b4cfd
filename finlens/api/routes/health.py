from fastapi import APIRouter

from finlens import __version__
from finlens.infrastructure.db import database

router = APIRouter()


@router.get("/health")
async def health():
    db_connected = await database.check_connection()
    return {
        "status": "healthy",
        "service": "FinLens API",
        "version": __version__,
        "database": "connected" if db_connected else "disconnected",
    }
