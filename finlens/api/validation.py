"""
Path and query validation shared by the routes
"""

import re
from datetime import date
from typing import Optional

from fastapi import HTTPException

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def require_value(value: str, label: str) -> str:
    if not value or not value.strip():
        raise HTTPException(status_code=400, detail=f"{label} is required")
    return value.strip()


def parse_date_param(value: Optional[str]) -> Optional[date]:
    """YYYY-MM-DD, and a real calendar date"""
    if not value:
        return None
    if not DATE_PATTERN.match(value):
        raise HTTPException(status_code=400, detail="Date must be in YYYY-MM-DD format")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Date '{value}' is not a valid calendar date")


def date_suffix(target_date: Optional[date]) -> str:
    return f" on date {target_date.isoformat()}" if target_date else ""
