from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Optional

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@(.+)$")
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def parse_date(date_str: Any) -> Optional[date]:
    """Parses zero-padded YYYY-MM-DD. Returns None for anything else."""
    # datetime subclasses date; stored ranges hold plain dates
    if isinstance(date_str, datetime):
        return date_str.date()
    if isinstance(date_str, date):
        return date_str
    if not isinstance(date_str, str) or not DATE_PATTERN.fullmatch(date_str):
        return None
    try:
        return date.fromisoformat(date_str)
    except ValueError:
        return None


def validate_email(email: str) -> bool:
    return bool(email) and EMAIL_PATTERN.match(email) is not None


def normalize_reservation_id(reservation_id: Any) -> str:
    return str(reservation_id).strip().upper()
