"""
Utility helpers shared across routers/services.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Optional

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int(value: Any) -> Optional[int]:
    """
    Read the leading integer of a path parameter.

    "12" -> 12, "12abc" -> 12, "abc" -> None. Callers treat None as an id
    that matches nothing.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value or ""))
    if not match:
        return None
    return int(match.group(1))


def local_date_string(now: Optional[datetime] = None) -> str:
    """Server-local date as M/D/YYYY, without zero padding."""
    current = now or datetime.now()
    return f"{current.month}/{current.day}/{current.year}"


def record_id(record: Any) -> Any:
    """Return the ``id`` of a stored record, or None for malformed entries."""
    if isinstance(record, dict):
        return record.get("id")
    return None
