"""
Shared date helpers.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Optional


# date.fromisoformat also takes basic and week forms on newer Pythons.
_CALENDAR_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)


def parse_build_date(value: Optional[str]) -> Optional[date]:
    """Parse an ISO 8601 calendar date (``YYYY-MM-DD``).

    Returns None for missing or malformed values so callers can fall back.
    """
    if not value:
        return None
    value = value.strip()
    if not _CALENDAR_DATE.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None
