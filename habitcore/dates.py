"""Calendar-day keys and weekday helpers for HabitLink.

A DateKey is the ``YYYY-MM-DD`` string that identifies one calendar day.
All progress and eligibility bookkeeping is done on these keys.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, timedelta, tzinfo
from typing import Any

logger = logging.getLogger(__name__)

_DATE_KEY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def to_date(value: Any, tz: tzinfo | None = None) -> date | None:
    """Coerce a date, datetime or ISO-like string to a calendar day.

    Aware datetimes are converted to *tz* first when one is given.
    Returns None for anything that does not name a real calendar day.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if tz is not None and value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        # '2025-12-01T08:00:00Z' or '2025-12-01 08:00' -> '2025-12-01'
        prefix = re.split(r"[T ]", text, maxsplit=1)[0]
        if not _DATE_KEY_RE.match(prefix):
            logger.debug("Unparseable date string: %r", value)
            return None
        try:
            return date.fromisoformat(prefix)
        except ValueError:
            logger.debug("Invalid calendar day: %r", value)
            return None
    logger.debug("Unsupported date value of type %s", type(value).__name__)
    return None


def normalize(value: Any, tz: tzinfo | None = None) -> str | None:
    """Return the ``YYYY-MM-DD`` key for *value*, or None if unparseable."""
    day = to_date(value, tz)
    return day.isoformat() if day is not None else None


def weekday_index(day: date) -> int:
    """Weekday number with Sunday=0, Monday=1, ... Saturday=6."""
    return (day.weekday() + 1) % 7


def recent_days(today: date, count: int) -> list[date]:
    """The *count* most recent calendar days ending at *today*, newest first."""
    return [today - timedelta(days=i) for i in range(max(0, count))]
