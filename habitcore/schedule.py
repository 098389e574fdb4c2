"""Recurrence rules: is a habit scheduled on a given day?"""

from __future__ import annotations

import logging
from typing import Any

from habitcore.dates import to_date, weekday_index
from habitcore.models import Habit

logger = logging.getLogger(__name__)


def is_due(habit: Habit | None, day: Any) -> bool:
    """Decide whether *habit* is due on *day*.

    daily:          always due.
    weekly/custom:  due when the weekday (Sunday=0) is listed in freq.days.
    anything else:  not due. Missing habit, rule or date also yield False.
    """
    if habit is None or habit.freq is None:
        return False
    d = to_date(day)
    if d is None:
        return False

    mode = (habit.freq.mode or "").strip().lower()
    if mode == "daily":
        return True
    if mode in ("weekly", "custom"):
        if habit.freq.days is None:
            return False
        return weekday_index(d) in habit.freq.days

    logger.debug("Habit %s has unknown frequency mode %r", habit.id, mode)
    return False
