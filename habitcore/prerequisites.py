"""Same-day prerequisite gating between habits.

A habit with prerequisites is locked on a day until every prerequisite
habit has that day's DateKey in its progress.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from habitcore.dates import normalize
from habitcore.models import Habit

logger = logging.getLogger(__name__)


def _lookup(habits: Iterable[Habit], habit_id: str) -> Habit | None:
    for h in habits:
        if h.id == habit_id:
            return h
    return None


def is_prerequisites_met(habit: Habit | None, habits: list[Habit], day: Any) -> bool:
    """True when every prerequisite of *habit* was completed on *day*.

    No prerequisites means unconstrained. A prerequisite id that matches
    no habit counts as unmet.
    """
    if habit is None or not habit.prerequisites:
        return True
    key = normalize(day)
    if key is None:
        return False
    for pid in habit.prerequisites:
        prereq = _lookup(habits or [], pid)
        if prereq is None:
            logger.debug("Habit %s depends on missing habit %s", habit.id, pid)
            return False
        if not prereq.is_completed_on(key):
            return False
    return True


def unmet_prerequisites(habit: Habit | None, habits: list[Habit], day: Any) -> list[str]:
    """Labels of the prerequisites blocking *habit* on *day*.

    Existing habits are labelled by title (id when untitled), dangling
    references by their raw id.
    """
    if habit is None or not habit.prerequisites:
        return []
    key = normalize(day)
    unmet = []
    for pid in habit.prerequisites:
        prereq = _lookup(habits or [], pid)
        if prereq is None:
            unmet.append(pid)
        elif not prereq.is_completed_on(key):
            unmet.append(prereq.title or prereq.id)
    return unmet
