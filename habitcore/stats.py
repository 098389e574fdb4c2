"""Completion statistics for HabitLink.

Only eligible days count: a day is eligible when the habit is due and its
prerequisites were met that day. Among eligible days, a day is completed
when its DateKey is in the habit's progress.
"""

from __future__ import annotations

import math
from datetime import date
from typing import Any, Iterable

from habitcore.dates import recent_days, to_date
from habitcore.models import CompletionStats, ComparisonRow, Habit
from habitcore.prerequisites import is_prerequisites_met
from habitcore.schedule import is_due
from habitcore.workspace import local_today

DAYS_PER_WEEK = 7


def _resolve_today(today: Any) -> date | None:
    if today is None:
        return local_today()
    return to_date(today)


def _is_eligible(habit: Habit, habits: list[Habit], day: date) -> bool:
    return is_due(habit, day) and is_prerequisites_met(habit, habits, day)


def _tally(habit: Habit, habits: list[Habit], days: Iterable[date]) -> CompletionStats:
    eligible = 0
    completed = 0
    for d in days:
        if not _is_eligible(habit, habits, d):
            continue
        eligible += 1
        if habit.is_completed_on(d.isoformat()):
            completed += 1
    rate = completed / eligible if eligible else 0.0
    return CompletionStats(eligible=eligible, completed=completed, rate=rate)


def completion_rate(
    habit: Habit | None,
    habits: list[Habit],
    days_back: int = 30,
    today: Any = None,
) -> CompletionStats:
    """Eligible/completed counts over the *days_back* days ending today (inclusive)."""
    end = _resolve_today(today)
    if habit is None or end is None or days_back <= 0:
        return CompletionStats()
    return _tally(habit, habits or [], recent_days(end, days_back))


def weekly_series(
    habit: Habit | None,
    habits: list[Habit],
    weeks: int = 4,
    today: Any = None,
) -> list[float]:
    """Completion rate per 7-day bucket over the last *weeks* weeks.

    The newest bucket is the 7 days ending today. Returned oldest first.
    """
    if weeks <= 0:
        return []
    end = _resolve_today(today)
    if habit is None or end is None:
        return [0.0] * weeks

    days = recent_days(end, weeks * DAYS_PER_WEEK)
    series = []
    for w in range(weeks):
        bucket = days[w * DAYS_PER_WEEK:(w + 1) * DAYS_PER_WEEK]
        series.append(_tally(habit, habits or [], bucket).rate)
    # scanned newest -> oldest
    series.reverse()
    return series


def current_streak(
    habit: Habit | None,
    habits: list[Habit],
    today: Any = None,
) -> int:
    """Consecutive completed eligible days, counting back from today.

    Days that are not eligible neither extend nor break the streak. Today
    is still open, so an eligible but unfinished today is skipped. The walk
    stops at the earliest day in progress, so the streak is never capped.
    """
    end = _resolve_today(today)
    if habit is None or end is None:
        return 0
    done_days = [d for d in (to_date(k) for k in habit.progress) if d is not None]
    if not done_days:
        return 0
    earliest = min(done_days)
    streak = 0
    for i, d in enumerate(recent_days(end, (end - earliest).days + 1)):
        if not _is_eligible(habit, habits or [], d):
            continue
        if habit.is_completed_on(d.isoformat()):
            streak += 1
        elif i == 0:
            continue
        else:
            break
    return streak


def consistency_label(rate: float) -> str:
    if rate >= 0.8:
        return "High"
    if rate >= 0.5:
        return "Medium"
    return "Low"


def _percent(rate: float) -> int:
    # half-up, so 0.125 -> 13 rather than banker's 12
    return int(math.floor(rate * 100 + 0.5))


def compare_habits(
    habits: list[Habit],
    selected_ids: Iterable[Any],
    days_back: int = 30,
    today: Any = None,
) -> list[ComparisonRow]:
    """Side-by-side rows for the selected habits, in collection order.

    A streak supplied with the habit record wins over the computed one.
    """
    selected = {str(s) for s in (selected_ids or [])}
    end = _resolve_today(today)
    if end is None:
        return []
    rows = []
    for habit in habits or []:
        if habit.id not in selected:
            continue
        stats = completion_rate(habit, habits, days_back, end)
        streak = habit.current_streak
        if streak is None:
            streak = current_streak(habit, habits, end)
        rows.append(ComparisonRow(
            habit_id=habit.id,
            title=habit.title,
            completion_pct=_percent(stats.rate),
            current_streak=streak,
            consistency=consistency_label(stats.rate),
            stats=stats,
        ))
    return rows
