"""Habit validation, lookup and per-day status for HabitLink."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from habitcore.dates import normalize, to_date
from habitcore.fileio import read_json, read_yaml
from habitcore.graph import build_dependency_graph, find_cycle
from habitcore.models import VALID_MODES, DayStatus, Habit, HabitsFile
from habitcore.prerequisites import unmet_prerequisites
from habitcore.schedule import is_due
from habitcore.workspace import habits_json_path, habits_path, local_today

logger = logging.getLogger(__name__)


# ── Validation ────────────────────────────────────────────────


def validate_habit(habit: dict[str, Any]) -> list[str]:
    """Validate habit schema and return list of errors (empty if valid)."""
    errors = []
    if "id" not in habit or habit["id"] in (None, ""):
        errors.append("Missing required field: id")
    if not str(habit.get("title") or "").strip():
        errors.append("Missing required field: title")

    # a habit without a rule is valid; it is just never due
    freq = habit.get("freq")
    if isinstance(freq, dict):
        mode = str(freq.get("mode") or "").strip().lower()
        if mode not in VALID_MODES:
            errors.append(f"Invalid frequency mode: {freq.get('mode')!r}")
        elif mode in ("weekly", "custom"):
            days = freq.get("days")
            if not isinstance(days, list):
                errors.append(f"freq.days is required for {mode} habits")
            elif any(isinstance(x, bool) or not isinstance(x, int) or not 0 <= x <= 6 for x in days):
                errors.append("freq.days must be weekday integers 0-6 (Sunday=0)")
    elif freq is not None:
        errors.append("freq must be a mapping")

    if "prerequisites" in habit and not isinstance(habit["prerequisites"], list):
        errors.append("prerequisites must be a list")

    progress = habit.get("progress")
    if progress is not None:
        if not isinstance(progress, list):
            errors.append("progress must be a list")
        else:
            bad = [p for p in progress if normalize(p) is None]
            if bad:
                errors.append(f"Invalid progress dates: {', '.join(map(str, bad))}")

    return errors


def validate_prerequisites(
    candidate_id: Any,
    candidate_prereqs: list[Any],
    habits: list[Habit],
) -> list[str]:
    """Check a proposed prerequisite list before it is stored.

    Returns list of errors; empty means the edit keeps the graph acyclic.
    """
    if candidate_prereqs is not None and not isinstance(candidate_prereqs, (list, tuple, set, frozenset)):
        return ["prerequisites must be a list"]
    node = str(candidate_id)
    prereqs = [str(p) for p in (candidate_prereqs or [])]
    known = {h.id for h in habits or []}
    errors = []

    if node in prereqs:
        errors.append(f"Habit cannot depend on itself: {node}")
    missing = [p for p in prereqs if p not in known and p != node]
    if missing:
        errors.append(f"Unknown prerequisite habits: {', '.join(missing)}")
    dupes = sorted({p for p in prereqs if prereqs.count(p) > 1})
    if dupes:
        errors.append(f"Duplicate prerequisites: {', '.join(dupes)}")

    if node not in prereqs:
        graph = build_dependency_graph(habits, {node: prereqs})
        cycle = find_cycle(graph, through=node)
        if cycle:
            errors.append(f"Prerequisites would create a cycle: {' -> '.join(cycle)}")

    return errors


# ── Lookup ────────────────────────────────────────────────────


def find_habit(habits: list[Habit], habit_id: Any) -> Habit | None:
    """Find a habit by ID; None when no habit has it."""
    key = str(habit_id)
    for h in habits or []:
        if h.id == key:
            return h
    return None


def filter_habits(habits: list[Habit], query: str) -> list[Habit]:
    """Case-insensitive title search. Blank query returns every habit."""
    q = (query or "").strip().lower()
    if not q:
        return list(habits or [])
    return [h for h in habits or [] if q in h.title.lower()]


def day_status(habit: Habit, habits: list[Habit], day: Any = None) -> DayStatus:
    """Due/locked/completed state of *habit* on *day* (default: today)."""
    d = local_today() if day is None else to_date(day)
    if habit is None:
        return DayStatus(day=normalize(d))
    key = normalize(d)
    unmet = unmet_prerequisites(habit, habits, d)
    return DayStatus(
        habit_id=habit.id,
        day=key,
        due=is_due(habit, d),
        locked=bool(unmet),
        completed=habit.is_completed_on(key),
        unmet=unmet,
    )


# ── Snapshot loading ──────────────────────────────────────────


def load_habits(root: Path | None = None) -> HabitsFile:
    """Load the habit snapshot from habits.yaml, or habits.json if absent."""
    path = habits_path(root)
    if path.exists():
        data = read_yaml(path)
    else:
        data = read_json(habits_json_path(root))
    skipped = [h for h in (data.get("habits") or []) if not isinstance(h, dict)]
    if skipped:
        logger.debug("Skipping %d malformed habit entries", len(skipped))
    return HabitsFile.from_dict(data)
