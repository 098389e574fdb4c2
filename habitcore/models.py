"""Typed dataclasses for HabitLink data model.

All models use from_dict/to_dict for JSON/YAML serialization.
camelCase in JSON is mapped to snake_case in Python.
Unknown keys are ignored; missing keys use defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from habitcore.dates import normalize


VALID_MODES = {"daily", "weekly", "custom"}


# ── Habits ────────────────────────────────────────────────────


@dataclass
class FrequencyRule:
    """Recurrence rule. ``days`` holds weekday ints with Sunday=0."""

    mode: str = ""
    days: list[int] | None = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> FrequencyRule | None:
        if not d or not isinstance(d, dict):
            return None
        raw_days = d.get("days")
        days = None
        if isinstance(raw_days, (list, tuple, set)):
            days = [x for x in raw_days if isinstance(x, int) and not isinstance(x, bool)]
        return cls(
            mode=str(d.get("mode") or "").strip().lower(),
            days=days,
        )

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"mode": self.mode}
        if self.days is not None:
            d["days"] = list(self.days)
        return d


@dataclass
class Habit:
    id: str = ""
    title: str = ""
    freq: FrequencyRule | None = None
    prerequisites: list[str] = field(default_factory=list)
    progress: list[str] = field(default_factory=list)  # DateKeys
    # supplied by a backend, carried through as-is
    current_streak: int | None = None
    notes: str = ""

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Habit:
        if not d or not isinstance(d, dict):
            return cls()
        prereqs = d.get("prerequisites")
        progress = d.get("progress", d.get("completedDates"))
        keys = []
        if isinstance(progress, (list, tuple, set)):
            for entry in progress:
                key = normalize(entry)
                if key is not None:
                    keys.append(key)
        streak = d.get("currentStreak", d.get("current_streak"))
        return cls(
            id=str(d.get("id", "")),
            title=str(d.get("title", d.get("name", "")) or ""),
            freq=FrequencyRule.from_dict(d.get("freq")),
            prerequisites=[str(p) for p in prereqs] if isinstance(prereqs, (list, tuple, set)) else [],
            progress=keys,
            current_streak=int(streak) if isinstance(streak, (int, float)) else None,
            notes=str(d.get("notes", "") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "freq": self.freq.to_dict() if self.freq else None,
            "prerequisites": list(self.prerequisites),
            "progress": list(self.progress),
        }
        if self.current_streak is not None:
            d["currentStreak"] = self.current_streak
        if self.notes:
            d["notes"] = self.notes
        return d

    def is_completed_on(self, key: str | None) -> bool:
        return key is not None and key in self.progress


@dataclass
class HabitsFile:
    habits: list[Habit] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> HabitsFile:
        if not d or not isinstance(d, dict):
            return cls()
        habits = [Habit.from_dict(h) for h in (d.get("habits") or []) if isinstance(h, dict)]
        return cls(habits=habits)

    def to_dict(self) -> dict[str, Any]:
        return {"habits": [h.to_dict() for h in self.habits]}


# ── Query results ─────────────────────────────────────────────


@dataclass
class CompletionStats:
    eligible: int = 0
    completed: int = 0
    rate: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "eligible": self.eligible,
            "completed": self.completed,
            "rate": round(self.rate, 3),
        }


@dataclass
class DayStatus:
    """State of one habit on one day, as shown in a habit list row."""

    habit_id: str = ""
    day: str | None = None
    due: bool = False
    locked: bool = False
    completed: bool = False
    unmet: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "habitId": self.habit_id,
            "day": self.day,
            "due": self.due,
            "locked": self.locked,
            "completed": self.completed,
            "unmet": list(self.unmet),
        }


@dataclass
class ComparisonRow:
    habit_id: str = ""
    title: str = ""
    completion_pct: int = 0
    current_streak: int = 0
    consistency: str = "Low"
    stats: CompletionStats = field(default_factory=CompletionStats)

    def to_dict(self) -> dict[str, Any]:
        return {
            "habitId": self.habit_id,
            "title": self.title,
            "completionPct": self.completion_pct,
            "currentStreak": self.current_streak,
            "consistency": self.consistency,
            "stats": self.stats.to_dict(),
        }
