"""Tests for habitcore/schedule.py — due-day rules."""

from datetime import date, timedelta

from habitcore.dates import weekday_index
from habitcore.models import FrequencyRule, Habit
from habitcore.schedule import is_due

START = date(2026, 2, 1)
FORTNIGHT = [START + timedelta(days=i) for i in range(14)]


def test_daily_is_due_every_day():
    habit = Habit(id="h", freq=FrequencyRule(mode="daily"))
    assert all(is_due(habit, d) for d in FORTNIGHT)


def test_weekly_due_only_on_listed_weekdays():
    habit = Habit(id="h", freq=FrequencyRule(mode="weekly", days=[1, 3]))
    for d in FORTNIGHT:
        assert is_due(habit, d) is (weekday_index(d) in {1, 3})


def test_custom_behaves_like_weekly():
    habit = Habit(id="h", freq=FrequencyRule(mode="custom", days=[0, 6]))
    assert is_due(habit, date(2026, 2, 8)) is True  # Sunday
    assert is_due(habit, date(2026, 2, 14)) is True  # Saturday
    assert is_due(habit, date(2026, 2, 11)) is False


def test_weekly_without_days_is_never_due():
    habit = Habit(id="h", freq=FrequencyRule(mode="weekly", days=None))
    assert not any(is_due(habit, d) for d in FORTNIGHT)


def test_weekly_with_empty_days_is_never_due():
    habit = Habit(id="h", freq=FrequencyRule(mode="weekly", days=[]))
    assert not any(is_due(habit, d) for d in FORTNIGHT)


def test_unknown_or_missing_rule_fails_closed():
    assert is_due(Habit(id="h", freq=FrequencyRule(mode="monthly")), START) is False
    assert is_due(Habit(id="h", freq=FrequencyRule(mode="")), START) is False
    assert is_due(Habit(id="h", freq=None), START) is False
    assert is_due(None, START) is False


def test_accepts_date_strings():
    habit = Habit(id="h", freq=FrequencyRule(mode="weekly", days=[3]))
    assert is_due(habit, "2026-02-11") is True
    assert is_due(habit, "2026-02-11T22:00:00") is True
    assert is_due(habit, "not a date") is False


def test_mode_is_case_insensitive_when_loaded():
    habit = Habit.from_dict({"id": "h", "freq": {"mode": "Daily"}})
    assert is_due(habit, START) is True


def test_mode_is_case_insensitive_on_direct_construction():
    assert is_due(Habit(id="h", freq=FrequencyRule(mode="Daily")), START) is True
    habit = Habit(id="h", freq=FrequencyRule(mode=" WEEKLY ", days=[0]))
    assert is_due(habit, date(2026, 2, 8)) is True  # Sunday
    assert is_due(habit, date(2026, 2, 9)) is False
