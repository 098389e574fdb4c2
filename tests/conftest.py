"""Shared test fixtures for HabitLink tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
import yaml


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a temporary workspace with a profile and a habit snapshot."""
    root = tmp_path / "workspace"
    root.mkdir(parents=True)

    profile = {"timezone": "UTC"}
    (root / "profile.yaml").write_text(
        yaml.dump(profile, default_flow_style=False), encoding="utf-8"
    )

    habits = {
        "habits": [
            {
                "id": "wake",
                "title": "Wake up at 7",
                "freq": {"mode": "daily"},
                "prerequisites": [],
                "progress": ["2026-02-10", "2026-02-11"],
            },
            {
                "id": "run",
                "title": "Morning run",
                "freq": {"mode": "weekly", "days": [1, 3, 5]},
                "prerequisites": ["wake"],
                "progress": ["2026-02-11T07:45:00Z"],
                "currentStreak": 4,
            },
            {
                "id": 3,
                "name": "Read 10 pages",
                "freq": {"mode": "custom", "days": [0, 6]},
                "completedDates": ["2026-02-08"],
            },
        ],
    }
    (root / "habits.yaml").write_text(
        yaml.dump(habits, default_flow_style=False), encoding="utf-8"
    )

    os.environ["HABITS_ROOT"] = str(root)
    yield root
    if "HABITS_ROOT" in os.environ:
        del os.environ["HABITS_ROOT"]
