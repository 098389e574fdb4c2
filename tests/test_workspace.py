"""Tests for habitcore/workspace.py and habitcore/fileio.py."""

from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

from habitcore.fileio import read_json, read_text, read_yaml
from habitcore.workspace import (
    get_user_timezone,
    habits_path,
    local_today,
    profile_path,
    today_str,
    workspace_root,
)


def test_workspace_root_from_env(workspace):
    assert workspace_root() == workspace.resolve()
    assert habits_path() == workspace.resolve() / "habits.yaml"
    assert profile_path(workspace) == workspace / "profile.yaml"


def test_timezone_from_profile(workspace):
    (workspace / "profile.yaml").write_text("timezone: Asia/Tokyo\n", encoding="utf-8")
    assert get_user_timezone(workspace) == ZoneInfo("Asia/Tokyo")
    assert local_today(workspace) == datetime.now(ZoneInfo("Asia/Tokyo")).date()


def test_timezone_defaults_to_utc(tmp_path: Path):
    assert get_user_timezone(tmp_path) == ZoneInfo("UTC")


def test_invalid_timezone_falls_back_to_utc(tmp_path: Path):
    (tmp_path / "profile.yaml").write_text("timezone: Mars/Olympus\n", encoding="utf-8")
    assert get_user_timezone(tmp_path) == ZoneInfo("UTC")


def test_today_str_format(workspace):
    s = today_str()
    assert len(s) == 10
    assert s == datetime.now(ZoneInfo("UTC")).date().isoformat()


def test_readers_tolerate_missing_and_empty_files(tmp_path: Path):
    missing = tmp_path / "nope.yaml"
    assert read_text(missing) == ""
    assert read_yaml(missing) == {}
    assert read_json(tmp_path / "nope.json") == {}
    empty = tmp_path / "empty.yaml"
    empty.write_text("   \n", encoding="utf-8")
    assert read_yaml(empty) == {}


def test_readers_return_empty_dict_for_non_mapping(tmp_path: Path):
    (tmp_path / "list.yaml").write_text("- a\n- b\n", encoding="utf-8")
    (tmp_path / "list.json").write_text("[1, 2]", encoding="utf-8")
    assert read_yaml(tmp_path / "list.yaml") == {}
    assert read_json(tmp_path / "list.json") == {}
