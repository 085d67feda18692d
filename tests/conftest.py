"""Shared test fixtures for DayLog tests."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest
import yaml


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a temporary data root with a profile and an entry export."""
    root = tmp_path / "daylog"
    root.mkdir(parents=True)

    # Profile
    profile = {
        "timezone": "Asia/Seoul",
        "sleep": {
            "target_hours": 7.5,
            "sleep_window": "23:00-00:30",
            "wake_window": "06:00-07:30",
        },
    }
    (root / "profile.yaml").write_text(
        yaml.dump(profile, default_flow_style=False), encoding="utf-8"
    )

    # Entries
    entries = [
        {"id": "e1", "content": "잘 자 #sleep", "timestamp": "2026-01-01T23:10:00+09:00"},
        {"id": "e2", "content": "good morning #wake", "timestamp": "2026-01-02T07:00:00+09:00"},
        {"id": "e3", "content": "coffee #생각", "timestamp": "2026-01-02T09:15:00+09:00"},
        {"id": "e4", "content": "bed #sleep", "tags": ["#sleep"], "timestamp": "2026-01-03T00:20:00+09:00"},
        {"id": "e5", "content": "up #wake", "timestamp": "2026-01-03T07:30:00+09:00"},
        {"id": "bad", "content": "broken #wake", "timestamp": "not a time"},
    ]
    (root / "entries.json").write_text(
        json.dumps(entries, indent=2, ensure_ascii=False), encoding="utf-8"
    )

    # Set env var
    os.environ["DAYLOG_ROOT"] = str(root)
    yield root
    # Cleanup
    if "DAYLOG_ROOT" in os.environ:
        del os.environ["DAYLOG_ROOT"]
