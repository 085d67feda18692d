"""Data root, profile, timezone and logical-today helpers for DayLog."""

from __future__ import annotations

import logging
import os
from datetime import date
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from daylog.dayclock import logical_date
from daylog.fileio import read_json_list, read_yaml
from daylog.models import LogEntry, Profile

logger = logging.getLogger(__name__)


def workspace_root() -> Path:
    """Get the data root (holds profile.yaml and entries.json)."""
    return Path(
        os.environ.get("DAYLOG_ROOT", str(Path.home() / "daylog"))
    ).expanduser().resolve()


def profile_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "profile.yaml"


def entries_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "entries.json"


def load_profile(root: Path | None = None) -> Profile:
    """Load profile.yaml; a missing file gives the default targets."""
    return Profile.from_dict(read_yaml(profile_path(root)))


def get_user_timezone(root: Path | None = None) -> ZoneInfo:
    """Get user's timezone from profile.yaml, defaulting to UTC."""
    name = load_profile(root).timezone
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Unknown timezone {name!r} in profile, using UTC")
        return ZoneInfo("UTC")


def today_logical(root: Path | None = None) -> date:
    """Today's logical day (rolls over at 05:00) in the user's timezone."""
    return logical_date(tz=get_user_timezone(root))


def today_str(root: Path | None = None) -> str:
    return today_logical(root).isoformat()


def load_entries(root: Path | None = None) -> list[LogEntry]:
    """Read exported journal entries; entries with bad timestamps are skipped."""
    entries = []
    for i, raw in enumerate(read_json_list(entries_path(root))):
        try:
            entries.append(LogEntry.from_dict(raw))
        except ValueError as e:
            logger.warning(f"Skipping entry {raw.get('id', i)!r}: {e}")
    return entries
