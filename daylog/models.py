"""Typed dataclasses for the DayLog data model.

Models crossing the collaborator boundary use from_dict/to_dict.
camelCase in JSON is mapped to snake_case in Python.
Unknown keys are ignored; missing keys use defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time
from typing import Any

from daylog.dayclock import folded_minutes
from daylog.tags import determine_category, extract_tags


def _parse_instant(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if not value:
        raise ValueError("Missing timestamp")
    s = str(value).strip()
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    return datetime.fromisoformat(s)


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


# ── Log entries ───────────────────────────────────────────────


@dataclass
class LogEntry:
    """A timestamped journal line as read from the entry store."""

    id: str = ""
    content: str = ""
    tags: list[str] = field(default_factory=list)
    category: str = "action"  # action, thought, chore
    timestamp: datetime | None = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> LogEntry:
        content = str(d.get("content", ""))
        tags = d.get("tags")
        if tags is None:
            tags = extract_tags(content)
        category = d.get("category") or determine_category(tags)
        return cls(
            id=str(d.get("id", "")),
            content=content,
            tags=list(tags),
            category=str(category),
            timestamp=_parse_instant(d.get("timestamp")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "content": self.content,
            "tags": list(self.tags),
            "category": self.category,
            "timestamp": _iso(self.timestamp),
        }

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags


# ── Sleep ─────────────────────────────────────────────────────


@dataclass
class SleepRecord:
    """One reconstructed night. Either instant may be missing."""

    date: str = ""  # YYYY-MM-DD, logical day
    sleep_time: datetime | None = None
    wake_time: datetime | None = None
    duration_minutes: int | None = None

    def is_complete(self) -> bool:
        return self.sleep_time is not None and self.wake_time is not None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"date": self.date}
        if self.sleep_time is not None:
            d["sleepTime"] = _iso(self.sleep_time)
        if self.wake_time is not None:
            d["wakeTime"] = _iso(self.wake_time)
        if self.duration_minutes is not None:
            d["duration"] = self.duration_minutes
        return d


@dataclass
class SleepScoreDetails:
    sleep_consistency: float | None = None
    wake_consistency: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "sleepConsistency": self.sleep_consistency,
            "wakeConsistency": self.wake_consistency,
        }


@dataclass
class SleepScore:
    total: int = 0
    duration_score: int = 0
    sleep_regularity: int = 0
    wake_regularity: int = 0
    consistency_score: int = 0
    details: SleepScoreDetails = field(default_factory=SleepScoreDetails)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "durationScore": self.duration_score,
            "sleepRegularity": self.sleep_regularity,
            "wakeRegularity": self.wake_regularity,
            "consistencyScore": self.consistency_score,
            "details": self.details.to_dict(),
        }


@dataclass
class WeeklyStreak:
    sleep_streak: int = 0
    wake_streak: int = 0
    sleep_streak_met: bool = False
    wake_streak_met: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "sleepStreak": self.sleep_streak,
            "wakeStreak": self.wake_streak,
            "sleepStreakMet": self.sleep_streak_met,
            "wakeStreakMet": self.wake_streak_met,
        }


@dataclass
class SleepSummary:
    """Averages shown in the recent-sleep panel."""

    avg_duration_hours: float | None = None
    avg_sleep_time: str | None = None
    avg_wake_time: str | None = None
    record_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "avgDuration": self.avg_duration_hours,
            "avgSleepTime": self.avg_sleep_time,
            "avgWakeTime": self.avg_wake_time,
            "recordCount": self.record_count,
        }


# ── Todos ─────────────────────────────────────────────────────


QUADRANTS = ("q1", "q2", "q3", "q4", "inbox")


@dataclass
class TodoItem:
    checked: bool = False
    text: str = ""
    indent: int = 0
    line_index: int = 0
    quadrant: str = "inbox"  # q1..q4, inbox
    weight: int = 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "checked": self.checked,
            "text": self.text,
            "indent": self.indent,
            "lineIndex": self.line_index,
            "quadrant": self.quadrant,
            "weight": self.weight,
        }


@dataclass
class TodoNode:
    item: TodoItem
    children: list[TodoNode] = field(default_factory=list)
    weight: float = 1


# ── Levels ────────────────────────────────────────────────────


@dataclass
class LevelInfo:
    level: int = 1
    title: str = ""


@dataclass
class RealLevelInfo:
    level: int = 1
    title: str = ""
    next_level_at: int = 0


# ── Profile ───────────────────────────────────────────────────


@dataclass
class TimeWindow:
    """A clock-time window that may cross midnight (e.g. 23:00-00:30)."""

    start: time
    end: time

    @classmethod
    def from_str(cls, s: str) -> TimeWindow:
        """Parse '23:00-00:30' or '23:00\u201300:30'."""
        s = s.replace("\u2013", "-").replace("\u2014", "-")
        parts = s.split("-")
        if len(parts) != 2:
            raise ValueError(f"Invalid time window: {s!r}")
        return cls(
            start=time.fromisoformat(parts[0].strip()),
            end=time.fromisoformat(parts[1].strip()),
        )

    def to_str(self) -> str:
        return f"{self.start.strftime('%H:%M')}-{self.end.strftime('%H:%M')}"


DEFAULT_SLEEP_WINDOW = "23:00-00:30"
DEFAULT_WAKE_WINDOW = "06:00-07:30"


def _sleep_window(s: str) -> TimeWindow:
    """Parse a bedtime window; it must not cross the 06:00 fold."""
    window = TimeWindow.from_str(s)
    if folded_minutes(window.start) > folded_minutes(window.end):
        raise ValueError(f"Sleep window crosses 06:00: {s!r}")
    return window


@dataclass
class Profile:
    timezone: str = "UTC"
    target_sleep_hours: float = 7.5
    sleep_window: TimeWindow = field(default_factory=lambda: TimeWindow.from_str(DEFAULT_SLEEP_WINDOW))
    wake_window: TimeWindow = field(default_factory=lambda: TimeWindow.from_str(DEFAULT_WAKE_WINDOW))

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Profile:
        if not d or not isinstance(d, dict):
            return cls()
        sleep = d.get("sleep") or {}
        if not isinstance(sleep, dict):
            sleep = {}
        return cls(
            timezone=str(d.get("timezone", "UTC")),
            target_sleep_hours=float(sleep.get("target_hours", 7.5)),
            sleep_window=_sleep_window(sleep.get("sleep_window", DEFAULT_SLEEP_WINDOW)),
            wake_window=TimeWindow.from_str(sleep.get("wake_window", DEFAULT_WAKE_WINDOW)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "timezone": self.timezone,
            "sleep": {
                "target_hours": self.target_sleep_hours,
                "sleep_window": self.sleep_window.to_str(),
                "wake_window": self.wake_window.to_str(),
            },
        }
