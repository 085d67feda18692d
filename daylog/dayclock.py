"""Logical-day and minute-of-day helpers shared by the sleep and todo engines.

A logical day starts at 05:00 local time, so anything logged before 5 AM
belongs to the previous calendar day. Sleep times are averaged on a
"folded" scale where clock times before 06:00 count as minutes past the
preceding midnight (+1440), which keeps 23:30 and 00:45 next to each other.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo

DAY_CUTOFF_HOUR = 5
FOLD_HOUR = 6
MINUTES_PER_DAY = 1440


def round_half_up(x: float, ndigits: int = 0) -> float:
    """Round halves away from zero for positives (JS Math.round behaviour)."""
    m = 10 ** ndigits
    return math.floor(x * m + 0.5) / m


def to_local(dt: datetime, tz: ZoneInfo | None = None) -> datetime:
    """Express *dt* in *tz*.

    Aware datetimes are converted. Naive datetimes are local wall-clock
    time already, so *tz* is attached without shifting the clock.
    """
    if tz is None:
        return dt
    if dt.tzinfo is None:
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


def logical_date(dt: datetime | None = None, tz: ZoneInfo | None = None) -> date:
    """Return the logical day of *dt* (defaults to now)."""
    if dt is None:
        dt = datetime.now(tz)
    dt = to_local(dt, tz)
    if dt.hour < DAY_CUTOFF_HOUR:
        return dt.date() - timedelta(days=1)
    return dt.date()


def logical_day_str(dt: datetime | None = None, tz: ZoneInfo | None = None) -> str:
    return logical_date(dt, tz).isoformat()


def logical_start_of_day(dt: datetime | None = None, tz: ZoneInfo | None = None) -> datetime:
    """Midnight of the logical day, keeping the tzinfo of *dt*."""
    if dt is None:
        dt = datetime.now(tz)
    dt = to_local(dt, tz)
    return datetime.combine(logical_date(dt), time(0, 0), tzinfo=dt.tzinfo)


def clock_minutes(t: datetime | time) -> int:
    return t.hour * 60 + t.minute


def folded_minutes(t: datetime | time) -> int:
    """Minute-of-day with the small hours folded onto the previous night."""
    m = clock_minutes(t)
    if t.hour < FOLD_HOUR:
        return m + MINUTES_PER_DAY
    return m


def minutes_to_clock(minutes: float) -> str:
    """Format a (possibly folded) minute count as 'HH:mm'."""
    total = int(round_half_up(minutes))
    if total >= MINUTES_PER_DAY:
        total -= MINUTES_PER_DAY
    total %= MINUTES_PER_DAY
    return f"{total // 60:02d}:{total % 60:02d}"
