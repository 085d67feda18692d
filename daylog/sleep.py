"""Sleep session reconstruction and scoring.

Users log "#sleep" and "#wake" as independent journal entries. This module
pairs them into nights, averages recent nights, and scores a week out of 100.
"""

from __future__ import annotations

import logging
import statistics
from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from daylog.dayclock import (
    MINUTES_PER_DAY,
    clock_minutes,
    folded_minutes,
    logical_date,
    logical_day_str,
    minutes_to_clock,
    round_half_up,
    to_local,
)
from daylog.models import (
    LogEntry,
    Profile,
    SleepRecord,
    SleepScore,
    SleepScoreDetails,
    SleepSummary,
    TimeWindow,
    WeeklyStreak,
)

logger = logging.getLogger(__name__)

SLEEP_TAG = "#sleep"
WAKE_TAG = "#wake"
MAX_SESSION = timedelta(hours=24)

DURATION_MAX = 40
DURATION_POINTS_PER_HOUR = 8
REGULARITY_MAX = 15
REGULARITY_MINUTES_PER_POINT = 10
CONSISTENCY_MAX = 15  # per half, sleep and wake
CONSISTENCY_FULL_SD = 15
CONSISTENCY_ZERO_SD = 90
STREAK_LOOKBACK = 5
STREAK_TARGET = 5


# ── Reconstruction ────────────────────────────────────────────


def extract_sleep_records(entries: list[LogEntry], tz: ZoneInfo | None = None) -> list[SleepRecord]:
    """Pair each #wake with the nearest earlier unused #sleep under 24h.

    Wakes are processed in time order, so an ambiguous sleep goes to the
    first wake that can claim it. Leftover sleeps become sleep-only records.
    Returned newest day first.
    """
    stamped = [(to_local(e.timestamp, tz), e) for e in entries if e.timestamp is not None]
    if tz is None and len({ts.tzinfo is None for ts, _ in stamped}) > 1:
        # Mixed naive and aware input: compare everything as logged wall-clock time.
        stamped = [(ts.replace(tzinfo=None), e) for ts, e in stamped]
    stamped.sort(key=lambda pair: pair[0])
    sleeps = [ts for ts, e in stamped if e.has_tag(SLEEP_TAG)]
    wakes = [ts for ts, e in stamped if e.has_tag(WAKE_TAG)]

    records: list[SleepRecord] = []
    used: set[int] = set()

    for wake in wakes:
        best_idx = -1
        best_gap: timedelta | None = None
        for i, slept in enumerate(sleeps):
            if i in used or slept >= wake:
                continue
            gap = wake - slept
            if gap < MAX_SESSION and (best_gap is None or gap < best_gap):
                best_gap = gap
                best_idx = i

        record = SleepRecord(date=logical_day_str(wake), wake_time=wake)
        if best_gap is not None:
            record.sleep_time = sleeps[best_idx]
            record.duration_minutes = int(round_half_up(best_gap.total_seconds() / 60))
            used.add(best_idx)
        else:
            logger.debug(f"No sleep entry matches wake at {wake.isoformat()}")
        records.append(record)

    for i, slept in enumerate(sleeps):
        if i in used:
            continue
        records.append(SleepRecord(date=logical_day_str(slept), sleep_time=slept))

    logger.debug(
        f"Reconstructed {len(records)} sleep records "
        f"from {len(sleeps)} sleep / {len(wakes)} wake entries"
    )
    return sorted(records, key=lambda r: r.date, reverse=True)


# ── Averages ──────────────────────────────────────────────────


def get_recent_records(
    records: list[SleepRecord],
    days: int,
    today: date | None = None,
    tz: ZoneInfo | None = None,
) -> list[SleepRecord]:
    """Keep records dated on or after *today* minus *days*.

    *today* defaults to the current logical day in *tz*.
    """
    if today is None:
        today = logical_date(tz=tz)
    cutoff = (today - timedelta(days=days)).isoformat()
    return [r for r in records if r.date >= cutoff]


def get_average_duration(records: list[SleepRecord]) -> float | None:
    """Mean session length in hours, one decimal."""
    durations = [r.duration_minutes for r in records if r.duration_minutes is not None]
    if not durations:
        return None
    avg_minutes = sum(durations) / len(durations)
    return round_half_up(avg_minutes / 6) / 10


def _mean_sleep_minutes(records: list[SleepRecord]) -> float | None:
    samples = [folded_minutes(r.sleep_time) for r in records if r.sleep_time is not None]
    if not samples:
        return None
    return sum(samples) / len(samples)


def _mean_wake_minutes(records: list[SleepRecord]) -> float | None:
    samples = [clock_minutes(r.wake_time) for r in records if r.wake_time is not None]
    if not samples:
        return None
    return sum(samples) / len(samples)


def get_average_sleep_time(records: list[SleepRecord]) -> str | None:
    avg = _mean_sleep_minutes(records)
    return minutes_to_clock(avg) if avg is not None else None


def get_average_wake_time(records: list[SleepRecord]) -> str | None:
    avg = _mean_wake_minutes(records)
    return minutes_to_clock(avg) if avg is not None else None


def summarize_recent_sleep(
    records: list[SleepRecord],
    days: int = 7,
    today: date | None = None,
    tz: ZoneInfo | None = None,
) -> SleepSummary:
    recent = get_recent_records(records, days, today, tz)
    return SleepSummary(
        avg_duration_hours=get_average_duration(recent),
        avg_sleep_time=get_average_sleep_time(recent),
        avg_wake_time=get_average_wake_time(recent),
        record_count=len(recent),
    )


# ── Weekly score ──────────────────────────────────────────────


def records_in_week(records: list[SleepRecord], week_start: date) -> list[SleepRecord]:
    """Records whose day falls in the seven days starting at *week_start*."""
    lo = week_start.isoformat()
    hi = (week_start + timedelta(days=7)).isoformat()
    return [r for r in records if lo <= r.date < hi]


def _window_bounds(window: TimeWindow, folded: bool) -> tuple[int, int]:
    if folded:
        lo, hi = folded_minutes(window.start), folded_minutes(window.end)
    else:
        lo, hi = clock_minutes(window.start), clock_minutes(window.end)
    if hi < lo:
        hi += MINUTES_PER_DAY
    return lo, hi


def _distance_outside(minutes: float, bounds: tuple[int, int]) -> float:
    lo, hi = bounds
    if minutes < lo:
        return lo - minutes
    if minutes > hi:
        return minutes - hi
    return 0.0


def _clamp(value: float, upper: int) -> int:
    return int(max(0, min(upper, value)))


def duration_points(avg_minutes: float | None, target_hours: float = 7.5) -> int:
    """40 points at the target, minus 8 per hour of deviation either way."""
    if avg_minutes is None:
        return 0
    deviation = abs(avg_minutes - target_hours * 60)
    return _clamp(round_half_up(DURATION_MAX - deviation * DURATION_POINTS_PER_HOUR / 60), DURATION_MAX)


def regularity_points(avg_minutes: float | None, bounds: tuple[int, int]) -> int:
    """15 inside the window, minus 1 per 10 minutes outside it."""
    if avg_minutes is None:
        return 0
    off = _distance_outside(avg_minutes, bounds)
    return _clamp(round_half_up(REGULARITY_MAX - off / REGULARITY_MINUTES_PER_POINT), REGULARITY_MAX)


def consistency_points(sd: float | None) -> int:
    """15 at or under 15 min of spread, 0 at 90 min, linear in between."""
    if sd is None:
        return 0
    if sd <= CONSISTENCY_FULL_SD:
        return CONSISTENCY_MAX
    if sd >= CONSISTENCY_ZERO_SD:
        return 0
    span = CONSISTENCY_ZERO_SD - CONSISTENCY_FULL_SD
    return _clamp(round_half_up(CONSISTENCY_MAX * (CONSISTENCY_ZERO_SD - sd) / span), CONSISTENCY_MAX)


def _spread(samples: list[int], fallback: list[int]) -> float | None:
    if not samples:
        return None
    if len(samples) < 2:
        samples = samples + fallback
    if len(samples) < 2:
        return None
    return round_half_up(statistics.pstdev(samples), 1)


def compute_sleep_score(
    records: list[SleepRecord],
    week_start: date,
    profile: Profile | None = None,
) -> SleepScore:
    """Score the week starting at *week_start* out of 100.

    Duration 40, sleep-time regularity 15, wake-time regularity 15,
    consistency 30. When the week has fewer than two samples for a
    consistency half, the previous week's samples are pooled in.
    """
    profile = profile or Profile()
    week = records_in_week(records, week_start)
    if not week:
        return SleepScore()
    prev_week = records_in_week(records, week_start - timedelta(days=7))

    durations = [r.duration_minutes for r in week if r.duration_minutes is not None]
    avg_duration = sum(durations) / len(durations) if durations else None
    duration_score = duration_points(avg_duration, profile.target_sleep_hours)

    sleep_bounds = _window_bounds(profile.sleep_window, folded=True)
    wake_bounds = _window_bounds(profile.wake_window, folded=False)
    sleep_regularity = regularity_points(_mean_sleep_minutes(week), sleep_bounds)
    wake_regularity = regularity_points(_mean_wake_minutes(week), wake_bounds)

    sleep_sd = _spread(
        [folded_minutes(r.sleep_time) for r in week if r.sleep_time is not None],
        [folded_minutes(r.sleep_time) for r in prev_week if r.sleep_time is not None],
    )
    wake_sd = _spread(
        [clock_minutes(r.wake_time) for r in week if r.wake_time is not None],
        [clock_minutes(r.wake_time) for r in prev_week if r.wake_time is not None],
    )
    consistency = consistency_points(sleep_sd) + consistency_points(wake_sd)

    total = duration_score + sleep_regularity + wake_regularity + consistency
    logger.debug(f"Sleep score for week of {week_start.isoformat()}: {total}")
    return SleepScore(
        total=total,
        duration_score=duration_score,
        sleep_regularity=sleep_regularity,
        wake_regularity=wake_regularity,
        consistency_score=consistency,
        details=SleepScoreDetails(sleep_consistency=sleep_sd, wake_consistency=wake_sd),
    )


# ── Weekly streak ─────────────────────────────────────────────


def _in_window(t: datetime | time, bounds: tuple[int, int], folded: bool) -> bool:
    m = folded_minutes(t) if folded else clock_minutes(t)
    return _distance_outside(m, bounds) == 0


def compute_weekly_streak(
    records: list[SleepRecord],
    week_start: date,
    profile: Profile | None = None,
) -> WeeklyStreak:
    """Count goal days among the five most recent logged days of the week.

    Days need not be consecutive: a streak is met when all five of the most
    recent days with a logged sleep (or wake) time hit the target window.
    A day with several records counts once, by its latest sleep and its
    earliest wake.
    """
    profile = profile or Profile()
    sleep_bounds = _window_bounds(profile.sleep_window, folded=True)
    wake_bounds = _window_bounds(profile.wake_window, folded=False)

    sleep_by_day: dict[str, datetime] = {}
    wake_by_day: dict[str, datetime] = {}
    for r in records_in_week(records, week_start):
        if r.sleep_time is not None:
            prev = sleep_by_day.get(r.date)
            sleep_by_day[r.date] = r.sleep_time if prev is None else max(prev, r.sleep_time)
        if r.wake_time is not None:
            prev = wake_by_day.get(r.date)
            wake_by_day[r.date] = r.wake_time if prev is None else min(prev, r.wake_time)

    slept = [sleep_by_day[d] for d in sorted(sleep_by_day, reverse=True)][:STREAK_LOOKBACK]
    woke = [wake_by_day[d] for d in sorted(wake_by_day, reverse=True)][:STREAK_LOOKBACK]
    sleep_streak = sum(1 for t in slept if _in_window(t, sleep_bounds, folded=True))
    wake_streak = sum(1 for t in woke if _in_window(t, wake_bounds, folded=False))

    return WeeklyStreak(
        sleep_streak=sleep_streak,
        wake_streak=wake_streak,
        sleep_streak_met=sleep_streak >= STREAK_TARGET,
        wake_streak_met=wake_streak >= STREAK_TARGET,
    )
