"""Tests for daylog/dayclock.py."""

from datetime import date, datetime, time, timezone
from zoneinfo import ZoneInfo

from daylog.dayclock import (
    clock_minutes,
    folded_minutes,
    logical_date,
    logical_day_str,
    logical_start_of_day,
    minutes_to_clock,
    round_half_up,
    to_local,
)


def test_logical_date_before_cutoff_is_previous_day():
    assert logical_date(datetime(2026, 1, 2, 4, 59)) == date(2026, 1, 1)


def test_logical_date_at_cutoff_is_same_day():
    assert logical_date(datetime(2026, 1, 2, 5, 0)) == date(2026, 1, 2)
    assert logical_date(datetime(2026, 1, 2, 23, 59)) == date(2026, 1, 2)


def test_logical_day_crosses_month_and_year():
    assert logical_day_str(datetime(2026, 1, 1, 0, 30)) == "2025-12-31"
    assert logical_day_str(datetime(2026, 3, 1, 2, 0)) == "2026-02-28"


def test_logical_start_of_day():
    assert logical_start_of_day(datetime(2026, 1, 2, 3, 0)) == datetime(2026, 1, 1, 0, 0)
    assert logical_start_of_day(datetime(2026, 1, 2, 13, 45)) == datetime(2026, 1, 2, 0, 0)


def test_logical_date_uses_timezone():
    seoul = ZoneInfo("Asia/Seoul")
    # 15:00 UTC is midnight in Seoul, still the previous logical day
    dt = datetime(2026, 1, 1, 15, 0, tzinfo=timezone.utc)
    assert to_local(dt, seoul).hour == 0
    assert logical_date(dt, seoul) == date(2026, 1, 1)
    # 20:30 UTC is 05:30 in Seoul
    assert logical_date(datetime(2026, 1, 1, 20, 30, tzinfo=timezone.utc), seoul) == date(2026, 1, 2)


def test_to_local_keeps_naive_wall_clock():
    dt = datetime(2026, 1, 1, 8, 0)
    seoul = ZoneInfo("Asia/Seoul")
    local = to_local(dt, seoul)
    assert local.tzinfo is seoul
    assert local.replace(tzinfo=None) == dt
    assert to_local(dt) is dt


def test_folded_minutes():
    assert folded_minutes(time(23, 30)) == 1410
    assert folded_minutes(time(0, 45)) == 1485
    assert folded_minutes(time(5, 59)) == 359 + 1440
    assert folded_minutes(time(6, 0)) == 360
    assert folded_minutes(datetime(2026, 1, 2, 1, 0)) == 1500


def test_clock_minutes():
    assert clock_minutes(time(0, 45)) == 45
    assert clock_minutes(time(7, 30)) == 450


def test_minutes_to_clock():
    assert minutes_to_clock(1410) == "23:30"
    assert minutes_to_clock(1485) == "00:45"
    assert minutes_to_clock(420) == "07:00"
    assert minutes_to_clock(419.6) == "07:00"
    assert minutes_to_clock(1439.7) == "00:00"


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(2.4) == 2
    assert round_half_up(0.25, 1) == 0.3
