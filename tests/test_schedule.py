from __future__ import annotations

from datetime import date, datetime

import pytest

from eonje_swim.domain import Member, WorkType
from eonje_swim.domain.schedule import (
    daily_stats,
    dates_in_range,
    day_status,
    default_period,
    format_day_label,
)

HOLIDAYS = frozenset({"2025-12-25", "2026-01-01"})


def test_dates_in_range_is_inclusive():
    assert dates_in_range("2025-12-30", "2026-01-02") == [
        "2025-12-30",
        "2025-12-31",
        "2026-01-01",
        "2026-01-02",
    ]


def test_dates_in_range_single_day():
    assert dates_in_range("2025-12-18", "2025-12-18") == ["2025-12-18"]


@pytest.mark.parametrize(
    "start, end",
    [("2025-12-20", "2025-12-18"), ("not-a-date", "2025-12-18"), ("2025-12-18", ""), ("", "")],
)
def test_dates_in_range_empty_for_invalid_or_inverted(start, end):
    assert dates_in_range(start, end) == []


def test_weekday_without_entry_defaults_to_office():
    status = day_status("2025-12-18", {}, HOLIDAYS)
    assert status.work_type is WorkType.OFFICE
    assert not status.is_locked


def test_weekend_and_holiday_default_to_holiday():
    saturday = day_status("2025-12-20", {}, HOLIDAYS)
    christmas = day_status("2025-12-25", {}, HOLIDAYS)
    assert saturday.work_type is WorkType.HOLIDAY and saturday.is_weekend
    assert christmas.work_type is WorkType.HOLIDAY and christmas.is_holiday
    assert saturday.is_locked and christmas.is_locked


def test_explicit_entry_wins_even_on_weekend():
    status = day_status("2025-12-20", {"2025-12-20": WorkType.REMOTE}, HOLIDAYS)
    assert status.work_type is WorkType.REMOTE
    assert status.is_weekend


def test_explicit_none_falls_back_to_default():
    status = day_status("2025-12-18", {"2025-12-18": WorkType.NONE}, HOLIDAYS)
    assert status.work_type is WorkType.OFFICE


def test_format_day_label():
    assert format_day_label("2025-12-18") == "12/18 (Thu)"
    assert format_day_label(date(2026, 1, 4)) == "1/4 (Sun)"


def test_daily_stats_counts_leave_and_working():
    members = [
        Member(id="1", name="Jisoo", statuses={"2025-12-18": WorkType.FULL_LEAVE}),
        Member(id="2", name="Minho", statuses={"2025-12-18": WorkType.AM_HALF}),
        Member(id="3", name="Dana", statuses={"2025-12-18": WorkType.REMOTE}),
        Member(id="4", name="Alex"),
    ]
    stats = daily_stats(members, ["2025-12-18", "2025-12-20"], HOLIDAYS)

    assert stats[0].label == "12/18 (Thu)"
    assert (stats[0].leave_count, stats[0].working_count) == (2, 2)
    # Weekend: everyone resolves to HOLIDAY, which is neither leave nor working.
    assert (stats[1].leave_count, stats[1].working_count) == (0, 0)


def test_daily_stats_without_members_is_zero():
    stats = daily_stats([], ["2025-12-18"], HOLIDAYS)
    assert stats[0].leave_count == 0
    assert stats[0].working_count == 0


def test_default_period_spans_two_weeks():
    assert default_period(date(2025, 12, 18)) == ("2025-12-18", "2026-01-01")
    assert default_period(date(2025, 12, 18), span_days=7) == ("2025-12-18", "2025-12-25")


def test_holiday_with_remote_entry_is_remote():
    assert day_status("2025-12-25", {}, HOLIDAYS).work_type is WorkType.HOLIDAY
    assert day_status("2025-12-25", {"2025-12-25": WorkType.REMOTE}, HOLIDAYS).work_type is WorkType.REMOTE
    assert len(dates_in_range("2025-12-18", "2025-12-20")) == 3


def test_datetimes_are_normalised_to_dates():
    assert dates_in_range(datetime(2025, 12, 18, 9, 30), datetime(2025, 12, 19, 18, 0)) == ["2025-12-18", "2025-12-19"]
    assert day_status(datetime(2025, 12, 20, 12, 0), {}, HOLIDAYS).date == "2025-12-20"
    assert format_day_label(datetime(2025, 12, 18, 23, 59)) == "12/18 (Thu)"
    assert default_period(datetime(2025, 12, 18, 8, 0)) == ("2025-12-18", "2026-01-01")
