from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterable, Iterator, List, Mapping, Optional, Sequence, Union

from ..config.settings import DEFAULT_PUBLIC_HOLIDAYS
from .enums import LEAVE_TYPES, WORKING_TYPES, WorkType
from .models import DailyStats, DayStatus, Member

PUBLIC_HOLIDAYS = frozenset(DEFAULT_PUBLIC_HOLIDAYS)

_WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

DateLike = Union[str, date]


def _to_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value).strip())


def _coerce(value: DateLike) -> Optional[date]:
    try:
        return _to_date(value)
    except ValueError:
        return None


def _date_range(start: date, end: date) -> Iterator[date]:
    delta = (end - start).days
    for index in range(delta + 1):
        yield start + timedelta(days=index)


def dates_in_range(start: DateLike, end: DateLike) -> List[str]:
    """Return every ``YYYY-MM-DD`` date from ``start`` to ``end`` inclusive.

    An unparsable bound or an inverted range yields an empty list.
    """

    first = _coerce(start)
    last = _coerce(end)
    if first is None or last is None or first > last:
        return []
    return [day.isoformat() for day in _date_range(first, last)]


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5


def day_status(
    day: DateLike,
    statuses: Mapping[str, WorkType],
    holidays: Iterable[str] = PUBLIC_HOLIDAYS,
) -> DayStatus:
    """Resolve the effective status of one member on one date.

    An explicit entry always wins, weekends and holidays included. Without one
    the day defaults to ``HOLIDAY`` on weekends/holidays and ``OFFICE``
    otherwise.
    """

    target = _to_date(day)
    key = target.isoformat()
    weekend = is_weekend(target)
    holiday = key in holidays

    work_type = statuses.get(key) or WorkType.NONE
    if work_type == WorkType.NONE:
        work_type = WorkType.HOLIDAY if weekend or holiday else WorkType.OFFICE

    return DayStatus(date=key, is_weekend=weekend, is_holiday=holiday, work_type=work_type)


def format_day_label(day: DateLike) -> str:
    target = _to_date(day)
    return f"{target.month}/{target.day} ({_WEEKDAY_LABELS[target.weekday()]})"


def daily_stats(
    members: Sequence[Member],
    dates: Iterable[str],
    holidays: Iterable[str] = PUBLIC_HOLIDAYS,
) -> List[DailyStats]:
    holiday_set = frozenset(holidays)
    stats: list[DailyStats] = []
    for day in dates:
        resolved = [day_status(day, member.statuses, holiday_set).work_type for member in members]
        stats.append(
            DailyStats(
                date=day,
                label=format_day_label(day),
                leave_count=sum(1 for work_type in resolved if work_type in LEAVE_TYPES),
                working_count=sum(1 for work_type in resolved if work_type in WORKING_TYPES),
            )
        )
    return stats


def default_period(today: Optional[date] = None, *, span_days: int = 14) -> tuple[str, str]:
    anchor = _to_date(today) if today is not None else date.today()
    return anchor.isoformat(), (anchor + timedelta(days=span_days)).isoformat()
