"""Domain models for the shared attendance calendar."""

from __future__ import annotations

from .enums import LEAVE_TYPES, WORKING_TYPES, WorkType
from .models import Calendar, DailyStats, DayStatus, Member, ScheduleEntry

__all__ = [
    "Calendar",
    "DailyStats",
    "DayStatus",
    "LEAVE_TYPES",
    "Member",
    "ScheduleEntry",
    "WORKING_TYPES",
    "WorkType",
]
