"""Application services orchestrating data access and domain logic."""

from __future__ import annotations

from .calendar import CalendarService, CalendarSnapshot
from .context import ServiceContext
from .roster import RosterEditor, RosterService
from .shell import AppState, GridView, Notice, OperationResult, ScheduleApp

__all__ = [
    "AppState",
    "CalendarService",
    "CalendarSnapshot",
    "GridView",
    "Notice",
    "OperationResult",
    "RosterEditor",
    "RosterService",
    "ScheduleApp",
    "ServiceContext",
]
