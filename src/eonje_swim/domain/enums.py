from __future__ import annotations

from enum import Enum


class WorkType(str, Enum):
    OFFICE = "OFFICE"
    REMOTE = "REMOTE"
    AM_HALF = "AM_HALF"
    PM_HALF = "PM_HALF"
    FULL_LEAVE = "FULL_LEAVE"
    HOLIDAY = "HOLIDAY"
    NONE = "NONE"


LEAVE_TYPES = frozenset({WorkType.AM_HALF, WorkType.PM_HALF, WorkType.FULL_LEAVE})
WORKING_TYPES = frozenset({WorkType.OFFICE, WorkType.REMOTE})
