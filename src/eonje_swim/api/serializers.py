from __future__ import annotations

from typing import Any, Dict, Optional

from ..domain import Calendar, Member
from ..services.shell import GridRow
from .models import CalendarPayload, CellPayload, GridRowPayload, MemberPayload


def serialize_calendar(calendar: Calendar, *, share_link: Optional[str] = None) -> Dict[str, Any]:
    return CalendarPayload.from_domain(calendar, share_link=share_link).model_dump()


def serialize_member(member: Member) -> Dict[str, Any]:
    return MemberPayload.from_domain(member).model_dump()


def serialize_row(row: GridRow) -> Dict[str, Any]:
    return GridRowPayload(
        member=MemberPayload.from_domain(row.member),
        cells=[CellPayload.from_domain(status) for status in row.days],
    ).model_dump()
