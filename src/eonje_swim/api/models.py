from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain import Calendar, DailyStats, DayStatus, Member
from ..domain.presentation import WorkTypeStyle, cell_color, cell_label, cell_text_color
from ..domain.enums import WorkType


class CalendarPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    token: str
    name: str
    share_link: Optional[str] = Field(default=None)

    @classmethod
    def from_domain(cls, calendar: Calendar, *, share_link: Optional[str] = None) -> "CalendarPayload":
        return cls(id=calendar.id, token=calendar.token, name=calendar.name, share_link=share_link)


class MemberPayload(BaseModel):
    id: str
    name: str
    position: int = 0
    statuses: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, member: Member) -> "MemberPayload":
        return cls(
            id=member.id,
            name=member.name,
            position=member.position,
            statuses={day: work_type.value for day, work_type in sorted(member.statuses.items())},
        )


class MemberInput(BaseModel):
    """One roster row sent by a client; rows without ``id`` are new members."""

    model_config = ConfigDict(str_strip_whitespace=True)

    id: Optional[str] = Field(default=None)
    name: str = Field(min_length=1)


class CellPayload(BaseModel):
    date: str
    work_type: str
    is_weekend: bool
    is_holiday: bool
    label: str
    color: str
    text_color: str

    @classmethod
    def from_domain(cls, status: DayStatus) -> "CellPayload":
        return cls(
            date=status.date,
            work_type=status.work_type.value,
            is_weekend=status.is_weekend,
            is_holiday=status.is_holiday,
            label=cell_label(status.work_type),
            color=cell_color(status.work_type),
            text_color=cell_text_color(status.work_type),
        )


class GridRowPayload(BaseModel):
    member: MemberPayload
    cells: List[CellPayload]


class DailyStatsPayload(BaseModel):
    date: str
    label: str
    leave_count: int
    working_count: int

    @classmethod
    def from_domain(cls, stats: DailyStats) -> "DailyStatsPayload":
        return cls(date=stats.date, label=stats.label, leave_count=stats.leave_count, working_count=stats.working_count)


class WorkTypePayload(BaseModel):
    value: str
    label: str
    color: str
    text_color: str
    selectable: bool

    @classmethod
    def from_style(cls, work_type: WorkType, style: WorkTypeStyle, *, selectable: bool) -> "WorkTypePayload":
        return cls(
            value=work_type.value,
            label=style.label,
            color=style.color,
            text_color=style.text_color,
            selectable=selectable,
        )
