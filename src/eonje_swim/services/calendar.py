from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List
from uuid import uuid4

from ..domain import Calendar, Member, ScheduleEntry, WorkType
from ..errors import CalendarNotFoundError
from .context import ServiceContext

logger = logging.getLogger(__name__)

DEFAULT_CALENDAR_NAME = "New calendar"


@dataclass(slots=True)
class CalendarSnapshot:
    """Everything the grid needs for one calendar, loaded in one pass."""

    calendar: Calendar
    members: List[Member] = field(default_factory=list)


def generate_token() -> str:
    return str(uuid4())


@dataclass(slots=True)
class CalendarService:
    context: ServiceContext

    def create_calendar(self, title: str) -> Calendar:
        name = title.strip() or DEFAULT_CALENDAR_NAME
        calendar = self.context.calendars.create(generate_token(), name)
        logger.info("Created calendar %s (%s)", calendar.id, calendar.name)
        return calendar

    def fetch_calendar(self, token: str) -> Calendar:
        calendar = self.context.calendars.fetch_by_token(token)
        if calendar is None:
            raise CalendarNotFoundError(token)
        return calendar

    def rename_calendar(self, token: str, title: str) -> None:
        self.context.calendars.rename(token, title)

    def load(self, token: str) -> CalendarSnapshot:
        calendar = self.fetch_calendar(token)
        members = self.context.members.list_for_calendar(calendar.id)
        if members:
            by_id = {member.id: member for member in members}
            entries = self.context.schedules.list_for_members(member.backend_id for member in members)
            for entry in entries:
                owner = by_id.get(entry.member_id)
                if owner is not None:
                    owner.statuses[entry.date] = entry.work_type
        logger.debug("Loaded calendar %s with %d members", calendar.id, len(members))
        return CalendarSnapshot(calendar=calendar, members=members)

    def set_status(self, member_id: str, day: str, work_type: WorkType) -> ScheduleEntry:
        entry = ScheduleEntry(member_id=member_id, date=day, work_type=work_type)
        self.context.schedules.upsert(entry)
        return entry
