from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..config import AppSettings, get_settings
from ..data import SupabaseGateway
from ..data.repositories import CalendarRepository, MemberRepository, ScheduleRepository


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root for services to share settings, gateway, and repositories."""

    settings: AppSettings = field(default_factory=get_settings)
    gateway: SupabaseGateway = field(init=False)
    calendars: Optional[CalendarRepository] = None
    members: Optional[MemberRepository] = None
    schedules: Optional[ScheduleRepository] = None

    def __post_init__(self) -> None:
        self.gateway = SupabaseGateway(self.settings.supabase)
        if self.calendars is None:
            self.calendars = CalendarRepository(
                gateway=self.gateway,
                table_name=self.settings.storage.calendars_table,
            )
        if self.members is None:
            self.members = MemberRepository(
                gateway=self.gateway,
                table_name=self.settings.storage.members_table,
            )
        if self.schedules is None:
            self.schedules = ScheduleRepository(
                gateway=self.gateway,
                table_name=self.settings.storage.schedules_table,
            )

    @property
    def holidays(self) -> frozenset[str]:
        return self.settings.calendar.public_holidays
