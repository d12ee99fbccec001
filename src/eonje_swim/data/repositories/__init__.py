"""Supabase repositories for first-class domain objects."""

from __future__ import annotations

from .calendars import CalendarRepository
from .members import MemberRepository
from .schedules import ScheduleRepository

__all__ = ["CalendarRepository", "MemberRepository", "ScheduleRepository"]
