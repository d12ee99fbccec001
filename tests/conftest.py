from __future__ import annotations

from dataclasses import replace
from types import SimpleNamespace
from typing import Any

import pytest

from eonje_swim.config.settings import (
    AppSettings,
    CalendarSettings,
    StorageSettings,
    SupabaseSettings,
    UiSettings,
)
from eonje_swim.domain import Calendar, Member, ScheduleEntry
from eonje_swim.errors import RemoteStoreError
from eonje_swim.services.context import ServiceContext


class FakeCalendarsRepo:
    def __init__(self):
        self._next_id = 1
        self.rows: dict[str, Calendar] = {}
        self.fail_create = False
        self.fail_rename = False
        self.renamed: list[tuple[str, str]] = []

    def add(self, token, name):
        calendar = Calendar(id=self._next_id, token=token, name=name)
        self._next_id += 1
        self.rows[token] = calendar
        return calendar

    def create(self, token, name):
        if self.fail_create:
            raise RemoteStoreError("Failed to create calendar: offline")
        return replace(self.add(token, name))

    def fetch_by_token(self, token):
        calendar = self.rows.get(token)
        return replace(calendar) if calendar else None

    def rename(self, token, name):
        if self.fail_rename:
            raise RemoteStoreError("Failed to rename calendar: offline")
        self.renamed.append((token, name))
        if token in self.rows:
            self.rows[token].name = name


class FakeMembersRepo:
    def __init__(self):
        self._next_id = 100
        self.rows: dict[int, dict[str, Any]] = {}
        self.calls: list[tuple] = []
        self.fail_on: str | None = None

    def seed(self, calendar_id, name, position):
        member_id = self._next_id
        self._next_id += 1
        self.rows[member_id] = {"id": member_id, "calendar_id": calendar_id, "name": name, "position": position}
        return str(member_id)

    def _check(self, action):
        if self.fail_on == action:
            raise RemoteStoreError(f"Failed to {action}: offline")

    def list_for_calendar(self, calendar_id):
        rows = [row for row in self.rows.values() if row["calendar_id"] == calendar_id]
        rows.sort(key=lambda row: (row["position"], row["id"]))
        return [Member.from_record(row) for row in rows]

    def create(self, calendar_id, name, position):
        self._check("create")
        self.calls.append(("create", name, position))
        member_id = self.seed(calendar_id, name, position)
        return Member.from_record(self.rows[int(member_id)])

    def update(self, member_id, *, name, position):
        self._check("update")
        self.calls.append(("update", member_id, name, position))
        self.rows[member_id].update(name=name, position=position)

    def delete_many(self, member_ids):
        self._check("delete")
        identifiers = list(member_ids)
        self.calls.append(("delete", identifiers))
        for member_id in identifiers:
            self.rows.pop(member_id, None)


class FakeSchedulesRepo:
    def __init__(self):
        self.rows: dict[tuple[str, str], ScheduleEntry] = {}
        self.fail_upsert = False
        self.upserts: list[ScheduleEntry] = []

    def list_for_members(self, member_ids):
        identifiers = {str(member_id) for member_id in member_ids}
        return [entry for (member_id, _day), entry in self.rows.items() if member_id in identifiers]

    def upsert(self, entry):
        if self.fail_upsert:
            raise RemoteStoreError("Failed to save status: offline")
        self.upserts.append(entry)
        self.rows[(entry.member_id, entry.date)] = entry


def make_settings(**ui_overrides) -> AppSettings:
    ui = {"app_name": "Eonje Swim", "public_url": "https://eonjeswim.app/", "toast_ms": 3000}
    ui.update(ui_overrides)
    return AppSettings(
        supabase=SupabaseSettings(url=None, anon_key=None),
        storage=StorageSettings(calendars_table="calendars", members_table="members", schedules_table="schedules"),
        calendar=CalendarSettings(public_holidays=frozenset({"2025-12-25", "2026-01-01"}), default_span_days=14),
        ui=UiSettings(**ui),
    )


@pytest.fixture
def settings() -> AppSettings:
    return make_settings()


@pytest.fixture
def repos():
    return SimpleNamespace(
        calendars=FakeCalendarsRepo(),
        members=FakeMembersRepo(),
        schedules=FakeSchedulesRepo(),
    )


@pytest.fixture
def context(settings, repos) -> ServiceContext:
    return ServiceContext(
        settings=settings,
        calendars=repos.calendars,
        members=repos.members,
        schedules=repos.schedules,
    )
