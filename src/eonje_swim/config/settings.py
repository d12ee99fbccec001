from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PUBLIC_HOLIDAYS = ("2025-12-25", "2026-01-01")


@dataclass(frozen=True)
class SupabaseSettings:
    url: Optional[str]
    anon_key: Optional[str]

    @property
    def is_configured(self) -> bool:
        return bool(self.url and self.anon_key)

    @property
    def missing_env_vars(self) -> list[str]:
        missing = []
        if not self.url:
            missing.append("SUPABASE_URL")
        if not self.anon_key:
            missing.append("SUPABASE_ANON_KEY")
        return missing


@dataclass(frozen=True)
class StorageSettings:
    calendars_table: str
    members_table: str
    schedules_table: str


@dataclass(frozen=True)
class CalendarSettings:
    public_holidays: frozenset[str]
    default_span_days: int


@dataclass(frozen=True)
class UiSettings:
    app_name: str
    public_url: str
    toast_ms: int


@dataclass(frozen=True)
class AppSettings:
    supabase: SupabaseSettings
    storage: StorageSettings
    calendar: CalendarSettings
    ui: UiSettings


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _holidays_from_env(name: str) -> frozenset[str]:
    raw = os.getenv(name)
    if raw is None:
        return frozenset(DEFAULT_PUBLIC_HOLIDAYS)
    return frozenset(item.strip() for item in raw.split(",") if item.strip())


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    supabase = SupabaseSettings(
        url=os.getenv("SUPABASE_URL"),
        anon_key=os.getenv("SUPABASE_ANON_KEY"),
    )

    storage = StorageSettings(
        calendars_table=os.getenv("EONJE_CALENDARS_TABLE", "calendars"),
        members_table=os.getenv("EONJE_MEMBERS_TABLE", "members"),
        schedules_table=os.getenv("EONJE_SCHEDULES_TABLE", "schedules"),
    )

    calendar = CalendarSettings(
        public_holidays=_holidays_from_env("EONJE_PUBLIC_HOLIDAYS"),
        default_span_days=_int_from_env("EONJE_DEFAULT_SPAN_DAYS", 14),
    )

    ui = UiSettings(
        app_name=os.getenv("EONJE_APP_NAME", "Eonje Swim"),
        public_url=os.getenv("EONJE_PUBLIC_URL", "https://eonjeswim.app/"),
        toast_ms=_int_from_env("EONJE_TOAST_MS", 3000),
    )

    return AppSettings(supabase=supabase, storage=storage, calendar=calendar, ui=ui)
