"""Configuration models and helpers."""

from __future__ import annotations

from .settings import AppSettings, CalendarSettings, StorageSettings, SupabaseSettings, UiSettings, get_settings
from .theme import AppPalette

__all__ = [
    "AppSettings",
    "AppPalette",
    "CalendarSettings",
    "StorageSettings",
    "SupabaseSettings",
    "UiSettings",
    "get_settings",
]
