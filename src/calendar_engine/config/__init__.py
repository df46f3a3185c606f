"""Configuration models and helpers."""

from __future__ import annotations

from .settings import AppSettings, CalendarSettings, LogSettings, get_settings

__all__ = ["AppSettings", "CalendarSettings", "LogSettings", "get_settings"]
