from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import time
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ..domain import EventStatus, ValidationError

load_dotenv()

DEFAULT_ALL_DAY_START = time(8, 0)
DEFAULT_ALL_DAY_END = time(17, 0)
DEFAULT_TIMEZONE = "America/New_York"


@dataclass(frozen=True)
class CalendarSettings:
    """Engine policy: the all-day window and defaults applied to new events."""

    all_day_start: time = DEFAULT_ALL_DAY_START
    all_day_end: time = DEFAULT_ALL_DAY_END
    default_status: EventStatus = EventStatus.PUBLIC
    default_timezone: str = DEFAULT_TIMEZONE

    def __post_init__(self) -> None:
        if self.all_day_end <= self.all_day_start:
            raise ValidationError("All-day end must be after all-day start")

    @classmethod
    def defaults(cls) -> "CalendarSettings":
        return cls()


@dataclass(frozen=True)
class LogSettings:
    level: str = "INFO"
    directory: Optional[Path] = None
    max_bytes: int = 1_000_000
    backup_count: int = 5


@dataclass(frozen=True)
class AppSettings:
    calendar: CalendarSettings
    log: LogSettings


def _time_from_env(name: str, default: time) -> time:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return time.fromisoformat(raw.strip())
    except ValueError:
        return default


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return max(int(raw.strip()), 0)
    except ValueError:
        return default


def _status_from_env(name: str, default: EventStatus) -> EventStatus:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return EventStatus(raw.strip().lower())
    except ValueError:
        return default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    all_day_start = _time_from_env("CALENDAR_ALL_DAY_START", DEFAULT_ALL_DAY_START)
    all_day_end = _time_from_env("CALENDAR_ALL_DAY_END", DEFAULT_ALL_DAY_END)
    if all_day_end <= all_day_start:
        all_day_start, all_day_end = DEFAULT_ALL_DAY_START, DEFAULT_ALL_DAY_END

    calendar = CalendarSettings(
        all_day_start=all_day_start,
        all_day_end=all_day_end,
        default_status=_status_from_env("CALENDAR_DEFAULT_STATUS", EventStatus.PUBLIC),
        default_timezone=os.getenv("CALENDAR_DEFAULT_TIMEZONE", DEFAULT_TIMEZONE),
    )

    log_dir = os.getenv("CALENDAR_LOG_DIR")
    log = LogSettings(
        level=os.getenv("CALENDAR_LOG_LEVEL", "INFO").upper(),
        directory=Path(log_dir) if log_dir else None,
        max_bytes=_int_from_env("CALENDAR_LOG_MAX_BYTES", 1_000_000),
        backup_count=_int_from_env("CALENDAR_LOG_BACKUPS", 5),
    )

    return AppSettings(calendar=calendar, log=log)
