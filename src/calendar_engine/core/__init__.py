"""Calendar engine core: recurrence, selection, patching and the engine itself."""

from __future__ import annotations

from .calendar import InMemoryCalendar
from .config import APP_AUTHOR, APP_NAME, LOG_DIR, ensure_log_dir
from .normalizer import Normalizer
from .patching import PatchApplier, PreparedEdit
from .recurrence import RecurrenceExpander
from .selector import SelectorResolver

__all__ = [
    "APP_AUTHOR",
    "APP_NAME",
    "LOG_DIR",
    "InMemoryCalendar",
    "Normalizer",
    "PatchApplier",
    "PreparedEdit",
    "RecurrenceExpander",
    "SelectorResolver",
    "ensure_log_dir",
]
