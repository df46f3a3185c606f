from __future__ import annotations

from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "Calendar Engine"
APP_AUTHOR = "CalendarEngine"
LOG_DIR = Path(user_log_dir(APP_NAME, APP_AUTHOR))


def ensure_log_dir(directory: Path = LOG_DIR) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    return directory
