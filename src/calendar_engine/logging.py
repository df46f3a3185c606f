from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import get_settings
from .core.config import LOG_DIR, ensure_log_dir

LOG_FILE_NAME = "calendar_engine.log"

_INITIALIZED = False


def configure_logging(level: Optional[str] = None, *, log_path: Optional[Path] = None) -> Optional[Path]:
    """Attach a rotating file handler and a console handler to the root logger.

    Level, directory and rotation come from ``CALENDAR_LOG_*`` settings unless
    overridden. Only the first call has an effect; it returns the log file path.
    """

    global _INITIALIZED
    if _INITIALIZED:
        return None

    settings = get_settings().log
    if log_path is None:
        log_path = ensure_log_dir(settings.directory or LOG_DIR) / LOG_FILE_NAME
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handlers = [
        RotatingFileHandler(str(log_path), maxBytes=settings.max_bytes, backupCount=settings.backup_count),
        logging.StreamHandler(),
    ]

    root = logging.getLogger()
    root.setLevel(getattr(logging, (level or settings.level).upper(), logging.INFO))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    _INITIALIZED = True
    logging.getLogger(__name__).debug("Logging to %s (%d bytes x %d)", log_path, settings.max_bytes, settings.backup_count)
    return log_path


__all__ = ["LOG_FILE_NAME", "configure_logging"]
