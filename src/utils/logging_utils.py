"""Logging setup for the category browser: JSON lines on disk, plain text on the console."""

from __future__ import annotations

import json
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from utils.env import is_dev_mode


PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_LOG_FILE = PROJECT_ROOT / "data" / "logs" / "catbrowser.log"

# Rotate at 1 MiB, keep three old files
MAX_LOG_BYTES = 1 << 20
LOG_BACKUPS = 3

_active_log_file: Optional[Path] = None


class StructuredFormatter(logging.Formatter):
    """One JSON object per record. Fields passed via ``extra`` become keys."""

    _RESERVED = set(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in self._RESERVED and not key.startswith("_")
        )
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _resolve_level(level: Optional[int]) -> int:
    if level is not None:
        return level
    override = os.environ.get("CATBROWSER_LOG_LEVEL", "").strip().upper()
    if override and isinstance(logging.getLevelName(override), int):
        return logging.getLevelName(override)
    return logging.DEBUG if is_dev_mode() else logging.INFO


def setup_logging(level: Optional[int] = None, log_file: Optional[Path] = None) -> Path:
    """Install the root handlers on first call and return the active log file.

    Level precedence: ``level`` argument, ``CATBROWSER_LOG_LEVEL``, then DEBUG
    in dev mode and INFO otherwise. The console handler is only added in dev
    mode. Later calls leave the existing configuration alone.
    """
    global _active_log_file

    if _active_log_file is not None:
        return _active_log_file

    target = Path(log_file) if log_file else DEFAULT_LOG_FILE
    target.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(_resolve_level(level))
    for handler in list(root.handlers):
        root.removeHandler(handler)

    file_handler = RotatingFileHandler(
        target, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
    )
    file_handler.setFormatter(StructuredFormatter())
    root.addHandler(file_handler)

    if is_dev_mode():
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter("%(asctime)s %(levelname)-7s %(name)s: %(message)s"))
        root.addHandler(console)

    _active_log_file = target
    return target


def get_log_file_path() -> Path:
    """Log file in use, or the default location before ``setup_logging`` ran."""
    return _active_log_file or DEFAULT_LOG_FILE
