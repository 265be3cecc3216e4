"""Error reporting and performance helpers.

Usage in UI event handlers:
    from utils.error_handling import format_error_message, log_exception

    try:
        service.add_category(name, parent_id)
    except CategoryServiceError as e:
        log_exception(e, "Failed to add category")
        QMessageBox.warning(self, "Add Category", format_error_message(e, include_type=False))

Performance timing usage:
    @timed
    def render(self):
        ...

    # Enable timing with: CATBROWSER_PERF_DEBUG=1
"""

from __future__ import annotations

import logging
import os
import time
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

# Environment variable to enable performance timing
PERF_DEBUG = os.environ.get("CATBROWSER_PERF_DEBUG", "0") == "1"

F = TypeVar("F", bound=Callable[..., Any])


def timed(func: F) -> F:
    """Log execution time of ``func`` at DEBUG level when PERF_DEBUG is on."""
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if not PERF_DEBUG:
            return func(*args, **kwargs)

        start = time.perf_counter()
        try:
            result = func(*args, **kwargs)
            elapsed = time.perf_counter() - start
            logger.debug(f"PERF: {func.__module__}.{func.__qualname__} took {elapsed:.4f}s")
            return result
        except Exception:
            elapsed = time.perf_counter() - start
            logger.debug(f"PERF: {func.__module__}.{func.__qualname__} failed after {elapsed:.4f}s")
            raise

    return wrapper  # type: ignore


def format_error_message(
    error: Exception,
    context: Optional[str] = None,
    include_type: bool = True,
) -> str:
    """Text for a message box: ``"<context> - <Type>: <message>"``.

    Exceptions without a message (or whose message is ``"None"``) are shown
    by type name alone.
    """
    detail = str(error)
    type_name = type(error).__name__
    if detail in ("", "None"):
        detail = type_name
    elif include_type:
        detail = f"{type_name}: {detail}"
    return f"{context} - {detail}" if context else detail


def log_exception(
    error: Exception,
    context: str,
    extra: Optional[dict] = None,
    level: int = logging.ERROR,
) -> None:
    """Log an exception with structured context and its traceback."""
    log_extra = {"event": "error", "error_type": type(error).__name__}
    if extra:
        log_extra.update(extra)

    logger.log(level, f"{context}: {error}", extra=log_extra, exc_info=error)
