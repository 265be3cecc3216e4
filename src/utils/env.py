"""Environment helpers for runtime configuration."""

import os
from functools import lru_cache

_TRUTHY = {"dev", "development", "1", "true", "yes"}


@lru_cache
def is_dev_mode() -> bool:
    """Return True when the browser runs in development mode."""
    value = os.environ.get("CATBROWSER_ENV") or os.environ.get("CATBROWSER_DEV_MODE")
    if not value:
        return False
    return value.strip().lower() in _TRUTHY


__all__ = ["is_dev_mode"]
