"""Repository package - provides a clean interface to database operations."""

from .category import CategoryRepository
from .entry import EntryRepository

__all__ = [
    "CategoryRepository",
    "EntryRepository",
]
