"""Category service - loads the category tree and files entries under it."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Iterator, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from database.repositories import CategoryRepository, EntryRepository
from database.session import SessionFactory, session_scope
from services.category_tree import ROOT_CATEGORY_ID, CategoryNode

logger = logging.getLogger(__name__)


class CategoryServiceError(ValueError):
    """Raised when a category or entry operation is rejected."""


@dataclass
class EntrySummary:
    """Entry fields shown in the entry list pane."""
    id: int
    title: str
    uri: str
    time_add: Optional[datetime] = None

    @property
    def display_title(self) -> str:
        return self.title or self.uri


class CategoryService:
    """Service wrapping category/entry repositories behind short-lived sessions."""

    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    @contextmanager
    def _session(self, action: str) -> Iterator[Session]:
        """``session_scope`` that reports database failures as CategoryServiceError."""
        try:
            with session_scope(self._session_factory) as session:
                yield session
        except SQLAlchemyError as e:
            raise CategoryServiceError(f"Database error while {action}") from e

    def load_tree(self) -> CategoryNode:
        with self._session("loading categories") as session:
            tree = CategoryRepository(session).load_tree()
        logger.debug("Loaded category tree with %d nodes", len(tree.ids()))
        return tree

    def add_category(self, name: str, parent_id: int = ROOT_CATEGORY_ID) -> int:
        """Create a category under ``parent_id`` and return its id.

        Raises:
            CategoryServiceError: Empty name, unknown parent or duplicate name.
        """
        name = (name or "").strip()
        if not name:
            raise CategoryServiceError("Category name cannot be empty")

        with self._session("adding a category") as session:
            repo = CategoryRepository(session)
            if not repo.exists(parent_id):
                raise CategoryServiceError(f"Parent category {parent_id} not found")
            if repo.get_by_name(name) is not None:
                raise CategoryServiceError(f"Category '{name}' already exists")
            try:
                category = repo.add_category(name, parent_id)
            except IntegrityError as e:
                raise CategoryServiceError(f"Failed to add category '{name}'") from e
            category_id = category.id

        logger.info(
            f"Added category '{name}'",
            extra={"event": "category_added", "category_id": category_id, "parent_id": parent_id},
        )
        return category_id

    def add_entry(self, title: str, uri: str, category_ids: Iterable[int] = ()) -> int:
        """File a new entry under the given categories and return its id."""
        uri = (uri or "").strip()
        if not uri:
            raise CategoryServiceError("Entry URI cannot be empty")

        with self._session("adding an entry") as session:
            try:
                entry = EntryRepository(session).add_entry(title, uri, category_ids)
            except IntegrityError as e:
                raise CategoryServiceError(f"Entry '{uri}' already exists") from e
            return entry.id

    def entries_for(self, category_id: int) -> List[EntrySummary]:
        with self._session("listing entries") as session:
            return [
                EntrySummary(id=entry.id, title=entry.title, uri=entry.uri, time_add=entry.time_add)
                for entry in EntryRepository(session).get_by_category(category_id)
            ]
