"""Session factory helpers for the category database.

Usage:
    from database.session import database_session_factory, session_scope

    factory = database_session_factory(db_path)
    with session_scope(factory) as session:
        repo = CategoryRepository(session)
        tree = repo.load_tree()
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, Optional

from sqlalchemy.orm import Session

from .base import get_session, init_db, resolve_db_path

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], Session]

__all__ = [
    "SessionFactory",
    "database_session_factory",
    "session_scope",
]


def database_session_factory(db_path: Optional[Path] = None) -> SessionFactory:
    """Return a session factory bound to a category database (created on demand)."""
    target = resolve_db_path(db_path)
    initialized = False

    def _factory() -> Session:
        nonlocal initialized
        if not initialized:
            init_db(target)
            initialized = True
        return get_session(target)

    return _factory


@contextmanager
def session_scope(factory: SessionFactory) -> Iterator[Session]:
    """Context manager for commit/rollback semantics around a session factory."""
    session = factory()
    try:
        yield session
        session.commit()
    except Exception as e:
        session.rollback()
        logger.debug(f"Session rolled back: {e}")
        raise
    finally:
        session.close()
