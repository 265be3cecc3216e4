"""Category database utilities."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import NullPool

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent.parent.parent / "data"
DEFAULT_DB_PATH = DATA_DIR / "categories.db"

Base = declarative_base()

# -----------------------------------------------------------------------------
# Engine registry for proper cleanup
# -----------------------------------------------------------------------------

# Track engines per database path for proper disposal
_engines: Dict[str, Engine] = {}


def _get_or_create_engine(db_path: Path) -> Engine:
    """Get or create an engine for the given database path.

    Uses NullPool so connections close as soon as a session is done.
    """
    db_path_str = str(db_path.resolve())

    if db_path_str in _engines:
        return _engines[db_path_str]

    db_path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(
        f"sqlite:///{db_path}",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=NullPool,
    )
    _engines[db_path_str] = engine
    return engine


def dispose_engine(db_path: Path) -> None:
    """Dispose of the engine for a database file, if one was created."""
    db_path_str = str(db_path.resolve())
    if db_path_str in _engines:
        _engines.pop(db_path_str).dispose()


def dispose_all_engines() -> None:
    """Dispose every registered engine; connected to ``QApplication.aboutToQuit``."""
    for engine in _engines.values():
        engine.dispose()
    _engines.clear()


def resolve_db_path(db_path: Optional[Path] = None) -> Path:
    return Path(db_path) if db_path else DEFAULT_DB_PATH


def get_session(db_path: Optional[Path] = None) -> Session:
    engine = _get_or_create_engine(resolve_db_path(db_path))
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    return SessionLocal()


def init_db(db_path: Optional[Path] = None) -> Path:
    """Create tables and the root category; safe to call repeatedly."""
    from database.repositories.category import CategoryRepository

    target = resolve_db_path(db_path)
    engine = _get_or_create_engine(target)
    Base.metadata.create_all(bind=engine)

    session = get_session(target)
    try:
        CategoryRepository(session).ensure_root()
    finally:
        session.close()

    logger.info("Category database ready", extra={"event": "db_init", "db_path": str(target)})
    return target
