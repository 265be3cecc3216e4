"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from typing import Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from database.base import Base
from database import models  # noqa: F401  (registers tables on Base.metadata)
from database.repositories import CategoryRepository
from services.category_tree import CategoryNode


# ---------------------------------------------------------------------------
# Database Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def in_memory_engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session_factory(in_memory_engine):
    """Session factory bound to the in-memory engine, with the root category."""
    SessionLocal = sessionmaker(bind=in_memory_engine)
    session = SessionLocal()
    try:
        CategoryRepository(session).ensure_root()
    finally:
        session.close()
    return SessionLocal


@pytest.fixture
def db_session(session_factory) -> Generator[Session, None, None]:
    """Create a database session for testing."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


# ---------------------------------------------------------------------------
# Category Tree Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_tree() -> CategoryNode:
    """root(0) -> [aaa(1) -> [bbb(2), ccc(3)], ddd(4)]"""
    return CategoryNode.from_mapping(
        {
            "id": 0,
            "name": "root",
            "children": [
                {
                    "id": 1,
                    "name": "aaa",
                    "children": [
                        {"id": 2, "name": "bbb"},
                        {"id": 3, "name": "ccc"},
                    ],
                },
                {"id": 4, "name": "ddd", "children": []},
            ],
        }
    )
