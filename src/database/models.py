"""SQLAlchemy database models for categories and their entries."""

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    ForeignKey,
    Table,
)
from sqlalchemy.orm import relationship
from datetime import datetime

from .base import Base


entry_categories = Table(
    "entry_categories",
    Base.metadata,
    Column("entry_id", Integer, ForeignKey("entries.id"), primary_key=True),
    Column("category_id", Integer, ForeignKey("categories.id"), primary_key=True),
)


class Category(Base):
    """A node of the category hierarchy. Only the root has no parent."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False, unique=True)
    parent_id = Column(Integer, ForeignKey("categories.id"), nullable=True)

    entries = relationship("Entry", secondary=entry_categories, back_populates="categories")

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}', parent_id={self.parent_id})>"


class Entry(Base):
    """A bookmarked item filed under one or more categories."""

    __tablename__ = "entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(500), nullable=False, default="")
    uri = Column(String(2048), nullable=False, unique=True)
    time_add = Column(DateTime, default=datetime.utcnow)

    categories = relationship("Category", secondary=entry_categories, back_populates="entries")

    def __repr__(self):
        return f"<Entry(id={self.id}, uri='{self.uri}')>"
