"""Generic repository base shared by the category and entry repositories."""

from __future__ import annotations

from typing import Generic, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

ModelT = TypeVar("ModelT")


class BaseRepository(Generic[ModelT]):
    """Session holder with insert/lookup helpers; subclasses set ``model``."""

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    def create(self, **fields) -> ModelT:
        """Insert one row, commit and return it with generated columns loaded."""
        row = self.model(**fields)
        self.session.add(row)
        self.session.commit()
        self.session.refresh(row)
        return row

    def get_by_id(self, pk: int) -> Optional[ModelT]:
        return self.session.get(self.model, pk)

    def exists(self, pk: int) -> bool:
        stmt = select(self.model.id).where(self.model.id == pk)
        return self.session.execute(stmt).first() is not None
