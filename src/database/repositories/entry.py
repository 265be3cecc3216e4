"""Entry repository - entries and their category links."""

from typing import Iterable, List

from ..models import Category, Entry
from ..base_repository import BaseRepository
from services.category_tree import ROOT_CATEGORY_ID


class EntryRepository(BaseRepository[Entry]):
    """Repository for Entry operations."""

    model = Entry

    def add_entry(self, title: str, uri: str, category_ids: Iterable[int] = ()) -> Entry:
        ids = list(category_ids)
        categories = (
            self.session.query(Category).filter(Category.id.in_(ids)).all() if ids else []
        )
        return super().create(title=title, uri=uri, categories=categories)

    def get_by_category(self, category_id: int) -> List[Entry]:
        """Entries filed under ``category_id``, newest first.

        The root category lists every entry.
        """
        query = self.session.query(Entry)
        if category_id != ROOT_CATEGORY_ID:
            query = query.filter(Entry.categories.any(Category.id == category_id))
        return query.order_by(Entry.time_add.desc(), Entry.id.desc()).all()
