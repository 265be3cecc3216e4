"""Category repository - flat category rows and the assembled tree."""

from typing import List, Optional

from ..models import Category
from ..base_repository import BaseRepository
from services.category_tree import (
    ROOT_CATEGORY_ID,
    ROOT_CATEGORY_NAME,
    CategoryNode,
    CategoryRow,
    build_category_tree,
)


class CategoryRepository(BaseRepository[Category]):
    """Repository for Category operations."""

    model = Category

    def ensure_root(self) -> Category:
        """Return the root category, inserting it on first use."""
        root = self.get_by_id(ROOT_CATEGORY_ID)
        if root is None:
            root = super().create(id=ROOT_CATEGORY_ID, name=ROOT_CATEGORY_NAME, parent_id=None)
        return root

    def add_category(self, name: str, parent_id: int = ROOT_CATEGORY_ID) -> Category:
        return super().create(name=name, parent_id=parent_id)

    def get_by_name(self, name: str) -> Optional[Category]:
        return self.session.query(Category).filter(Category.name == name).first()

    def list_rows(self) -> List[CategoryRow]:
        """All categories as ``(id, name, parent_id)``, in insertion order."""
        return [
            (category.id, category.name, category.parent_id)
            for category in self.session.query(Category).order_by(Category.id).all()
        ]

    def load_tree(self) -> CategoryNode:
        return build_category_tree(self.list_rows())
