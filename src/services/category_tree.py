"""Immutable category tree model shared by the data layer and the tree view.

A category tree is read-only from the point of view of the UI: the tree view
only walks it. New trees are produced by the data layer whenever categories
change (see ``build_category_tree``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

ROOT_CATEGORY_ID = 0
ROOT_CATEGORY_NAME = "(root)"

CategoryRow = Tuple[int, str, Optional[int]]


class CategoryTreeError(ValueError):
    """Raised when category data cannot form a valid tree."""


@dataclass(frozen=True)
class CategoryNode:
    """One category and its ordered children."""

    id: int
    name: str
    children: Tuple["CategoryNode", ...] = field(default_factory=tuple)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def iter_nodes(self) -> Iterator["CategoryNode"]:
        """Yield this node and all descendants in pre-order."""
        stack: List[CategoryNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def ids(self) -> List[int]:
        return [node.id for node in self.iter_nodes()]

    def find(self, node_id: int) -> Optional["CategoryNode"]:
        for node in self.iter_nodes():
            if node.id == node_id:
                return node
        return None

    def path_to(self, node_id: int) -> List["CategoryNode"]:
        """Return the nodes from this node down to ``node_id`` (empty if absent)."""
        if self.id == node_id:
            return [self]
        for child in self.children:
            path = child.path_to(node_id)
            if path:
                return [self] + path
        return []

    def to_mapping(self) -> Dict[str, Any]:
        """Serialize as ``{"data": {"id", "name"}, "children": [...]}``."""
        return {
            "data": {"id": self.id, "name": self.name},
            "children": [child.to_mapping() for child in self.children],
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CategoryNode":
        """Build a tree from nested mappings.

        Accepts ``{"id", "name", "children"}``, the older ``{"key", ...}``
        spelling, and the serialized ``{"data": {...}, "children": [...]}``
        form produced by ``to_mapping``. A missing ``children`` means leaf.

        Raises:
            CategoryTreeError: If a node has no id or an id is repeated.
        """
        seen: set[int] = set()
        return cls._from_mapping(data, seen)

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Any], seen: set[int]) -> "CategoryNode":
        payload = data.get("data", data)
        if "id" in payload:
            node_id = payload["id"]
        elif "key" in payload:
            node_id = payload["key"]
        else:
            raise CategoryTreeError(f"Category without id: {dict(payload)!r}")

        if node_id in seen:
            raise CategoryTreeError(f"Duplicate category id: {node_id}")
        seen.add(node_id)

        children = tuple(
            cls._from_mapping(child, seen) for child in (data.get("children") or ())
        )
        return cls(id=node_id, name=str(payload.get("name", "")), children=children)


def build_category_tree(
    rows: Iterable[CategoryRow],
    root_id: int = ROOT_CATEGORY_ID,
    root_name: str = ROOT_CATEGORY_NAME,
) -> CategoryNode:
    """Assemble a tree from flat ``(id, name, parent_id)`` rows.

    The root is always synthesized from ``root_id``/``root_name``; a row for
    the root itself is ignored. Rows may arrive in any order: a row whose
    parent is not known yet gets an unnamed placeholder parent hung under the
    root, and that placeholder is renamed and moved once its own row shows up.
    Rows without a parent attach to the root.

    Raises:
        CategoryTreeError: If the parent links form a cycle.
    """
    names: Dict[int, str] = {root_id: root_name}
    parents: Dict[int, int] = {}
    children: Dict[int, List[int]] = {root_id: []}

    def attach(node_id: int, parent_id: int) -> None:
        parents[node_id] = parent_id
        children.setdefault(parent_id, []).append(node_id)

    def ensure(node_id: int) -> None:
        if node_id not in names:
            names[node_id] = ""
            children[node_id] = []
            attach(node_id, root_id)

    for node_id, name, parent_id in rows:
        if node_id == root_id:
            continue
        target = root_id if parent_id is None else parent_id
        if target == node_id:
            raise CategoryTreeError(f"Category {node_id} cannot be its own parent")

        if node_id in names:
            # Placeholder created for an earlier child; fill it in.
            names[node_id] = name
            ensure(target)
            if parents[node_id] != target:
                ancestor: Optional[int] = target
                while ancestor is not None:
                    if ancestor == node_id:
                        raise CategoryTreeError(
                            f"Category {node_id} cannot be its own ancestor"
                        )
                    ancestor = parents.get(ancestor)
                children[parents[node_id]].remove(node_id)
                attach(node_id, target)
            continue

        ensure(target)
        names[node_id] = name
        children[node_id] = []
        attach(node_id, target)

    def freeze(node_id: int) -> CategoryNode:
        return CategoryNode(
            id=node_id,
            name=names[node_id],
            children=tuple(freeze(child_id) for child_id in children[node_id]),
        )

    return freeze(root_id)


__all__ = [
    "ROOT_CATEGORY_ID",
    "ROOT_CATEGORY_NAME",
    "CategoryNode",
    "CategoryRow",
    "CategoryTreeError",
    "build_category_tree",
]
