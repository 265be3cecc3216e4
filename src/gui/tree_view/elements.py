"""Generic render descriptions produced by the tree view components.

An ``Element`` is a tag, a dict of attributes and an ordered list of
children (elements or plain text). Attributes whose name starts with
``on_`` hold event handlers. Nothing here depends on a UI toolkit, so any
renderer (Qt widgets, HTML, tests) can consume the output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Union

Child = Union["Element", str]


@dataclass
class Element:
    """A node in a rendered UI tree."""

    tag: str
    attrs: Dict[str, Any] = field(default_factory=dict)
    children: List[Child] = field(default_factory=list)
    key: Optional[Any] = None

    def walk(self) -> Iterator["Element"]:
        """Yield this element and every descendant element (pre-order)."""
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.walk()

    def find_all(self, predicate: Callable[["Element"], bool]) -> List["Element"]:
        return [element for element in self.walk() if predicate(element)]

    def find(self, predicate: Callable[["Element"], bool]) -> Optional["Element"]:
        for element in self.walk():
            if predicate(element):
                return element
        return None

    def child_elements(self) -> List["Element"]:
        return [child for child in self.children if isinstance(child, Element)]

    def text(self) -> str:
        """Concatenated text of all descendants."""
        parts: List[str] = []
        for child in self.children:
            parts.append(child.text() if isinstance(child, Element) else child)
        return "".join(parts)

    def trigger(self, event: str = "click") -> None:
        """Invoke the ``on_<event>`` handler, if the element has one."""
        handler = self.attrs.get(f"on_{event}")
        if handler is not None:
            handler()


def h(tag: str, attrs: Optional[Dict[str, Any]] = None, *children: Any) -> Element:
    """Build an element; ``key`` in ``attrs`` becomes the element key.

    ``None`` children are skipped and nested lists are flattened, so callers
    can splice generated child lists directly.
    """
    attrs = dict(attrs or {})
    key = attrs.pop("key", None)
    flat: List[Child] = []
    for child in children:
        if child is None:
            continue
        if isinstance(child, list):
            flat.extend(c for c in child if c is not None)
        else:
            flat.append(child)
    return Element(tag=tag, attrs=attrs, children=flat, key=key)


__all__ = ["Child", "Element", "h"]
