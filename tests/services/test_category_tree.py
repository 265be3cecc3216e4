"""Tests for the immutable category tree model."""

import dataclasses

import pytest

from services.category_tree import (
    ROOT_CATEGORY_ID,
    ROOT_CATEGORY_NAME,
    CategoryNode,
    CategoryTreeError,
    build_category_tree,
)


def _shape(node):
    """(name, [children...]) view of a tree for compact assertions."""
    return (node.name, [_shape(child) for child in node.children])


class TestFromMapping:
    """Tests for CategoryNode.from_mapping."""

    def test_plain_shape(self, sample_tree):
        assert sample_tree.ids() == [0, 1, 2, 3, 4]
        assert sample_tree.find(2).is_leaf
        assert sample_tree.find(4).children == ()

    def test_key_shape(self):
        tree = CategoryNode.from_mapping(
            {"name": "root", "key": 0, "children": [{"name": "aaa", "key": 1}]}
        )
        assert tree.ids() == [0, 1]

    def test_serialized_shape(self):
        tree = CategoryNode.from_mapping(
            {
                "data": {"id": 0, "name": "(root)"},
                "children": [{"data": {"id": 1, "name": "aaa"}, "children": []}],
            }
        )
        assert _shape(tree) == ("(root)", [("aaa", [])])

    def test_missing_id_raises(self):
        with pytest.raises(CategoryTreeError):
            CategoryNode.from_mapping({"name": "nameless"})

    def test_duplicate_id_raises(self):
        with pytest.raises(CategoryTreeError, match="Duplicate"):
            CategoryNode.from_mapping(
                {"id": 0, "name": "root", "children": [{"id": 1, "name": "a"}, {"id": 1, "name": "b"}]}
            )

    def test_round_trip_through_mapping(self, sample_tree):
        assert CategoryNode.from_mapping(sample_tree.to_mapping()) == sample_tree


class TestNodeHelpers:
    """Traversal helpers."""

    def test_nodes_are_frozen(self, sample_tree):
        with pytest.raises(dataclasses.FrozenInstanceError):
            sample_tree.name = "other"

    def test_iter_nodes_preorder(self, sample_tree):
        assert [node.name for node in sample_tree.iter_nodes()] == ["root", "aaa", "bbb", "ccc", "ddd"]

    def test_find_missing(self, sample_tree):
        assert sample_tree.find(99) is None

    def test_path_to(self, sample_tree):
        assert [node.id for node in sample_tree.path_to(3)] == [0, 1, 3]
        assert sample_tree.path_to(99) == []

    def test_to_mapping(self):
        tree = CategoryNode(id=0, name="r", children=(CategoryNode(id=1, name="a"),))
        assert tree.to_mapping() == {
            "data": {"id": 0, "name": "r"},
            "children": [{"data": {"id": 1, "name": "a"}, "children": []}],
        }


class TestBuildCategoryTree:
    """Tests for assembling trees from flat rows."""

    def test_empty_rows_give_root_only(self):
        tree = build_category_tree([])
        assert tree == CategoryNode(id=ROOT_CATEGORY_ID, name=ROOT_CATEGORY_NAME)

    def test_root_row_is_ignored(self):
        tree = build_category_tree([(0, "(root)", None), (1, "aaa", 0)])
        assert _shape(tree) == ("(root)", [("aaa", [])])

    def test_nested_rows_keep_order(self):
        rows = [(1, "aaa", 0), (2, "bbb", 1), (3, "ccc", 1), (4, "ddd", 0)]
        tree = build_category_tree(rows)
        assert _shape(tree) == (
            "(root)",
            [("aaa", [("bbb", []), ("ccc", [])]), ("ddd", [])],
        )

    def test_child_before_parent(self):
        tree = build_category_tree([(2, "bbb", 1), (1, "aaa", 0)])
        assert _shape(tree) == ("(root)", [("aaa", [("bbb", [])])])

    def test_placeholder_moves_under_real_parent(self):
        rows = [(3, "ccc", 2), (1, "aaa", 0), (2, "bbb", 1)]
        tree = build_category_tree(rows)
        assert [node.id for node in tree.path_to(3)] == [0, 1, 2, 3]
        assert [child.id for child in tree.children] == [1]

    def test_unresolved_parent_stays_as_unnamed_placeholder(self):
        tree = build_category_tree([(5, "orphan", 9)])
        assert _shape(tree) == ("(root)", [("", [("orphan", [])])])

    def test_missing_parent_attaches_to_root(self):
        tree = build_category_tree([(1, "aaa", None)])
        assert tree.children[0].name == "aaa"

    def test_custom_root(self):
        tree = build_category_tree([(2, "x", 1)], root_id=1, root_name="top")
        assert _shape(tree) == ("top", [("x", [])])

    def test_self_parent_raises(self):
        with pytest.raises(CategoryTreeError):
            build_category_tree([(1, "aaa", 1)])

    def test_cycle_raises(self):
        with pytest.raises(CategoryTreeError):
            build_category_tree([(1, "aaa", 2), (2, "bbb", 1)])
