"""Tests for the TreeView selection coordinator.

These follow the category browser scenarios: tree
root(0) -> [aaa(1) -> [bbb(2), ccc(3)], ddd(4)] with root initially selected.
"""

from unittest.mock import MagicMock

import pytest

from config.visual_config import SELECTED_ITEM_CLASS
from gui.tree_view.tree_view import TreeView
from services.category_tree import CategoryNode


def _labels(element):
    return [el.text() for el in element.find_all(lambda el: "data_id" in el.attrs)]


def _selected_labels(element):
    return [
        el.text()
        for el in element.find_all(lambda el: el.attrs.get("class_name") == SELECTED_ITEM_CLASS)
    ]


def _click_label(view, node_id):
    label = view.element.find(lambda el: el.attrs.get("data_id") == node_id)
    label.trigger("click")


@pytest.fixture
def view(sample_tree):
    tree_view = TreeView(sample_tree, selection=0)
    tree_view.render()
    return tree_view


class TestSelection:
    """Canonical selection ownership."""

    def test_initial_selection(self, view):
        assert view.get_selection() == 0
        assert _selected_labels(view.element) == ["root"]
        assert [item.node.id for item in view.selected_items()] == [0]

    def test_clicking_label_selects_only_that_item(self, view):
        _click_label(view, 2)

        assert view.get_selection() == 2
        assert _selected_labels(view.element) == ["bbb"]
        assert [item.node.id for item in view.selected_items()] == [2]

    @pytest.mark.parametrize("node_id", [0, 1, 2, 3, 4])
    def test_select_marks_exactly_one_item(self, view, node_id):
        view.select(node_id)

        assert view.get_selection() == node_id
        selected = view.selected_items()
        assert len(selected) == 1
        assert selected[0] is view.find_item(node_id)

    def test_unknown_id_selects_nothing(self, view):
        view.select(99)

        assert view.get_selection() == 99
        assert view.selected_items() == []
        assert _selected_labels(view.element) == []

    def test_initial_unknown_selection(self, sample_tree):
        view = TreeView(sample_tree, selection=123)
        assert _selected_labels(view.render()) == []

    def test_no_initial_selection(self, sample_tree):
        view = TreeView(sample_tree)
        assert view.get_selection() is None
        assert _selected_labels(view.render()) == []

    def test_on_select_receives_clicked_id(self, sample_tree):
        on_select = MagicMock()
        view = TreeView(sample_tree, selection=0, on_select=on_select)
        view.render()

        _click_label(view, 4)

        on_select.assert_called_once_with(4)

    def test_select_rerenders_synchronously(self, view):
        before = view.element
        view.select(3)
        assert view.element is not before
        assert _selected_labels(view.element) == ["ccc"]


    def test_failing_on_select_still_renders_selection(self, sample_tree):
        view = TreeView(sample_tree, selection=0, on_select=MagicMock(side_effect=RuntimeError("db down")))
        view.render()

        with pytest.raises(RuntimeError):
            view.select(3)

        assert view.get_selection() == 3
        assert _selected_labels(view.element) == ["ccc"]


class TestFolding:
    """Fold state interplay with selection."""

    def test_collapsing_removes_descendants_but_keeps_selection(self, view):
        _click_label(view, 2)
        view.find_item(1).toggle()

        assert _labels(view.element) == ["root", "aaa", "ddd"]
        assert view.get_selection() == 2
        assert view.find_item(2) is None
        assert view.find_item(3) is None

    def test_selecting_hidden_node_shows_after_expand(self, view):
        aaa = view.find_item(1)
        aaa.toggle()

        view.select(3)
        assert view.get_selection() == 3
        assert _selected_labels(view.element) == []

        aaa.toggle()
        assert _selected_labels(view.element) == ["ccc"]
        assert view.find_item(3).selected is True

    def test_reexpanding_creates_fresh_items(self, view):
        aaa = view.find_item(1)
        old_bbb = view.find_item(2)
        old_bbb.toggle()
        assert old_bbb.folded is True

        aaa.toggle()
        aaa.toggle()

        new_bbb = view.find_item(2)
        assert new_bbb is not old_bbb
        assert new_bbb.folded is False

    def test_toggle_pair_restores_render(self, view):
        before = _labels(view.element)
        item = view.find_item(0)
        item.toggle()
        item.toggle()
        assert _labels(view.element) == before

    def test_root_starts_expanded(self, sample_tree):
        view = TreeView(sample_tree)
        assert view.root_item.expanded is True

    def test_root_folded_option(self, sample_tree):
        view = TreeView(sample_tree, folded=True)
        assert _labels(view.render()) == ["root"]


class TestRendering:
    """Render publication and data reloads."""

    def test_subscribers_receive_each_render(self, sample_tree):
        view = TreeView(sample_tree, selection=0)
        received = []
        unsubscribe = view.subscribe(received.append)

        view.render()
        view.select(1)
        view.find_item(1).toggle()

        assert len(received) == 3
        assert received[-1] is view.element

        unsubscribe()
        view.select(2)
        assert len(received) == 3

    def test_indent_is_threaded_to_items(self, sample_tree):
        view = TreeView(sample_tree, indent=10)
        element = view.render()
        ccc = element.find(lambda el: el.key == 3)
        assert ccc.child_elements()[0].attrs["style"]["margin_left"] == 20

    def test_set_indent_rerenders_mounted_items(self, view):
        view.find_item(4).toggle()
        received = []
        view.subscribe(received.append)

        view.set_indent(40)

        bbb = view.element.find(lambda el: el.key == 2)
        assert bbb.child_elements()[0].attrs["style"]["margin_left"] == 80
        assert len(received) == 1
        assert view.find_item(4).folded

    def test_set_indent_applies_to_items_mounted_later(self, view):
        view.find_item(1).toggle()
        view.set_indent(5)

        view.find_item(1).toggle()

        ccc = view.element.find(lambda el: el.key == 3)
        assert ccc.child_elements()[0].attrs["style"]["margin_left"] == 10

    def test_set_data_keeps_fold_state(self, view, sample_tree):
        view.find_item(1).toggle()
        grown = CategoryNode(
            id=0,
            name="root",
            children=sample_tree.children + (CategoryNode(id=5, name="eee"),),
        )

        view.set_data(grown)

        assert view.root is grown
        assert _labels(view.element) == ["root", "aaa", "ddd", "eee"]
        assert view.find_item(1).folded is True

    def test_set_data_reordered_children_keep_state(self, view, sample_tree):
        aaa = view.find_item(1)
        aaa.toggle()
        reordered = CategoryNode(id=0, name="root", children=tuple(reversed(sample_tree.children)))

        view.set_data(reordered)

        assert view.find_item(1) is aaa
        assert aaa.folded is True
        assert _labels(view.element) == ["root", "ddd", "aaa"]

    def test_set_data_with_new_root_mounts_fresh_root(self, view):
        old_root_item = view.root_item
        view.set_data(CategoryNode(id=10, name="other"))

        assert view.root_item is not old_root_item
        assert _labels(view.element) == ["other"]
