"""Unit tests for BSTNodeCursor implementation."""

import copy
import weakref

import pytest

from bst_cursor import (
    BinarySearchTree,
    BSTNodeCursor,
    CursorState,
    EmptyCursorError,
    InvariantViolationError,
    StaleReferenceError,
)


@pytest.fixture
def tree():
    """Create the reference tree 7, 5, 9, 4, 6, 8, 10."""
    bst = BinarySearchTree()
    for value in (7, 5, 9, 4, 6, 8, 10):
        bst.insert(value)
    return bst


@pytest.fixture
def cursor(tree):
    """Cursor bound to the root of the reference tree."""
    return tree.cursor()


def test_cursor_from_empty_tree_is_unbound():
    cursor = BinarySearchTree().cursor()

    assert cursor.state is CursorState.UNBOUND
    assert cursor.data() is None
    assert cursor.parent().data() is None
    assert cursor.left().data() is None
    assert cursor.right().data() is None
    assert not cursor.is_bound()


def test_unbound_find_is_noop():
    cursor = BSTNodeCursor()
    assert cursor.find(3) is cursor
    assert cursor.state is CursorState.UNBOUND


def test_unbound_insert_raises():
    with pytest.raises(EmptyCursorError):
        BSTNodeCursor().insert(1)


def test_cursor_starts_at_root(tree, cursor):
    assert cursor.state is CursorState.LIVE
    assert cursor.data() == 7
    assert cursor.node() is tree.root


def test_navigation(cursor):
    assert cursor.left().data() == 5
    assert cursor.right().data() == 6
    assert cursor.parent().data() == 5
    assert cursor.parent().data() == 7
    assert cursor.right().left().data() == 8


def test_parent_of_root_unbinds(cursor):
    cursor.parent()
    assert cursor.state is CursorState.UNBOUND
    assert cursor.data() is None


def test_missing_child_unbinds(cursor):
    cursor.left().left().left()
    assert cursor.data() is None
    # Once unbound, every move stays unbound
    cursor.parent()
    assert cursor.data() is None


def test_self_find_keeps_position(tree, cursor):
    cursor.find(7)
    assert cursor.node() is tree.root


def test_find_rebinds(cursor):
    cursor.find(10)
    assert cursor.data() == 10
    assert cursor.parent().data() == 9


def test_find_is_relative_to_position(cursor):
    cursor.left()
    cursor.find(9)
    assert cursor.data() is None


def test_find_miss_unbinds(cursor):
    cursor.find(11)
    assert cursor.state is CursorState.UNBOUND
    assert cursor.data() is None


def test_clone_is_independent(cursor):
    other = cursor.clone()
    other.left().left()

    assert other.data() == 4
    assert cursor.data() == 7


def test_copy_is_independent(cursor):
    other = copy.copy(cursor)
    cursor.find(11)

    assert other.data() == 7
    assert cursor.data() is None


def test_cursor_does_not_keep_tree_alive():
    bst = BinarySearchTree()
    for value in (2, 1, 3):
        bst.insert(value)
    cursor = bst.cursor().left()
    probe = weakref.ref(cursor.node())

    del bst
    assert probe() is None
    assert cursor.state is CursorState.STALE


def test_insert_below_cursor_breaks_ordering(tree, cursor):
    cursor.find(10)
    new = cursor.insert(1)

    ten = tree.find(10)
    assert ten.left is new
    assert new.parent is ten
    assert list(tree) == [4, 5, 6, 7, 8, 9, 1, 10]
    # 1 is off the root-relative search path
    assert tree.find(1) is None
    assert tree.cursor().find(1).data() is None


def test_insert_does_not_count_towards_tree_size(tree, cursor):
    cursor.insert(3)
    assert tree.length() == 7
    assert list(tree) == [3, 4, 5, 6, 7, 8, 9, 10]


class TestStaleCursor:
    """Cursor whose target subtree has been pruned."""

    @pytest.fixture
    def stale(self, tree):
        cursor = tree.cursor().left().left()
        assert cursor.data() == 4
        tree.root.detach_left()
        return cursor

    def test_state(self, stale):
        assert stale.state is CursorState.STALE
        assert not stale.is_bound()
        assert stale.node() is None

    def test_data_is_absent(self, stale):
        assert stale.data() is None

    def test_insert_raises(self, stale):
        with pytest.raises(StaleReferenceError):
            stale.insert(2)

    @pytest.mark.parametrize("move", ["parent", "left", "right"])
    def test_moves_unbind(self, stale, move):
        getattr(stale, move)()
        assert stale.state is CursorState.UNBOUND

    def test_find_unbinds(self, stale):
        stale.find(4)
        assert stale.state is CursorState.UNBOUND

    def test_repr(self, stale):
        assert repr(stale) == "BSTNodeCursor(<stale>)"


def test_broken_self_reference_is_an_invariant_violation(tree, cursor):
    six = tree.find(6)
    four = tree.find(4)
    six._ref = four.ref

    with pytest.raises(InvariantViolationError):
        cursor.find(6)
    with pytest.raises(AssertionError):
        tree.cursor().find(6)


def test_repr(cursor):
    assert repr(cursor) == "BSTNodeCursor(7)"
    assert repr(BSTNodeCursor()) == "BSTNodeCursor(<unbound>)"
