"""Revocable cursor over the nodes of a tree.

A cursor holds a single weak reference to its current node. It never keeps a
node alive: once the node is reclaimed the cursor is stale, which reads as
"nothing here" and fails loudly only for mutation.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

from ..core.errors import (
    EmptyCursorError,
    InvariantViolationError,
    NodeNotFoundError,
    StaleReferenceError,
)

if TYPE_CHECKING:
    import weakref

    from ..core.types import Value
    from .node import Node

logger = logging.getLogger(__name__)


class CursorState(Enum):
    """Where a cursor points."""

    UNBOUND = "unbound"
    LIVE = "live"
    STALE = "stale"


class BSTNodeCursor:
    """Movable, non-owning position in a tree.

    Moves (parent, left, right, find) change the position in place and return
    the cursor so they can be chained. Clones are independent: moving one
    never moves another.

    Invariants:
        - the cursor never holds a strong reference to a node
        - a reclaimed target is reported as absent, never dereferenced
    """

    __slots__ = ("_ref",)

    def __init__(self, node: Optional[Node] = None) -> None:
        self._ref: Optional[weakref.ref[Node]] = None if node is None else node.ref

    def __repr__(self) -> str:
        node = self.node()
        if node is None:
            return f"BSTNodeCursor(<{self.state.value}>)"
        return f"BSTNodeCursor({node.data!r})"

    def __copy__(self) -> BSTNodeCursor:
        return self.clone()

    def clone(self) -> BSTNodeCursor:
        other = BSTNodeCursor()
        other._ref = self._ref
        return other

    # -------------------------------
    # State
    # -------------------------------
    @property
    def state(self) -> CursorState:
        if self._ref is None:
            return CursorState.UNBOUND
        if self._ref() is None:
            return CursorState.STALE
        return CursorState.LIVE

    def is_bound(self) -> bool:
        """True if the cursor points at a node that still exists."""
        return self.state is CursorState.LIVE

    def node(self) -> Optional[Node]:
        """Resolve the current position, or None if unbound or stale."""
        if self._ref is None:
            return None
        return self._ref()

    def data(self) -> Optional[Value]:
        """Get the data under the cursor."""
        node = self.node()
        return None if node is None else node.data

    # -------------------------------
    # Mutation
    # -------------------------------
    def insert(self, value: Value) -> Node:
        """Insert value below the current node instead of below the root.

        This bypasses the root-relative ordering, so the tree may stop being
        a valid BST.
        """
        if self._ref is None:
            raise EmptyCursorError(f"cannot insert {value}: cursor is unbound")
        node = self._ref()
        if node is None:
            raise StaleReferenceError(
                f"cannot insert {value}: cursor target no longer exists"
            )
        return node.insert(value)

    # -------------------------------
    # Traversals
    # -------------------------------
    def _step(self, link: Callable[[Node], Optional[Node]]) -> BSTNodeCursor:
        node = self.node()
        if node is None:
            self._ref = None
            return self
        target = link(node)
        self._ref = None if target is None else target.ref
        return self

    def parent(self) -> BSTNodeCursor:
        """Traverse to parent."""
        return self._step(lambda n: n.parent)

    def left(self) -> BSTNodeCursor:
        """Traverse left."""
        return self._step(lambda n: n.left)

    def right(self) -> BSTNodeCursor:
        """Traverse right."""
        return self._step(lambda n: n.right)

    def find(self, value: Value) -> BSTNodeCursor:
        """
        Traverse to the node holding value from the current position,
        downwards only. A miss unbinds the cursor; an unbound cursor
        stays unbound.
        """
        if self._ref is None:
            return self
        current = self._ref()
        if current is None:
            logger.debug("Cursor target reclaimed before find(%d); unbinding", value)
            self._ref = None
            return self

        try:
            found = current.find(value)
        except NodeNotFoundError:
            logger.debug("%d not found below %d; unbinding cursor", value, current.data)
            self._ref = None
            return self

        ref = found.ref
        if ref() is not found:
            raise InvariantViolationError(
                f"self reference of {found!r} does not resolve to it"
            )
        self._ref = ref
        return self
