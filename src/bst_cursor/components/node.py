"""Tree node with owning child links and weak parent/self links.

Ownership flows strictly downward: a node holds strong references to its
children only. The parent link and the self link are weakref.ref objects, so
no node ever keeps its ancestors (or itself) alive, and dropping the owning
link of a subtree reclaims the whole subtree immediately.

Insert and find walk the tree iteratively so that list-shaped trees (e.g. a
strictly increasing insert sequence) do not hit the recursion limit.
"""

from __future__ import annotations

import logging
import weakref
from typing import TYPE_CHECKING, Optional, Union

from ..core.errors import NodeNotFoundError
from ..core.types import Side, Value

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


class Node:
    """A node is the fundamental unit of the tree.

    It holds
      - data: the sort key and payload
      - left/right: owned children
      - parent: weak reference to the owning node
      - ref: weak reference to itself, handed out to cursors

    Invariants:
        - ref() is self while the node is alive
        - every child's parent is the node that owns it
    """

    __slots__ = ("data", "_left", "_right", "_parent", "_ref", "__weakref__")

    def __init__(self, data: Value) -> None:
        self.data: Value = data
        self._left: Optional[Node] = None
        self._right: Optional[Node] = None
        self._parent: Optional[weakref.ref[Node]] = None
        self._ref: weakref.ref[Node] = weakref.ref(self)

        if logger.isEnabledFor(logging.DEBUG):
            release = weakref.finalize(
                self, logger.debug, "Node containing %d released", data
            )
            release.atexit = False

    def __repr__(self) -> str:
        return f"Node({self.data!r})"

    @property
    def ref(self) -> weakref.ref[Node]:
        """Non-owning reference to this node."""
        return self._ref

    @property
    def left(self) -> Optional[Node]:
        return self._left

    @property
    def right(self) -> Optional[Node]:
        return self._right

    @property
    def parent(self) -> Optional[Node]:
        """The owning node, or None for a root or detached subtree."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def is_leaf(self) -> bool:
        return self._left is None and self._right is None

    def child(self, side: Side) -> Optional[Node]:
        return self._left if side is Side.LEFT else self._right

    def _attach(self, side: Side, node: Node) -> None:
        node._parent = self._ref
        if side is Side.LEFT:
            self._left = node
        else:
            self._right = node

    # -------------------------------
    # Shape mutation
    # -------------------------------
    def insert(self, value: Value) -> Node:
        """Insert value under this node and return the new node.

        Greater values go right; smaller and equal values go left, so
        duplicates are kept and always land on the left.
        """
        node = self
        while True:
            side = Side.RIGHT if value > node.data else Side.LEFT
            child = node.child(side)
            if child is None:
                new_node = Node(value)
                node._attach(side, new_node)
                logger.debug("Inserted %d %s of %d", value, side.value, node.data)
                return new_node
            node = child

    def detach(self, side: Side) -> Optional[Node]:
        """Clear the owning link on one side and return the detached subtree.

        The subtree is reclaimed as soon as the caller drops the result.
        """
        child = self.child(side)
        if child is None:
            return None
        if side is Side.LEFT:
            self._left = None
        else:
            self._right = None
        child._parent = None
        return child

    def detach_left(self) -> Optional[Node]:
        return self.detach(Side.LEFT)

    def detach_right(self) -> Optional[Node]:
        return self.detach(Side.RIGHT)

    # -------------------------------
    # Search
    # -------------------------------
    def find(self, value: Value) -> Node:
        """
        Finds the first node holding value below (or at) this node.
        Descends right when value is greater, else left; only that one
        path is searched.
        Raises NodeNotFoundError when a missing child is reached first.
        """
        node: Optional[Node] = self
        while node is not None:
            if node.data == value:
                return node
            node = node._right if value > node.data else node._left
        raise NodeNotFoundError(value)

    # -------------------------------
    # Traversals
    # -------------------------------
    def inorder(self) -> Iterator[Node]:
        """Lazily yield the nodes of this subtree as left, self, right."""
        stack: list[Node] = []
        node: Optional[Node] = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node._left
            node = stack.pop()
            yield node
            node = node._right

    def values(self) -> Iterator[Value]:
        for node in self.inorder():
            yield node.data

    def prefix_tokens(self, marker: str = "*", bare_leaves: bool = False) -> Iterator[str]:
        """
        Lazily yield the preorder rendering of this subtree as tokens.
        A node renders as value[<left><right>] where an absent child is
        replaced by marker. With bare_leaves a leaf renders as "value " and
        an internal node closes with "] ", the plain console layout.
        """
        close = "] " if bare_leaves else "]"
        stack: list[Union[Node, str]] = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                yield item
                continue
            if bare_leaves and item.is_leaf:
                yield f"{item.data} "
                continue
            yield f"{item.data}["
            stack.append(close)
            stack.append(item._right if item._right is not None else marker)
            stack.append(item._left if item._left is not None else marker)
