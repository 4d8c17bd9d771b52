"""BinarySearchTree container - main public API.

Owns the root node and the insert count, and hands out cursors.
"""

from __future__ import annotations

import logging
import sys
from collections import deque
from typing import TYPE_CHECKING, Optional

from ..components.cursor import BSTNodeCursor
from ..components.node import Node
from .config import TreeConfig
from .errors import NodeNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..interfaces.sink import OutputSink
    from .types import Value

logger = logging.getLogger(__name__)


class BinarySearchTree:
    """Container for a binary search tree of integers.

    Args:
        config: rendering parameters (defaults to TreeConfig())

    Public API:
        - insert(value): BST insert from the root, duplicates go left
        - length(): number of insert calls
        - inline_display(sink) / prefix_display(sink): write traversals
        - cursor(): revocable cursor bound to the root

    Invariants:
        - size equals the number of insert calls
        - once set, root is never reset to None

    Not safe for concurrent mutation.
    """

    __slots__ = ("_root", "_size", "config")

    def __init__(self, config: Optional[TreeConfig] = None) -> None:
        self._root: Optional[Node] = None
        self._size = 0
        self.config = config if config is not None else TreeConfig()

    @property
    def root(self) -> Optional[Node]:
        return self._root

    @property
    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def length(self) -> int:
        """Get length of the BST"""
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Value]:
        if self._root is None:
            return iter(())
        return self._root.values()

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self)})"

    # -------------------------------
    # Insert
    # -------------------------------
    def insert(self, value: Value) -> None:
        """Insertion into BST"""
        if self._root is None:
            self._root = Node(value)
            logger.debug("Inserted %d as root", value)
        else:
            self._root.insert(value)
        self._size += 1

    # -------------------------------
    # Search
    # -------------------------------
    def find(self, value: Value) -> Optional[Node]:
        """Return the node holding value on its search path from the root, or None."""
        if self._root is None:
            return None
        try:
            return self._root.find(value)
        except NodeNotFoundError:
            logger.debug("%d not found from root", value)
            return None

    def find_min(self) -> Optional[Value]:
        """
        Follows left links from the root to the leftmost value.
        Only the true minimum while no cursor has inserted out of order.
        """
        node = self._root
        if node is None:
            return None
        while node.left:
            node = node.left
        return node.data

    def find_max(self) -> Optional[Value]:
        """
        Follows right links from the root to the rightmost value.
        Only the true maximum while no cursor has inserted out of order.
        """
        node = self._root
        if node is None:
            return None
        while node.right:
            node = node.right
        return node.data

    def height(self) -> int:
        """
        Returns the number of levels in the tree (0 when empty).
        Time Complexity: O(n), level by level so list-shaped trees are fine
        """
        if self._root is None:
            return 0
        height = 0
        level: deque[Node] = deque([self._root])
        while level:
            height += 1
            for _ in range(len(level)):
                node = level.popleft()
                if node.left is not None:
                    level.append(node.left)
                if node.right is not None:
                    level.append(node.right)
        return height

    # -------------------------------
    # Rendering
    # -------------------------------
    def _inline_tokens(self, root: Node) -> Iterator[str]:
        for i, value in enumerate(root.values()):
            if i:
                yield self.config.inline_separator
            yield str(value)

    def _prefix_tokens(self, root: Node) -> Iterator[str]:
        return root.prefix_tokens(
            marker=self.config.leaf_marker, bare_leaves=self.config.bare_leaves
        )

    def inline(self) -> str:
        """In-order rendering, e.g. "4 5 6 7"."""
        if self._root is None:
            return self.config.empty_text
        return "".join(self._inline_tokens(self._root))

    def prefix(self) -> str:
        """Preorder rendering with leaf markers, e.g. "5[4[**]6[**]]"."""
        if self._root is None:
            return self.config.empty_text
        return "".join(self._prefix_tokens(self._root))

    def inline_display(self, sink: Optional[OutputSink] = None) -> None:
        """Perform inline display over the containing tree"""
        self._display(sink, inline=True)

    def prefix_display(self, sink: Optional[OutputSink] = None) -> None:
        """Perform prefix display over the containing tree"""
        self._display(sink, inline=False)

    def _display(self, sink: Optional[OutputSink], inline: bool) -> None:
        out = sink if sink is not None else sys.stdout
        if self._root is None:
            out.write(self.config.empty_text)
        else:
            render = self._inline_tokens if inline else self._prefix_tokens
            tokens = render(self._root)
            for token in tokens:
                out.write(token)
        out.write("\n")

    # -------------------------------
    # Cursors
    # -------------------------------
    def cursor(self) -> BSTNodeCursor:
        """Get cursor for the root node"""
        return BSTNodeCursor(self._root)
