"""Protocol definition for node cursors."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..core.types import Value


class NodeCursor(Protocol):
    """Movable, non-owning position in a node graph."""

    def data(self) -> Optional[Value]:
        """Return the value under the cursor, or None if there is none."""
        ...

    def parent(self) -> NodeCursor:
        """Move to the parent of the current node."""
        ...

    def left(self) -> NodeCursor:
        """Move to the left child of the current node."""
        ...

    def right(self) -> NodeCursor:
        """Move to the right child of the current node."""
        ...

    def find(self, value: Value) -> NodeCursor:
        """Move downwards to the node holding value, or unbind on a miss."""
        ...
