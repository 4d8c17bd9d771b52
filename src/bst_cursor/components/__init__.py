"""Tree building blocks: nodes and cursors."""

from .cursor import BSTNodeCursor, CursorState
from .node import Node

__all__ = ["Node", "BSTNodeCursor", "CursorState"]
