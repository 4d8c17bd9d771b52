"""bst_cursor - binary search tree with revocable cursors in Python."""

from .components.cursor import BSTNodeCursor, CursorState
from .components.node import Node
from .core.config import TreeConfig
from .core.errors import (
    BSTError,
    CursorError,
    EmptyCursorError,
    InvariantViolationError,
    NodeNotFoundError,
    StaleReferenceError,
)
from .core.tree import BinarySearchTree
from .core.types import Side, Value
from .interfaces import NodeCursor, OutputSink

__all__ = [
    "BinarySearchTree",
    "BSTNodeCursor",
    "CursorState",
    "Node",
    "NodeCursor",
    "OutputSink",
    "TreeConfig",
    "BSTError",
    "CursorError",
    "EmptyCursorError",
    "InvariantViolationError",
    "NodeNotFoundError",
    "StaleReferenceError",
    "Side",
    "Value",
]
