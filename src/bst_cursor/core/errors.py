"""Exception hierarchy for the cursor BST.

Defines all custom exceptions used throughout the implementation.
"""

from __future__ import annotations


class BSTError(Exception):
    """Base exception for all tree errors."""
    pass


class NodeNotFoundError(BSTError, LookupError):
    """Raised when a downward search reaches a missing child link."""

    def __init__(self, value: int):
        super().__init__(f"{value}: Not found")
        self.value = value


class CursorError(BSTError):
    """Base exception for cursor misuse."""
    pass


class EmptyCursorError(CursorError):
    """Raised when mutating through a cursor that points at nothing."""
    pass


class StaleReferenceError(CursorError):
    """Raised when a cursor's target node has already been reclaimed."""
    pass


class InvariantViolationError(BSTError, AssertionError):
    """Raised when a reference that must resolve does not.

    Signals a defect in the ownership model, never a normal search miss.
    """
    pass
