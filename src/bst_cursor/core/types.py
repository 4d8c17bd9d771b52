"""Common type definitions for the cursor BST.

Defines fundamental types used across all components.
"""

from __future__ import annotations

from enum import Enum

# Node payload and sort key
Value = int


class Side(Enum):
    """Which child link of a node an operation refers to."""

    LEFT = "left"
    RIGHT = "right"
