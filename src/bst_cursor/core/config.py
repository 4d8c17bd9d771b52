"""Configuration for the cursor BST.

Defines the display parameters used when rendering a tree.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TreeConfig:
    """Rendering parameters for BinarySearchTree.

    Attributes:
        leaf_marker: Token written in place of an absent child
        empty_text: Rendering of a tree without a root
        inline_separator: Separator between in-order values
        bare_leaves: Render leaves as a bare value instead of value[**]
    """

    leaf_marker: str = "*"
    empty_text: str = "<Empty>"
    inline_separator: str = " "
    bare_leaves: bool = False
