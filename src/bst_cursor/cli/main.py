# Console demo: builds a small tree, walks it with cursors and prints the results.
from __future__ import annotations

import argparse
import logging
import sys

from bst_cursor.core.config import TreeConfig
from bst_cursor.core.tree import BinarySearchTree

DEMO_VALUES = (7, 5, 9, 4, 6, 8, 10)


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr so stdout only carries the demo output."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bst-demo", description="Walk and mutate a binary search tree with cursors"
    )
    p.add_argument(
        "-v", "--verbose", action="store_true", help="Log tree operations to stderr"
    )
    p.add_argument(
        "--bare-leaves",
        action="store_true",
        help="Print leaves without their [**] markers in the prefix rendering",
    )
    return p


def run_demo(tree: BinarySearchTree) -> None:
    for value in DEMO_VALUES:
        tree.insert(value)

    tree.prefix_display()

    print(f"BST size:{tree.length()}")

    cursor = tree.cursor()
    root_cursor = cursor.clone()

    cursor.find(10)
    print(cursor.data())
    # Inserting below 10 breaks the BST ordering on purpose
    cursor.insert(1)

    root_cursor.find(11)
    print(root_cursor.data())

    tree.inline_display()


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    tree = BinarySearchTree(TreeConfig(bare_leaves=args.bare_leaves))
    run_demo(tree)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
