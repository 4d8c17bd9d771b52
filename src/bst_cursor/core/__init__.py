"""Cursor BST core: tree container, configuration, errors and types."""
