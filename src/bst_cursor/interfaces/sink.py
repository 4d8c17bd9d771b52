"""Protocol definition for display output."""

from __future__ import annotations

from typing import Protocol


class OutputSink(Protocol):
    """Consumer of rendered tokens (sys.stdout, io.StringIO, ...)."""

    def write(self, s: str) -> int:
        """Write a single token."""
        ...
