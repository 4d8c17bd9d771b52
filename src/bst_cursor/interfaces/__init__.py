"""Protocols shared between tree components."""

from .cursor import NodeCursor
from .sink import OutputSink

__all__ = ["NodeCursor", "OutputSink"]
