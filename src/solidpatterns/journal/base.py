"""Protocols shared by the journal and its persistence helper."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Renderable(Protocol):
    """Anything that can be flushed to storage as a single block of text."""

    def render(self) -> str:
        """Return the full text content to be written."""
        ...
