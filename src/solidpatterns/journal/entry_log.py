"""Append-only journal of numbered text entries.

Each log numbers its entries with an :class:`IdSequence`.  By default every
log owns a fresh sequence, so two logs both start at ``1``.  Pass the same
sequence to several logs to number their entries process-wide::

    ids = IdSequence()
    a = EntryLog(ids=ids)
    b = EntryLog(ids=ids)
    a.append("first")   # -> 1
    b.append("second")  # -> 2
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

logger = logging.getLogger(__name__)

SEPARATOR = "\n"


class IdSequence:
    """Monotonic integer id allocator. Never resets or goes backwards."""

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def allocate(self) -> int:
        value = self._next
        self._next += 1
        return value

    @property
    def peek(self) -> int:
        """The id the next call to :meth:`allocate` will return."""
        return self._next

    def __repr__(self) -> str:
        return f"IdSequence(next={self._next})"


# Opt-in process-wide numbering (see Settings.shared_entry_ids)
shared_ids = IdSequence()


@dataclass(frozen=True)
class Entry:
    """One numbered journal line."""

    id: int
    text: str

    def __str__(self) -> str:
        return f"{self.id}: {self.text}"


class EntryLog:
    """Ordered journal entries with positional removal.

    The log only knows how to hold and render its entries; writing them to
    disk is the job of :class:`~solidpatterns.journal.persistence.Persistence`.
    """

    def __init__(self, ids: IdSequence | None = None) -> None:
        self._ids = ids if ids is not None else IdSequence()
        self._entries: list[Entry] = []

    def append(self, text: str) -> int:
        """Store ``text`` under the next id and return that id."""
        entry = Entry(self._ids.allocate(), text)
        self._entries.append(entry)
        logger.debug("Appended entry %d", entry.id)
        return entry.id

    def remove(self, position: int) -> None:
        """Delete the entry at ``position`` (0-based, counted from the front).

        Raises:
            IndexError: if ``position`` is not a valid index into the log.
                Negative positions are rejected rather than counted from
                the end.
        """
        if not 0 <= position < len(self._entries):
            raise IndexError(
                f"entry position {position} out of range for log of {len(self._entries)} entries"
            )
        entry = self._entries.pop(position)
        logger.debug("Removed entry %d at position %d", entry.id, position)

    def render(self) -> str:
        """Join all entries with newlines, in insertion order."""
        return SEPARATOR.join(str(e) for e in self._entries)

    @property
    def entries(self) -> tuple[Entry, ...]:
        return tuple(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"EntryLog({len(self._entries)} entries)"
