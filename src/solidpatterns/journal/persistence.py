"""Write a journal to disk, kept apart from the journal itself."""
from __future__ import annotations

import logging
from pathlib import Path

from .base import Renderable

logger = logging.getLogger(__name__)


class Persistence:
    """Flush any :class:`Renderable` (usually an ``EntryLog``) to a text file.

    The whole file is replaced on every write; there is no append mode and
    no atomic rename.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def save(
        self,
        path: str | Path,
        log: Renderable,
        overwrite: bool = False,
    ) -> bool:
        """Write ``log.render()`` to ``path``.

        An existing file is left untouched unless ``overwrite`` is set.

        Returns True if the file was written, False if the call was skipped.
        """
        if not isinstance(log, Renderable):
            raise TypeError(f"{log!r} does not implement Renderable")

        target = Path(path)
        if target.exists() and not overwrite:
            logger.debug("Not overwriting existing file %s", target)
            return False

        target.write_text(log.render(), encoding=self._encoding)
        logger.debug("Saved %s", target)
        return True
