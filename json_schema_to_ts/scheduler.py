"""
Emission scheduler.

Tracks every named declaration as either queued (registered, not yet written)
or finalized (already written). A name is in at most one of the two states,
and a finalized name never changes again.
"""

from __future__ import annotations

import logging

from .code_buffer import CodeBuffer
from .declarations import Declaration, render_declaration

logger = logging.getLogger(__name__)


class EmissionScheduler:
    """Owns the queued/finalized tables of a single generator."""

    def __init__(self):
        self._queued: dict[str, Declaration] = {}
        self._finalized: set[str] = set()

    def is_queued(self, name: str) -> bool:
        return name in self._queued

    def is_finalized(self, name: str) -> bool:
        return name in self._finalized

    def is_known(self, name: str) -> bool:
        """True if `name` is queued or finalized."""
        return name in self._queued or name in self._finalized

    def queued(self) -> list[Declaration]:
        """Queued declarations, in emission order."""
        return list(self._queued.values())

    def register(self, declaration: Declaration, replace: bool = False) -> bool:
        """
        Queue a declaration under its name.

        Args:
            declaration: The work item to queue
            replace: Whether to replace an already queued declaration of the same name

        Returns:
            True if the declaration was queued, False if the name was already taken
        """
        name = declaration.name
        if name in self._finalized:
            return False
        if name in self._queued and not replace:
            return False

        self._queued[name] = declaration
        logger.debug("queued %s %s", type(declaration).__name__, name)
        return True

    def checkpoint(self) -> int:
        """Position in the queue, for a later `rollback()`."""
        return len(self._queued)

    def rollback(self, checkpoint: int) -> list[str]:
        """
        Withdraw every declaration queued since `checkpoint`.

        Returns:
            The withdrawn names
        """
        names = list(self._queued)[checkpoint:]
        for name in names:
            del self._queued[name]
        if names:
            logger.debug("withdrew %s", ", ".join(names))
        return names

    def drain(self, code: CodeBuffer) -> None:
        """Render all queued declarations in queued order and finalize them."""
        while self._queued:
            name, declaration = next(iter(self._queued.items()))
            render_declaration(declaration, code)
            code.line()
            del self._queued[name]
            self._finalized.add(name)
            logger.debug("finalized %s", name)
