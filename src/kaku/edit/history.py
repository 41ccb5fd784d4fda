"""Undo/redo history with stroke batching.

Every change to the canvas is recorded as a :class:`CellMutation`
carrying the cell before and after. Mutations are grouped into
:class:`Action` objects, the unit of undo and redo. A drag gesture is
wrapped in ``begin_stroke()`` / ``end_stroke()`` so the whole stroke
undoes in one step.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from kaku.config import HISTORY_CAPACITY
from kaku.core.canvas import Canvas
from kaku.core.cell import Cell

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CellMutation:
    """One cell's state before and after an edit."""
    x: int
    y: int
    old: Cell
    new: Cell


@dataclass(slots=True)
class Action:
    """An ordered group of mutations applied and reverted together."""
    mutations: list[CellMutation] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.mutations)


class History:
    """Bounded linear undo/redo history.

    Committing a new action discards anything that could have been redone.
    When more than ``capacity`` actions are stored, the oldest is dropped.
    """

    def __init__(self, capacity: int = HISTORY_CAPACITY) -> None:
        self.capacity = capacity
        self._undo: list[Action] = []
        self._redo: list[Action] = []
        self._pending: list[CellMutation] | None = None

    # -------------------------------------------------------------------------
    # Strokes
    # -------------------------------------------------------------------------

    def begin_stroke(self) -> None:
        """Start collecting mutations for a drag stroke.

        Any stroke still open is discarded without being committed.
        """
        self._pending = []

    def push_mutation(self, mutation: CellMutation) -> None:
        """Add a mutation to the open stroke, or commit it alone if none."""
        if self._pending is not None:
            self._pending.append(mutation)
        else:
            self.commit(Action([mutation]))

    def end_stroke(self) -> None:
        """Close the open stroke, committing it if it changed anything."""
        pending = self._pending
        self._pending = None
        if pending:
            self.commit(Action(pending))

    def is_stroke_active(self) -> bool:
        return self._pending is not None

    # -------------------------------------------------------------------------
    # Stacks
    # -------------------------------------------------------------------------

    def commit(self, action: Action) -> None:
        """Push an action onto the undo stack. Empty actions are ignored."""
        if not action.mutations:
            return
        self._redo.clear()
        self._undo.append(action)
        if len(self._undo) > self.capacity:
            self._undo.pop(0)
            logger.debug("History full, dropped oldest action")
        logger.debug("Committed action with %d mutation(s)", len(action))

    def undo(self, canvas: Canvas) -> bool:
        """Revert the most recent action. Returns False if there was none."""
        if not self._undo:
            return False
        action = self._undo.pop()
        for mutation in reversed(action.mutations):
            canvas.set(mutation.x, mutation.y, mutation.old)
        self._redo.append(action)
        logger.debug("Undo: reverted %d mutation(s)", len(action))
        return True

    def redo(self, canvas: Canvas) -> bool:
        """Reapply the most recently undone action. Returns False if none."""
        if not self._redo:
            return False
        action = self._redo.pop()
        for mutation in action.mutations:
            canvas.set(mutation.x, mutation.y, mutation.new)
        self._undo.append(action)
        logger.debug("Redo: reapplied %d mutation(s)", len(action))
        return True

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        """Number of actions that can be undone."""
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        """Number of actions that can be redone."""
        return len(self._redo)

    def clear(self) -> None:
        """Forget everything, including an open stroke."""
        self._undo.clear()
        self._redo.clear()
        self._pending = None
