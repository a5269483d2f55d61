"""
Undo/redo log of applied diffs.

The history is the only path through which the engine mutates a board,
so stepping backwards and forwards replays exactly what happened.
"""
import logging
from dataclasses import replace
from typing import List

from .board import Board
from .diff import Diff, MultiCell, SingleCell, SingleCellDiff, iter_changes

logger = logging.getLogger(__name__)


class History:
    """
    Ordered diff log with a cursor counted from the newest entry.

    ``index == 0`` means nothing is undone; ``index == len(self)`` means
    every entry is undone.
    """

    def __init__(self) -> None:
        self.entries: List[Diff] = []
        self.index = 0

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def can_undo(self) -> bool:
        return self.index < len(self.entries)

    @property
    def can_redo(self) -> bool:
        return self.index > 0

    def push(self, diff: Diff, board: Board) -> None:
        """
        Apply ``diff`` to ``board`` and record it.

        Any undone entries are discarded first.
        """
        if self.index:
            del self.entries[len(self.entries) - self.index:]
            logger.debug("Dropped %d undone entries", self.index)
            self.index = 0
        board.apply(diff)
        self.entries.append(diff)

    def step_back(self, board: Board) -> bool:
        """
        Undo the newest applied entry.

        Returns:
            True if an entry was undone.
        """
        if not self.can_undo:
            return False
        diff = self.entries[len(self.entries) - 1 - self.index]
        board.undo(diff)
        self.index += 1
        logger.debug("Undo: %d/%d applied", len(self) - self.index, len(self))
        return True

    def step_forward(self, board: Board) -> bool:
        """
        Redo the most recently undone entry.

        Returns:
            True if an entry was reapplied.
        """
        if not self.can_redo:
            return False
        self.index -= 1
        diff = self.entries[len(self.entries) - 1 - self.index]
        board.apply(diff)
        logger.debug("Redo: %d/%d applied", len(self) - self.index, len(self))
        return True

    def adopt_contents(self, board: Board) -> None:
        """
        Rewrite every recorded diff with the board's current cell contents.

        Diffs recorded before mines were placed (flags on an untouched
        board) still hold the empty placeholder contents. Placement only
        changes contents, never visibility, so swapping them in keeps each
        diff exact.
        """
        self.entries = [_with_contents(diff, board) for diff in self.entries]

    def clear(self) -> None:
        self.entries.clear()
        self.index = 0


def _with_contents(diff: Diff, board: Board) -> Diff:
    changes = tuple(
        SingleCellDiff(
            change.index,
            replace(change.before, content=board.cell_at(change.index).content),
            replace(change.after, content=board.cell_at(change.index).content),
        )
        for change in iter_changes(diff)
    )
    if isinstance(diff, SingleCell):
        return SingleCell(changes[0])
    return MultiCell(changes)
