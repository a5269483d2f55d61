"""
Board module for Minesweeper.

Owns the grid of cells and the counters from which the game outcome is
derived. Cells only change through diffs, which can be applied and
reverted exactly.
"""
from dataclasses import replace
from enum import Enum, auto
from typing import List, Optional

import numpy as np

from .cell import Cell, Empty, Mine
from .config import BoardConfig
from .diff import Diff, SingleCellDiff, iter_changes
from .grid import Cursor, in_bounds, neighbors, to_cursor, to_index


# ============================================================================
# Constants
# ============================================================================

class WinState(Enum):
    """Possible states of the game."""

    UNTOUCHED = auto()
    ONGOING = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_over(self) -> bool:
        """Check if the game reached a terminal state."""
        return self in (WinState.WON, WinState.LOST)


class HistoryCorruptionError(RuntimeError):
    """A diff was reverted against a cell it did not produce."""


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    Manages the flat grid of cells and three counters: flagged cells,
    hidden safe cells and shown mines. The win state is recomputed from
    the counters after every applied or reverted diff.
    """

    def __init__(self, config: BoardConfig) -> None:
        """
        Create an untouched board with no mines placed yet.

        Args:
            config: Board configuration; used as given, callers clamp it.
        """
        self.config = config
        self.width = config.width
        self.height = config.height
        self.mines = config.num_mines
        self.cells: List[Cell] = [Cell() for _ in range(config.size)]
        self.flagged_cells = 0
        self.closed_empty_cells = config.size - config.num_mines
        self.open_mine_cells = 0
        self.win_state = WinState.UNTOUCHED

    # ========================================================================
    # Mine Seeding (Low-level)
    # ========================================================================

    def seed_mines(self, mask: np.ndarray) -> None:
        """
        Place mines at every True entry of ``mask`` and start the game.

        Args:
            mask: Boolean array of length width * height.
        """
        for index in np.flatnonzero(mask):
            self._set_mine(int(index))
        self.win_state = WinState.ONGOING

    def _set_mine(self, index: int) -> None:
        """Turn an empty cell into a mine and bump its neighbors' counts."""
        cell = self.cells[index]
        if cell.is_mine:
            return
        self.cells[index] = replace(cell, content=Mine())

        x, y = to_cursor(index, self.width)
        for nx, ny in neighbors(x, y, self.width, self.height):
            n_index = to_index(nx, ny, self.width)
            neighbor = self.cells[n_index]
            if isinstance(neighbor.content, Empty):
                self.cells[n_index] = replace(
                    neighbor, content=Empty(neighbor.content.count + 1)
                )

    # ========================================================================
    # Diff Application (Mid-level)
    # ========================================================================

    def apply(self, diff: Diff) -> None:
        """Apply every change of ``diff`` in order."""
        for change in iter_changes(diff):
            self._adjust_counters(change.before, change.after)
            self.cells[change.index] = change.after
        self._update_win_state()

    def undo(self, diff: Diff) -> None:
        """
        Revert ``diff``, last change first.

        A diff names each index at most once and counter updates depend
        only on the cell being changed, so the reversal order does not
        affect the result; newest first simply mirrors ``apply``.

        Raises:
            HistoryCorruptionError: If a cell no longer holds the value the
                diff recorded as its result.
        """
        for change in reversed(list(iter_changes(diff))):
            self._check_current(change)
            self._adjust_counters(change.after, change.before)
            self.cells[change.index] = change.before
        self._update_win_state()

    def _check_current(self, change: SingleCellDiff) -> None:
        current = self.cells[change.index]
        if current != change.after:
            raise HistoryCorruptionError(
                f"Cell {change.index} is {current!r}, "
                f"expected {change.after!r}"
            )

    def _adjust_counters(self, old: Cell, new: Cell) -> None:
        """Update counters for a cell going from ``old`` to ``new``."""
        if old.is_hidden and new.is_shown:
            if isinstance(new.content, Mine):
                self.open_mine_cells += 1
            else:
                self.closed_empty_cells -= 1
        elif old.is_shown and new.is_hidden:
            if isinstance(new.content, Mine):
                self.open_mine_cells -= 1
            else:
                self.closed_empty_cells += 1

        if not old.is_flagged and new.is_flagged:
            self.flagged_cells += 1
        elif old.is_flagged and not new.is_flagged:
            self.flagged_cells -= 1

    def _update_win_state(self) -> None:
        """Derive the win state from the counters."""
        # Only seeding mines leaves UNTOUCHED
        if self.win_state == WinState.UNTOUCHED:
            return
        if self.open_mine_cells > 0:
            self.win_state = WinState.LOST
        elif self.closed_empty_cells == 0:
            self.win_state = WinState.WON
        else:
            self.win_state = WinState.ONGOING

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def remaining_mines(self) -> int:
        """Mines not yet accounted for by definite flags."""
        return self.mines - self.flagged_cells

    def in_bounds(self, cursor: Cursor) -> bool:
        return in_bounds(cursor[0], cursor[1], self.width, self.height)

    def get_cell(self, cursor: Cursor) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.in_bounds(cursor):
            return None
        return self.cells[to_index(cursor[0], cursor[1], self.width)]

    def cell_at(self, index: int) -> Cell:
        return self.cells[index]

    def hidden_indices(self) -> List[int]:
        """Indices of cells that are still closed."""
        return [i for i, cell in enumerate(self.cells) if cell.is_hidden]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array (height x width) of ``Cell.to_observation`` values.
        """
        obs = np.fromiter(
            (cell.to_observation() for cell in self.cells),
            dtype=np.int8,
            count=self.size,
        )
        return obs.reshape(self.height, self.width)

    def __str__(self) -> str:
        lines = []
        for y in range(self.height):
            row = self.cells[y * self.width:(y + 1) * self.width]
            lines.append("".join(str(cell) for cell in row) + "\n")
        return "".join(lines)
