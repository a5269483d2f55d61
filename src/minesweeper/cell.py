"""
Cell module for Minesweeper.

Represents individual cells on the game board: what they contain
(a mine or a neighbor count) and how visible they are
(hidden with an optional flag, or shown).
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Union


# ============================================================================
# Constants
# ============================================================================

class Flag(Enum):
    """Marker a player can put on a hidden cell."""

    CLEAR = 0
    FLAGGED = 1
    FLAGGED_MAYBE = 2

    def next(self) -> "Flag":
        """Cycle CLEAR -> FLAGGED -> FLAGGED_MAYBE -> CLEAR."""
        members = list(Flag)
        return members[(members.index(self) + 1) % len(members)]


# ============================================================================
# Content and Visibility Variants
# ============================================================================

@dataclass(frozen=True)
class Empty:
    """Safe cell with the number of neighboring mines (0-8)."""

    count: int = 0


@dataclass(frozen=True)
class Mine:
    """Cell containing a mine."""


@dataclass(frozen=True)
class Hidden:
    """Closed cell, possibly carrying a flag."""

    flag: Flag = Flag.CLEAR


@dataclass(frozen=True)
class Shown:
    """Opened cell."""


CellContent = Union[Empty, Mine]
Visibility = Union[Hidden, Shown]


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Cells are immutable values; a change produces a new Cell via
    ``dataclasses.replace`` so that before/after snapshots can be kept
    in diffs without copying.

    Attributes:
        visibility: Hidden (with flag) or Shown.
        content: Empty (with neighbor count) or Mine.
    """

    visibility: Visibility = field(default_factory=Hidden)
    content: CellContent = field(default_factory=Empty)

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden (flagged or not)."""
        return isinstance(self.visibility, Hidden)

    @property
    def is_shown(self) -> bool:
        """Check if cell is shown."""
        return isinstance(self.visibility, Shown)

    @property
    def is_mine(self) -> bool:
        """Check if cell contains a mine."""
        return isinstance(self.content, Mine)

    @property
    def flag(self) -> Flag:
        """Flag on the cell; shown cells report CLEAR."""
        if isinstance(self.visibility, Hidden):
            return self.visibility.flag
        return Flag.CLEAR

    @property
    def is_flagged(self) -> bool:
        """Check if cell carries a definite flag."""
        return self.flag == Flag.FLAGGED

    @property
    def adjacent_mines(self) -> int:
        """Neighbor mine count, 0 for mines."""
        if isinstance(self.content, Empty):
            return self.content.count
        return 0

    def to_observation(self) -> int:
        """
        Convert cell to an integer observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            -3: Cell flagged as maybe
            0-8: Shown cell with adjacent mine count
            9: Shown mine
        """
        if isinstance(self.visibility, Hidden):
            return {
                Flag.CLEAR: -1,
                Flag.FLAGGED: -2,
                Flag.FLAGGED_MAYBE: -3,
            }[self.visibility.flag]
        if self.is_mine:
            return 9
        return self.adjacent_mines

    def __str__(self) -> str:
        if isinstance(self.visibility, Hidden):
            return {
                Flag.CLEAR: "#",
                Flag.FLAGGED: "!",
                Flag.FLAGGED_MAYBE: "?",
            }[self.visibility.flag]
        if self.is_mine:
            return "*"
        if self.adjacent_mines == 0:
            return "."
        return str(self.adjacent_mines)
