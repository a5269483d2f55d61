"""
Action vocabulary for the Minesweeper engine.

Game commands change cells and are recorded in history. Meta commands
(restart, undo, redo) act on the engine itself.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .grid import Cursor


class Sign(Enum):
    """Direction of an increment."""

    NEGATIVE = -1
    POSITIVE = 1


# ============================================================================
# Game Commands
# ============================================================================

@dataclass(frozen=True)
class OpenCell:
    """Reveal the cell under the cursor."""

    cursor: Cursor


@dataclass(frozen=True)
class FlagCell:
    """Cycle the flag on the cell under the cursor."""

    cursor: Cursor


@dataclass(frozen=True)
class ClearFlag:
    """Remove any flag from the cell under the cursor."""

    cursor: Cursor


@dataclass(frozen=True)
class Surrender:
    """Give up and reveal the whole board."""


GameAction = Union[OpenCell, FlagCell, ClearFlag, Surrender]


# ============================================================================
# Restart Changes
# ============================================================================

@dataclass(frozen=True)
class ResizeH:
    sign: Sign


@dataclass(frozen=True)
class ResizeV:
    sign: Sign


@dataclass(frozen=True)
class IncrementMines:
    sign: Sign


@dataclass(frozen=True)
class IncrementMinesPercent:
    """Change the mine count by one percent of the board size."""

    sign: Sign


RestartChange = Union[ResizeH, ResizeV, IncrementMines, IncrementMinesPercent]


# ============================================================================
# Meta Commands
# ============================================================================

@dataclass(frozen=True)
class Restart:
    """Start a new board, optionally with changed settings."""

    change: Optional[RestartChange] = None


@dataclass(frozen=True)
class Undo:
    pass


@dataclass(frozen=True)
class Redo:
    pass


Action = Union[GameAction, Restart, Undo, Redo]

GAME_ACTIONS = (OpenCell, FlagCell, ClearFlag, Surrender)
