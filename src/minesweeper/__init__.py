"""
Minesweeper engine package.

Provides the reversible board engine: cell model, mine placement,
action processing, diff application, undo/redo history and the engine
that ties them together.
"""
from .actions import (
    Action,
    ClearFlag,
    FlagCell,
    IncrementMines,
    IncrementMinesPercent,
    OpenCell,
    Redo,
    ResizeH,
    ResizeV,
    Restart,
    Sign,
    Surrender,
    Undo,
)
from .board import Board, HistoryCorruptionError, WinState
from .cell import Cell, Empty, Flag, Hidden, Mine, Shown
from .config import BoardConfig, BEGINNER, INTERMEDIATE, EXPERT
from .diff import Diff, MultiCell, SingleCell, SingleCellDiff
from .engine import Minesweeper
from .history import History
from .processor import process
from .environment import MinesweeperEnv, make_vec_env

__all__ = [
    "Action",
    "ClearFlag",
    "FlagCell",
    "IncrementMines",
    "IncrementMinesPercent",
    "OpenCell",
    "Redo",
    "ResizeH",
    "ResizeV",
    "Restart",
    "Sign",
    "Surrender",
    "Undo",
    "Board",
    "HistoryCorruptionError",
    "WinState",
    "Cell",
    "Empty",
    "Flag",
    "Hidden",
    "Mine",
    "Shown",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "Diff",
    "MultiCell",
    "SingleCell",
    "SingleCellDiff",
    "Minesweeper",
    "History",
    "process",
    "MinesweeperEnv",
    "make_vec_env",
]
