"""
Pytest configuration and shared fixtures.
"""
import sys
from pathlib import Path
from typing import Iterable, List

import numpy as np
import pytest

# Add src to path for imports, and the project root for main.py
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT))

from minesweeper import Board, BoardConfig, Cell, Minesweeper
from minesweeper.grid import Cursor, to_index


# ============================================================================
# Helpers
# ============================================================================

def make_board(width: int, height: int, mines: Iterable[Cursor]) -> Board:
    """Create an ongoing board with mines at the given (x, y) positions."""
    positions: List[Cursor] = list(mines)
    board = Board(BoardConfig(width, height, len(positions)))
    mask = np.zeros(width * height, dtype=bool)
    for x, y in positions:
        mask[to_index(x, y, width)] = True
    board.seed_mines(mask)
    return board


def recount(board: Board) -> tuple:
    """Recompute (flagged, closed_empty, open_mine) from the cells."""
    flagged = sum(1 for cell in board.cells if cell.is_flagged)
    closed_empty = sum(
        1 for cell in board.cells if cell.is_hidden and not cell.is_mine
    )
    open_mine = sum(1 for cell in board.cells if cell.is_shown and cell.is_mine)
    return flagged, closed_empty, open_mine


def counters(board: Board) -> tuple:
    return board.flagged_cells, board.closed_empty_cells, board.open_mine_cells


def snapshot(board: Board) -> tuple:
    """Everything that must survive an apply/undo round trip."""
    return tuple(board.cells), counters(board), board.win_state


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def corner_board() -> Board:
    """
    5x5 board with a single mine in the bottom-right corner.

    Opening (0, 0) reveals every safe cell.
    """
    return make_board(5, 5, [(4, 4)])


@pytest.fixture
def split_board() -> Board:
    """
    5x3 board with a wall of mines down the middle column.

        # * #        columns 0-1 and 3-4 are separate regions
    """
    return make_board(5, 3, [(2, 0), (2, 1), (2, 2)])


@pytest.fixture
def single_mine_board() -> Board:
    """8x8 board with one mine in the bottom-right corner."""
    return make_board(8, 8, [(7, 7)])


@pytest.fixture
def untouched_board() -> Board:
    """Fresh 8x8 board, mines not yet placed."""
    return Board(BoardConfig(8, 8, 10))


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def engine() -> Minesweeper:
    """Seeded 8x8 engine with 10 mines."""
    return Minesweeper(BoardConfig(8, 8, 10), seed=1234)


@pytest.fixture
def single_mine_engine() -> Minesweeper:
    """Seeded 8x8 engine with 1 mine."""
    return Minesweeper(BoardConfig(8, 8, 1), seed=42)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()
