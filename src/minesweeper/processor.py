"""
Action processing for Minesweeper.

Translates a game command into the diff it would cause, without touching
the board. Commands that would change nothing produce None.
"""
from collections import deque
from dataclasses import replace
from typing import Deque, List, Optional, Set

from .actions import ClearFlag, FlagCell, GameAction, OpenCell, Surrender
from .board import Board, WinState
from .cell import Cell, Empty, Flag, Hidden, Shown
from .config import BoardConfig
from .diff import Diff, MultiCell, SingleCell, SingleCellDiff
from .grid import Cursor, neighbors, to_index


def process(
    action: GameAction,
    board: Board,
    config: BoardConfig,
) -> Optional[Diff]:
    """
    Compute the diff a game command would cause.

    Args:
        action: Command to evaluate.
        board: Current board, read only.
        config: Board configuration (flag cap policy).

    Returns:
        The diff to apply, or None if the command is a no-op.
    """
    if board.win_state.is_over:
        return None

    if isinstance(action, OpenCell):
        return _open_cell(board, action.cursor)
    if isinstance(action, FlagCell):
        return _flag_cell(board, config, action.cursor)
    if isinstance(action, ClearFlag):
        return _clear_flag(board, action.cursor)
    if isinstance(action, Surrender):
        return _surrender(board)
    return None


# ============================================================================
# Opening
# ============================================================================

def _open_cell(board: Board, cursor: Cursor) -> Optional[Diff]:
    # Mines must be seeded before anything can be opened
    if board.win_state != WinState.ONGOING:
        return None
    cell = board.get_cell(cursor)
    if cell is None or not _can_open(cell):
        return None

    index = to_index(cursor[0], cursor[1], board.width)
    change = _show(index, cell)
    if cell.content == Empty(0):
        return MultiCell(tuple(_expand(board, cursor, change)))
    return SingleCell(change)


def _can_open(cell: Cell) -> bool:
    """Closed cells open unless they carry a definite flag."""
    return cell.is_hidden and cell.flag != Flag.FLAGGED


def _expand(
    board: Board, origin: Cursor, first: SingleCellDiff
) -> List[SingleCellDiff]:
    """
    Flood-reveal around an opened zero cell.

    Every hidden neighbor of a zero cell is shown; neighbors that are zero
    themselves are queued for further expansion.
    """
    changes = [first]
    visited: Set[int] = {first.index}
    queue: Deque[Cursor] = deque([origin])

    while queue:
        x, y = queue.popleft()
        for nx, ny in neighbors(x, y, board.width, board.height):
            index = to_index(nx, ny, board.width)
            if index in visited:
                continue
            cell = board.cell_at(index)
            if not cell.is_hidden:
                continue
            visited.add(index)
            changes.append(_show(index, cell))
            if cell.content == Empty(0):
                queue.append((nx, ny))

    return changes


def _show(index: int, cell: Cell) -> SingleCellDiff:
    return SingleCellDiff(index, cell, replace(cell, visibility=Shown()))


# ============================================================================
# Flags
# ============================================================================

def _flag_cell(
    board: Board, config: BoardConfig, cursor: Cursor
) -> Optional[Diff]:
    cell = board.get_cell(cursor)
    if cell is None or not cell.is_hidden:
        return None

    flag = cell.flag.next()
    capped = config.cap_flags and board.flagged_cells >= board.mines
    if flag == Flag.FLAGGED and capped:
        flag = flag.next()

    index = to_index(cursor[0], cursor[1], board.width)
    return SingleCell(
        SingleCellDiff(index, cell, replace(cell, visibility=Hidden(flag)))
    )


def _clear_flag(board: Board, cursor: Cursor) -> Optional[Diff]:
    cell = board.get_cell(cursor)
    if cell is None or not cell.is_hidden or cell.flag == Flag.CLEAR:
        return None

    index = to_index(cursor[0], cursor[1], board.width)
    return SingleCell(
        SingleCellDiff(index, cell, replace(cell, visibility=Hidden()))
    )


# ============================================================================
# Surrender
# ============================================================================

def _surrender(board: Board) -> Optional[Diff]:
    if board.win_state != WinState.ONGOING:
        return None
    changes = tuple(
        _show(index, board.cell_at(index))
        for index in board.hidden_indices()
    )
    if not changes:
        return None
    return MultiCell(changes)
