"""
Minesweeper engine.

Ties configuration, board, history and pending input together. Each call
to ``update`` processes at most one submitted action.
"""
import logging
from dataclasses import dataclass, replace
from typing import Callable, Optional

import numpy as np

from .actions import (
    GAME_ACTIONS,
    Action,
    GameAction,
    IncrementMines,
    IncrementMinesPercent,
    OpenCell,
    Redo,
    ResizeH,
    ResizeV,
    Restart,
    RestartChange,
    Undo,
)
from .board import Board, WinState
from .cell import Cell
from .config import BoardConfig
from .grid import Cursor
from .history import History
from .placement import generate_mine_mask
from .processor import process

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

TITLE = "Minesweeper!"
TITLE_SHORT = "mnswpr!!"
RETRY = "(R)etry (Q)uit"
RETRY_SHORT = "(R) (Q)"
NEXT = "(N)ext (P)rev"
NEXT_SHORT = "(N) (P)"


@dataclass
class InputState:
    """Cursor position and the single pending action."""

    cursor: Cursor = (0, 0)
    action: Optional[Action] = None


# ============================================================================
# Engine
# ============================================================================

class Minesweeper:
    """
    Minesweeper game engine.

    Owns one board and its history. Game commands are turned into diffs
    and pushed through the history; restarts replace both.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the engine.

        Args:
            config: Board configuration, clamped before use
                (default: 32x16 with 100 mines).
            rng: Random generator used for mine placement.
            seed: Seed for a fresh generator when ``rng`` is not given.
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.input_state = InputState()
        self.history = History()
        self._new_board(config or BoardConfig())

    def _new_board(self, config: BoardConfig) -> None:
        self.config = config.clamped()
        self.board = Board(self.config)
        self.history.clear()
        self._update_display_text()

    def _update_display_text(self) -> None:
        width = self.config.width
        self.title = TITLE_SHORT if width < len(TITLE) else TITLE
        if width < max(len(RETRY), len(NEXT)):
            self.text_top, self.text_bottom = RETRY_SHORT, NEXT_SHORT
        else:
            self.text_top, self.text_bottom = RETRY, NEXT
        self.width_digits = len(str(width - 1))
        self.height_digits = len(str(self.config.height - 1))
        self.mines_digits = len(str(self.config.num_mines))

    # ========================================================================
    # Input
    # ========================================================================

    def submit(self, action: Action) -> None:
        """Set the action processed by the next ``update``."""
        self.input_state.action = action

    def move_cursor(self, dx: int, dy: int) -> None:
        """Move the cursor, stopping at the board edges."""
        x, y = self.input_state.cursor
        self.input_state.cursor = (
            min(max(x + dx, 0), self.config.width - 1),
            min(max(y + dy, 0), self.config.height - 1),
        )

    # ========================================================================
    # Update Cycle
    # ========================================================================

    def update(self) -> bool:
        """
        Process the pending action, if any.

        Returns:
            True if the board or configuration changed.
        """
        action = self.input_state.action
        if action is None:
            return False
        self.input_state.action = None
        logger.debug("Processing %s", action)

        if isinstance(action, GAME_ACTIONS):
            return self._play(action)
        if isinstance(action, Undo):
            return self._travel(self.history.step_back)
        if isinstance(action, Redo):
            return self._travel(self.history.step_forward)
        if isinstance(action, Restart):
            self._restart(action.change)
            return True
        return False

    def _play(self, action: GameAction) -> bool:
        if isinstance(action, OpenCell) and self.board.win_state == WinState.UNTOUCHED:
            cell = self.board.get_cell(action.cursor)
            if cell is None or cell.is_flagged:
                return False
            self._place_mines(action.cursor)

        diff = process(action, self.board, self.config)
        if diff is None:
            return False

        previous = self.board.win_state
        self.history.push(diff, self.board)
        self._log_outcome(previous)
        return True

    def _travel(self, step: Callable[[Board], bool]) -> bool:
        previous = self.board.win_state
        moved = step(self.board)
        if moved:
            self._log_outcome(previous)
        return moved

    def _place_mines(self, cursor: Cursor) -> None:
        mask = generate_mine_mask(
            self.config.width,
            self.config.height,
            self.config.num_mines,
            cursor,
            self.rng,
        )
        self.board.seed_mines(mask)
        self.history.adopt_contents(self.board)
        logger.info(
            "Game started: %dx%d with %d mines",
            self.config.width, self.config.height, self.config.num_mines,
        )

    def _log_outcome(self, previous: WinState) -> None:
        current = self.board.win_state
        if current != previous:
            logger.info("Win state %s -> %s", previous.name, current.name)

    # ========================================================================
    # Restart
    # ========================================================================

    def _restart(self, change: Optional[RestartChange]) -> None:
        config = self._changed_config(change) if change else self.config
        cursor = self.input_state.cursor
        self._new_board(config)
        self.input_state.cursor = (
            min(cursor[0], self.config.width - 1),
            min(cursor[1], self.config.height - 1),
        )
        logger.info(
            "Restarted: %dx%d with %d mines",
            self.config.width, self.config.height, self.config.num_mines,
        )

    def _changed_config(self, change: RestartChange) -> BoardConfig:
        """Apply a restart change; the result is clamped by ``_new_board``."""
        width = self.config.width
        height = self.config.height
        mines = self.config.num_mines

        if isinstance(change, ResizeH):
            width = max(1, width + change.sign.value)
        elif isinstance(change, ResizeV):
            height = max(1, height + change.sign.value)
        elif isinstance(change, IncrementMines):
            mines = max(0, mines + change.sign.value)
        elif isinstance(change, IncrementMinesPercent):
            step = max(1, self.config.size // 100)
            if change.sign.value > 0:
                mines = _next_multiple_of(mines + 1, step)
            else:
                mines = _next_multiple_of(max(0, mines - step), step)

        mines = min(mines, width * height - 1)
        return replace(self.config, width=width, height=height, num_mines=mines)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def win_state(self) -> WinState:
        return self.board.win_state

    @property
    def cursor(self) -> Cursor:
        return self.input_state.cursor

    def get_cell(self, cursor: Cursor) -> Optional[Cell]:
        """Bounds-checked cell lookup."""
        return self.board.get_cell(cursor)

    def __str__(self) -> str:
        return str(self.board)


def _next_multiple_of(value: int, step: int) -> int:
    """Smallest multiple of ``step`` that is >= ``value``."""
    return -(-value // step) * step
