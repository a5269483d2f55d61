"""
Gymnasium environment wrapper for the Minesweeper engine.

Maps flat integer actions onto engine commands so the engine can be
driven through the standard step/reset interface.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .actions import ClearFlag, FlagCell, OpenCell
from .board import WinState
from .config import BoardConfig
from .engine import Minesweeper
from .grid import to_cursor

# Command selected by action // size
COMMANDS = (OpenCell, FlagCell, ClearFlag)


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - -3 = cell flagged as maybe
        - 0-8 = shown cell with adjacent mine count
        - 9 = shown mine

    Actions:
        Discrete action space of size 3 * width * height.
        ``action // size`` picks open, flag or clear-flag and
        ``action % size`` the cell index (y * width + x).

    Rewards:
        - +1 for opening a safe cell
        - +10 for winning the game
        - -10 for opening a mine
        - 0 for a flag change
        - -0.1 for an action that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration, clamped by the engine.
            render_mode: How to render the environment.
        """
        super().__init__()

        self.engine = Minesweeper(config)
        self.config = self.engine.config
        self.render_mode = render_mode
        self._size = self.config.size

        self.observation_space = spaces.Box(
            low=-3,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(len(COMMANDS) * self._size)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new untouched board.

        Mines are not placed until the first open action, drawn from the
        environment's seeded generator so a given seed reproduces the board.

        Args:
            seed: Seed for the generator used in mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (fully hidden observation, info dict).
        """
        super().reset(seed=seed)
        self.engine = Minesweeper(self.config, rng=self.np_random)
        self._steps = 0

        return self.engine.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Submit one open, flag or clear-flag command to the engine.

        Args:
            action: Flat index; ``action // size`` selects the command
                (0 open, 1 flag, 2 clear flag) and ``action % size`` the
                cell at (index % width, index // width).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
            ``terminated`` is set once the game is won or lost; episodes
            are never truncated.
        """
        command, cursor = self._decode_action(int(action))
        self._steps += 1

        self.engine.submit(command(cursor))
        changed = self.engine.update()
        reward = self._calculate_reward(command, changed)

        observation = self.engine.board.get_observation()
        terminated = self.engine.win_state.is_over

        return observation, reward, terminated, False, self._get_info()

    def _decode_action(self, action: int):
        """Split a flat action into its command class and cursor."""
        kind, index = divmod(action, self._size)
        return COMMANDS[kind], to_cursor(index, self.config.width)

    def _calculate_reward(self, command, changed: bool) -> float:
        if not changed:
            return -0.1
        state = self.engine.win_state
        if state == WinState.WON:
            return 10.0
        if state == WinState.LOST:
            return -10.0
        if command is OpenCell:
            return 1.0
        return 0.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.engine.board
        return {
            "steps": self._steps,
            "closed_safe": board.closed_empty_cells,
            "flagged": board.flagged_cells,
            "game_state": board.win_state.name,
            "valid_actions": int(self.get_action_mask().sum()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return str(self.engine)
        if self.render_mode == "human":
            print(self.engine)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the board.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.engine.win_state.is_over:
            return mask
        obs = self.engine.board.get_observation().ravel()
        size = self._size
        mask[:size] = (obs == -1) | (obs == -3)
        mask[size:2 * size] = obs < 0
        mask[2 * size:] = (obs == -2) | (obs == -3)
        return mask


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    config: Optional[BoardConfig] = None,
) -> gym.vector.VectorEnv:
    """
    Run several independent boards in worker processes.

    Each worker owns its own engine; seeding the vector reset gives every
    board its own reproducible mine placement.

    Args:
        n_envs: Number of boards.
        config: Board configuration shared by all boards.

    Returns:
        Vectorized environment batching observations as (n_envs, height, width).
    """
    def make_board_env() -> MinesweeperEnv:
        return MinesweeperEnv(config=config)

    return gym.vector.AsyncVectorEnv([make_board_env] * n_envs)
