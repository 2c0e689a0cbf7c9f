"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface over the board engine. The environment
keeps its own observation array and updates it from reveal outcomes.
"""
import random
from enum import Enum, auto
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .cell import OBS_HIDDEN, OBS_FLAGGED, OBS_MINE
from .generator import generate
from .moves import Loss


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


REWARD_WIN = 10.0
REWARD_LOSS = -10.0
REWARD_SAFE = 1.0
REWARD_INVALID = -0.1


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
        - 0-8 = revealed cell with adjacent mine count
        - 9 = the mine that ended the game

    Actions:
        Discrete action space of size width * height.
        Action i corresponds to cell at (i // width, i % width).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged, or game over)
    """

    metadata = {"render_modes": []}

    def __init__(self, config: Optional[BoardConfig] = None) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 8x8 with 10 mines).
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board: Board = generate(self.config)

        self.observation_space = spaces.Box(
            low=OBS_FLAGGED,
            high=OBS_MINE,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._observation = np.full(
            self.config.total_cells, OBS_HIDDEN, dtype=np.int8
        )
        self._game_state = GameState.PLAYING
        self._steps = 0

    @property
    def game_state(self) -> GameState:
        return self._game_state

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on a freshly generated board.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        board_seed = int(self.np_random.integers(2**32))
        self.board = generate(self.config, rng=random.Random(board_seed))
        self._observation.fill(OBS_HIDDEN)
        self._game_state = GameState.PLAYING
        self._steps = 0

        return self._get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal the cell at the action index.

        Args:
            action: Cell index to reveal (row * width + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).

        Raises:
            IndexOutOfRange: If action is outside the board.
        """
        reward = self._apply_reveal(int(action))
        self._steps += 1

        terminated = self._game_state != GameState.PLAYING
        return self._get_observation(), reward, terminated, False, self._get_info()

    def flag(self, action: int) -> bool:
        """Toggle a flag and mirror it in the observation."""
        if self._game_state != GameState.PLAYING:
            return False
        if not self.board.toggle_flag(action):
            return False
        cell = self.board.cell_at(action)
        self._observation[action] = cell.to_observation()
        return True

    def _apply_reveal(self, index: int) -> float:
        """Reveal a cell and copy the outcome into the observation."""
        if self._game_state != GameState.PLAYING:
            return REWARD_INVALID

        outcome = self.board.reveal(index)

        if isinstance(outcome, Loss):
            self._observation[outcome.index] = OBS_MINE
            self._game_state = GameState.LOST
            return REWARD_LOSS

        if not outcome.indices:
            return REWARD_INVALID

        for revealed in outcome.indices:
            self._observation[revealed] = self.board.cell_at(revealed).adjacent_mines

        if self.board.is_cleared:
            self._game_state = GameState.WON
            return REWARD_WIN
        return REWARD_SAFE

    def _get_observation(self) -> np.ndarray:
        return self._observation.reshape(
            self.config.height, self.config.width
        ).copy()

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.board.revealed_count,
            "total_safe": self.board.safe_cell_count,
            "game_state": self._game_state.name,
            "valid_actions": len(self.board.hidden_indices()),
        }

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        return self._observation == OBS_HIDDEN


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    config: Optional[BoardConfig] = None,
) -> gym.vector.VectorEnv:
    """
    Create vectorized environment for parallel play.

    Args:
        n_envs: Number of parallel environments.
        config: Board configuration.

    Returns:
        Vectorized environment.
    """
    def make_env() -> MinesweeperEnv:
        return MinesweeperEnv(config=config)

    return gym.vector.SyncVectorEnv([make_env for _ in range(n_envs)])
