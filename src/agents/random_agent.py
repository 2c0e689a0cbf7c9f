"""
Random agent for Minesweeper.

Baseline player that reveals hidden cells uniformly at random.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


class RandomAgent(BaseAgent):
    """Agent that reveals a uniformly random hidden cell each move."""

    def __init__(
        self,
        board_height: int = 8,
        board_width: int = 8,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
            seed: Random seed for reproducibility.
        """
        super().__init__(board_height, board_width)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid action.

        Raises:
            ValueError: If no cell is left to reveal.
        """
        if valid_actions is None:
            valid_actions = self.valid_actions_from_obs(observation)

        valid_indices = np.flatnonzero(valid_actions)
        if len(valid_indices) == 0:
            raise ValueError("No hidden cells left to reveal")

        return int(self.rng.choice(valid_indices))
