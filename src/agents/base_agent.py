"""
Base agent interface for automated Minesweeper players.

An agent only ever sees the observation a presentation layer would show:
hidden cells, flags and revealed counts, never the mine layout.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from minefield.cell import OBS_HIDDEN


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    Subclasses pick the next cell index to reveal from an observation.
    """

    def __init__(self, board_height: int, board_width: int) -> None:
        self.board_height = board_height
        self.board_width = board_width
        self.total_cells = board_height * board_width

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select the cell to reveal next.

        Args:
            observation: 2D array of cell observation codes.
            valid_actions: Optional flat mask of cells that may be revealed.

        Returns:
            Cell index (row * width + col).
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat cell index to (row, col) position."""
        return divmod(action, self.board_width)

    def valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """Flat mask of hidden cells in an observation."""
        return observation.flatten() == OBS_HIDDEN

    def reset(self) -> None:
        """Reset agent state for a new game."""
