"""
Board module for Minesweeper game.

Implements the board configuration and the board itself: a flat,
row-major grid of cells addressed by index (row * width + col).
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .cell import Cell, CellView
from .errors import InvalidConfig, IndexOutOfRange
from . import moves


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
        mine_percentage: Share of cells holding mines (0-100). When set it
            overrides num_mines.
    """

    width: int = 8
    height: int = 8
    num_mines: int = 10
    mine_percentage: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self.validate()

    def validate(self) -> None:
        """
        Ensure configuration values describe a playable board.

        Raises:
            InvalidConfig: On non-positive dimensions, a negative count, a
                percentage outside 0-100, or no safe cell left.
        """
        if self.width < 1 or self.height < 1:
            raise InvalidConfig("Board dimensions must be positive")
        if self.mine_percentage is not None:
            if (
                not isinstance(self.mine_percentage, int)
                or isinstance(self.mine_percentage, bool)
            ):
                raise InvalidConfig("Mine percentage must be an integer")
            if not 0 <= self.mine_percentage <= 100:
                raise InvalidConfig("Mine percentage must be between 0 and 100")
        elif self.num_mines < 0:
            raise InvalidConfig("Number of mines cannot be negative")
        max_mines = self.total_cells - 1
        if self.resolved_mines > max_mines:
            raise InvalidConfig(
                f"Too many mines: {self.resolved_mines} (max {max_mines})"
            )

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def resolved_mines(self) -> int:
        """Mine count after applying the percentage, if one is set."""
        if self.mine_percentage is not None:
            return self.total_cells * self.mine_percentage // 100
        return self.num_mines


# Preset difficulty levels
BEGINNER = BoardConfig(8, 8, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)


# ============================================================================
# Neighbor Utilities
# ============================================================================

def neighbor_indices(index: int, width: int, height: int) -> List[int]:
    """
    Get indices of the up-to-8 cells surrounding a cell.

    Neighbors are clipped at the grid edges; there is no wraparound.

    Args:
        index: Flat index of the center cell.
        width: Number of columns.
        height: Number of rows.

    Returns:
        Flat indices of valid neighbors.
    """
    row, col = divmod(index, width)
    neighbors = []
    for new_row in range(max(0, row - 1), min(height, row + 2)):
        for new_col in range(max(0, col - 1), min(width, col + 2)):
            if new_row == row and new_col == col:
                continue
            neighbors.append(new_row * width + new_col)
    return neighbors


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    Owns a fixed-size grid of cells. Callers read cells through cell_at(),
    which returns immutable views, and change visibility only through
    reveal() and toggle_flag().
    """

    def __init__(self, width: int, height: int, cells: List[Cell]) -> None:
        """
        Wrap an already generated grid.

        Args:
            width: Number of columns.
            height: Number of rows.
            cells: Row-major cells, exactly width * height of them.
        """
        if width < 1 or height < 1:
            raise InvalidConfig("Board dimensions must be positive")
        if len(cells) != width * height:
            raise InvalidConfig(
                f"Expected {width * height} cells, got {len(cells)}"
            )
        self._width = width
        self._height = height
        self._cells = list(cells)
        self._mine_count = sum(1 for cell in self._cells if cell.is_mine)

    def __repr__(self) -> str:
        return (
            f"Board(width={self._width}, height={self._height}, "
            f"mines={self._mine_count})"
        )

    # ========================================================================
    # Indexing (Low-level)
    # ========================================================================

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._cells):
            raise IndexOutOfRange(
                f"Cell index {index} out of range for board of "
                f"{len(self._cells)} cells"
            )

    def _cell(self, index: int) -> Cell:
        """Board-owned cell, for the reveal engine only."""
        self._check_index(index)
        return self._cells[index]

    def index_of(self, row: int, col: int) -> int:
        """Convert (row, col) to a flat index."""
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise IndexOutOfRange(
                f"Position ({row}, {col}) outside "
                f"{self._width}x{self._height} board"
            )
        return row * self._width + col

    def position_of(self, index: int) -> Tuple[int, int]:
        """Convert a flat index to (row, col)."""
        self._check_index(index)
        return divmod(index, self._width)

    def neighbors(self, index: int) -> List[int]:
        """Indices of the cells surrounding index."""
        self._check_index(index)
        return neighbor_indices(index, self._width, self._height)

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, index: int) -> moves.RevealOutcome:
        """Reveal a cell; see minefield.moves.reveal."""
        return moves.reveal(self, index)

    def toggle_flag(self, index: int) -> bool:
        """Flag or unflag a cell; see minefield.moves.toggle_flag."""
        return moves.toggle_flag(self, index)

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def dimensions(self) -> Tuple[int, int]:
        """Get (width, height)."""
        return self._width, self._height

    def cell_count(self) -> int:
        return len(self._cells)

    def mine_count(self) -> int:
        return self._mine_count

    def cell_at(self, index: int) -> CellView:
        """
        Get a read-only view of the cell at index.

        Raises:
            IndexOutOfRange: If index is outside the board.
        """
        return self._cell(index).view()

    def mine_indices(self) -> List[int]:
        """Indices of all mine cells."""
        return [i for i, cell in enumerate(self._cells) if cell.is_mine]

    def hidden_indices(self) -> List[int]:
        """Indices of cells that can still be revealed."""
        return [i for i, cell in enumerate(self._cells) if cell.is_hidden]

    @property
    def revealed_count(self) -> int:
        """Number of revealed cells that are not mines."""
        return sum(
            1 for cell in self._cells if cell.is_revealed and not cell.is_mine
        )

    @property
    def safe_cell_count(self) -> int:
        return len(self._cells) - self._mine_count

    @property
    def is_cleared(self) -> bool:
        """Check if every non-mine cell has been revealed."""
        return self.revealed_count == self.safe_cell_count

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D (height, width) int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        values = [cell.view().to_observation() for cell in self._cells]
        return np.array(values, dtype=np.int8).reshape(
            self._height, self._width
        )
