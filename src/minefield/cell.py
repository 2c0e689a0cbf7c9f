"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their visibility
(hidden/revealed/flagged) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visibility states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# Observation codes shared by cells and board snapshots
OBS_HIDDEN = -1
OBS_FLAGGED = -2
OBS_MINE = 9


# ============================================================================
# Cell View
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """
    Read-only snapshot of a cell handed out by the board.

    Attributes:
        is_mine: Whether the cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Visibility at the time the view was taken.
    """

    is_mine: bool
    adjacent_mines: int
    state: CellState

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to an observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return OBS_HIDDEN
        if self.state == CellState.FLAGGED:
            return OBS_FLAGGED
        if self.is_mine:
            return OBS_MINE
        return self.adjacent_mines


# ============================================================================
# Cell
# ============================================================================

class Cell:
    """
    A single board-owned cell in the Minesweeper grid.

    Mine status and adjacency count are fixed at construction; only the
    visibility state changes afterwards, through reveal() and toggle_flag().
    """

    __slots__ = ("_is_mine", "_adjacent_mines", "state")

    def __init__(
        self,
        is_mine: bool = False,
        adjacent_mines: int = 0,
        state: CellState = CellState.HIDDEN,
    ) -> None:
        if not 0 <= adjacent_mines <= 8:
            raise ValueError(f"Adjacent mine count must be 0-8, got {adjacent_mines}")
        self._is_mine = is_mine
        self._adjacent_mines = adjacent_mines
        self.state = state

    def __repr__(self) -> str:
        return (
            f"Cell(is_mine={self._is_mine}, "
            f"adjacent_mines={self._adjacent_mines}, state={self.state})"
        )

    @property
    def is_mine(self) -> bool:
        """Check if cell contains a mine."""
        return self._is_mine

    @property
    def adjacent_mines(self) -> int:
        """Count of mines in neighboring cells (0-8)."""
        return self._adjacent_mines

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def view(self) -> CellView:
        """Take an immutable snapshot of this cell."""
        return CellView(self._is_mine, self._adjacent_mines, self.state)
