"""
Minesweeper board engine.

Provides board generation, the reveal/flag moves, and read-only board
accessors for presentation layers.
"""
from .cell import Cell, CellState, CellView
from .errors import MinefieldError, InvalidConfig, IndexOutOfRange
from .board import Board, BoardConfig, BEGINNER, INTERMEDIATE, EXPERT
from .moves import Loss, Revealed, RevealOutcome, reveal, toggle_flag
from .generator import generate, build_board
from .environment import MinesweeperEnv, make_vec_env

__all__ = [
    "Cell",
    "CellState",
    "CellView",
    "MinefieldError",
    "InvalidConfig",
    "IndexOutOfRange",
    "Board",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "Loss",
    "Revealed",
    "RevealOutcome",
    "reveal",
    "toggle_flag",
    "generate",
    "build_board",
    "cell_at",
    "MinesweeperEnv",
    "make_vec_env",
]


def cell_at(board: Board, index: int) -> CellView:
    """Read-only view of the cell at index on board."""
    return board.cell_at(index)
