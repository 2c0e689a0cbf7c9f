"""
Board generator for Minesweeper.

Places mines uniformly at random and computes adjacency counts for
every cell. Mines may land on any cell; there is no first-click safety.
"""
import logging
import random
from typing import Iterable, List, Optional, Set

from .board import Board, BoardConfig, neighbor_indices
from .cell import Cell
from .errors import InvalidConfig

logger = logging.getLogger(__name__)


# ============================================================================
# Mine Placement (Low-level)
# ============================================================================

def place_mines(total_cells: int, num_mines: int, rng: random.Random) -> Set[int]:
    """
    Pick distinct mine indices by repeated uniform draws.

    A draw that lands on an existing mine is discarded and redrawn.

    Args:
        total_cells: Number of cells on the board.
        num_mines: Mines to place, strictly fewer than total_cells.
        rng: Random source to draw from.

    Returns:
        Set of exactly num_mines indices in [0, total_cells).
    """
    if not 0 <= num_mines < total_cells:
        raise InvalidConfig(
            f"Cannot place {num_mines} mines on {total_cells} cells"
        )
    mines: Set[int] = set()
    while len(mines) < num_mines:
        mines.add(rng.randrange(total_cells))
    return mines


def count_adjacent_mines(
    index: int, width: int, height: int, mines: Set[int]
) -> int:
    """Count mines among the grid-clipped neighbors of index."""
    return sum(
        1 for neighbor in neighbor_indices(index, width, height)
        if neighbor in mines
    )


# ============================================================================
# Board Construction
# ============================================================================

def build_board(width: int, height: int, mine_indices: Iterable[int]) -> Board:
    """
    Build a hidden board from an explicit mine layout.

    Adjacency counts are computed for every cell, mines included.

    Args:
        width: Number of columns.
        height: Number of rows.
        mine_indices: Flat indices of the mine cells.

    Returns:
        A new board with every cell hidden.

    Raises:
        InvalidConfig: On bad dimensions, duplicate or out-of-range mine
            indices, or a layout with no safe cell.
    """
    if width < 1 or height < 1:
        raise InvalidConfig("Board dimensions must be positive")
    total_cells = width * height
    indices = list(mine_indices)
    mines = set(indices)
    if len(mines) != len(indices):
        raise InvalidConfig("Duplicate mine indices")
    if any(not 0 <= i < total_cells for i in mines):
        raise InvalidConfig(f"Mine index outside board of {total_cells} cells")
    if len(mines) >= total_cells:
        raise InvalidConfig(
            f"Too many mines: {len(mines)} (max {total_cells - 1})"
        )

    cells: List[Cell] = [
        Cell(
            is_mine=i in mines,
            adjacent_mines=count_adjacent_mines(i, width, height, mines),
        )
        for i in range(total_cells)
    ]
    return Board(width, height, cells)


def generate(
    config: BoardConfig,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> Board:
    """
    Generate a new board for one game.

    Args:
        config: Board dimensions and mine count or percentage.
        rng: Random source. A fresh one is created per call when omitted.
        seed: Seed for the fresh random source; ignored when rng is given.

    Returns:
        A new board with mines placed and all cells hidden.

    Raises:
        InvalidConfig: If the configuration cannot produce a playable board.
    """
    config.validate()
    if rng is None:
        rng = random.Random(seed)

    mines = place_mines(config.total_cells, config.resolved_mines, rng)
    board = build_board(config.width, config.height, mines)
    logger.debug(
        "Generated %dx%d board with %d mines",
        config.width, config.height, len(mines),
    )
    return board
