"""
Player moves on a Minesweeper board.

Revealing a zero-count cell flood fills across its neighbors until the
fill reaches cells with a positive adjacent mine count.
"""
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, FrozenSet, List, Set, Union

from .cell import CellState

if TYPE_CHECKING:
    from .board import Board

logger = logging.getLogger(__name__)


# ============================================================================
# Outcomes
# ============================================================================

@dataclass(frozen=True)
class Loss:
    """The revealed cell was a mine."""

    index: int


@dataclass(frozen=True)
class Revealed:
    """
    Cells that went from hidden to revealed during one move.

    Empty when the target was already revealed or is flagged.
    """

    indices: FrozenSet[int]

    def __len__(self) -> int:
        return len(self.indices)

    def __contains__(self, index: object) -> bool:
        return index in self.indices


RevealOutcome = Union[Loss, Revealed]


# ============================================================================
# Moves
# ============================================================================

def reveal(board: "Board", index: int) -> RevealOutcome:
    """
    Reveal the cell at index.

    Args:
        board: Board to play on.
        index: Flat index of the target cell.

    Returns:
        Loss if the target is a mine, otherwise Revealed with every index
        uncovered by this move.

    Raises:
        IndexOutOfRange: If index is outside the board. Nothing is changed.
    """
    target = board._cell(index)
    if target.state != CellState.HIDDEN:
        return Revealed(frozenset())

    if target.is_mine:
        target.reveal()
        logger.debug("Mine hit at index %d", index)
        return Loss(index)

    revealed = _flood_fill(board, index)
    logger.debug("Revealed %d cells from index %d", len(revealed), index)
    return Revealed(frozenset(revealed))


def _flood_fill(board: "Board", start: int) -> Set[int]:
    """Reveal start and spread through zero-count cells."""
    revealed: Set[int] = set()
    seen = {start}
    stack: List[int] = [start]

    while stack:
        index = stack.pop()
        cell = board._cell(index)
        if not cell.reveal():
            continue
        revealed.add(index)

        if cell.adjacent_mines != 0:
            continue
        for neighbor in board.neighbors(index):
            if neighbor not in seen and board._cell(neighbor).is_hidden:
                seen.add(neighbor)
                stack.append(neighbor)

    return revealed


def toggle_flag(board: "Board", index: int) -> bool:
    """
    Toggle the flag on a hidden cell.

    Returns:
        True if the flag was toggled, False if the cell is revealed.

    Raises:
        IndexOutOfRange: If index is outside the board.
    """
    return board._cell(index).toggle_flag()
