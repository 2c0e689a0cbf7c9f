"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src and the project root to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT))

from minefield import Board, BoardConfig, Cell, build_board


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def corner_mines_board() -> Board:
    """
    3x3 board with mines in the top-left corner.

        * * 1
        * 3 1
        1 1 0
    """
    return build_board(3, 3, [0, 1, 3])


@pytest.fixture
def empty_board() -> Board:
    """3x3 board with no mines, every cell zero."""
    return build_board(3, 3, [])


@pytest.fixture
def single_mine_board() -> Board:
    """4x4 board with one mine at index 0."""
    return build_board(4, 4, [0])


@pytest.fixture
def wall_board() -> Board:
    """5x1 strip with a mine in the middle: 0 1 * 1 0."""
    return build_board(5, 1, [2])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)


@pytest.fixture
def mine_free_config() -> BoardConfig:
    """Small board without mines; any first reveal wins."""
    return BoardConfig(3, 3, 0)
