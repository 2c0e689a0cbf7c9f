"""
Unit tests for the board generator.
"""
import random

import pytest
from minefield import BoardConfig, InvalidConfig, build_board, generate
from minefield.generator import place_mines


class ScriptedRandom:
    """Random source replaying a fixed sequence of indices."""

    def __init__(self, draws) -> None:
        self._draws = iter(draws)

    def randrange(self, stop: int) -> int:
        return next(self._draws)


def brute_force_count(board, index: int) -> int:
    """Count mines around index by scanning every cell."""
    row, col = board.position_of(index)
    count = 0
    for other in range(board.cell_count()):
        other_row, other_col = board.position_of(other)
        if other == index:
            continue
        if abs(other_row - row) <= 1 and abs(other_col - col) <= 1:
            count += board.cell_at(other).is_mine
    return count


# ============================================================================
# Generation Tests
# ============================================================================

class TestGenerate:
    """Test generate()."""

    @pytest.mark.parametrize(
        "width,height,mines",
        [(1, 1, 0), (1, 5, 2), (8, 8, 10), (30, 16, 99), (3, 3, 8)],
    )
    def test_cell_and_mine_counts(self, width: int, height: int, mines: int) -> None:
        """Board has width*height cells and exactly the configured mines."""
        board = generate(BoardConfig(width, height, mines), seed=7)
        assert board.cell_count() == width * height
        assert board.mine_count() == mines
        assert len(set(board.mine_indices())) == mines

    def test_percentage_resolves_mine_count(self) -> None:
        board = generate(BoardConfig(8, 8, 16, mine_percentage=25), seed=1)
        assert board.mine_count() == 16

    def test_percentage_takes_precedence(self) -> None:
        board = generate(BoardConfig(10, 10, 1, mine_percentage=30), seed=1)
        assert board.mine_count() == 30

    def test_all_cells_start_hidden(self, valid_config: BoardConfig) -> None:
        board = generate(valid_config, seed=3)
        assert board.hidden_indices() == list(range(81))

    def test_same_seed_same_layout(self, valid_config: BoardConfig) -> None:
        first = generate(valid_config, seed=42)
        second = generate(valid_config, seed=42)
        assert first.mine_indices() == second.mine_indices()

    def test_injected_rng_is_used(self, valid_config: BoardConfig) -> None:
        first = generate(valid_config, rng=random.Random(5))
        second = generate(valid_config, rng=random.Random(5))
        assert first.mine_indices() == second.mine_indices()

    def test_adjacency_matches_enumeration(self) -> None:
        """Every safe cell's count equals a brute-force neighbor scan."""
        board = generate(BoardConfig(7, 5, 12), seed=11)
        for index in range(board.cell_count()):
            if not board.cell_at(index).is_mine:
                assert board.cell_at(index).adjacent_mines == brute_force_count(
                    board, index
                )

    def test_revalidates_mutated_config(self) -> None:
        """A config changed after construction is checked again."""
        config = BoardConfig(3, 3, 2)
        config.num_mines = 9
        with pytest.raises(InvalidConfig, match="Too many mines"):
            generate(config)


# ============================================================================
# Mine Placement Tests
# ============================================================================

class TestPlaceMines:
    """Test rejection sampling of mine indices."""

    def test_collisions_are_redrawn(self) -> None:
        rng = ScriptedRandom([3, 3, 3, 5])
        assert place_mines(9, 2, rng) == {3, 5}

    def test_zero_mines(self) -> None:
        assert place_mines(9, 0, random.Random(0)) == set()

    def test_too_many_mines_raises_error(self) -> None:
        with pytest.raises(InvalidConfig):
            place_mines(4, 4, random.Random(0))


# ============================================================================
# Fixed Layout Tests
# ============================================================================

class TestBuildBoard:
    """Test boards built from explicit mine layouts."""

    def test_adjacency_on_fixed_board(self, corner_mines_board) -> None:
        """Counts cover mine cells too."""
        counts = [
            corner_mines_board.cell_at(i).adjacent_mines for i in range(9)
        ]
        assert counts == [2, 2, 1, 2, 3, 1, 1, 1, 0]

    def test_surrounded_cell_counts_eight(self) -> None:
        board = build_board(3, 3, [0, 1, 2, 3, 5, 6, 7, 8])
        assert board.cell_at(4).adjacent_mines == 8

    def test_duplicate_mines_raise_error(self) -> None:
        with pytest.raises(InvalidConfig, match="Duplicate"):
            build_board(3, 3, [1, 1])

    def test_out_of_range_mine_raises_error(self) -> None:
        with pytest.raises(InvalidConfig, match="outside board"):
            build_board(3, 3, [9])

    def test_all_mines_raises_error(self) -> None:
        with pytest.raises(InvalidConfig, match="Too many mines"):
            build_board(2, 1, [0, 1])

    def test_zero_width_raises_error(self) -> None:
        with pytest.raises(InvalidConfig):
            build_board(0, 3, [])
