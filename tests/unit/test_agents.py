"""
Unit tests for agents, evaluation and the command line.
"""
import numpy as np
import pytest
from minefield import BoardConfig
from agents import BaseAgent, Evaluator, RandomAgent

import main


class TestRandomAgent:
    """Test random action selection."""

    def test_selects_only_valid_actions(self) -> None:
        agent = RandomAgent(2, 2, seed=0)
        mask = np.array([False, True, False, False])
        for _ in range(10):
            assert agent.select_action(np.zeros((2, 2)), mask) == 1

    def test_uses_hidden_cells_without_mask(self) -> None:
        agent = RandomAgent(2, 2, seed=0)
        obs = np.array([[0, -1], [1, -2]], dtype=np.int8)
        assert agent.select_action(obs) == 1

    def test_no_hidden_cells_raises(self) -> None:
        agent = RandomAgent(1, 2, seed=0)
        with pytest.raises(ValueError, match="No hidden cells"):
            agent.select_action(np.zeros((1, 2), dtype=np.int8))

    def test_action_to_position(self) -> None:
        assert RandomAgent(3, 4).action_to_position(6) == (1, 2)


class StubbornAgent(BaseAgent):
    """Agent that keeps choosing the same cell."""

    def select_action(self, observation, valid_actions=None) -> int:
        return 2


class TestEvaluator:
    """Test playing full games."""

    def test_mine_free_board_always_wins(
        self, mine_free_config: BoardConfig
    ) -> None:
        """First reveal floods the whole board."""
        result = Evaluator(mine_free_config, num_episodes=5, seed=0).evaluate(
            RandomAgent(3, 3, seed=0)
        )
        assert result.games == 5
        assert result.win_rate == 1.0
        assert result.avg_steps == 1.0
        assert result.avg_revealed == 9.0

    def test_repeated_invalid_moves_stop_at_step_limit(self) -> None:
        """A game that never ends is abandoned after max_steps."""
        config = BoardConfig(5, 5, 4)
        result = Evaluator(config, num_episodes=3, max_steps=10, seed=0).evaluate(
            StubbornAgent(5, 5)
        )
        assert result.games == 3
        assert 3 <= result.total_steps <= 30

    def test_results_are_bounded(self) -> None:
        config = BoardConfig(5, 5, 5)
        result = Evaluator(config, num_episodes=10, seed=4).evaluate(
            RandomAgent(5, 5, seed=4)
        )
        assert result.games == 10
        assert 0.0 <= result.win_rate <= 1.0
        assert result.avg_steps >= 1.0
        assert set(result.as_dict()) == {
            "win_rate", "avg_reward", "avg_steps", "avg_revealed",
        }


class TestCommandLine:
    """Test main.py."""

    def test_evaluate_prints_results(self, capsys) -> None:
        code = main.main([
            "evaluate", "--width", "3", "--height", "3",
            "--mines", "0", "--games", "2", "--seed", "1",
        ])
        out = capsys.readouterr().out
        assert code == 0
        assert "Board: 3x3 with 0 mines" in out
        assert "Win rate: 100.0%" in out

    def test_percentage_option(self, capsys) -> None:
        main.main([
            "evaluate", "--width", "4", "--height", "4",
            "--percentage", "25", "--games", "1", "--seed", "2",
        ])
        assert "with 4 mines" in capsys.readouterr().out

    def test_invalid_board_reports_error(self, capsys) -> None:
        code = main.main(["evaluate", "--width", "2", "--height", "2", "--mines", "4"])
        assert code == 2
        assert "Too many mines" in capsys.readouterr().err
