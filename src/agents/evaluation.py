"""
Play agents through the Minesweeper environment and collect results.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Optional

from minefield.board import BoardConfig
from minefield.environment import GameState, MinesweeperEnv

from .base_agent import BaseAgent

logger = logging.getLogger(__name__)


@dataclass
class EvaluationResult:
    """Aggregated outcome of a batch of games."""

    games: int = 0
    wins: int = 0
    total_reward: float = 0.0
    total_steps: int = 0
    total_revealed: int = 0

    @property
    def win_rate(self) -> float:
        return self.wins / self.games if self.games else 0.0

    @property
    def avg_reward(self) -> float:
        return self.total_reward / self.games if self.games else 0.0

    @property
    def avg_steps(self) -> float:
        return self.total_steps / self.games if self.games else 0.0

    @property
    def avg_revealed(self) -> float:
        return self.total_revealed / self.games if self.games else 0.0

    def as_dict(self) -> Dict[str, float]:
        return {
            "win_rate": self.win_rate,
            "avg_reward": self.avg_reward,
            "avg_steps": self.avg_steps,
            "avg_revealed": self.avg_revealed,
        }


class Evaluator:
    """
    Evaluate an agent over a number of games.

    Every game runs on a newly generated board; a game ends on a mine hit
    or once all safe cells are revealed, and is abandoned after max_steps.
    """

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        num_episodes: int = 100,
        max_steps: int = 100,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            board_config: Board configuration for every game.
            num_episodes: Number of games to play.
            max_steps: Maximum moves per game before it is abandoned.
            seed: Seed for the first board; later boards follow from it.
        """
        self.board_config = board_config or BoardConfig()
        self.num_episodes = num_episodes
        self.max_steps = max_steps
        self.seed = seed

    def evaluate(self, agent: BaseAgent) -> EvaluationResult:
        """Play num_episodes games with agent."""
        env = MinesweeperEnv(config=self.board_config)
        result = EvaluationResult()

        for episode in range(self.num_episodes):
            seed = self.seed if episode == 0 else None
            observation, info = env.reset(seed=seed)
            agent.reset()

            for _ in range(self.max_steps):
                action = agent.select_action(observation, env.get_action_mask())
                observation, reward, terminated, truncated, info = env.step(action)
                result.total_reward += float(reward)
                result.total_steps += 1
                if terminated or truncated:
                    break

            result.games += 1
            if info["game_state"] == GameState.WON.name:
                result.wins += 1
            result.total_revealed += int(info["revealed"])
            logger.debug(
                "Game %d finished: %s after %d steps",
                episode + 1, info["game_state"], info["steps"],
            )

        return result
