"""
Automated Minesweeper players.

Provides:
- BaseAgent: interface for agents playing through MinesweeperEnv
- RandomAgent: baseline random selection
- Evaluator: plays games and aggregates results
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .evaluation import EvaluationResult, Evaluator

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "EvaluationResult",
    "Evaluator",
]
