"""
Computer player backed by the UCT search.
"""

import logging
import random
import time
from typing import Any, Dict, Optional

from uct import DEFAULT_EXPLORATION_BIAS, TwoPlayerGame, best_win_ratio, search_tree

logger = logging.getLogger(__name__)


class MCTSAgent:
    """
    Monte Carlo Tree Search agent.

    Runs a fixed number of UCT iterations with random rollouts for every move.
    The agent owns its random source, so two agents built with the same seed
    play the same moves from the same positions.
    """

    def __init__(self,
                 iterations: int = 1000,
                 exploration_bias: float = DEFAULT_EXPLORATION_BIAS,
                 seed: Optional[int] = None):
        """
        Initialize MCTS agent.

        Args:
            iterations: Number of search iterations per move
            exploration_bias: UCB1 exploration parameter
            seed: Random seed for reproducible behavior
        """
        if iterations < 1:
            raise ValueError(f"iterations must be at least 1, got {iterations}")
        self.iterations = iterations
        self.exploration_bias = exploration_bias
        self.seed = seed
        self.rng = random.Random(seed)

        # Statistics
        self.stats = {
            "searches": 0,
            "iterations_run": 0,
            "time_elapsed": 0.0,
            "last_win_ratio": None,
        }

    def choose_move(self, game: TwoPlayerGame) -> Any:
        """
        Select a move for the player to move in game.

        Raises:
            PreconditionViolation: if game is already over
        """
        start_time = time.time()
        move, root = search_tree(game, self.rng, self.iterations, self.exploration_bias)
        elapsed = time.time() - start_time

        self.stats["searches"] += 1
        self.stats["iterations_run"] += self.iterations
        self.stats["time_elapsed"] += elapsed
        self.stats["last_win_ratio"] = best_win_ratio(root)

        logger.debug(f"MCTS picked {move} for {game.current_player} in {elapsed:.3f}s "
                     f"(win ratio {self.stats['last_win_ratio']:.3f})")
        return move

    def get_action_info(self) -> Dict[str, Any]:
        """Get information about the agent."""
        return {
            "name": "MCTSAgent",
            "type": "mcts",
            "description": "Monte Carlo Tree Search with UCB1 selection and random rollouts",
            "parameters": {
                "iterations": self.iterations,
                "exploration_bias": self.exploration_bias,
                "seed": self.seed,
            },
            "stats": self.stats.copy()
        }

    def reset(self):
        """Reset agent statistics."""
        self.stats = {
            "searches": 0,
            "iterations_run": 0,
            "time_elapsed": 0.0,
            "last_win_ratio": None,
        }

    def set_seed(self, seed: int):
        """Set random seed for reproducible behavior."""
        self.seed = seed
        self.rng = random.Random(seed)
