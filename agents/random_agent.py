"""
Random agent that picks uniformly from legal moves.
"""

import random
from typing import Any, Dict, Optional

from uct import TwoPlayerGame


class RandomAgent:
    """
    Random agent that selects moves uniformly from legal moves.

    This agent serves as a baseline for comparison with the search agent.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize random agent.

        Args:
            seed: Random seed for reproducible behavior
        """
        self.rng = random.Random(seed)

    def choose_move(self, game: TwoPlayerGame) -> Any:
        """Select a random legal move."""
        return self.rng.choice(game.possible_moves())

    def get_action_info(self) -> Dict[str, Any]:
        """Get information about the agent."""
        return {
            "name": "RandomAgent",
            "type": "random",
            "description": "Selects moves uniformly from legal moves"
        }

    def set_seed(self, seed: int):
        """Set random seed for reproducible behavior."""
        self.rng = random.Random(seed)
