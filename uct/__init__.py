"""
Generic UCT search engine for two-player board games.

This package contains:
- The player/turn model
- The board contract and the game-state wrapper
- The search tree (UCB1 selection, expansion, rollout, backpropagation)
- The fixed-budget search driver
"""

from .errors import PreconditionViolation
from .game import BoardMixin, RandomSource, TwoPlayerBoard, TwoPlayerGame
from .node import Node, rollout
from .player import Player
from .search import DEFAULT_EXPLORATION_BIAS, best_win_ratio, rank_children, search, search_tree

__all__ = [
    'Player', 'PreconditionViolation',
    'TwoPlayerBoard', 'TwoPlayerGame', 'BoardMixin', 'RandomSource',
    'Node', 'rollout',
    'search', 'search_tree', 'rank_children', 'best_win_ratio',
    'DEFAULT_EXPLORATION_BIAS',
]
