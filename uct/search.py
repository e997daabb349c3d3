"""
Fixed-budget UCT search driver.
"""

import functools
import logging
from typing import List, Optional, Tuple, TypeVar

from .errors import PreconditionViolation
from .game import RandomSource, TwoPlayerGame
from .node import Node

logger = logging.getLogger(__name__)

M = TypeVar("M")

DEFAULT_EXPLORATION_BIAS = 1.0


def _compare_win_ratio(a: Node, b: Node) -> int:
    """Descending by score/visits; ratios that can't be ordered compare equal."""
    ratio_a = a.win_ratio()
    ratio_b = b.win_ratio()
    if ratio_b < ratio_a:
        return -1
    if ratio_b > ratio_a:
        return 1
    return 0


def rank_children(root: Node[M]) -> List[Node[M]]:
    """Return the root's children, best win ratio first (stable)."""
    return sorted(root.children, key=functools.cmp_to_key(_compare_win_ratio))


def search_tree(
    game: TwoPlayerGame[M],
    rng: RandomSource,
    iterations: int,
    bias: float = DEFAULT_EXPLORATION_BIAS,
) -> Tuple[M, Node[M]]:
    """
    Run the search and return both the chosen move and the root node.

    Args:
        game: Position to search from; it is never modified
        rng: The only source of randomness used by the search
        iterations: Number of select/expand/rollout passes
        bias: UCB1 exploration weight

    Raises:
        PreconditionViolation: if the game has no legal moves
        ValueError: if iterations is lower than 1
    """
    if iterations < 1:
        raise ValueError(f"iterations must be at least 1, got {iterations}")
    if game.is_over():
        raise PreconditionViolation("search() called on a game that is already over")

    root: Node[M] = Node.create(None, game.copy(), rng)

    for _ in range(iterations):
        root.iterate(game.copy(), rng, bias)

    ranked = rank_children(root)
    best = ranked[0]

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Search finished after {iterations} iterations, {len(root.children)} children")
        logger.debug("\n" + root.describe())

    return best.last_move, root


def search(
    game: TwoPlayerGame[M],
    rng: RandomSource,
    iterations: int,
    bias: float = DEFAULT_EXPLORATION_BIAS,
) -> M:
    """
    Pick a move for the player to move in game.

    Builds a fresh tree, runs exactly iterations passes from its root and
    returns the move of the child with the best observed win ratio. With an
    identically seeded rng the result is reproducible.
    """
    move, _ = search_tree(game, rng, iterations, bias)
    return move


def best_win_ratio(root: Node) -> Optional[float]:
    """Win ratio of the best ranked child, or None if the root has none."""
    if not root.children:
        return None
    return rank_children(root)[0].win_ratio()
