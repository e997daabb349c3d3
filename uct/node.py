"""
Search tree node for UCT (UCB1 applied to trees) with random rollouts.
"""

import math
from typing import Generic, List, Optional, TypeVar

from .game import RandomSource, TwoPlayerGame
from .player import Player

M = TypeVar("M")


class Node(Generic[M]):
    """
    Node in the Monte Carlo Tree Search tree.

    Statistics are kept from the point of view of last_player, the player
    credited with last_move: a win for last_player scores 1.0, a draw 0.5 and
    a loss 0.0. Nodes own their children; there is no parent link, the walk
    back to the root is the call stack of iterate().
    """

    __slots__ = ("last_move", "last_player", "score", "visits", "untried_moves", "children")

    def __init__(self, last_move: Optional[M], last_player: Player, untried_moves: List[M]):
        self.last_move = last_move
        self.last_player = last_player
        self.score = 0.0
        self.visits = 0
        self.untried_moves = untried_moves
        self.children: List["Node[M]"] = []

    @classmethod
    def create(cls, last_move: Optional[M], game: TwoPlayerGame[M], rng: RandomSource) -> "Node[M]":
        """
        Build the node reached by last_move, whose position is held by game.

        Legal moves are shuffled once here so that expansion can simply pop
        from the end of the list.
        """
        untried_moves = game.possible_moves()
        rng.shuffle(untried_moves)
        return cls(last_move, game.current_player.opponent(), untried_moves)

    def is_fully_expanded(self) -> bool:
        return not self.untried_moves

    def is_terminal(self) -> bool:
        return not self.untried_moves and not self.children

    def win_ratio(self) -> float:
        if self.visits == 0:
            return math.nan
        return self.score / self.visits

    def ucb1(self, parent_visits: int, bias: float) -> float:
        """
        UCB1 value of this node seen from a parent with parent_visits visits.

        Only defined once the node has been visited at least once.
        """
        exploitation = self.score / self.visits
        exploration = bias * math.sqrt(2.0 * math.log(parent_visits) / self.visits)
        return exploitation + exploration

    def select_child(self, bias: float) -> "Node[M]":
        """Return the child with the highest UCB1 value; the first one wins ties."""
        best_value = -math.inf
        best_child = None
        for child in self.children:
            value = child.ucb1(self.visits, bias)
            if value > best_value:
                best_value = value
                best_child = child
        return best_child

    def add_child(self, last_move: M, game: TwoPlayerGame[M], rng: RandomSource) -> "Node[M]":
        child = Node.create(last_move, game, rng)
        self.children.append(child)
        return child

    def update(self, winner: Optional[Player]) -> None:
        if winner is None:
            self.score += 0.5
        elif winner == self.last_player:
            self.score += 1.0
        self.visits += 1

    def iterate(self, game: TwoPlayerGame[M], rng: RandomSource, bias: float) -> Optional[Player]:
        """
        Run one select/expand/rollout pass below this node.

        game is a working copy positioned at this node and is mutated as the
        pass walks down the tree. Every node on the path records the outcome
        exactly once, on the way back up.

        Returns:
            The winner of the simulated game, or None for a draw
        """
        if self.untried_moves:
            move = self.untried_moves.pop()
            game.play(move)
            child = self.add_child(move, game, rng)
            winner = rollout(game, rng)
            child.update(winner)
        elif self.children:
            child = self.select_child(bias)
            game.play(child.last_move)
            winner = child.iterate(game, rng, bias)
        else:
            winner = game.board.winner()

        self.update(winner)
        return winner

    def describe(self, max_depth: int = 1) -> str:
        """Text dump of the tree down to max_depth, root first."""
        lines: List[str] = []
        self._describe_into(lines, 0, max_depth)
        return "\n".join(lines)

    def _describe_into(self, lines: List[str], depth: int, max_depth: int) -> None:
        if depth > max_depth:
            return
        indent = "  " * depth
        if depth == 0:
            lines.append(f"{indent}[root]")
        else:
            lines.append(f"{indent}[M: {self.last_move}, S/V: {self.score}/{self.visits}]")
        for child in self.children:
            child._describe_into(lines, depth + 1, max_depth)

    def __repr__(self) -> str:
        return (f"Node(move={self.last_move}, player={self.last_player.name}, "
                f"S/V={self.score}/{self.visits}, children={len(self.children)}, "
                f"untried={len(self.untried_moves)})")


def rollout(game: TwoPlayerGame[M], rng: RandomSource) -> Optional[Player]:
    """
    Play uniformly random moves until the side to move is stuck.

    Returns:
        The board's winner, or None for a draw
    """
    moves: List[M] = []
    game.possible_moves_into(moves)
    while moves:
        game.play(rng.choice(moves))
        moves.clear()
        game.possible_moves_into(moves)
    return game.board.winner()
