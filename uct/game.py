"""
Board contract and the game-state wrapper used by the search.

Any two-player, perfect-information game can be searched as long as its board
satisfies TwoPlayerBoard. The engine never looks inside a move; moves only need
equality and must be safe to share (immutable values are the usual choice).
"""

from __future__ import annotations

from typing import Any, Generic, List, MutableSequence, Optional, Protocol, Sequence, TypeVar

from .errors import PreconditionViolation
from .player import Player

M = TypeVar("M")
T = TypeVar("T")


class TwoPlayerBoard(Protocol[M]):
    """
    Minimal contract every game board must satisfy.

    possible_moves_into() must be deterministic for a given board state.
    play() is only ever called with a move obtained from possible_moves_into()
    for the same player. winner() is only called once the side to move has no
    legal moves.
    """

    def possible_moves_into(self, player: Player, moves: List[M]) -> None:
        ...

    def possible_moves(self, player: Player) -> List[M]:
        ...

    def play(self, player: Player, move: M) -> None:
        ...

    def winner(self) -> Optional[Player]:
        ...

    def copy(self) -> "TwoPlayerBoard[M]":
        ...


class RandomSource(Protocol):
    """Shuffle/choice primitives; random.Random satisfies this."""

    def shuffle(self, x: MutableSequence[Any]) -> None:
        ...

    def choice(self, seq: Sequence[T]) -> T:
        ...


class BoardMixin(Generic[M]):
    """Provides possible_moves() on top of possible_moves_into()."""

    def possible_moves(self, player: Player) -> List[M]:
        moves: List[M] = []
        self.possible_moves_into(player, moves)  # type: ignore[attr-defined]
        return moves


class TwoPlayerGame(Generic[M]):
    """
    A board together with the player whose turn it is.

    This is the only place where turn order changes: every play() hands the
    turn to the opponent, even when the opponent has nothing left to play.
    """

    def __init__(self, board: TwoPlayerBoard[M], current_player: Player = Player.WHITE):
        self._board = board
        self._current_player = current_player

    @property
    def board(self) -> TwoPlayerBoard[M]:
        return self._board

    @property
    def current_player(self) -> Player:
        return self._current_player

    def play(self, move: M) -> None:
        """Apply move as the current player, then pass the turn."""
        self._board.play(self._current_player, move)
        self._current_player = self._current_player.opponent()

    def possible_moves(self) -> List[M]:
        return self._board.possible_moves(self._current_player)

    def possible_moves_into(self, moves: List[M]) -> None:
        self._board.possible_moves_into(self._current_player, moves)

    def is_over(self) -> bool:
        return not self.possible_moves()

    def winner(self) -> Optional[Player]:
        """
        Return the winner of a finished game, or None for a draw.

        Raises:
            PreconditionViolation: if the side to move still has legal moves
        """
        if not self.is_over():
            raise PreconditionViolation("winner() called on a game that is not over")
        return self._board.winner()

    def copy(self) -> "TwoPlayerGame[M]":
        return TwoPlayerGame(self._board.copy(), self._current_player)

    def __str__(self) -> str:
        return str(self._board)
