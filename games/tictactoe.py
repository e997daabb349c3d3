"""
Tic-tac-toe on a 3x3 board.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from uct import BoardMixin, Player

from .coords import Coords
from .rendering import draw_board, player_token


@dataclass(frozen=True)
class TicTacToeMove:
    """Put a token on pos."""
    pos: Coords

    def __str__(self) -> str:
        return str(self.pos)


def _lines(size: int) -> List[List[Coords]]:
    lines = []
    for i in range(size):
        lines.append([Coords(x, i) for x in range(size)])
        lines.append([Coords(i, y) for y in range(size)])
    lines.append([Coords(i, i) for i in range(size)])
    lines.append([Coords(i, size - 1 - i) for i in range(size)])
    return lines


class TicTacToeBoard(BoardMixin[TicTacToeMove]):
    """
    Tic-tac-toe board.

    The grid is indexed as grid[y, x] and holds None or the Player owning the
    cell. The game stops as soon as one line is complete.
    """

    SIZE = 3
    LINES = _lines(SIZE)

    def __init__(self):
        self.grid = np.full((self.SIZE, self.SIZE), None, dtype=object)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "TicTacToeBoard":
        """
        Build a position from text rows drawn top rank first.

        'W' marks a white token, 'B' a black one, anything else is empty.
        """
        board = cls()
        for i, row in enumerate(rows):
            y = cls.SIZE - 1 - i
            for x, char in enumerate(row):
                if char == 'W':
                    board.grid[y, x] = Player.WHITE
                elif char == 'B':
                    board.grid[y, x] = Player.BLACK
        return board

    def __getitem__(self, pos: Coords) -> Optional[Player]:
        return self.grid[pos.y, pos.x]

    def winner(self) -> Optional[Player]:
        for line in self.LINES:
            first = self[line[0]]
            if first is not None and all(self[c] == first for c in line[1:]):
                return first
        return None

    def play(self, player: Player, move: TicTacToeMove) -> None:
        self.grid[move.pos.y, move.pos.x] = player

    def possible_moves_into(self, player: Player, moves: List[TicTacToeMove]) -> None:
        if self.winner() is not None:
            return

        for y in range(self.SIZE):
            for x in range(self.SIZE):
                if self.grid[y, x] is None:
                    moves.append(TicTacToeMove(Coords(x, y)))

    def copy(self) -> "TicTacToeBoard":
        new_board = TicTacToeBoard()
        new_board.grid = self.grid.copy()
        return new_board

    def __str__(self) -> str:
        return draw_board(self.grid, player_token)
