"""
Connect four on a 7x6 grid.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from uct import BoardMixin, Player

from .rendering import player_token


@dataclass(frozen=True)
class Connect4Move:
    """Drop a token in column (0-based, shown 1-based)."""
    column: int

    def __str__(self) -> str:
        return str(self.column + 1)


class Connect4Board(BoardMixin[Connect4Move]):
    """
    Connect four board.

    The grid is indexed as grid[column, row] with row 0 at the bottom.
    """

    COLUMNS = 7
    ROWS = 6
    ALIGN = 4
    # right, up, up-right, down-right
    DIRECTIONS = ((1, 0), (0, 1), (1, 1), (1, -1))

    def __init__(self):
        self.grid = np.full((self.COLUMNS, self.ROWS), None, dtype=object)

    @classmethod
    def from_columns(cls, columns: Sequence[str]) -> "Connect4Board":
        """Build a position from one string per column, bottom token first ('W'/'B')."""
        board = cls()
        for col, stack in enumerate(columns):
            for row, char in enumerate(stack):
                board.grid[col, row] = Player.WHITE if char == 'W' else Player.BLACK
        return board

    def _is_in(self, col: int, row: int) -> bool:
        return 0 <= col < self.COLUMNS and 0 <= row < self.ROWS

    def winner(self) -> Optional[Player]:
        grid = self.grid
        for col in range(self.COLUMNS):
            for row in range(self.ROWS):
                player = grid[col, row]
                if player is None:
                    continue
                for dc, dr in self.DIRECTIONS:
                    last = self.ALIGN - 1
                    if not self._is_in(col + last * dc, row + last * dr):
                        continue
                    if all(grid[col + k * dc, row + k * dr] == player for k in range(1, self.ALIGN)):
                        return player
        return None

    def play(self, player: Player, move: Connect4Move) -> None:
        column = self.grid[move.column]
        for row in range(self.ROWS):
            if column[row] is None:
                column[row] = player
                return

    def possible_moves_into(self, player: Player, moves: List[Connect4Move]) -> None:
        if self.winner() is not None:
            return

        for col in range(self.COLUMNS):
            if self.grid[col, self.ROWS - 1] is None:
                moves.append(Connect4Move(col))

    def copy(self) -> "Connect4Board":
        new_board = Connect4Board()
        new_board.grid = self.grid.copy()
        return new_board

    def __str__(self) -> str:
        hor_line = " " + "+---" * self.COLUMNS + "+\n"
        out = ["\n", hor_line]
        for row in reversed(range(self.ROWS)):
            out.append(" | ")
            for col in range(self.COLUMNS):
                cell = self.grid[col, row]
                out.append(" " if cell is None else player_token(cell))
                out.append(" | ")
            out.append("\n")
            out.append(hor_line)

        out.append("   ")
        for col in range(self.COLUMNS):
            out.append(f"{col + 1}   ")
        out.append("\n\n")
        return "".join(out)
