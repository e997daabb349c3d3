"""
Checkers (draughts) on an 8x8 board with international-style rules.

Rules implemented:
- Men move one square diagonally forward and capture in both directions
- Kings move and capture any distance along a diagonal
- Captures chain, and only the moves capturing the most pieces are legal
- A man reaching the far rank is crowned
- After 25 consecutive king moves without capture the game is drawn
"""

from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

import numpy as np

from uct import BoardMixin, Player, PreconditionViolation

from .coords import Coords
from .rendering import draw_board


@dataclass(frozen=True)
class Token:
    player: Player
    crowned: bool = False

    def __str__(self) -> str:
        if self.player is Player.WHITE:
            return "⛃" if self.crowned else "⛂"
        return "⛁" if self.crowned else "⛀"


@dataclass(frozen=True)
class CheckersMove:
    """Move the token on src to dst, removing every token in captured."""
    src: Coords
    dst: Coords
    captured: Tuple[Coords, ...] = ()

    def __str__(self) -> str:
        text = f"{self.src} -> {self.dst}"
        if self.captured:
            text += ", with capture of " + ", ".join(str(c) for c in self.captured)
        return text


class CheckersBoard(BoardMixin[CheckersMove]):
    """
    Checkers board.

    The grid is indexed as grid[y, x] and holds None or a Token. White starts
    on the lowest ranks and moves up, black starts on the highest ranks.
    """

    SIZE = 8
    MAX_KING_MOVES_WITHOUT_CAPTURE = 25

    def __init__(self, setup: bool = True):
        self.grid = np.full((self.SIZE, self.SIZE), None, dtype=object)
        self.king_moves_without_capture = 0
        if setup:
            self._setup()

    @classmethod
    def empty(cls) -> "CheckersBoard":
        return cls(setup=False)

    def _setup(self) -> None:
        half = self.SIZE // 2
        for y in range(self.SIZE):
            if half - 1 <= y <= half:
                continue
            player = Player.WHITE if y < half else Player.BLACK
            for x in range(y % 2, self.SIZE, 2):
                self.grid[y, x] = Token(player)

    def __getitem__(self, pos: Coords) -> Optional[Token]:
        return self.grid[pos.y, pos.x]

    def __setitem__(self, pos: Coords, token: Optional[Token]) -> None:
        self.grid[pos.y, pos.x] = token

    def _moves_from(self, src: Coords, moves: List[CheckersMove]) -> None:
        token = self[src]

        if token.crowned:
            directions = [(dx, dy) for dy in (-1, 1) for dx in (-1, 1)]
        else:
            forward = 1 if token.player is Player.WHITE else -1
            directions = [(-1, forward), (1, forward)]

        for dx, dy in directions:
            dst = src.offset(dx, dy)
            while dst.is_inside(self.SIZE) and self[dst] is None:
                moves.append(CheckersMove(src, dst))
                if not token.crowned:
                    break
                dst = dst.offset(dx, dy)

        self._captures_from(src, src, [], moves)

    def _captures_from(self, src: Coords, pos: Coords, captured: List[Coords],
                       moves: List[CheckersMove]) -> None:
        """
        Depth-first search of capture chains for the token on src, currently
        standing (virtually) on pos. The board is not modified during the
        search: captured tokens stay in place and can't be jumped twice, and
        src counts as empty.
        """
        token = self[src]
        done = True

        for dy in (-1, 1):
            for dx in (-1, 1):
                current = pos.offset(dx, dy)
                target = None

                while current.is_inside(self.SIZE):
                    cell = None if current == src else self[current]
                    if target is None:
                        if cell is not None:
                            if cell.player == token.player or current in captured:
                                break
                            target = current
                        elif not token.crowned:
                            break
                    else:
                        if cell is not None:
                            break
                        captured.append(target)
                        self._captures_from(src, current, captured, moves)
                        captured.pop()
                        done = False
                        if not token.crowned:
                            break
                    current = current.offset(dx, dy)

        if done and src != pos:
            moves.append(CheckersMove(src, pos, tuple(captured)))

    def possible_moves_into(self, player: Player, moves: List[CheckersMove]) -> None:
        if self.king_moves_without_capture >= self.MAX_KING_MOVES_WITHOUT_CAPTURE:
            return

        candidates: List[CheckersMove] = []
        for y in range(self.SIZE):
            for x in range(self.SIZE):
                token = self.grid[y, x]
                if token is not None and token.player == player:
                    self._moves_from(Coords(x, y), candidates)

        if not candidates:
            return
        max_captures = max(len(m.captured) for m in candidates)
        moves.extend(m for m in candidates if len(m.captured) == max_captures)

    def play(self, player: Player, move: CheckersMove) -> None:
        token = self[move.src]

        if token.crowned and not move.captured:
            self.king_moves_without_capture += 1
        else:
            self.king_moves_without_capture = 0

        self[move.dst] = token
        self[move.src] = None
        for c in move.captured:
            self[c] = None

        last_rank = self.SIZE - 1 if player is Player.WHITE else 0
        if move.dst.y == last_rank and not token.crowned:
            self[move.dst] = replace(token, crowned=True)

    def winner(self) -> Optional[Player]:
        white_blocked = not self.possible_moves(Player.WHITE)
        black_blocked = not self.possible_moves(Player.BLACK)

        if white_blocked and black_blocked:
            return None
        if white_blocked:
            return Player.BLACK
        if black_blocked:
            return Player.WHITE
        raise PreconditionViolation("winner() must be called on a finished game")

    def count(self, player: Player) -> int:
        return sum(1 for token in self.grid.flat if token is not None and token.player == player)

    def copy(self) -> "CheckersBoard":
        new_board = CheckersBoard.empty()
        new_board.grid = self.grid.copy()
        new_board.king_moves_without_capture = self.king_moves_without_capture
        return new_board

    def __str__(self) -> str:
        return draw_board(self.grid)
