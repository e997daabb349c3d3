"""
Text rendering of square boards.
"""

from typing import Callable, Optional, Sequence, TypeVar

from uct import Player

T = TypeVar("T")

PLAYER_TOKENS = {
    Player.WHITE: "⛂",
    Player.BLACK: "⛀",
}


def player_token(player: Player) -> str:
    return PLAYER_TOKENS[player]


def draw_board(rows: Sequence[Sequence[Optional[T]]], cell_str: Callable[[T], str] = str) -> str:
    """
    Render a square grid indexed as rows[y][x].

    The highest rank is drawn first, ranks are labelled on the left and
    files (a, b, ...) below the grid. Empty cells are None.
    """
    size = len(rows)
    hor_line = "   " + "+---" * size + "+\n"

    out = ["\n", hor_line]
    for i, row in enumerate(reversed(rows)):
        out.append(f"{size - i:>2} | ")
        for cell in row:
            out.append(" " if cell is None else cell_str(cell))
            out.append(" | ")
        out.append("\n")
        out.append(hor_line)

    out.append("     ")
    for i in range(size):
        out.append(f"{chr(ord('a') + i)}   ")
    out.append("\n\n")
    return "".join(out)
