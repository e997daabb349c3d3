"""
Concrete two-player games playable by the UCT engine.

Every board here satisfies uct.TwoPlayerBoard:
- Tic-tac-toe (3x3)
- Connect four (7x6)
- Checkers (8x8, international-style rules)
"""

from .checkers import CheckersBoard, CheckersMove
from .connect4 import Connect4Board, Connect4Move
from .coords import Coords
from .tictactoe import TicTacToeBoard, TicTacToeMove

GAMES = {
    "tictactoe": TicTacToeBoard,
    "connect4": Connect4Board,
    "checkers": CheckersBoard,
}


def create_board(name: str):
    """Return a board in its initial position for the game called name."""
    try:
        board_cls = GAMES[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown game: {name} (expected one of {', '.join(GAMES)})") from None
    return board_cls()


__all__ = [
    'Coords',
    'TicTacToeBoard', 'TicTacToeMove',
    'Connect4Board', 'Connect4Move',
    'CheckersBoard', 'CheckersMove',
    'GAMES', 'create_board',
]
