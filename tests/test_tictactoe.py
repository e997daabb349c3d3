"""
Tests for the tic-tac-toe board and board coordinates.
"""

import unittest

from games import TicTacToeBoard, TicTacToeMove
from games.coords import Coords
from uct import Player


class TestCoords(unittest.TestCase):
    """Test Coords parsing and display."""

    def test_str(self):
        self.assertEqual(str(Coords(0, 0)), "a1")
        self.assertEqual(str(Coords(2, 1)), "c2")
        self.assertEqual(str(Coords(7, 7)), "h8")

    def test_parse(self):
        self.assertEqual(Coords.parse("a1", 3), Coords(0, 0))
        self.assertEqual(Coords.parse(" C2 ", 3), Coords(2, 1))
        self.assertEqual(Coords.parse("h8", 8), Coords(7, 7))

    def test_parse_rejects_malformed_input(self):
        for text in ["", "a", "1a", "aa", "a-1"]:
            with self.assertRaises(ValueError):
                Coords.parse(text, 3)

    def test_parse_rejects_out_of_board(self):
        for text in ["d1", "a4", "a0"]:
            with self.assertRaises(ValueError):
                Coords.parse(text, 3)


class TestTicTacToeBoard(unittest.TestCase):
    """Test the tic-tac-toe board."""

    def test_initial_moves(self):
        board = TicTacToeBoard()
        moves = board.possible_moves(Player.WHITE)
        self.assertEqual(len(moves), 9)
        self.assertEqual(len(set(moves)), 9)
        self.assertIsNone(board.winner())

    def test_play(self):
        board = TicTacToeBoard()
        board.play(Player.BLACK, TicTacToeMove(Coords(1, 2)))
        self.assertEqual(board[Coords(1, 2)], Player.BLACK)
        self.assertEqual(len(board.possible_moves(Player.WHITE)), 8)

    def test_row_win(self):
        board = TicTacToeBoard.from_rows([
            "...",
            "BBB",
            "WW.",
        ])
        self.assertEqual(board.winner(), Player.BLACK)

    def test_column_win(self):
        board = TicTacToeBoard.from_rows([
            "W.B",
            "W.B",
            "W..",
        ])
        self.assertEqual(board.winner(), Player.WHITE)

    def test_diagonal_wins(self):
        ascending = TicTacToeBoard.from_rows([
            "..W",
            ".W.",
            "W..",
        ])
        descending = TicTacToeBoard.from_rows([
            "B..",
            ".B.",
            "..B",
        ])
        self.assertEqual(ascending.winner(), Player.WHITE)
        self.assertEqual(descending.winner(), Player.BLACK)

    def test_no_moves_after_a_win(self):
        board = TicTacToeBoard.from_rows([
            "WWW",
            "BB.",
            "...",
        ])
        self.assertEqual(board.possible_moves(Player.BLACK), [])

    def test_from_rows_orientation(self):
        board = TicTacToeBoard.from_rows([
            "W..",
            "...",
            "..B",
        ])
        self.assertEqual(board[Coords(0, 2)], Player.WHITE)
        self.assertEqual(board[Coords(2, 0)], Player.BLACK)

    def test_copy_is_independent(self):
        board = TicTacToeBoard()
        clone = board.copy()
        clone.play(Player.WHITE, TicTacToeMove(Coords(0, 0)))
        self.assertIsNone(board[Coords(0, 0)])

    def test_moves_are_hashable_values(self):
        self.assertEqual(TicTacToeMove(Coords(1, 1)), TicTacToeMove(Coords(1, 1)))
        self.assertEqual(str(TicTacToeMove(Coords(1, 1))), "b2")

    def test_rendering(self):
        board = TicTacToeBoard()
        board.play(Player.WHITE, TicTacToeMove(Coords(0, 0)))
        board.play(Player.BLACK, TicTacToeMove(Coords(2, 2)))
        lines = str(board).splitlines()

        self.assertEqual(lines[1], "   +---+---+---+")
        self.assertEqual(lines[2], " 3 |   |   | ⛀ | ")
        self.assertEqual(lines[6], " 1 | ⛂ |   |   | ")
        self.assertEqual(lines[8], "     a   b   c   ")


if __name__ == '__main__':
    unittest.main()
