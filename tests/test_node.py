"""
Tests for the search tree node: statistics, UCB1 selection and one pass of
select/expand/rollout/backpropagate.
"""

import math
import random
import unittest

from games import Connect4Board, TicTacToeBoard, TicTacToeMove
from games.coords import Coords
from uct import Node, Player, TwoPlayerGame, rollout

# Eight cells filled, no line; White completes a drawn board at c1.
ONE_MOVE_FROM_DRAW = [
    "WBW",
    "WBB",
    "BW.",
]


def _walk(node):
    yield node
    for child in node.children:
        yield from _walk(child)


class TestNodeStatistics(unittest.TestCase):
    """Test Node.update scoring."""

    def setUp(self):
        self.node = Node(None, Player.WHITE, [])

    def test_win_for_last_player(self):
        self.node.update(Player.WHITE)
        self.assertEqual(self.node.score, 1.0)
        self.assertEqual(self.node.visits, 1)

    def test_loss_for_last_player(self):
        self.node.update(Player.BLACK)
        self.assertEqual(self.node.score, 0.0)
        self.assertEqual(self.node.visits, 1)

    def test_draw(self):
        self.node.update(None)
        self.node.update(None)
        self.assertEqual(self.node.score, 1.0)
        self.assertEqual(self.node.visits, 2)

    def test_win_ratio(self):
        self.assertTrue(math.isnan(self.node.win_ratio()))
        self.node.update(Player.WHITE)
        self.node.update(None)
        self.assertAlmostEqual(self.node.win_ratio(), 0.75)


class TestNodeCreation(unittest.TestCase):
    """Test Node.create."""

    def test_last_player_is_opponent_of_player_to_move(self):
        game = TwoPlayerGame(TicTacToeBoard())
        node = Node.create(None, game, random.Random(0))
        self.assertEqual(node.last_player, Player.BLACK)
        self.assertIsNone(node.last_move)

    def test_untried_moves_are_all_legal_moves(self):
        game = TwoPlayerGame(TicTacToeBoard())
        node = Node.create(None, game, random.Random(0))
        self.assertEqual(len(node.untried_moves), 9)
        self.assertEqual(set(node.untried_moves), set(game.possible_moves()))
        self.assertEqual(node.visits, 0)
        self.assertEqual(node.score, 0.0)
        self.assertEqual(node.children, [])

    def test_shuffle_is_reproducible(self):
        game = TwoPlayerGame(Connect4Board())
        first = Node.create(None, game, random.Random(7))
        second = Node.create(None, game, random.Random(7))
        self.assertEqual(first.untried_moves, second.untried_moves)


class TestSelection(unittest.TestCase):
    """Test UCB1 child selection."""

    def _node_with_children(self, parent_visits, stats):
        parent = Node(None, Player.BLACK, [])
        parent.visits = parent_visits
        for i, (score, visits) in enumerate(stats):
            child = Node(TicTacToeMove(Coords(i, 0)), Player.WHITE, [])
            child.score = score
            child.visits = visits
            parent.children.append(child)
        return parent

    def test_ucb1_formula(self):
        child = Node(None, Player.WHITE, [])
        child.score = 3.0
        child.visits = 4
        expected = 0.75 + 1.5 * math.sqrt(2.0 * math.log(10) / 4)
        self.assertAlmostEqual(child.ucb1(10, 1.5), expected)

    def test_first_child_wins_ties(self):
        parent = self._node_with_children(9, [(1.0, 3), (1.0, 3), (1.0, 3)])
        self.assertIs(parent.select_child(1.0), parent.children[0])

    def test_less_visited_child_is_explored(self):
        parent = self._node_with_children(12, [(5.0, 10), (1.0, 2)])
        self.assertIs(parent.select_child(1.0), parent.children[1])

    def test_zero_bias_is_greedy(self):
        parent = self._node_with_children(30, [(5.0, 10), (9.0, 10), (1.0, 10)])
        self.assertIs(parent.select_child(0.0), parent.children[1])


class TestIterate(unittest.TestCase):
    """Test a full pass through the tree."""

    def test_first_iteration_expands_one_child(self):
        game = TwoPlayerGame(TicTacToeBoard())
        rng = random.Random(3)
        root = Node.create(None, game.copy(), rng)

        root.iterate(game.copy(), rng, 1.0)

        self.assertEqual(root.visits, 1)
        self.assertEqual(len(root.children), 1)
        self.assertEqual(len(root.untried_moves), 8)
        child = root.children[0]
        self.assertEqual(child.visits, 1)
        self.assertEqual(child.last_player, Player.WHITE)
        self.assertEqual(len(child.untried_moves), 8)

    def test_iterate_does_not_touch_search_position(self):
        game = TwoPlayerGame(TicTacToeBoard())
        rng = random.Random(3)
        root = Node.create(None, game.copy(), rng)
        for _ in range(20):
            root.iterate(game.copy(), rng, 1.0)
        self.assertEqual(len(game.possible_moves()), 9)
        self.assertEqual(game.current_player, Player.WHITE)

    def test_visit_counts_are_consistent(self):
        game = TwoPlayerGame(TicTacToeBoard())
        rng = random.Random(11)
        root = Node.create(None, game.copy(), rng)

        for _ in range(300):
            root.iterate(game.copy(), rng, 1.0)

        self.assertEqual(root.visits, 300)
        self.assertEqual(sum(c.visits for c in root.children), 300)
        for node in _walk(root):
            if node is root:
                continue
            self.assertGreaterEqual(node.visits, 1)
            if node.children:
                self.assertEqual(node.visits, 1 + sum(c.visits for c in node.children))
            elif node.untried_moves:
                self.assertEqual(node.visits, 1)

    def test_terminal_node_reads_winner_without_rollout(self):
        board = TicTacToeBoard.from_rows([
            "WWW",
            "BB.",
            "...",
        ])
        game = TwoPlayerGame(board, Player.BLACK)
        node = Node.create(None, game, random.Random(0))
        self.assertTrue(node.is_terminal())

        winner = node.iterate(game.copy(), random.Random(0), 1.0)

        self.assertEqual(winner, Player.WHITE)
        self.assertEqual(node.last_player, Player.WHITE)
        self.assertEqual(node.score, 1.0)
        self.assertEqual(node.visits, 1)

    def test_draw_contributes_half_to_every_ancestor(self):
        game = TwoPlayerGame(TicTacToeBoard.from_rows(ONE_MOVE_FROM_DRAW))
        rng = random.Random(0)
        root = Node.create(None, game.copy(), rng)

        for expected_visits in range(1, 6):
            winner = root.iterate(game.copy(), rng, 1.0)
            self.assertIsNone(winner)
            self.assertEqual(root.visits, expected_visits)
            self.assertEqual(root.score, 0.5 * expected_visits)

        child = root.children[0]
        self.assertEqual(child.last_move, TicTacToeMove(Coords(2, 0)))
        self.assertEqual(child.visits, 5)
        self.assertEqual(child.score, 2.5)

    def test_describe(self):
        game = TwoPlayerGame(TicTacToeBoard.from_rows(ONE_MOVE_FROM_DRAW))
        rng = random.Random(0)
        root = Node.create(None, game.copy(), rng)
        root.iterate(game.copy(), rng, 1.0)

        lines = root.describe().splitlines()
        self.assertEqual(lines[0], "[root]")
        self.assertEqual(lines[1], "  [M: c1, S/V: 0.5/1]")


class TestRollout(unittest.TestCase):
    """Test random playouts."""

    def test_rollout_plays_to_the_end(self):
        game = TwoPlayerGame(TicTacToeBoard())
        winner = rollout(game, random.Random(5))
        self.assertTrue(game.is_over())
        self.assertEqual(winner, game.board.winner())

    def test_rollout_terminates_on_connect4(self):
        for seed in range(10):
            game = TwoPlayerGame(Connect4Board())
            winner = rollout(game, random.Random(seed))
            self.assertTrue(game.is_over())
            self.assertIn(winner, (Player.WHITE, Player.BLACK, None))

    def test_rollout_is_reproducible(self):
        first = TwoPlayerGame(Connect4Board())
        second = TwoPlayerGame(Connect4Board())
        rollout(first, random.Random(21))
        rollout(second, random.Random(21))
        self.assertTrue((first.board.grid == second.board.grid).all())


if __name__ == '__main__':
    unittest.main()
