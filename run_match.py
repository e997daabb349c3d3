#!/usr/bin/env python3
"""
Play a board game against the UCT engine.

Examples:
    python run_match.py --game connect4 --white human --black mcts --iterations 5000
    python run_match.py --game tictactoe --games 20 --quiet --seed 1 --output-dir runs
"""

import sys

from arena.cli import main

if __name__ == "__main__":
    sys.exit(main())
