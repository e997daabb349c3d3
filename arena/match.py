"""
Turn loop playing a game between two agents.
"""

import json
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from agents.protocol import AgentProtocol
from agents.registry import build_agent
from games import create_board
from uct import Player, TwoPlayerBoard, TwoPlayerGame
from utils.logging_setup import create_run_directory

from .config import MatchConfig

logger = logging.getLogger(__name__)


@dataclass
class MatchResult:
    """
    Outcome of one match.

    Attributes:
        winner: Winning player, or None for a draw
        moves_made: Number of moves played
        duration: Wall-clock duration in seconds
        history: Moves in the order they were played, as text
        truncated: True if the match was stopped by the move cap
    """
    winner: Optional[Player]
    moves_made: int
    duration: float
    history: List[str] = field(default_factory=list)
    truncated: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "winner": self.winner.name if self.winner else None,
            "moves_made": self.moves_made,
            "duration": round(self.duration, 4),
            "history": list(self.history),
            "truncated": self.truncated,
        }


class Match:
    """
    A single game between two agents, White moving first.

    When the side to move has exactly one legal move it is played directly
    and the agent is not consulted.
    """

    def __init__(self,
                 board: TwoPlayerBoard,
                 white_agent: AgentProtocol,
                 black_agent: AgentProtocol,
                 max_moves: Optional[int] = None,
                 output_fn: Callable[[str], None] = print):
        self.game = TwoPlayerGame(board)
        self.agents = {Player.WHITE: white_agent, Player.BLACK: black_agent}
        self.max_moves = max_moves
        self.output_fn = output_fn

    def next_move(self) -> Any:
        """Move to play for the current player; the game must not be over."""
        moves = self.game.possible_moves()
        if len(moves) == 1:
            return moves[0]
        return self.agents[self.game.current_player].choose_move(self.game)

    def run(self, verbose: bool = True) -> MatchResult:
        """
        Play until the side to move is stuck (or the move cap is reached).

        Args:
            verbose: Print the board before every move and the final result
        """
        start_time = time.time()
        history: List[str] = []
        truncated = False

        while True:
            if verbose:
                self.output_fn(str(self.game.board))

            if self.game.is_over():
                break
            if self.max_moves is not None and len(history) >= self.max_moves:
                truncated = True
                break

            player = self.game.current_player
            if verbose:
                self.output_fn(f"{player} turn")

            move = self.next_move()

            if verbose:
                self.output_fn(f"{player} player played {move}")
            logger.debug(f"Move {len(history) + 1}: {player} played {move}")

            self.game.play(move)
            history.append(str(move))

        winner = None if truncated else self.game.winner()

        if verbose:
            if truncated:
                self.output_fn(f"Draw (stopped after {len(history)} moves)")
            elif winner is None:
                self.output_fn("Draw")
            else:
                self.output_fn(f"{winner} won")

        return MatchResult(
            winner=winner,
            moves_made=len(history),
            duration=time.time() - start_time,
            history=history,
            truncated=truncated,
        )

    def run_quiet(self) -> Optional[Player]:
        """Play silently and return the winner, None for a draw."""
        return self.run(verbose=False).winner


def build_match(config: MatchConfig, game_index: int = 0,
                output_fn: Callable[[str], None] = print) -> Match:
    """Create the board and both agents described by config."""
    white = build_agent(config.white, config.game, config.iterations,
                        config.exploration_bias, config.agent_seed(game_index, white=True))
    black = build_agent(config.black, config.game, config.iterations,
                        config.exploration_bias, config.agent_seed(game_index, white=False))
    return Match(create_board(config.game), white, black, config.max_moves, output_fn)


def run_series(config: MatchConfig, output_fn: Callable[[str], None] = print) -> Dict[str, Any]:
    """
    Play config.games matches and aggregate the results.

    If config.output_dir is set, the summary is also written as summary.json
    in a new timestamped directory below it.

    Returns:
        Summary dictionary with per-match results and win/draw counts
    """
    results: List[MatchResult] = []

    for game_index in range(config.games):
        match = build_match(config, game_index, output_fn)
        result = match.run(verbose=config.verbose)
        results.append(result)
        logger.info(f"Match {game_index + 1}/{config.games}: "
                    f"{result.winner.name if result.winner else 'draw'} "
                    f"after {result.moves_made} moves ({result.duration:.2f}s)")

    summary = {
        "config": config.to_dict(),
        "white_wins": sum(1 for r in results if r.winner is Player.WHITE),
        "black_wins": sum(1 for r in results if r.winner is Player.BLACK),
        "draws": sum(1 for r in results if r.winner is None),
        "results": [r.to_dict() for r in results],
    }

    if config.output_dir:
        run_dir = create_run_directory(Path(config.output_dir),
                                       f"{config.game}_{config.white}_vs_{config.black}")
        summary_path = run_dir / "summary.json"
        with open(summary_path, "w") as f:
            json.dump(summary, f, indent=2)
        logger.info(f"Summary written to {summary_path}")

    return summary
