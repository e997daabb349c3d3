"""
Match configuration for the arena.

Configuration can be provided via CLI arguments or YAML/JSON config files;
explicit CLI arguments override values loaded from a file.
"""

import argparse
import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import List, Optional

import yaml

from agents.registry import AGENT_TYPES
from games import GAMES
from uct import DEFAULT_EXPLORATION_BIAS


@dataclass
class MatchConfig:
    """
    Structured match configuration.

    Attributes:
        game: Game to play ("tictactoe", "connect4" or "checkers")
        white: Agent type playing White, who moves first
        black: Agent type playing Black
        iterations: Search iterations per move for MCTS agents
        exploration_bias: UCB1 exploration weight for MCTS agents
        seed: Base random seed (None = nondeterministic)
        games: Number of matches to play
        max_moves: Stop a match as a draw after this many moves (None = never)
        verbose: Print the board and every move
        logging_verbosity: Logging level (0=ERROR, 1=INFO, 2=DEBUG)
        output_dir: Directory where a JSON summary is written (None = no summary)
    """

    game: str = "tictactoe"
    white: str = "mcts"
    black: str = "mcts"
    iterations: int = 1000
    exploration_bias: float = DEFAULT_EXPLORATION_BIAS
    seed: Optional[int] = None
    games: int = 1
    max_moves: Optional[int] = None
    verbose: bool = True
    logging_verbosity: int = 1
    output_dir: Optional[str] = None

    def __post_init__(self):
        """Validate values and normalize names."""
        self.game = self.game.lower()
        self.white = self.white.lower()
        self.black = self.black.lower()

        if self.game not in GAMES:
            raise ValueError(f"Unknown game: {self.game} (expected one of {', '.join(GAMES)})")
        for agent_type in (self.white, self.black):
            if agent_type not in AGENT_TYPES:
                raise ValueError(f"Unknown agent type: {agent_type} (expected one of {', '.join(AGENT_TYPES)})")
        if self.iterations < 1:
            raise ValueError(f"iterations must be at least 1, got {self.iterations}")
        if self.games < 1:
            raise ValueError(f"games must be at least 1, got {self.games}")
        if self.max_moves is not None and self.max_moves < 1:
            raise ValueError(f"max_moves must be at least 1, got {self.max_moves}")

    def agent_seed(self, game_index: int, white: bool) -> Optional[int]:
        """Seed for one side of one match; both sides and all matches differ."""
        if self.seed is None:
            return None
        return self.seed + 2 * game_index + (0 if white else 1)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "MatchConfig":
        """Create config from dictionary, ignoring unknown keys."""
        valid_keys = {f.name for f in fields(cls)}
        filtered_dict = {k: v for k, v in config_dict.items() if k in valid_keys}
        return cls(**filtered_dict)

    @classmethod
    def from_file(cls, config_path: Path) -> "MatchConfig":
        """Load config from YAML or JSON file."""
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            if config_path.suffix.lower() in [".yaml", ".yml"]:
                config_dict = yaml.safe_load(f) or {}
            elif config_path.suffix.lower() == ".json":
                config_dict = json.load(f)
            else:
                raise ValueError(f"Unsupported config file format: {config_path.suffix}")

        return cls.from_dict(config_dict)

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def save_to_file(self, config_path: Path):
        """Save config to YAML or JSON file."""
        config_path = Path(config_path)
        config_dict = self.to_dict()

        with open(config_path, "w") as f:
            if config_path.suffix.lower() in [".yaml", ".yml"]:
                yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
            elif config_path.suffix.lower() == ".json":
                json.dump(config_dict, f, indent=2, sort_keys=False)
            else:
                raise ValueError(f"Unsupported config file format: {config_path.suffix}")

    def log_config(self, logger: logging.Logger):
        """Log the effective configuration."""
        logger.info("=" * 60)
        logger.info("Match Configuration")
        logger.info("=" * 60)
        logger.info(f"Game: {self.game}")
        logger.info(f"White: {self.white}")
        logger.info(f"Black: {self.black}")
        logger.info(f"Iterations: {self.iterations}")
        logger.info(f"Exploration Bias: {self.exploration_bias}")
        logger.info(f"Random Seed: {self.seed}")
        logger.info(f"Games: {self.games}")
        logger.info(f"Max Moves: {self.max_moves if self.max_moves else 'Unlimited'}")
        logger.info(f"Output Dir: {self.output_dir if self.output_dir else 'None (no summary)'}")
        logger.info("=" * 60)


def create_arg_parser() -> argparse.ArgumentParser:
    """Create argument parser for the match runner."""
    parser = argparse.ArgumentParser(
        description="Play two-player board games against the UCT engine",
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML or JSON config file (CLI arguments override it)"
    )
    parser.add_argument(
        "--game",
        type=str,
        choices=sorted(GAMES),
        default=None,
        help="Game to play (default: tictactoe)"
    )
    parser.add_argument(
        "--white",
        type=str,
        choices=AGENT_TYPES,
        default=None,
        help="Agent playing White, who moves first (default: mcts)"
    )
    parser.add_argument(
        "--black",
        type=str,
        choices=AGENT_TYPES,
        default=None,
        help="Agent playing Black (default: mcts)"
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="Search iterations per move (default: 1000)"
    )
    parser.add_argument(
        "--bias",
        type=float,
        default=None,
        dest="exploration_bias",
        help=f"UCB1 exploration bias (default: {DEFAULT_EXPLORATION_BIAS})"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible matches"
    )
    parser.add_argument(
        "--games",
        type=int,
        default=None,
        help="Number of matches to play (default: 1)"
    )
    parser.add_argument(
        "--max-moves",
        type=int,
        default=None,
        help="Declare a draw after this many moves"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print boards and moves"
    )
    parser.add_argument(
        "--verbosity",
        type=int,
        default=None,
        choices=[0, 1, 2],
        help="Logging verbosity: 0=ERROR, 1=INFO, 2=DEBUG"
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Write a JSON summary of the matches into a timestamped directory here"
    )

    return parser


def parse_args_to_config(args: argparse.Namespace) -> MatchConfig:
    """Convert parsed arguments to MatchConfig."""
    if args.config:
        config_dict = MatchConfig.from_file(Path(args.config)).to_dict()
    else:
        config_dict = {}

    overrides = {
        "game": args.game,
        "white": args.white,
        "black": args.black,
        "iterations": args.iterations,
        "exploration_bias": args.exploration_bias,
        "seed": args.seed,
        "games": args.games,
        "max_moves": args.max_moves,
        "logging_verbosity": args.verbosity,
        "output_dir": args.output_dir,
    }
    config_dict.update({k: v for k, v in overrides.items() if v is not None})
    if args.quiet:
        config_dict["verbose"] = False

    return MatchConfig.from_dict(config_dict)


def parse_config(argv: Optional[List[str]] = None) -> MatchConfig:
    """Parse command line arguments into a MatchConfig."""
    return parse_args_to_config(create_arg_parser().parse_args(argv))
