"""
Command line entry point for playing matches.
"""

import logging
from typing import List, Optional

from utils.logging_setup import setup_logging, verbosity_to_level

from .config import parse_config
from .match import run_series

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_config(argv)
    setup_logging(verbosity_to_level(config.logging_verbosity))
    config.log_config(logger)

    summary = run_series(config)

    if config.games > 1:
        print(f"White wins: {summary['white_wins']}, "
              f"Black wins: {summary['black_wins']}, "
              f"Draws: {summary['draws']}")
    return 0
