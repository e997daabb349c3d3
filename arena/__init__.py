"""
Match running: configuration, the turn loop and the command line.
"""

from .config import MatchConfig, create_arg_parser, parse_config
from .match import Match, MatchResult, build_match, run_series

__all__ = [
    'MatchConfig', 'create_arg_parser', 'parse_config',
    'Match', 'MatchResult', 'build_match', 'run_series',
]
