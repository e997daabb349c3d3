"""
Minimal contract for anything that can pick a move in a match.
"""

from __future__ import annotations

from typing import Any, Dict, Protocol

from uct import TwoPlayerGame


class AgentProtocol(Protocol):
    """
    An agent is asked for a move only when the side to move has at least two
    legal moves; the returned move must be one of game.possible_moves().
    """

    def choose_move(self, game: TwoPlayerGame) -> Any:
        ...

    def get_action_info(self) -> Dict[str, Any]:
        ...
