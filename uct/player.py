"""
Player identities for two-player games.
"""

from enum import Enum


class Player(Enum):
    """Player enumeration."""
    WHITE = 0
    BLACK = 1

    def opponent(self) -> "Player":
        """Return the other player."""
        if self is Player.WHITE:
            return Player.BLACK
        return Player.WHITE

    def __str__(self) -> str:
        return self.name.capitalize()
