"""
Board coordinates in the usual "a1" notation.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coords:
    """A square on a 2D board; x is the column (a, b, ...), y the rank (1, 2, ...)."""
    x: int
    y: int

    def __str__(self) -> str:
        return f"{chr(ord('a') + self.x)}{self.y + 1}"

    def offset(self, dx: int, dy: int) -> "Coords":
        return Coords(self.x + dx, self.y + dy)

    def is_inside(self, size: int) -> bool:
        return 0 <= self.x < size and 0 <= self.y < size

    @classmethod
    def parse(cls, text: str, size: int) -> "Coords":
        """
        Parse a square such as "c4" (case-insensitive).

        Raises:
            ValueError: if text is malformed or lies outside a size x size board
        """
        text = text.strip()
        if len(text) < 2 or not text[0].isalpha() or not text[1:].isdigit():
            raise ValueError(f"Invalid coordinates: {text!r}")

        coords = cls(ord(text[0].lower()) - ord('a'), int(text[1:]) - 1)
        if not coords.is_inside(size):
            raise ValueError(f"Coordinates out of the board: {text!r}")
        return coords
