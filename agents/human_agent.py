"""
Interactive agent reading moves from a terminal.
"""

from typing import Any, Callable, Dict, List

from games.coords import Coords
from uct import TwoPlayerGame


class HumanAgent:
    """
    Human player prompting for coordinates.

    Malformed or impossible input is reported and asked again. input_fn and
    output_fn default to input() and print() and can be replaced to script
    a game.
    """

    def __init__(self,
                 game_name: str,
                 input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        choosers = {
            "tictactoe": self._choose_cell,
            "connect4": self._choose_column,
            "checkers": self._choose_checkers_move,
        }
        if game_name not in choosers:
            raise ValueError(f"No human input available for game: {game_name}")
        self.game_name = game_name
        self._choose = choosers[game_name]
        self.input_fn = input_fn
        self.output_fn = output_fn

    def choose_move(self, game: TwoPlayerGame) -> Any:
        return self._choose(game.possible_moves())

    def _read_coords(self, message: str, size: int) -> Coords:
        while True:
            text = self.input_fn(f"{message}\n> ")
            try:
                return Coords.parse(text, size)
            except ValueError as e:
                self.output_fn(str(e))

    def _choose_cell(self, moves: List[Any]) -> Any:
        while True:
            pos = self._read_coords("Coordinates to play? (e.g., a1)", 3)
            for move in moves:
                if move.pos == pos:
                    return move
            self.output_fn("Impossible move")

    def _choose_column(self, moves: List[Any]) -> Any:
        while True:
            text = self.input_fn("Column to play? (e.g., 4)\n> ").strip()
            if not text.isdigit():
                self.output_fn(f"Invalid column: {text!r}")
                continue
            column = int(text) - 1
            for move in moves:
                if move.column == column:
                    return move
            self.output_fn("Impossible move")

    def _choose_checkers_move(self, moves: List[Any]) -> Any:
        while True:
            src = self._read_coords("Token to move? (e.g., a1)", 8)
            candidates = [m for m in moves if m.src == src]
            if not candidates:
                self.output_fn("Invalid coordinates")
                continue
            if len(candidates) == 1:
                return candidates[0]

            dst = self._read_coords("Destination? (e.g., b2)", 8)
            candidates = [m for m in candidates if m.dst == dst]
            if not candidates:
                self.output_fn("Invalid coordinates")
                continue
            if len(candidates) == 1:
                return candidates[0]

            return self._choose_among(candidates)

    def _choose_among(self, moves: List[Any]) -> Any:
        for i, move in enumerate(moves, start=1):
            self.output_fn(f"{i}: {move}")
        while True:
            text = self.input_fn("Which one? (number)\n> ").strip()
            if text.isdigit() and 1 <= int(text) <= len(moves):
                return moves[int(text) - 1]
            self.output_fn("Impossible move")

    def get_action_info(self) -> Dict[str, Any]:
        """Get information about the agent."""
        return {
            "name": "HumanAgent",
            "type": "human",
            "description": f"Reads {self.game_name} moves from the terminal"
        }
