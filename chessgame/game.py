"""A game of chess between two players taking turns on one board."""

from __future__ import annotations

from .board import INITIAL_LAYOUT, Board, MoveResult
from .pieces import Color
from .point import Point


def _parse_square(file_char: str, rank_char: str) -> Point:
    return Point(ord(file_char) - ord("a") + 1, ord(rank_char) - ord("1") + 1)


class Game:
    """Keeps the board and whose turn it is."""

    def __init__(self) -> None:
        self.board = Board(INITIAL_LAYOUT)
        self.current_player = Color.WHITE

    def move(self, coordinates: str) -> MoveResult:
        """Play a move written as source and destination squares, such as ``"e2e4"``.

        The turn passes to the other player only when the move was carried out.
        """
        if len(coordinates) < 4:
            raise ValueError(f"move must name two squares, got {coordinates!r}")
        src = _parse_square(coordinates[0], coordinates[1])
        dst = _parse_square(coordinates[2], coordinates[3])
        result = self.board.move_figure(src, dst, self.current_player)
        if result.successful:
            self.current_player = self.current_player.opponent
        return result

    def init_game(self) -> str:
        """The opening message: the starting layout followed by the first player's colour."""
        return INITIAL_LAYOUT + str(int(Color.WHITE))