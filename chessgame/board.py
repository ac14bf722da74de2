"""The chess board and the rules that apply across figures: check, checkmate, promotion."""

from __future__ import annotations

from contextlib import contextmanager
from enum import Enum
from typing import Iterator, List

from .pieces import SIZE, Color, Figure, Pawn, Queen, make_figure
from .point import Point

INITIAL_LAYOUT = "rnbqkbnrpppppppp################################PPPPPPPPRNBQKBNR"


class MoveResult(str, Enum):
    """Outcome of a move request; the value is the code sent to the graphics side."""

    OK = "0"
    CHECK = "1"
    NOT_OWN_FIGURE = "2"
    OWN_FIGURE_AT_DESTINATION = "3"
    SELF_CHECK = "4"
    INVALID_SQUARE = "5"
    ILLEGAL_MOVE = "6"
    SAME_SQUARE = "7"
    CHECKMATE = "8"

    @property
    def successful(self) -> bool:
        """Whether the move was carried out."""
        return self in (MoveResult.OK, MoveResult.CHECK, MoveResult.CHECKMATE)


def _on_board(point: Point) -> bool:
    return 1 <= point.x <= SIZE and 1 <= point.y <= SIZE


class Board:
    """An 8x8 grid of figures; row 0 of the grid is rank 8, column 0 is file a."""

    def __init__(self, layout: str = INITIAL_LAYOUT) -> None:
        if len(layout) != SIZE * SIZE:
            raise ValueError(f"board layout must have {SIZE * SIZE} squares, got {len(layout)}")
        self._grid: List[List[Figure]] = [
            [
                make_figure(layout[row * SIZE + col], Point(col + 1, SIZE - row))
                for col in range(SIZE)
            ]
            for row in range(SIZE)
        ]
        self._kings = {Color.WHITE: Point(), Color.BLACK: Point()}
        for figure in self._figures():
            self._update_king_position(figure)

    def figure_at(self, point: Point) -> Figure:
        """Return the figure standing on ``point``."""
        if not _on_board(point):
            raise IndexError(f"{point} is not on the board")
        return self._grid[SIZE - point.y][point.x - 1]

    def _put(self, point: Point, figure: Figure) -> None:
        self._grid[SIZE - point.y][point.x - 1] = figure

    def _figures(self) -> Iterator[Figure]:
        for row in self._grid:
            yield from row

    def _update_king_position(self, figure: Figure) -> None:
        if figure.letter == "k" and figure.color is not None:
            self._kings[figure.color] = figure.coordinates

    @contextmanager
    def _trial_move(self, figure: Figure, dst: Point) -> Iterator[None]:
        """Move ``figure`` to ``dst`` for the duration of the block, then undo it."""
        src = figure.coordinates
        captured = self.figure_at(dst)
        figure.move(dst, self._grid)
        self._update_king_position(figure)
        try:
            yield
        finally:
            figure.move(src, self._grid)
            self._put(dst, captured)
            self._update_king_position(figure)

    def move_figure(self, src: Point, dst: Point, color: Color) -> MoveResult:
        """Try to move the figure on ``src`` to ``dst`` for the player ``color``."""
        color = Color(color)
        if not (_on_board(src) and _on_board(dst)):
            return MoveResult.INVALID_SQUARE
        if src == dst:
            return MoveResult.SAME_SQUARE

        figure = self.figure_at(src)
        if figure.color != color:
            return MoveResult.NOT_OWN_FIGURE
        if self.figure_at(dst).color == color:
            return MoveResult.OWN_FIGURE_AT_DESTINATION
        if not figure.can_move(dst, self._grid):
            return MoveResult.ILLEGAL_MOVE

        with self._trial_move(figure, dst):
            exposes_king = self.is_check(color)
        if exposes_king:
            return MoveResult.SELF_CHECK

        figure.move(dst, self._grid)
        self._update_king_position(figure)
        figure.successful_move()

        last_rank = SIZE if color is Color.WHITE else 1
        if isinstance(figure, Pawn) and dst.y == last_rank:
            self._put(dst, Queen(color, dst))

        opponent = color.opponent
        if self.is_check(opponent):
            if self.is_checkmate(opponent):
                return MoveResult.CHECKMATE
            return MoveResult.CHECK
        return MoveResult.OK

    def is_check(self, color: Color) -> bool:
        """Whether the king of ``color`` is attacked by any other figure."""
        king = self._kings[Color(color)]
        if not _on_board(king):
            return False
        return any(
            figure.color != color and figure.can_move(king, self._grid)
            for figure in self._figures()
        )

    def is_checkmate(self, color: Color) -> bool:
        """Whether no move of ``color`` leaves its king out of check."""
        color = Color(color)
        own = [figure for figure in self._figures() if figure.color == color]
        for figure in own:
            for x in range(1, SIZE + 1):
                for y in range(1, SIZE + 1):
                    dst = Point(x, y)
                    if self.figure_at(dst).color == color or not figure.can_move(dst, self._grid):
                        continue
                    with self._trial_move(figure, dst):
                        escapes = not self.is_check(color)
                    if escapes:
                        return False
        return True

    def render(self) -> str:
        """The board as text, rank 8 first, symbols separated by spaces."""
        return "\n".join(" ".join(figure.symbol for figure in row) for row in self._grid)

    def __str__(self) -> str:
        return self.render()