"""Chess figures and the movement rules each of them follows."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import ClassVar, List, Optional

from .point import Point

SIZE = 8
EMPTY_SYMBOL = "#"


class Color(IntEnum):
    """The side a figure belongs to."""

    WHITE = 0
    BLACK = 1

    @property
    def opponent(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE


Grid = List[List["Figure"]]


def _cell(grid: Grid, point: Point) -> Figure:
    """Return the figure on ``point``; row 0 of the grid is rank 8."""
    return grid[SIZE - point.y][point.x - 1]


def _place(grid: Grid, point: Point, figure: Figure) -> None:
    grid[SIZE - point.y][point.x - 1] = figure


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Figure(ABC):
    """A figure standing on a square of the board."""

    letter: ClassVar[str] = ""

    def __init__(self, color: Optional[Color], coordinates: Point) -> None:
        self.color = color
        self.coordinates = coordinates

    @property
    def symbol(self) -> str:
        """One-character symbol: upper case for white, lower case for black."""
        return self.letter.upper() if self.color is Color.WHITE else self.letter

    @property
    def is_empty(self) -> bool:
        return False

    @abstractmethod
    def can_move(self, dst: Point, grid: Grid) -> bool:
        """Whether the figure's movement rules allow reaching ``dst``."""

    def move(self, dst: Point, grid: Grid) -> None:
        """Move to ``dst``, leaving an empty square behind."""
        _place(grid, self.coordinates, Empty(self.coordinates))
        self.coordinates = dst
        _place(grid, dst, self)

    def successful_move(self) -> None:
        """Hook called once a move has been accepted."""

    def _path_clear(self, dst: Point, grid: Grid) -> bool:
        step_x = _sign(dst.x - self.coordinates.x)
        step_y = _sign(dst.y - self.coordinates.y)
        distance = max(abs(dst.x - self.coordinates.x), abs(dst.y - self.coordinates.y))
        return all(
            _cell(grid, Point(self.coordinates.x + i * step_x, self.coordinates.y + i * step_y)).is_empty
            for i in range(1, distance)
        )

    def _is_straight_move(self, dst: Point, grid: Grid) -> bool:
        dx = abs(self.coordinates.x - dst.x)
        dy = abs(self.coordinates.y - dst.y)
        if (dx > 0 and dy == 0) or (dy > 0 and dx == 0):
            return self._path_clear(dst, grid)
        return False

    def _is_diagonal_move(self, dst: Point, grid: Grid) -> bool:
        dx = abs(self.coordinates.x - dst.x)
        dy = abs(self.coordinates.y - dst.y)
        if dx != dy:
            return False
        return self._path_clear(dst, grid)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.symbol!r}, {self.coordinates!r})"


class Empty(Figure):
    """An unoccupied square."""

    def __init__(self, coordinates: Point = Point()) -> None:
        super().__init__(None, coordinates)

    @property
    def symbol(self) -> str:
        return EMPTY_SYMBOL

    @property
    def is_empty(self) -> bool:
        return True

    def can_move(self, dst: Point, grid: Grid) -> bool:
        return False


class King(Figure):
    letter = "k"

    def can_move(self, dst: Point, grid: Grid) -> bool:
        dx = abs(dst.x - self.coordinates.x)
        dy = abs(dst.y - self.coordinates.y)
        return max(dx, dy) == 1


class Rook(Figure):
    letter = "r"

    def can_move(self, dst: Point, grid: Grid) -> bool:
        return self._is_straight_move(dst, grid)


class Bishop(Figure):
    letter = "b"

    def can_move(self, dst: Point, grid: Grid) -> bool:
        return self._is_diagonal_move(dst, grid)


class Knight(Figure):
    letter = "n"

    def can_move(self, dst: Point, grid: Grid) -> bool:
        dx = abs(dst.x - self.coordinates.x)
        dy = abs(dst.y - self.coordinates.y)
        return (dx, dy) in ((2, 1), (1, 2))


class Queen(Figure):
    letter = "q"

    def can_move(self, dst: Point, grid: Grid) -> bool:
        return self._is_straight_move(dst, grid) or self._is_diagonal_move(dst, grid)


class Pawn(Figure):
    letter = "p"

    def __init__(self, color: Optional[Color], coordinates: Point) -> None:
        super().__init__(color, coordinates)
        self.first_move = True

    def successful_move(self) -> None:
        self.first_move = False

    def can_move(self, dst: Point, grid: Grid) -> bool:
        dx = abs(dst.x - self.coordinates.x)
        dy = dst.y - self.coordinates.y
        direction = 1 if self.color is Color.WHITE else -1

        if dx == 0 and (
            dy == direction
            or (
                dy == 2 * direction
                and self.first_move
                and _cell(grid, Point(self.coordinates.x, self.coordinates.y + direction)).is_empty
            )
        ):
            return _cell(grid, dst).is_empty
        if dx == 1 and dy == direction:
            target = _cell(grid, dst)
            return target.color != self.color and not target.is_empty
        return False


_KINDS = {cls.letter: cls for cls in (King, Rook, Bishop, Knight, Queen, Pawn)}


def make_figure(symbol: str, coordinates: Point) -> Figure:
    """Create the figure a layout symbol stands for; unknown symbols are empty squares."""
    kind = _KINDS.get(symbol.lower()) if symbol.isalpha() else None
    if kind is None:
        return Empty(coordinates)
    color = Color.WHITE if symbol.isupper() else Color.BLACK
    return kind(color, coordinates)