"""Board coordinates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A square on the board: ``x`` is the file (1-8), ``y`` the rank (1-8)."""

    x: int = 0
    y: int = 0

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)