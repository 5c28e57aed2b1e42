"""Integer lattice coordinates.

Coordinates are pairs of non-negative integers. Addition and subtraction are
component-wise. Subtracting a larger coordinate from a smaller one is a
caller error: the result would have a negative component, so it raises
:class:`~rastercanvas.errors.CoordinateError` rather than producing a value
that cannot address a canvas cell.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import sqrt
from typing import Iterator

from rastercanvas.errors import CoordinateError

__all__ = ["Coord"]


@dataclass(frozen=True, slots=True)
class Coord:
    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise CoordinateError(
                f"coordinate components must be >= 0, got ({self.x}, {self.y})"
            )

    @classmethod
    def new(cls, x: int, y: int) -> "Coord":
        return cls(x, y)

    def abs(self) -> float:
        """Euclidean norm of the coordinate taken as a vector from the origin."""
        return sqrt(self.x * self.x + self.y * self.y)

    def distance(self, other: "Coord") -> float:
        """Euclidean distance to *other*.

        The per-axis differences are taken in absolute value first, so the
        intermediate vector is always a valid coordinate.
        """
        return Coord(abs(self.x - other.x), abs(self.y - other.y)).abs()

    def __add__(self, other: "Coord") -> "Coord":
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Coord") -> "Coord":
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.x - other.x, self.y - other.y)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y
