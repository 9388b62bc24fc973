"""A single coordinate in 2D space."""
from __future__ import annotations

from typing import ClassVar

from shapes2d.shape import Shape
from shapes2d.vector import Vector2, VectorLike, as_vector


class Point(Shape):
    """A simple geometric point."""

    _fields = ("coordinate",)

    ZERO: ClassVar[Point]
    ONE: ClassVar[Point]
    NEG_ONE: ClassVar[Point]

    def __init__(self, coordinate: VectorLike) -> None:
        self.coordinate = coordinate

    @classmethod
    def default(cls) -> Point:
        return cls(Vector2.ZERO)

    @property
    def coordinate(self) -> Vector2:
        return self._coordinate

    @coordinate.setter
    def coordinate(self, coordinate: VectorLike) -> None:
        self._coordinate = as_vector(coordinate)


Point.ZERO = Point(Vector2.ZERO).freeze()
Point.ONE = Point(Vector2.ONE).freeze()
Point.NEG_ONE = Point(Vector2.NEG_ONE).freeze()
