"""
Line Segment Primitive
======================
A segment stored as two endpoints, ``origin`` and ``end``. Center, direction
and length are derived on every read.
"""
from __future__ import annotations

from typing import ClassVar

import numpy as np

from shapes2d.shape import Shape
from shapes2d.vector import Scalar, Vector2, VectorLike, as_vector, scalar


class Line(Shape):
    """A straight line between two points. A zero-length line is valid."""

    _fields = ("origin", "end")

    UP: ClassVar[Line]
    RIGHT: ClassVar[Line]
    DOWN: ClassVar[Line]
    LEFT: ClassVar[Line]

    def __init__(self, origin: VectorLike, end: VectorLike) -> None:
        self.origin = origin
        self.end = end

    @classmethod
    def from_direction(cls, origin: VectorLike, direction: VectorLike, distance: Scalar) -> Line:
        """
        Creates a line starting at `origin` and running `distance` units along `direction`.

        Args:
            origin: Start point of the line.
            direction: Direction of travel, normalized before use. A zero vector
                yields a zero-length line at `origin` whatever the distance.
            distance: Length along the normalized direction (may be negative).
        """
        origin = as_vector(origin)
        return cls(origin, origin + as_vector(direction).normalize_or_zero() * scalar(distance))

    @classmethod
    def default(cls) -> Line:
        return cls(Vector2.ZERO, Vector2.ONE)

    @property
    def origin(self) -> Vector2:
        return self._origin

    @origin.setter
    def origin(self, origin: VectorLike) -> None:
        self._origin = as_vector(origin)

    @property
    def end(self) -> Vector2:
        return self._end

    @end.setter
    def end(self, end: VectorLike) -> None:
        self._end = as_vector(end)

    @property
    def center(self) -> Vector2:
        return (self._origin + self._end) * 0.5

    @property
    def direction(self) -> Vector2:
        """Vector from origin to end (not normalized)."""
        return self._end - self._origin

    @property
    def length(self) -> np.float32:
        """
        Largest signed component of `direction`.

        This is not the distance between the endpoints; it is kept for
        compatibility with existing callers. Use `euclidean_length` for the
        geometric length.
        """
        return self.direction.max_element()

    @property
    def euclidean_length(self) -> np.float32:
        """Distance between origin and end."""
        return self.direction.magnitude


Line.UP = Line(Vector2.ZERO, Vector2.Y).freeze()
Line.RIGHT = Line(Vector2.ZERO, Vector2.X).freeze()
Line.DOWN = Line(Vector2.ZERO, Vector2.NEG_Y).freeze()
Line.LEFT = Line(Vector2.ZERO, Vector2.NEG_X).freeze()
