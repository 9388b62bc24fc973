"""
Ray Primitive
=============
An origin plus a direction. The direction is normalized by every constructor
and setter, so it is always unit length or exactly zero (the latter when the
supplied direction or offset is degenerate).
"""
from __future__ import annotations

from typing import ClassVar

from shapes2d.shape import Shape
from shapes2d.vector import Vector2, VectorLike, as_vector


class Ray(Shape):
    """A half-line starting at `origin` and running along `direction`."""

    _fields = ("origin", "direction")

    UP: ClassVar[Ray]
    RIGHT: ClassVar[Ray]
    DOWN: ClassVar[Ray]
    LEFT: ClassVar[Ray]

    def __init__(self, origin: VectorLike, direction: VectorLike) -> None:
        self.origin = origin
        self.direction = direction

    @classmethod
    def from_direction(cls, origin: VectorLike, direction: VectorLike) -> Ray:
        return cls(origin, direction)

    @classmethod
    def from_offset(cls, origin: VectorLike, offset: VectorLike) -> Ray:
        """Creates a ray from `origin` pointing towards the point `offset`."""
        origin = as_vector(origin)
        return cls(origin, as_vector(offset) - origin)

    @classmethod
    def default(cls) -> Ray:
        return cls.from_offset(Vector2.ZERO, Vector2.ONE)

    @property
    def origin(self) -> Vector2:
        return self._origin

    @origin.setter
    def origin(self, origin: VectorLike) -> None:
        # The direction is kept, so the offset point moves with the origin.
        self._origin = as_vector(origin)

    @property
    def direction(self) -> Vector2:
        return self._direction

    @direction.setter
    def direction(self, direction: VectorLike) -> None:
        self._direction = as_vector(direction).normalize_or_zero()

    @property
    def offset(self) -> Vector2:
        """
        The point one unit along the ray.

        Assigning a point re-aims the ray at it from the current origin. Only
        the heading is stored, so reading `offset` back gives the point at unit
        distance on that heading, not the assigned point itself.
        """
        return self._direction + self._origin

    @offset.setter
    def offset(self, offset: VectorLike) -> None:
        self._direction = (as_vector(offset) - self._origin).normalize_or_zero()


Ray.UP = Ray(Vector2.ZERO, Vector2.Y).freeze()
Ray.RIGHT = Ray(Vector2.ZERO, Vector2.X).freeze()
Ray.DOWN = Ray(Vector2.ZERO, Vector2.NEG_Y).freeze()
Ray.LEFT = Ray(Vector2.ZERO, Vector2.NEG_X).freeze()
