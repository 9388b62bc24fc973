"""
Circle Primitive
================
A center coordinate plus a radius. The diameter is derived (``radius * 2``)
and can be written through its own setter.

No validation is performed: a negative radius (and therefore a negative
diameter) is stored as given.
"""
from __future__ import annotations

import numpy as np

from shapes2d.shape import Shape
from shapes2d.vector import Scalar, Vector2, VectorLike, as_vector, scalar


class Circle(Shape):
    """A circle defined by its center and radius."""

    _fields = ("center", "radius")

    def __init__(self, center: VectorLike, radius: Scalar) -> None:
        self.center = center
        self.radius = radius

    @classmethod
    def from_diameter(cls, center: VectorLike, diameter: Scalar) -> Circle:
        """Creates a circle from its diameter (``radius = diameter * 0.5``)."""
        return cls(center, scalar(diameter) * scalar(0.5))

    @classmethod
    def default(cls) -> Circle:
        return cls(Vector2.ZERO, 1.0)

    @property
    def center(self) -> Vector2:
        return self._center

    @center.setter
    def center(self, center: VectorLike) -> None:
        self._center = as_vector(center)

    @property
    def radius(self) -> np.float32:
        return self._radius

    @radius.setter
    def radius(self, radius: Scalar) -> None:
        self._radius = scalar(radius)

    @property
    def diameter(self) -> np.float32:
        return self._radius * scalar(2.0)

    @diameter.setter
    def diameter(self, diameter: Scalar) -> None:
        self._radius = scalar(diameter) * scalar(0.5)
