"""Triangle Primitive: three independently settable coordinates."""
from __future__ import annotations

from shapes2d.shape import Shape
from shapes2d.vector import Vector2, VectorLike, as_vector


class Triangle(Shape):
    """
    Three coordinates in 2D space.

    The coordinates are not ordered and may be collinear or coincident; area,
    centroid and winding are left to the caller.
    """

    _fields = ("coordinate1", "coordinate2", "coordinate3")

    def __init__(
        self,
        coordinate1: VectorLike,
        coordinate2: VectorLike,
        coordinate3: VectorLike,
    ) -> None:
        self.coordinate1 = coordinate1
        self.coordinate2 = coordinate2
        self.coordinate3 = coordinate3

    @classmethod
    def default(cls) -> Triangle:
        return cls(Vector2.ONE, Vector2.ZERO, Vector2.X)

    @property
    def coordinate1(self) -> Vector2:
        return self._coordinate1

    @coordinate1.setter
    def coordinate1(self, coordinate: VectorLike) -> None:
        self._coordinate1 = as_vector(coordinate)

    @property
    def coordinate2(self) -> Vector2:
        return self._coordinate2

    @coordinate2.setter
    def coordinate2(self, coordinate: VectorLike) -> None:
        self._coordinate2 = as_vector(coordinate)

    @property
    def coordinate3(self) -> Vector2:
        return self._coordinate3

    @coordinate3.setter
    def coordinate3(self, coordinate: VectorLike) -> None:
        self._coordinate3 = as_vector(coordinate)
