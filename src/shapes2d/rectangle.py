"""
Rectangle Primitive (AABB)
==========================
An axis-aligned rectangle stored as a ``min``/``max`` corner pair.

The corners are not ordered: nothing enforces ``min <= max``, and an inverted
rectangle simply reports a negative width and/or height.

Setters come in two families:

- Resizing (``min_x``, ``max_x``, ``min_y``, ``max_y``, ``min``, ``max``,
  ``width``, ``height``, ``size``, :meth:`Rectangle.resize`): write one corner,
  or recompute ``max`` from the current ``min``. The extent changes, the other
  corner is left as it is.
- Translating (``x``, ``y``, ``position``, ``center``, :meth:`Rectangle.move_to`):
  move both corners by the same delta. ``width`` and ``height`` are kept.

``x`` and ``min_x`` read the same value but belong to different families.
"""
from __future__ import annotations

import numpy as np

from shapes2d.shape import Shape
from shapes2d.vector import Scalar, Vector2, VectorLike, as_vector, scalar


class Rectangle(Shape):
    """
    An axis-aligned rectangle.

    Args:
        min_x: Left edge.
        min_y: Bottom edge.
        max_x: Right edge.
        max_y: Top edge.
    """

    _fields = ("min", "max")

    def __init__(self, min_x: Scalar, min_y: Scalar, max_x: Scalar, max_y: Scalar) -> None:
        self.min = Vector2(min_x, min_y)
        self.max = Vector2(max_x, max_y)

    @classmethod
    def from_coordinates(cls, min: VectorLike, max: VectorLike) -> Rectangle:
        """Creates a rectangle from its `min` and `max` corners."""
        min, max = as_vector(min), as_vector(max)
        return cls(min.x, min.y, max.x, max.y)

    @classmethod
    def from_dimensions(cls, min: VectorLike, width: Scalar, height: Scalar) -> Rectangle:
        """Creates a rectangle from its `min` corner and its size."""
        min = as_vector(min)
        return cls.from_coordinates(min, min + Vector2(width, height))

    @classmethod
    def default(cls) -> Rectangle:
        return cls.from_coordinates(Vector2.ZERO, Vector2.ONE)

    def _display_items(self) -> list[tuple[str, np.float32]]:
        return [
            ("MinX", self.min_x),
            ("MinY", self.min_y),
            ("MaxX", self.max_x),
            ("MaxY", self.max_y),
        ]

    # --------------------------------------------------------------------------
    # Corners
    # --------------------------------------------------------------------------
    @property
    def min(self) -> Vector2:
        return self._min

    @min.setter
    def min(self, min: VectorLike) -> None:
        self._min = as_vector(min)

    @property
    def max(self) -> Vector2:
        return self._max

    @max.setter
    def max(self, max: VectorLike) -> None:
        self._max = as_vector(max)

    # --------------------------------------------------------------------------
    # Edges (resizing)
    # --------------------------------------------------------------------------
    @property
    def min_x(self) -> np.float32:
        return self._min.x

    @min_x.setter
    def min_x(self, x: Scalar) -> None:
        self._min = Vector2(x, self._min.y)

    @property
    def max_x(self) -> np.float32:
        return self._max.x

    @max_x.setter
    def max_x(self, x: Scalar) -> None:
        self._max = Vector2(x, self._max.y)

    @property
    def min_y(self) -> np.float32:
        return self._min.y

    @min_y.setter
    def min_y(self, y: Scalar) -> None:
        self._min = Vector2(self._min.x, y)

    @property
    def max_y(self) -> np.float32:
        return self._max.y

    @max_y.setter
    def max_y(self, y: Scalar) -> None:
        self._max = Vector2(self._max.x, y)

    # --------------------------------------------------------------------------
    # Dimensions (resizing, `min` is the anchor)
    # --------------------------------------------------------------------------
    @property
    def width(self) -> np.float32:
        return self._max.x - self._min.x

    @width.setter
    def width(self, width: Scalar) -> None:
        self._max = Vector2(self._min.x + scalar(width), self._max.y)

    @property
    def height(self) -> np.float32:
        return self._max.y - self._min.y

    @height.setter
    def height(self, height: Scalar) -> None:
        self._max = Vector2(self._max.x, self._min.y + scalar(height))

    @property
    def size(self) -> Vector2:
        """(width, height); negative components mean an inverted rectangle."""
        return Vector2(self.width, self.height)

    @size.setter
    def size(self, size: VectorLike) -> None:
        size = as_vector(size)
        self.width = size.x
        self.height = size.y

    def resize(self, size: VectorLike) -> None:
        """Sets the size keeping the `min` corner in place."""
        self.size = size

    # --------------------------------------------------------------------------
    # Placement (translating, size is kept)
    # --------------------------------------------------------------------------
    @property
    def x(self) -> np.float32:
        return self._min.x

    @x.setter
    def x(self, x: Scalar) -> None:
        x = scalar(x)
        self._max = Vector2(self._max.x + (x - self._min.x), self._max.y)
        self._min = Vector2(x, self._min.y)

    @property
    def y(self) -> np.float32:
        return self._min.y

    @y.setter
    def y(self, y: Scalar) -> None:
        y = scalar(y)
        self._max = Vector2(self._max.x, self._max.y + (y - self._min.y))
        self._min = Vector2(self._min.x, y)

    @property
    def position(self) -> Vector2:
        """The `min` corner."""
        return self._min

    @position.setter
    def position(self, position: VectorLike) -> None:
        position = as_vector(position)
        self.x = position.x
        self.y = position.y

    def move_to(self, position: VectorLike) -> None:
        """Moves the `min` corner to `position` keeping the size."""
        self.position = position

    @property
    def center(self) -> Vector2:
        return (self._min + self._max) * 0.5

    @center.setter
    def center(self, center: VectorLike) -> None:
        center = as_vector(center)
        half_width = self.width * scalar(0.5)
        half_height = self.height * scalar(0.5)
        self.position = Vector2(center.x - half_width, center.y - half_height)
