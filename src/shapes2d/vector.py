"""
2D Vector Value Type
====================
The coordinate type shared by every primitive in the package.

Components are stored as single precision floats (see ``config.SCALAR_DTYPE``)
and the vector itself is immutable, so it can be handed out by accessors and
stored by setters without any aliasing concerns.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Iterator, Sequence, Union, TYPE_CHECKING

import numpy as np

from shapes2d.config import SCALAR_DTYPE, DEFAULT_TOLERANCE

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

Scalar = Union[int, float, np.floating, np.integer]
VectorLike = Union["Vector2", Sequence[float], "npt.NDArray[np.floating]"]


def scalar(value: Scalar) -> np.float32:
    """Coerce a number to the package scalar type."""
    return SCALAR_DTYPE(value)


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float, np.floating, np.integer))


@dataclass(frozen=True, repr=False)
class Vector2:
    """
    An immutable vector in 2D space.
    """
    x: float
    y: float

    ZERO: ClassVar[Vector2]
    ONE: ClassVar[Vector2]
    NEG_ONE: ClassVar[Vector2]
    X: ClassVar[Vector2]
    Y: ClassVar[Vector2]
    NEG_X: ClassVar[Vector2]
    NEG_Y: ClassVar[Vector2]

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", scalar(self.x))
        object.__setattr__(self, "y", scalar(self.y))

    @classmethod
    def from_array(cls, values: VectorLike) -> Vector2:
        """Build a vector from any two-element sequence (tuple, list, ndarray)."""
        if isinstance(values, Vector2):
            return values
        if len(values) != 2:
            raise ValueError(f"Expected exactly 2 components, got {len(values)}.")
        return cls(values[0], values[1])

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(x={self.x}, y={self.y})"

    def __str__(self) -> str:
        return f"[{self.x}, {self.y}]"

    def __iter__(self) -> Iterator[np.float32]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            raise TypeError("Can only add a Vector2 to a Vector2.")
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            raise TypeError("Can only subtract a Vector2 from a Vector2.")
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: Scalar) -> Vector2:
        if not _is_scalar(factor):
            raise TypeError("Can only multiply a Vector2 by a scalar.")
        factor = scalar(factor)
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Scalar) -> Vector2:
        if not _is_scalar(divisor):
            raise TypeError("Can only divide a Vector2 by a scalar.")
        if divisor == 0.0:
            raise ZeroDivisionError("Cannot divide a Vector2 by zero.")
        divisor = scalar(divisor)
        return Vector2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    @property
    def magnitude(self) -> np.float32:
        """Euclidean length of the vector."""
        return np.hypot(self.x, self.y)

    def dot(self, other: Vector2) -> np.float32:
        return self.x * other.x + self.y * other.y

    def normalize_or_zero(self) -> Vector2:
        """
        Returns the unit vector pointing the same way as this one.

        Falls back to the zero vector when the magnitude is zero or when its
        reciprocal is not finite (NaN, infinite or subnormal input), so the
        result never contains NaN.
        """
        with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
            rcp = SCALAR_DTYPE(1.0) / self.magnitude
        if np.isfinite(rcp) and rcp > 0.0:
            return Vector2(self.x * rcp, self.y * rcp)
        logger.debug("Degenerate vector %r normalized to zero.", self)
        return Vector2.ZERO

    def max_element(self) -> np.float32:
        """Larger of the two components (signed, NaN components are ignored)."""
        return np.fmax(self.x, self.y)

    def min_element(self) -> np.float32:
        """Smaller of the two components (signed, NaN components are ignored)."""
        return np.fmin(self.x, self.y)

    def is_close(self, other: VectorLike, tol: float = DEFAULT_TOLERANCE) -> bool:
        """Component-wise comparison within an absolute tolerance."""
        other = as_vector(other)
        return bool(abs(self.x - other.x) <= tol and abs(self.y - other.y) <= tol)

    def to_array(self) -> npt.NDArray[np.float32]:
        return np.array([self.x, self.y], dtype=SCALAR_DTYPE)


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.ONE = Vector2(1.0, 1.0)
Vector2.NEG_ONE = Vector2(-1.0, -1.0)
Vector2.X = Vector2(1.0, 0.0)
Vector2.Y = Vector2(0.0, 1.0)
Vector2.NEG_X = Vector2(-1.0, 0.0)
Vector2.NEG_Y = Vector2(0.0, -1.0)


def as_vector(value: VectorLike) -> Vector2:
    """Accept a Vector2 or any (x, y) sequence and return a Vector2."""
    if isinstance(value, Vector2):
        return value
    return Vector2.from_array(value)
