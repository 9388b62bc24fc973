"""
shapes2d
========
Elementary 2D geometric primitives: point, line segment, ray, axis-aligned
rectangle, circle and triangle, built on a single precision ``Vector2``.

The package does no intersection testing, transformation or rendering; it is
the shared vocabulary that such code is written against.
"""
from importlib.metadata import version, PackageNotFoundError

from shapes2d.errors import Shapes2dError, FrozenShapeError
from shapes2d.vector import Vector2, scalar
from shapes2d.shape import Shape
from shapes2d.point import Point
from shapes2d.line import Line
from shapes2d.ray import Ray
from shapes2d.rectangle import Rectangle
from shapes2d.circle import Circle
from shapes2d.triangle import Triangle
from shapes2d.placeholders import Ellipse, Polygon, Mesh

try:
    __version__ = version("shapes2d")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "Vector2",
    "scalar",
    "Shape",
    "Point",
    "Line",
    "Ray",
    "Rectangle",
    "Circle",
    "Triangle",
    "Ellipse",
    "Polygon",
    "Mesh",
    "Shapes2dError",
    "FrozenShapeError",
]
