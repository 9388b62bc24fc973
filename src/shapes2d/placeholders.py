"""
Placeholder Shapes
==================
Ellipse, polygon and mesh are named so that downstream code can refer to them,
but their geometry is not defined yet. They only hold their data: no
accessors, no derived values, no mutation.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from shapes2d.vector import Vector2


@dataclass(frozen=True)
class Ellipse:
    """Geometry not defined yet. Holds a center and both radii."""
    center: Vector2 = Vector2.ZERO
    radius_major: float = 0.0
    radius_minor: float = 0.0


@dataclass(frozen=True)
class Polygon:
    """Geometry not defined yet. Holds an ordered tuple of vertices."""
    coordinates: tuple[Vector2, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Mesh:
    """Geometry not defined yet. Holds an unordered tuple of vertices."""
    coordinates: tuple[Vector2, ...] = field(default_factory=tuple)
