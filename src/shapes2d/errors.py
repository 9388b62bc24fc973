"""Exception types raised by shapes2d."""
from __future__ import annotations


class Shapes2dError(Exception):
    """Base error of the package."""


class FrozenShapeError(Shapes2dError, AttributeError):
    """Attempt to mutate a frozen shape (one of the named class constants)."""
