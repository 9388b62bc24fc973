"""
Shape Base Class
================
Common behaviour of every primitive, driven by the ``_fields`` declaration of
the subclass:

- ``str()`` renders ``"<TypeName> { field1: <v1>, field2: <v2> }"``
- ``repr()``, ``==`` and ``copy()`` compare/copy the declared fields
- named constants (``Point.ZERO``, ``Ray.UP`` ...) are frozen instances; use
  ``copy()`` to obtain a mutable value from them
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, TypeVar

import numpy as np

from shapes2d.errors import FrozenShapeError

ShapeT = TypeVar("ShapeT", bound="Shape")


def _repr_value(value: Any) -> str:
    # numpy scalars repr as "np.float32(1.0)", show the plain number instead
    if isinstance(value, np.floating):
        return str(value)
    return repr(value)


class Shape(ABC):
    """
    Abstract base class for the 2D primitives.

    Subclasses list their stored attributes in ``_fields`` (declaration order)
    and expose each of them through a property of the same name.
    """

    _fields: ClassVar[tuple[str, ...]] = ()

    _frozen: bool = False

    def __setattr__(self, name: str, value: Any) -> None:
        if self._frozen:
            raise FrozenShapeError(
                f"{self.__class__.__name__} constant is frozen; call copy() to get a mutable value."
            )
        super().__setattr__(name, value)

    @classmethod
    @abstractmethod
    def default(cls: type[ShapeT]) -> ShapeT:
        """The default value of the shape."""
        pass

    def _display_items(self) -> list[tuple[str, Any]]:
        """Label/value pairs rendered by ``str()``."""
        return [(name, getattr(self, name)) for name in self._fields]

    def _field_values(self) -> tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self._fields)

    def __str__(self) -> str:
        body = ", ".join(f"{label}: {value}" for label, value in self._display_items())
        return f"{self.__class__.__name__} {{ {body} }}"

    def __repr__(self) -> str:
        args = ", ".join(f"{name}={_repr_value(getattr(self, name))}" for name in self._fields)
        return f"{self.__class__.__name__}({args})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._field_values() == other._field_values()

    # Mutable values are not hashable.
    __hash__ = None  # type: ignore[assignment]

    def copy(self: ShapeT) -> ShapeT:
        """Returns a mutable copy (also when called on a frozen constant)."""
        clone = object.__new__(self.__class__)
        for name, value in vars(self).items():
            if name != "_frozen":
                object.__setattr__(clone, name, value)
        return clone

    def __copy__(self: ShapeT) -> ShapeT:
        return self.copy()

    def __deepcopy__(self: ShapeT, memo: dict[int, Any]) -> ShapeT:
        # Stored values are immutable Vector2/float32, a shallow copy is already deep.
        clone = self.copy()
        memo[id(self)] = clone
        return clone

    def freeze(self: ShapeT) -> ShapeT:
        """Marks this instance read-only and returns it."""
        object.__setattr__(self, "_frozen", True)
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen
