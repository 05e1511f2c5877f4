# enginetools/world/iterable_vectors.py
"""
Vectores de 3 componentes recorribles (x, y, z), en versión entera y flotante.

IVector3Int(), IVector3Int(x, y) -> z = 0, IVector3Int(x, y, z) o
IVector3Int.from_vector(v) para copiar un vector nativo.
"""
from __future__ import annotations
from typing import Any, Callable, Iterator, Sequence, Union

from enginetools.world.vectors import Vector3, Vector3Int

Number = Union[int, float]


class _IterableVector3:
    __slots__ = ("_x", "_y", "_z")
    __hash__ = None  # mutable
    _coerce: Callable[[Any], Number] = float

    def __init__(self, x: Number = 0, y: Number = 0, z: Number = 0) -> None:
        self._x = self._coerce(x)
        self._y = self._coerce(y)
        self._z = self._coerce(z)

    @classmethod
    def from_vector(cls, source: Sequence[Number]):
        return cls(source[0], source[1], source[2])

    # --- accesores ---
    @property
    def x(self) -> Number:
        return self._x

    @x.setter
    def x(self, value: Number) -> None:
        self._x = self._coerce(value)

    @property
    def y(self) -> Number:
        return self._y

    @y.setter
    def y(self, value: Number) -> None:
        self._y = self._coerce(value)

    @property
    def z(self) -> Number:
        return self._z

    @z.setter
    def z(self, value: Number) -> None:
        self._z = self._coerce(value)

    # --- recorrido ---
    def __iter__(self) -> Iterator[Number]:
        yield self._x
        yield self._y
        yield self._z

    def as_sequence(self) -> Iterator[Number]:
        return iter(self)

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: int) -> Number:
        # indexado estricto (0..2, o negativos como en una tupla); get_value es el permisivo
        return (self._x, self._y, self._z)[index]

    def get_value(self, index: int) -> Number:
        """0 -> x, 1 -> y; cualquier otro índice devuelve z."""
        return self._x if index == 0 else self._y if index == 1 else self._z

    # --- conversiones ---
    def as_vector3_int(self) -> Vector3Int:
        return Vector3Int(int(self._x), int(self._y), int(self._z))

    def as_vector3(self) -> Vector3:
        return Vector3(float(self._x), float(self._y), float(self._z))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _IterableVector3):
            return NotImplemented
        return (self._x, self._y, self._z) == (other._x, other._y, other._z)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._x!r}, {self._y!r}, {self._z!r})"


class IVector3Int(_IterableVector3):
    __slots__ = ()
    _coerce = staticmethod(int)


class IVector3(_IterableVector3):
    __slots__ = ()
    _coerce = staticmethod(float)
