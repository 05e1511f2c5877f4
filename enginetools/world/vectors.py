# enginetools/world/vectors.py
from __future__ import annotations
import math
from typing import Any, Iterable, NamedTuple, Sequence

from enginetools.world import settings


class Vector2(NamedTuple):
    x: float = 0.0
    y: float = 0.0


class Vector2Int(NamedTuple):
    x: int = 0
    y: int = 0


class Vector3(NamedTuple):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class Vector3Int(NamedTuple):
    x: int = 0
    y: int = 0
    z: int = 0


def _position_of(obj: Any) -> Vector3:
    """Acepta un punto (x, y, z) o una entidad con .transform.position."""
    transform = getattr(obj, "transform", None)
    if transform is not None:
        obj = transform.position
    if isinstance(obj, Iterable) and not isinstance(obj, str):
        values = tuple(obj)
        if len(values) == 3:
            return Vector3(float(values[0]), float(values[1]), float(values[2]))
    raise TypeError(f"Expected a 3D point or an object with a transform, got {obj!r}")


def distance(a: Any, b: Any) -> float:
    """
    Distancia euclídea entre dos puntos del espacio. Cada operando puede ser un punto
    o un GameObject (se usa su transform.position); el orden no importa.
    """
    return math.dist(_position_of(a), _position_of(b))


def approximately(a: float, b: float) -> bool:
    st = settings.SETTINGS
    return abs(b - a) < max(st.APPROX_REL_TOL * max(abs(a), abs(b)), st.APPROX_ABS_TOL)


def approximately_equal(a: Sequence[float], b: Sequence[float]) -> bool:
    """Comparación componente a componente (x, y, z)."""
    return approximately(a[0], b[0]) and approximately(a[1], b[1]) and approximately(a[2], b[2])
