# enginetools/world/arrays.py
"""
Helpers sobre arrays 1D y grids 2D.

Un grid es una secuencia de secuencias rectangular indexada como grid[x][y]:
ancho = len(grid) (primera dimensión), alto = len(grid[0]) (segunda).
Las entradas None/vacías devuelven resultados degenerados en vez de fallar.
"""
from __future__ import annotations
from array import array as typed_array
from typing import Any, List, Optional, Sequence, Tuple, TypeVar, Union

from enginetools.utils.logger import get_logger

T = TypeVar("T")
Grid = Sequence[Sequence[T]]
Resizable = Union[List[T], typed_array]

log = get_logger("tools.arrays")

_ZERO_DEFAULT_TYPES = (int, float, complex, bool)
_CHAR_TYPECODES = ("u", "w")


def default_value(element_type: Optional[type]) -> Any:
    """Valor por defecto del tipo: cero para numéricos, None para el resto."""
    if isinstance(element_type, type) and issubclass(element_type, _ZERO_DEFAULT_TYPES):
        return element_type()
    return None


# ---- redimensionado ----

def increase_array_size(array: Optional[Sequence[T]], element_type: Optional[type] = None) -> Resizable:
    """
    Copia el array en uno nuevo con un elemento más al final (valor por defecto).
    None o vacío -> array de longitud 1.
    """
    if isinstance(array, typed_array):
        out = typed_array(array.typecode, array)
        out.append("\0" if array.typecode in _CHAR_TYPECODES else 0)
        return out

    if element_type is None and array:
        element_type = type(array[0])
    fill = default_value(element_type)
    if not array:
        log.debug(f"increase_array_size degenerate input={array!r} -> len=1")
        return [fill]
    return [*array, fill]


def decrease_array_size(array: Optional[Sequence[T]]) -> Resizable:
    """
    Copia el array sin su último elemento.
    None o vacío -> array de longitud 0.
    """
    if isinstance(array, typed_array):
        return typed_array(array.typecode, array[:-1])

    if not array:
        log.debug(f"decrease_array_size degenerate input={array!r} -> len=0")
        return []
    return list(array[:-1])


# ---- grids 2D ----

def grid_extents(grid: Grid) -> Tuple[int, int]:
    width = len(grid)
    if width == 0:
        return 0, 0
    height = len(grid[0])
    for x, column in enumerate(grid):
        if len(column) != height:
            raise ValueError(f"Ragged grid: row {x} has {len(column)} items, expected {height}")
    return width, height


def get_2d_array_as_list(grid: Optional[Grid]) -> Optional[List[T]]:
    """Aplana en orden (0,0), (0,1), ..., (W-1,H-1). None -> None."""
    if grid is None:
        return None

    width, height = grid_extents(grid)
    out: List[T] = []
    for x in range(width):
        for y in range(height):
            out.append(grid[x][y])
    return out


def coordinate_in_bounds(x: int, y: int, grid: Grid) -> bool:
    width = len(grid)
    height = len(grid[0]) if width else 0
    return 0 <= x < width and 0 <= y < height


def index_in_bounds(index: Sequence[float], grid: Grid) -> bool:
    """Acepta Vector2Int, Vector2 o una tupla (x, y); trunca hacia cero."""
    return coordinate_in_bounds(int(index[0]), int(index[1]), grid)
