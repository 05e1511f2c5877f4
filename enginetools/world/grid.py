# enginetools/world/grid.py
from __future__ import annotations
from typing import List, Sequence

from enginetools.world.vectors import Vector2Int

Cell = Sequence[int]  # Vector2Int o tupla (x, y)

def grid_distance(a: Cell, b: Cell) -> int:
    """Distancia Manhattan entre dos celdas."""
    # el abs exterior es redundante pero se mantiene igual que en el motor
    return abs(abs(a[0] - b[0]) + abs(a[1] - b[1]))

def get_adjacent_coordinates(source: Cell) -> List[Vector2Int]:
    """Vecinos en 4 direcciones, orden fijo (E, O, N, S). Sin filtrar por límites."""
    x, y = source
    return [
        Vector2Int(x + 1, y),
        Vector2Int(x - 1, y),
        Vector2Int(x, y + 1),
        Vector2Int(x, y - 1),
    ]
