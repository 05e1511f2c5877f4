# enginetools/world/transforms.py
from __future__ import annotations
from typing import Any, List, Optional

from enginetools.world.vectors import Vector3


class Transform:
    """
    Nodo de la jerarquía de escena (posición + padre + hijos ordenados).
    Cada Transform pertenece a exactamente un GameObject.
    """
    __slots__ = ("position", "game_object", "_parent", "_children")

    def __init__(self, position: Vector3 = Vector3(), parent: Optional[Transform] = None) -> None:
        self.position = Vector3(*position)
        self.game_object: Optional[GameObject] = None
        self._parent: Optional[Transform] = None
        self._children: List[Transform] = []
        if parent is not None:
            self.set_parent(parent)

    @property
    def parent(self) -> Optional[Transform]:
        return self._parent

    @property
    def child_count(self) -> int:
        return len(self._children)

    def get_child(self, index: int) -> Transform:
        return self._children[index]

    def is_child_of(self, other: Transform) -> bool:
        """True si other es este nodo o uno de sus ancestros."""
        cur: Optional[Transform] = self
        while cur is not None:
            if cur is other:
                return True
            cur = cur._parent
        return False

    def set_parent(self, parent: Optional[Transform]) -> None:
        if parent is not None and parent.is_child_of(self):
            raise ValueError("A transform cannot be parented to itself or to one of its descendants")
        if self._parent is not None:
            self._parent._children.remove(self)
        self._parent = parent
        if parent is not None:
            parent._children.append(self)

    def __repr__(self) -> str:
        owner = self.game_object.name if self.game_object else None
        return f"Transform(owner={owner!r}, position={tuple(self.position)}, children={self.child_count})"


class GameObject:
    __slots__ = ("name", "transform")

    def __init__(self, name: str, position: Vector3 = Vector3(), parent: Optional[GameObject] = None) -> None:
        self.name = name
        self.transform = Transform(position, parent.transform if parent is not None else None)
        self.transform.game_object = self

    def __repr__(self) -> str:
        return f"GameObject({self.name!r})"


# ---- consultas ----

def get_children_of_transform(parent: Any) -> List[Any]:
    """Hijos directos (no descendientes) en el orden nativo del host. Lista nueva."""
    children: List[Any] = []
    for i in range(parent.child_count):
        children.append(parent.get_child(i))
    return children


def get_children_of_game_object(parent: Any) -> List[Any]:
    return [t.game_object for t in get_children_of_transform(parent.transform)]
