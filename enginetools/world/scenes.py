# enginetools/world/scenes.py
"""
Consultas sobre las escenas cargadas.

El motor no se importa aquí: quien embebe la librería inyecta un SceneProvider
(cualquier objeto con scene_count y get_scene_at). SceneRegistry es la versión en memoria.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Protocol

from enginetools.utils.logger import get_logger

log = get_logger("tools.scenes")


@dataclass(frozen=True)
class Scene:
    name: str
    build_index: int = -1
    path: str = ""
    is_loaded: bool = True


class SceneProvider(Protocol):
    @property
    def scene_count(self) -> int: ...

    def get_scene_at(self, index: int) -> Scene: ...


class SceneRegistry:
    """Gestor simple de escenas cargadas, en orden de carga."""

    def __init__(self, scenes: List[Scene] | None = None) -> None:
        self._scenes: List[Scene] = []
        self._by_name: Dict[str, Scene] = {}
        for s in scenes or []:
            self.add(s)

    @classmethod
    def from_yaml(cls, path: str) -> "SceneRegistry":
        from enginetools.utils.loader import load_scene_registry
        return load_scene_registry(path)

    def __len__(self) -> int:
        return len(self._scenes)

    @property
    def scene_count(self) -> int:
        return len(self._scenes)

    def get_scene_at(self, index: int) -> Scene:
        if not 0 <= index < len(self._scenes):
            raise IndexError(f"Scene index out of range: {index} (count={len(self._scenes)})")
        return self._scenes[index]

    def get(self, name: str) -> Scene | None:
        return self._by_name.get(name)

    def add(self, *scenes: Scene) -> None:
        for s in scenes:
            if s.name in self._by_name:
                raise ValueError(f"Duplicate scene: {s.name}")
            self._scenes.append(s)
            self._by_name[s.name] = s
            log.info(f"scene_added name={s.name} index={len(self._scenes) - 1}")

    def remove(self, name: str) -> bool:
        scene = self._by_name.pop(name, None)
        if scene is None:
            log.info(f"scene_remove_ignored name={name} (not loaded)")
            return False
        self._scenes.remove(scene)
        log.info(f"scene_removed name={name}")
        return True


def get_active_scenes(provider: SceneProvider) -> List[Scene]:
    """Una entrada por cada escena registrada en el provider, en orden de índice."""
    active: List[Scene] = []
    for i in range(provider.scene_count):
        active.append(provider.get_scene_at(i))
    return active


def get_active_scene_names(provider: SceneProvider) -> List[str]:
    return [s.name for s in get_active_scenes(provider)]
