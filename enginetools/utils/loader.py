# enginetools/utils/loader.py
from __future__ import annotations
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict

import yaml

from enginetools.utils.logger import get_logger
from enginetools.world.scenes import Scene, SceneRegistry
from enginetools.world.settings import ToolSettings

log = get_logger("tools.loader")

# ---- helpers de lectura/validación ----

def _read_yaml(path: str | Path) -> Any:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))
    with p.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)

def _as_scene(value: Any, index: int) -> Scene:
    # admite "nombre" o {"name": .., "build_index": .., "path": .., "is_loaded": ..}
    if isinstance(value, str):
        return Scene(name=value, build_index=index)
    if isinstance(value, dict) and value.get("name"):
        return Scene(
            name=str(value["name"]),
            build_index=int(value.get("build_index", index)),
            path=str(value.get("path", "")),
            is_loaded=bool(value.get("is_loaded", True)),
        )
    raise ValueError(f"Invalid scene entry: {value!r}")

# ---- API pública ----

def load_settings(path: str | Path) -> ToolSettings:
    """
    Lee un YAML con claves de ToolSettings (APPROX_REL_TOL, LOG_LEVEL, ...).
    Fichero vacío -> valores por defecto.
    """
    raw: Dict[str, Any] = _read_yaml(path) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Settings file must contain a mapping: {path}")

    known = {f.name for f in fields(ToolSettings)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown settings keys: {unknown}")

    kwargs: Dict[str, Any] = {}
    for key, value in raw.items():
        if key in ("APPROX_REL_TOL", "APPROX_ABS_TOL"):
            kwargs[key] = float(value)
        elif key == "LOG_LEVEL":
            kwargs[key] = str(value).upper()
        else:
            kwargs[key] = None if value is None else str(value)

    st = ToolSettings(**kwargs)
    log.info(f"settings_loaded keys={sorted(kwargs)} from={path}")
    return st

def load_scene_registry(path: str | Path) -> SceneRegistry:
    """Crea un SceneRegistry a partir de la lista 'scenes' del YAML."""
    raw = _read_yaml(path) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Scene file must contain a mapping: {path}")

    registry = SceneRegistry()
    for i, entry in enumerate(raw.get("scenes") or []):
        registry.add(_as_scene(entry, i))

    log.info(f"scenes_loaded count={len(registry)} from={path}")
    return registry
