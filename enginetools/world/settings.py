# enginetools/world/settings.py
from dataclasses import dataclass
from typing import Optional

# Menor float32 subnormal positivo (Mathf.Epsilon en el motor)
FLOAT32_EPSILON = 1.401298e-45

@dataclass(frozen=True)
class ToolSettings:
    APPROX_REL_TOL: float = 1e-6
    APPROX_ABS_TOL: float = FLOAT32_EPSILON * 8
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

SETTINGS = ToolSettings()

def apply_settings(new: ToolSettings) -> ToolSettings:
    """
    Sustituye SETTINGS en caliente y reaplica nivel/fichero a los loggers existentes.
    Devuelve los anteriores (útil para restaurar).
    """
    from enginetools.utils.logger import reconfigure_loggers

    global SETTINGS
    previous, SETTINGS = SETTINGS, new
    reconfigure_loggers()
    return previous
