# enginetools/utils/logger.py
import logging
import os
from typing import Dict, Optional, Tuple, Union

from enginetools.world import settings

_FORMATTER = logging.Formatter(
    fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

# name -> (nivel tomado de SETTINGS, fichero tomado de SETTINGS)
_FROM_SETTINGS: Dict[str, Tuple[bool, bool]] = {}

def _ensure_dir(path: str) -> None:
    if path:
        os.makedirs(path, exist_ok=True)

def _file_handler(file_path: str, level: Union[int, str]) -> logging.FileHandler:
    _ensure_dir(os.path.dirname(file_path))
    fh = logging.FileHandler(file_path, encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(_FORMATTER)
    return fh

def get_logger(name: str,
               file_path: Optional[str] = None,
               level: Union[int, str, None] = None) -> logging.Logger:
    """
    Logger con formateo consistente. Siempre escribe por consola; si se pasa file_path
    (o SETTINGS.LOG_FILE está definido) añade también un fichero.
    Lo que no se pase explícitamente sigue a SETTINGS (ver reconfigure_loggers).
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger  # ya configurado

    _FROM_SETTINGS[name] = (level is None, file_path is None)
    if level is None:
        level = settings.SETTINGS.LOG_LEVEL
    if file_path is None:
        file_path = settings.SETTINGS.LOG_FILE

    logger.setLevel(level)

    if file_path:
        logger.addHandler(_file_handler(file_path, level))

    sh = logging.StreamHandler()
    sh.setLevel(level)
    sh.setFormatter(_FORMATTER)
    logger.addHandler(sh)

    logger.propagate = False
    return logger

def reconfigure_loggers() -> None:
    """Reaplica LOG_LEVEL / LOG_FILE de SETTINGS a los loggers ya creados por get_logger."""
    st = settings.SETTINGS
    for name, (level_from_settings, file_from_settings) in _FROM_SETTINGS.items():
        logger = logging.getLogger(name)
        if level_from_settings:
            logger.setLevel(st.LOG_LEVEL)
            for h in logger.handlers:
                h.setLevel(st.LOG_LEVEL)
        if not file_from_settings:
            continue
        for h in [h for h in logger.handlers if isinstance(h, logging.FileHandler)]:
            logger.removeHandler(h)
            h.close()
        if st.LOG_FILE:
            logger.addHandler(_file_handler(st.LOG_FILE, logger.level))
