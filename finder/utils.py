from __future__ import annotations
import logging
from typing import Optional

from .config import load_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def init_logger(name: str = "finder", level: Optional[str] = None) -> logging.Logger:
    """Attach a console handler to *name* once; later calls only adjust the level.

    *level* defaults to ``FINDER_LOG_LEVEL``.
    """
    level = level or load_settings().log_level
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        return logger
    ch = logging.StreamHandler()
    ch.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(ch)
    return logger
