from __future__ import annotations
import logging
import sys
from typing import Optional

from .config import LOG_LEVELS, log_level

_FORMAT = "[%(levelname)s] %(message)s"


def get_logger(name: str = "brdocs", level: Optional[int | str] = None) -> logging.Logger:
    """
    Logger com handler único em stdout. Sem `level` (ou com um nome de nível
    desconhecido) usa BRDOCS_LOG_LEVEL.
    """
    if isinstance(level, str):
        level = level.upper() if level.upper() in LOG_LEVELS else None
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level if level is not None else log_level())
    return logger


def mask_document(value: str, visible: int = 2) -> str:
    """Mantém só os últimos `visible` caracteres: '453.178.287-91' -> '************91'."""
    s = str(value or "")
    if len(s) <= visible:
        return "*" * len(s)
    return "*" * (len(s) - visible) + s[-visible:]
