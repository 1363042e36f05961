from __future__ import annotations

import logging
from typing import Union

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_ROOT = "allowance_system"


def configure_logging(level: Union[int, str] = logging.INFO, *, name: str = _ROOT) -> logging.Logger:
    """Attach one stream handler to the package logger (idempotent)."""
    logger = logging.getLogger(name)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)

    if not any(getattr(h, "_allowance_system", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._allowance_system = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
