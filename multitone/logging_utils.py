from __future__ import annotations

import logging
from typing import Optional

from .config import settings


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-scoped logger configured for console output.

    Status lines for generated files go through these loggers, so the CLI
    and the HTTP app share one format without managing handlers themselves.
    """

    logger_name = name or "multitone"
    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)s [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(settings.log_level.upper())

    return logger
