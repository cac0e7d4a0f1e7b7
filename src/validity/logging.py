import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "VALIDITY_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_level(name: str, override: Optional[str] = None) -> int:
    """
    Level for the logger ``name``.

    Library modules log at WARNING and the CLI at INFO, unless ``override``
    (by default the ``VALIDITY_LOG_LEVEL`` variable) names a known level.
    """
    default = logging.INFO if name.rsplit(".", 1)[-1] == "cli" else logging.WARNING
    if override is None:
        override = os.getenv(LOG_LEVEL_ENV)
    if not override:
        return default
    level = logging.getLevelName(override.strip().upper())
    return level if isinstance(level, int) else default


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(resolve_level(name))
    return logger
