"""Console logging bootstrap for processes embedding the codec.

Library modules only call ``logging.getLogger(__name__)``; whoever owns
the process calls ``configure_logging()`` once.
"""

import logging

from config.settings import settings

_ROOT_LOGGER = "src"


def configure_logging(level: str | None = None) -> logging.Logger:
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(settings.LOG_FORMAT, "%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
    return logger
