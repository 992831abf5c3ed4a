# shared/logger.py
import logging

from shared import config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
APP_LOGGER_NAME = "school_details"


def setup_logging() -> logging.Logger:
    level = getattr(logging, config.LOG_LEVEL, logging.INFO)

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate console handlers on reload
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.setLevel(level)
        logger.addHandler(handler)

    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    base = logging.getLogger(APP_LOGGER_NAME)
    return base.getChild(name) if name else base


logger = setup_logging()
