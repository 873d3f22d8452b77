"""Logging setup for the tierprice logger tree."""
import logging

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach one stream handler to the "tierprice" logger. Safe to call more than once."""
    logger = logging.getLogger("tierprice")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
