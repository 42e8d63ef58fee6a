import logging
import os
import sys


def init_logging() -> logging.Logger:
    """Set up the package logger from LOG_LEVEL."""
    log_level = os.getenv("LOG_LEVEL", "INFO")
    logger_keep = logging.getLogger("pizza_agent")
    if not logger_keep.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            ),
        )
        logger_keep.addHandler(handler)
    logger_keep.setLevel(logging._nameToLevel.get(log_level.upper(), logging.INFO))
    return logger_keep


logger = init_logging()
