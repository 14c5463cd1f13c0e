"""Logging setup for the tracker core."""

import logging

LOGGER_NAME = "water_tracker"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(level: str | int) -> int:
    """Map a level name such as ``"debug"`` to its numeric value."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach one stream handler to the tracker logger and set its level.

    Repeated calls only update the level, so rebuilding the container does
    not duplicate output.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_level(level))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
