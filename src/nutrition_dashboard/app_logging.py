"""Logging configuration helpers."""

import logging

LOGGER_NAME = "nutrition_dashboard"


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure dashboard logging with a single stream handler.

    Repeated calls only adjust the level, so an app built with a different
    ``log_level`` does not stack handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
