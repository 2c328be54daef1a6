"""Logging helpers for plagscan."""

import logging
from typing import Optional, Union

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

base_logger = logging.getLogger('plagscan')


def set_logger(
    name: str,
    level: Union[int, str] = logging.INFO,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    remove_handlers: bool = False
) -> logging.Logger:
    """
    Attach a stream handler to a logger and set its level.

    Args:
        name: Logger name, e.g. 'plagscan'
        level: Logging level name or number
        fmt: Format string for records
        datefmt: Date format for the %(asctime)s field
        remove_handlers: Drop handlers already attached to the logger

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if remove_handlers:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT, datefmt=datefmt))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
