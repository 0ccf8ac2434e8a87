"""
Logging configuration for power ranker.

Every record carries an ``extra["name"]`` naming the component that emitted
it (matrix, solver, sampler, session), defaulting to "power_ranker".
"""

import sys

from loguru import logger
from typing import Any

from .exceptions import InvalidArgumentError

DEFAULT_NAME = "power_ranker"

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]}:{function}:{line} - {message}"


def setup_logging(level: str = "INFO", debug: bool = False, log_file: str | None = None) -> None:
    """
    Configure loguru for power ranker components.

    Args:
        level: Console log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        debug: Shortcut for level="DEBUG"; solver iteration counts and sampled
            pairs are only logged at DEBUG
        log_file: Optional path of a rotating log file; records INFO and above,
            or everything from the console level when that is lower

    Raises:
        InvalidArgumentError: if level is not a known loguru level
    """
    log_level = "DEBUG" if debug else level.upper()
    try:
        _ = logger.level(log_level)
    except ValueError as e:
        raise InvalidArgumentError(f"Unknown log level: {level}") from e

    # Records from unbound loggers still need extra["name"] for the formats
    logger.configure(
        handlers=[{"sink": sys.stderr, "level": log_level, "format": CONSOLE_FORMAT}],
        extra={"name": DEFAULT_NAME},
    )

    if log_file:
        logger.add(
            log_file,
            level=min(logger.level(log_level).no, logger.level("INFO").no),
            format=FILE_FORMAT,
            rotation="10 MB",
            retention=5,
        )


def get_logger(name: str | None = None) -> Any:
    """Get a logger bound to a component name."""
    return logger.bind(name=name or DEFAULT_NAME)
