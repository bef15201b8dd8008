"""
Logging Configuration
=====================
Handlers for the `mathview` logger namespace.

The library modules only create child loggers (`logging.getLogger(__name__)`)
and never attach handlers; an application (or the demo entry point) calls
`setup_logging` once to decide where the records go.
"""
import logging
import sys
from typing import Optional, Union

from mathview import config

PACKAGE_LOGGER = "mathview"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'


def resolve_level(level: Union[int, str, None]) -> int:
    """
    Turn a level given as a number or a name ("debug", "INFO", ...) into a number.

    None falls back to `config.LOG_LEVEL` (the MATHVIEW_LOG_LEVEL variable).

    Raises:
        ValueError: For an unknown level name.
    """
    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, int):
        return level

    levels = logging.getLevelNamesMapping()
    name = level.strip().upper()
    if name not in levels:
        raise ValueError(f"Unknown log level '{level}'. Expected one of {sorted(levels)}.")
    return levels[name]


def setup_logging(level: Union[int, str, None] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route `mathview` log records to stdout and, optionally, to a file.

    Calling it again replaces the handlers of the previous call.

    Args:
        level: Level number or name; defaults to `config.LOG_LEVEL`.
        log_file: Path of a log file, truncated on every call.

    Returns:
        The `mathview` package logger.
    """
    numeric_level = resolve_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging to {len(handlers)} handler(s) at {logging.getLevelName(numeric_level)}.")
    return logger
