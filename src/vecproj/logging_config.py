"""Console and optional file logging for the ``vecproj`` front ends."""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

LOGGER_NAME = "vecproj"
LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Attach fresh handlers to the package logger and return it.

    ``level`` accepts a level number or a name such as ``"DEBUG"``, so the CLI
    can pass its ``--log-level`` value through. The package logger does not
    propagate, which keeps redraw logs out of uvicorn's root handlers.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %s", "stdout and " + log_file if log_file else "stdout")
    return logger
