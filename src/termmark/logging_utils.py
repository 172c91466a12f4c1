#  Copyright (c) 2026 termmark contributors
"""Logging setup for the termmark console script.

Library modules only create loggers. The console script attaches handlers
here so that warnings about skipped document content reach stderr while the
rendered document is written to stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

CONSOLE_FORMAT = "termmark: %(levelname)s: %(message)s"
DEBUG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
DEBUG_DATE_FORMAT = "%H:%M:%S"


def resolve_level(log_level: int | str) -> int:
    """Return the numeric logging level for a level number or name.

    Unknown names fall back to WARNING.
    """
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(log_level: int | str, log_file: Optional[str] = None) -> logging.Logger:
    """Attach stderr (and optionally file) handlers to the root logger.

    Existing root handlers are replaced. At DEBUG level records carry a
    timestamp and the emitting logger name.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name such as ``"WARNING"``
    log_file : str, optional
        Path of a file that receives the same records, opened for append

    Returns
    -------
    logging.Logger
        The configured root logger

    """
    level = resolve_level(log_level)
    if level <= logging.DEBUG:
        formatter = logging.Formatter(DEBUG_FORMAT, datefmt=DEBUG_DATE_FORMAT)
    else:
        formatter = logging.Formatter(CONSOLE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: OSError | None = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            file_error = exc

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if file_error is not None:
        root_logger.warning("Could not open log file %s: %s", log_file, file_error)
    elif log_file:
        root_logger.debug("Logging to file: %s", log_file)

    return root_logger
