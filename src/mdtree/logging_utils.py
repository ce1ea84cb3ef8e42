#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/logging_utils.py
"""Logging setup for applications embedding mdtree.

The library itself only creates module loggers; it never installs handlers.
Host applications that want to see the engine's DEBUG output (hook matches,
discarded frames, flattened custom nodes) call :func:`configure_logging`,
either for the whole process or for the ``mdtree`` logger hierarchy only.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PLAIN_FORMAT = "%(levelname)s: %(message)s"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def _formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    return logging.Formatter(PLAIN_FORMAT)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    logger_name: Optional[str] = None,
) -> logging.Logger:
    """Install console (and optionally file) handlers.

    Existing handlers of the target logger are replaced, so calling this
    twice does not duplicate output.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "DEBUG"); unknown names
        fall back to INFO.
    log_file : str, optional
        Path to a log file receiving a copy of the output. A file that cannot
        be opened is reported as a warning and only the console is used.
    trace_mode : bool, default False
        When true, emit timestamps and logger names with every record.
    logger_name : str, optional
        Logger to configure. None configures the root logger; ``"mdtree"``
        limits the handlers to this library's records, which then stop
        propagating to the root.

    Returns
    -------
    logging.Logger
        The configured logger.

    Examples
    --------
        >>> logger = configure_logging("DEBUG", logger_name="mdtree")

    """
    level = _resolve_level(log_level)
    formatter = _formatter(trace_mode)

    target = logging.getLogger(logger_name)
    target.setLevel(level)
    for handler in list(target.handlers):
        target.removeHandler(handler)
    if logger_name:
        target.propagate = False

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: Optional[OSError] = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            file_error = exc

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        target.addHandler(handler)

    if file_error is not None:
        target.warning("Could not create log file %s: %s", log_file, file_error)
    elif log_file:
        target.debug("Logging to file: %s", log_file)

    return target
