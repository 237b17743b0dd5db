"""Logging setup for the wpreadme command-line interface.

Library modules only create named loggers under ``wpreadme``. The CLI calls
:func:`configure_logging` once per run, which replaces the handlers it
installed on the package logger last time and leaves the root logger alone,
so ``main()`` can be called in-process without disturbing the host's logging.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "wpreadme"

TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PLAIN_FORMAT = "%(levelname)s: %(message)s"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Attach console and optional file handlers to the ``wpreadme`` logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Path of a UTF-8 log file that receives the same records as stderr.
    trace_mode : bool, default False
        When true, emit timestamps and logger names.

    Returns
    -------
    logging.Logger
        The configured package logger.

    Raises
    ------
    OSError
        If ``log_file`` cannot be opened for appending. The package logger is
        left untouched in that case.

    """
    resolved_level = _resolve_level(log_level)
    formatter = (
        logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT) if trace_mode else logging.Formatter(PLAIN_FORMAT)
    )

    # Open the file first so a bad path fails before anything is replaced
    new_handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        new_handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    package_logger.setLevel(resolved_level)
    for handler in new_handlers:
        handler.setLevel(resolved_level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    if log_file:
        package_logger.info(f"Logging to file: {log_file}")
    return package_logger
