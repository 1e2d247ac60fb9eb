#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2md/logging_utils.py
"""Logging setup for the notion2md command line.

Library code only creates module loggers; handlers are attached here, once,
by the CLI entry point.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

# Third-party loggers that report every HTTP request at INFO.
_CHATTY_LOGGERS = ("httpx", "httpcore")

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def _make_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    return logging.Formatter(_PLAIN_FORMAT)


def _attach(logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Send log records to stderr and, optionally, to a file.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name such as ``"DEBUG"``
    log_file : str, optional
        File that receives a copy of every record (appended to)
    trace_mode : bool, default False
        Add timestamps and logger names, and let HTTP client request logs
        through

    Returns
    -------
    logging.Logger
        The root logger

    """
    level = _resolve_level(log_level)
    formatter = _make_formatter(trace_mode)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    _attach(root_logger, logging.StreamHandler(sys.stderr), level, formatter)

    if log_file:
        try:
            _attach(root_logger, logging.FileHandler(log_file, mode="a", encoding="utf-8"), level, formatter)
        except OSError as exc:
            root_logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            root_logger.info("Logging to file: %s", log_file)

    if not trace_mode:
        for name in _CHATTY_LOGGERS:
            logging.getLogger(name).setLevel(max(level, logging.WARNING))

    return root_logger
