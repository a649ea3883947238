#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texml2tex/logging_utils.py
"""Logging setup for the texml2tex command.

Library modules only create loggers; handlers are installed here, by the
command-line entry point. Log records go to stderr because stdout carries
the converted TeX.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

# Marks handlers installed by configure_logging so a second call replaces them
_HANDLER_MARKER = "_texml2tex_handler"

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def _build_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    return logging.Formatter(_PLAIN_FORMAT)


def _install(root_logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_MARKER, True)
    root_logger.addHandler(handler)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Install console and optional file handlers on the root logger.

    Calling this again replaces the handlers from the previous call and
    leaves any other handlers on the root logger alone.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g. ``"INFO"``). Unknown names
        resolve to INFO.
    log_file : str, optional
        Path of a file that receives the same records as the console.
    trace_mode : bool, default False
        Include timestamps and logger names in every record.
    stream : IO[str], optional
        Console stream; defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        The root logger.

    """
    level = _resolve_level(log_level)
    formatter = _build_formatter(trace_mode)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in [h for h in root_logger.handlers if getattr(h, _HANDLER_MARKER, False)]:
        root_logger.removeHandler(handler)
        handler.close()

    _install(root_logger, logging.StreamHandler(stream or sys.stderr), level, formatter)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            _install(root_logger, file_handler, level, formatter)
            root_logger.info("Logging to file: %s", log_file)

    return root_logger


__all__ = ["configure_logging"]
