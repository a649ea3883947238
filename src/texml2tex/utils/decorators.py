#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texml2tex/utils/decorators.py
"""Timing helpers for the parse and render stages."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time a block and report it at DEBUG level.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the stage being timed (e.g., "Parsing (texml)")

    Examples
    --------
        >>> with debug_timer(logger, "Rendering (tex)"):
        ...     result = renderer.render_to_string(doc)
        ... # Logs: "Rendering (tex) completed in 0.42 ms"

    Notes
    -----
    Nothing is measured unless the logger has DEBUG enabled. A block that
    raises is reported as failed and the exception propagates unchanged.

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    start = time.perf_counter()
    try:
        yield
    except BaseException:
        logger.debug("%s failed after %.2f ms", operation, (time.perf_counter() - start) * 1000)
        raise
    logger.debug("%s completed in %.2f ms", operation, (time.perf_counter() - start) * 1000)


__all__ = ["debug_timer"]
