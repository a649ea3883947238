#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers shared by the parser, renderer and command line."""

from texml2tex.utils.escape import escape_tex
from texml2tex.utils.io_utils import write_content

__all__ = ["escape_tex", "write_content"]
