#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers that turn node trees into output text."""

from texml2tex.renderers.base import BaseRenderer
from texml2tex.renderers.tex import TexRenderer

__all__ = ["BaseRenderer", "TexRenderer"]
