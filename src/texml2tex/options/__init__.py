#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options for parsing TeXML and rendering TeX."""

from texml2tex.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from texml2tex.options.tex import TexRendererOptions
from texml2tex.options.texml import TexmlParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "TexRendererOptions",
    "TexmlParserOptions",
]
