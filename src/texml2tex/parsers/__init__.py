#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers that turn TeXML input into node trees."""

from texml2tex.parsers.base import BaseParser
from texml2tex.parsers.texml import TexmlParser

__all__ = ["BaseParser", "TexmlParser"]
