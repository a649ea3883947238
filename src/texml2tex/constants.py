#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for texml2tex.

This module centralizes the fixed lookup tables and default configuration
values used across the converter. All tables are immutable so they can be
shared between threads without coordination.

Constants are organized by category:
1. Type Definitions - Literal types and the node kind enumeration
2. Escaping - Substitutions applied to literal text
3. Node Rules - Special symbols, permitted child kinds, control characters
4. Parser and Renderer Defaults
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Literal, Mapping

# =============================================================================
# Type Definitions
# =============================================================================

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class NodeKind(str, Enum):
    """Node kinds recognized by the converter.

    Values are the tag names used in TeXML markup, except ``TEXT`` which is the
    conventional name for literal text nodes.
    """

    TEXML = "TeXML"
    CMD = "cmd"
    ENV = "env"
    OPT = "opt"
    PARM = "parm"
    CTRL = "ctrl"
    GROUP = "group"
    SPEC = "spec"
    TEXT = "#text"


# =============================================================================
# Escaping
# =============================================================================

# Substitutions for characters that are special to TeX
SPECIAL_CHAR_ESCAPES: Mapping[str, str] = MappingProxyType(
    {
        "%": r"\%{}",
        "{": r"\{",
        "}": r"\}",
        "|": r"$|${}",
        "#": r"\#{}",
        "_": r"\_{}",
        "^": r"\char`\^{}",
        "~": r"\char`\~{}",
        "&": r"\&{}",
        "$": r"\${}",
        "<": r"$<${}",
        ">": r"$>${}",
        "\\": r"$\backslash${}",
    }
)

# =============================================================================
# Node Rules
# =============================================================================

# Category names accepted by <spec cat="..."/>
SPECIAL_SYMBOLS: Mapping[str, str] = MappingProxyType(
    {
        "esc": "\\",
        "bg": "{",
        "eg": "}",
        "mshift": "$",
        "align": "&",
        "parm": "#",
        "sup": "^",
        "sub": "_",
        "tilde": "~",
        "comment": "%",
    }
)

# Clears bits 5 and 6, mapping e.g. "A" (0x41) onto ^A (0x01)
CONTROL_CHAR_MASK = 0x9F

BLOCK_CONTENT_KINDS: tuple[NodeKind, ...] = (
    NodeKind.CMD,
    NodeKind.ENV,
    NodeKind.CTRL,
    NodeKind.SPEC,
    NodeKind.TEXT,
)
ARGUMENT_CONTENT_KINDS: tuple[NodeKind, ...] = (
    NodeKind.CMD,
    NodeKind.CTRL,
    NodeKind.SPEC,
    NodeKind.TEXT,
)

DEFAULT_ENV_BEGIN = "begin"
DEFAULT_ENV_END = "end"

# Attribute values that switch on a newline hint (compared case-insensitively)
TRUTHY_ATTRIBUTE_VALUES = frozenset({"1", "true", "yes"})

# =============================================================================
# Parser and Renderer Defaults
# =============================================================================

DEFAULT_ENCODING = "utf-8"
DEFAULT_FALLBACK_ENCODINGS: tuple[str, ...] = ("latin-1",)
DEFAULT_STRIP_NAMESPACES = True

DEFAULT_NEWLINE_HINTS = True
DEFAULT_VERBATIM_ENVIRONMENTS: tuple[str, ...] = ("verbatim",)

ENV_VAR_PREFIX = "TEXML2TEX_"
