r"""texml2tex - Convert TeXML markup to TeX source.

TeXML describes a TeX document as XML: commands, environments, arguments,
special symbols and text become elements, and the converter writes the
corresponding TeX with every special character in literal text escaped.

Key Features
------------
- Node-kind dispatch table that can be extended by subclassing the renderer
- Fixed escaping of TeX special characters, suppressed inside verbatim environments
- Unknown markup is skipped rather than rejected
- Safe XML parsing via defusedxml
- ``texml2tex`` command for stdin/stdout conversion

Requirements
------------
- Python 3.10+
- defusedxml

Examples
--------
Convert TeXML text:

    >>> from texml2tex import convert
    >>> convert('<TeXML><cmd name="section"><parm>Intro</parm></cmd></TeXML>')
    '\\section{Intro} '

Escape a string directly:

    >>> from texml2tex import escape_tex
    >>> escape_tex("50% off")
    '50\\%{} off'

Work with the node tree:

    >>> from texml2tex import from_ast, to_ast
    >>> doc = to_ast("document.xml")
    >>> tex = from_ast(doc)

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "texml2tex requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from texml2tex.api import convert, from_ast, to_ast  # noqa: E402
from texml2tex.ast import Node, element, text_node  # noqa: E402
from texml2tex.constants import NodeKind  # noqa: E402
from texml2tex.exceptions import (  # noqa: E402
    FileError,
    InvalidArgumentError,
    InvalidDocumentError,
    InvalidOptionsError,
    ParsingError,
    RenderingError,
    Texml2TexError,
    ValidationError,
)
from texml2tex.options import TexmlParserOptions, TexRendererOptions  # noqa: E402
from texml2tex.parsers import TexmlParser  # noqa: E402
from texml2tex.renderers import TexRenderer  # noqa: E402
from texml2tex.utils.escape import escape_tex  # noqa: E402

__all__ = [
    "__version__",
    "convert",
    "to_ast",
    "from_ast",
    "escape_tex",
    "Node",
    "NodeKind",
    "element",
    "text_node",
    "TexmlParser",
    "TexRenderer",
    "TexmlParserOptions",
    "TexRendererOptions",
    "Texml2TexError",
    "ValidationError",
    "InvalidArgumentError",
    "InvalidOptionsError",
    "FileError",
    "ParsingError",
    "RenderingError",
    "InvalidDocumentError",
]
