#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texml2tex/utils/escape.py
"""Text escaping for TeX output.

Literal text taken from a TeXML document must have the characters that TeX
treats specially replaced before it can be emitted. The substitutions are
fixed and listed in :data:`texml2tex.constants.SPECIAL_CHAR_ESCAPES`.

"""

from __future__ import annotations

from texml2tex.constants import SPECIAL_CHAR_ESCAPES
from texml2tex.exceptions import InvalidArgumentError

_TRANSLATION_TABLE = str.maketrans(dict(SPECIAL_CHAR_ESCAPES))


def escape_tex(text: str) -> str:
    r"""Escape TeX special characters in text content.

    Each reserved character is replaced independently, so the result of
    escaping a concatenation equals the concatenation of the escaped parts.
    All other characters, including non-ASCII ones, are copied unchanged.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text safe for TeX source

    Raises
    ------
    InvalidArgumentError
        If ``text`` is not a string (``None`` included)

    Examples
    --------
        >>> escape_tex("a&b$c")
        'a\\&{}b\\${}c'
        >>> escape_tex("{x}")
        '\\{x\\}'

    """
    if not isinstance(text, str):
        raise InvalidArgumentError("text", "str", text)
    return text.translate(_TRANSLATION_TABLE)


__all__ = ["escape_tex"]
