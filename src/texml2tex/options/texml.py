#  Copyright (c) 2025 Tom Villani, Ph.D.

# texml2tex/options/texml.py
"""Configuration options for TeXML parsing.

This module defines options for reading TeXML markup into a node tree.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field

from texml2tex.constants import DEFAULT_ENCODING, DEFAULT_FALLBACK_ENCODINGS, DEFAULT_STRIP_NAMESPACES
from texml2tex.options.base import BaseParserOptions


@dataclass(frozen=True)
class TexmlParserOptions(BaseParserOptions):
    """Configuration options for TeXML-to-tree parsing.

    Parameters
    ----------
    encoding : str, default "utf-8"
        Encoding of byte input (raw bytes, files, binary streams) that has no
        XML declaration. UTF-8 is tried first; when that fails this encoding
        is tried before ``fallback_encodings``. Text input is never re-decoded.
    fallback_encodings : tuple[str, ...], default ("latin-1",)
        Encodings tried in order when the XML cannot be parsed as given.
    strip_namespaces : bool, default True
        Whether to drop ``{namespace}`` prefixes from tags and attribute names.

    """

    encoding: str = field(
        default=DEFAULT_ENCODING,
        metadata={"help": "Text encoding for reading TeXML input", "type": str},
    )
    fallback_encodings: tuple[str, ...] = field(
        default=DEFAULT_FALLBACK_ENCODINGS,
        metadata={"help": "Encodings to retry with when the input fails to parse"},
    )
    strip_namespaces: bool = field(
        default=DEFAULT_STRIP_NAMESPACES,
        metadata={"help": "Drop XML namespace prefixes from tags and attributes"},
    )

    def __post_init__(self) -> None:
        """Validate that every configured encoding is known.

        Raises
        ------
        ValueError
            If an encoding name is not recognized by the codecs registry.

        """
        super().__post_init__()
        for name in (self.encoding, *self.fallback_encodings):
            try:
                codecs.lookup(name)
            except LookupError as e:
                raise ValueError(f"Unknown encoding: {name}") from e
