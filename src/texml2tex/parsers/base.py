#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texml2tex/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class that parsers inherit from, along
with the shared logic for loading raw input from paths, bytes and streams.

"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from texml2tex.ast import Node
from texml2tex.exceptions import FileAccessError, FileNotFoundError, InvalidArgumentError, InvalidOptionsError
from texml2tex.options.base import BaseParserOptions

logger = logging.getLogger(__name__)

ParserInput = Union[str, Path, IO[bytes], IO[str], bytes]


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    The parse() method should handle all supported input types:
    - str: Markup text, or a path to a file when it does not look like markup
    - Path: File path to read
    - IO[bytes] or IO[str]: File-like object
    - bytes: Raw document bytes

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: ParserInput) -> Node:
        """Parse the input document into a node tree.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            The input document to parse

        Returns
        -------
        Node
            Root node of the parsed document

        Raises
        ------
        ParsingError
            If the markup is malformed
        FileError
            If a file path cannot be read
        InvalidArgumentError
            If input_data has an unsupported type

        """
        raise NotImplementedError

    @staticmethod
    def _load_input(input_data: ParserInput) -> Union[str, bytes]:
        """Load raw markup from any supported input type.

        Text, whether passed directly or read from a text stream, is returned
        as-is so the XML parser sees exactly what the caller passed and never
        re-decodes it. Everything else is returned as bytes, whose encoding the
        parser resolves.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            The input to load

        Returns
        -------
        str or bytes
            Raw markup

        """
        if isinstance(input_data, bytes):
            return input_data

        if isinstance(input_data, str) and (not input_data.strip() or input_data.lstrip().startswith("<")):
            return input_data

        if isinstance(input_data, (str, Path)):
            path = Path(input_data)
            logger.debug("Reading input file %s", path)
            if not path.exists():
                raise FileNotFoundError(str(path))
            try:
                return path.read_bytes()
            except OSError as e:
                raise FileAccessError(str(path), original_error=e) from e

        if hasattr(input_data, "read"):
            content = input_data.read()
            if isinstance(content, (str, bytes)):
                return content
            raise InvalidArgumentError("input_data", "a stream returning str or bytes", content)

        raise InvalidArgumentError("input_data", "str, Path, bytes or a file-like object", input_data)

    @staticmethod
    def _describe_input(input_data: ParserInput) -> str:
        """Return a short description of the input for log messages."""
        if isinstance(input_data, (str, Path)) and not str(input_data).lstrip().startswith("<"):
            return os.fspath(input_data)
        return f"<{type(input_data).__name__}>"
