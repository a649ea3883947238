#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texml2tex/utils/io_utils.py
"""I/O utilities for handling output destinations.

This module provides the single place where rendered TeX is written to a
file path or a file-like object.

"""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from texml2tex.exceptions import OutputWriteError


def _is_binary_stream(output: IO[bytes] | IO[str]) -> bool:
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    # Fallback for file objects that only expose a mode string
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]], encoding: str = "utf-8") -> None:
    r"""Write rendered text to a path or file-like object.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes], or IO[str]
        Output destination. Can be:
        - str or Path: Writes content to the file at that path
        - IO[bytes]: Encodes content and writes it to a binary stream
        - IO[str]: Writes content to a text stream
    encoding : str, default "utf-8"
        Encoding used for paths and binary streams

    Raises
    ------
    TypeError
        If the output type is not supported
    OutputWriteError
        If writing to a file path fails

    Examples
    --------
    Write to a text buffer:
        >>> buffer = StringIO()
        >>> write_content("\\section{A} ", buffer)
        >>> buffer.getvalue()
        '\\section{A} '

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_text(content, encoding=encoding)
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if _is_binary_stream(output):
        cast(IO[bytes], output).write(content.encode(encoding))
    else:
        cast(IO[str], output).write(content)


__all__ = ["write_content"]
