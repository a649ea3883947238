#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texml2tex/renderers/base.py
"""Base classes for tree renderers.

This module defines the abstract base class that renderers inherit from.
A renderer turns a :class:`~texml2tex.ast.Node` tree into output text.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from texml2tex.ast import Node
from texml2tex.exceptions import InvalidOptionsError
from texml2tex.options.base import BaseRendererOptions
from texml2tex.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for tree renderers.

    Subclasses implement :meth:`render_to_string`; :meth:`render` writes its
    result to a file path or file-like object.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Node) -> str:
        """Render the tree to a string.

        Parameters
        ----------
        doc : Node
            Root node to render

        Returns
        -------
        str
            Rendered document

        Raises
        ------
        RenderingError
            If rendering fails

        """
        raise NotImplementedError

    def render(self, doc: Node, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the tree and write it to ``output``.

        Parameters
        ----------
        doc : Node
            Root node to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        RenderingError
            If rendering fails
        OutputWriteError
            If the output file cannot be written

        """
        write_content(self.render_to_string(doc), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
