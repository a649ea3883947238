"""The major exported API functions for TeXML conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/texml2tex/api.py
import logging
from pathlib import Path
from typing import IO, Any, Optional, Union

from texml2tex.ast import Node
from texml2tex.exceptions import RenderingError
from texml2tex.options.tex import TexRendererOptions
from texml2tex.options.texml import TexmlParserOptions
from texml2tex.parsers.texml import TexmlParser
from texml2tex.renderers.tex import TexRenderer
from texml2tex.utils.decorators import debug_timer
from texml2tex.utils.io_utils import write_content

logger = logging.getLogger(__name__)

SourceType = Union[str, Path, IO[bytes], IO[str], bytes]
OutputType = Union[str, Path, IO[bytes], IO[str], None]


def to_ast(
    source: SourceType,
    *,
    parser_options: Optional[TexmlParserOptions] = None,
    **kwargs: Any,
) -> Node:
    """Parse TeXML into a node tree.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str], or bytes
        XML text, a path to a TeXML file, a file-like object, or raw bytes
    parser_options : TexmlParserOptions, optional
        Pre-configured parser options
    kwargs : Any
        Individual parser options that override settings in parser_options

    Returns
    -------
    Node
        Root node of the document

    Raises
    ------
    ParsingError
        If the XML is malformed
    FileError
        If a path cannot be read
    ValueError
        If a keyword is not a parser option or an option value is invalid

    Examples
    --------
        >>> root = to_ast('<TeXML><cmd name="par"/></TeXML>')
        >>> root.children[0].kind
        'cmd'

    """
    options = parser_options or TexmlParserOptions()
    if kwargs:
        options = options.create_updated(**kwargs)

    with debug_timer(logger, "Parsing (texml)"):
        return TexmlParser(options).parse(source)


def from_ast(
    ast_doc: Node,
    output: OutputType = None,
    *,
    renderer_options: Optional[TexRendererOptions] = None,
    **kwargs: Any,
) -> Optional[str]:
    r"""Render a node tree to TeX.

    Parameters
    ----------
    ast_doc : Node
        Root node to render
    output : str, Path, IO[bytes], IO[str], or None, default None
        Where to write the result. When None the TeX is returned instead.
    renderer_options : TexRendererOptions, optional
        Pre-configured renderer options
    kwargs : Any
        Individual renderer options that override settings in renderer_options

    Returns
    -------
    str or None
        The TeX source if ``output`` is None, otherwise None

    Raises
    ------
    InvalidDocumentError
        If a node is missing a required attribute
    RenderingError
        If the tree is too deeply nested to render
    ValueError
        If a keyword is not a renderer option or an option value is invalid

    Notes
    -----
    Rendering recurses through the tree, two stack frames per level of
    nesting, so the depth it can handle is bounded by the interpreter's
    recursion limit (a little under 500 levels at the default of 1000).
    Parsing has no such bound; a deeper tree parses and then fails here
    with ``RenderingError(rendering_stage="tree_walk")``.

    Examples
    --------
        >>> from texml2tex.ast import element
        >>> from_ast(element("TeXML", children=[element("spec", {"cat": "esc"})]))
        '\\'

    """
    options = renderer_options or TexRendererOptions()
    if kwargs:
        options = options.create_updated(**kwargs)

    renderer = TexRenderer(options)
    with debug_timer(logger, "Rendering (tex)"):
        try:
            content = renderer.render_to_string(ast_doc)
        except RecursionError as e:
            raise RenderingError(
                "Document is nested too deeply to render", rendering_stage="tree_walk", original_error=e
            ) from e

    if output is None:
        return content
    write_content(content, output)
    return None


def convert(
    source: SourceType,
    output: OutputType = None,
    *,
    parser_options: Optional[TexmlParserOptions] = None,
    renderer_options: Optional[TexRendererOptions] = None,
) -> Optional[str]:
    r"""Convert a TeXML document to TeX in one call.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str], or bytes
        TeXML input, as accepted by :func:`to_ast`
    output : str, Path, IO[bytes], IO[str], or None, default None
        Where to write the result. When None the TeX is returned instead.
    parser_options : TexmlParserOptions, optional
        Parser configuration
    renderer_options : TexRendererOptions, optional
        Renderer configuration

    Returns
    -------
    str or None
        The TeX source if ``output`` is None, otherwise None

    Raises
    ------
    ParsingError
        If the input cannot be parsed
    InvalidDocumentError
        If the parsed tree is missing required attributes
    RenderingError
        If the document is nested too deeply to render, see :func:`from_ast`

    Examples
    --------
        >>> convert('<TeXML><cmd name="section"><parm>Intro</parm></cmd></TeXML>')
        '\\section{Intro} '

    """
    document = to_ast(source, parser_options=parser_options)
    return from_ast(document, output, renderer_options=renderer_options)


__all__ = ["to_ast", "from_ast", "convert"]
