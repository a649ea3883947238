#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texml2tex/ast/__init__.py
r"""Tree representation of TeXML documents.

Examples
--------
Build a document by hand and render it:

    >>> from texml2tex.ast import element
    >>> from texml2tex.renderers.tex import TexRenderer
    >>> doc = element("TeXML", children=[
    ...     element("cmd", {"name": "section"}, [element("parm", children=["Intro"])])
    ... ])
    >>> TexRenderer().render_to_string(doc)
    '\\section{Intro} '

"""

from __future__ import annotations

from texml2tex.ast.nodes import Node, element, text_node

__all__ = ["Node", "element", "text_node"]
