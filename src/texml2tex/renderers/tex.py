#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texml2tex/renderers/tex.py
r"""TeX rendering from a TeXML node tree.

This module provides the TexRenderer class which converts TeXML nodes to
TeX source. Each node kind has a ``visit_*`` method; the class-level
``HANDLERS`` table maps kinds to those methods. Container kinds render
only the children kinds they permit, and anything else, including kinds
the renderer has never heard of, contributes nothing.

"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional

from texml2tex.ast import Node
from texml2tex.constants import (
    ARGUMENT_CONTENT_KINDS,
    BLOCK_CONTENT_KINDS,
    CONTROL_CHAR_MASK,
    DEFAULT_ENV_BEGIN,
    DEFAULT_ENV_END,
    SPECIAL_SYMBOLS,
    TRUTHY_ATTRIBUTE_VALUES,
    NodeKind,
)
from texml2tex.exceptions import InvalidArgumentError, InvalidDocumentError
from texml2tex.options.tex import TexRendererOptions
from texml2tex.renderers.base import BaseRenderer
from texml2tex.utils.escape import escape_tex

logger = logging.getLogger(__name__)


def _is_set(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in TRUTHY_ATTRIBUTE_VALUES


def _node_path(node: Node) -> str:
    """Describe where ``node`` sits, e.g. ``TeXML/env[document]/cmd``."""
    parts: list[str] = []
    current: Optional[Node] = node
    while current is not None:
        name = current.get("name")
        parts.append(f"{current.kind}[{name}]" if name else current.kind)
        current = current.parent
    return "/".join(reversed(parts))


class TexRenderer(BaseRenderer):
    r"""Render TeXML node trees to TeX source.

    The renderer keeps no state besides its options, so a single instance
    can convert many documents, from several threads at once.

    Parameters
    ----------
    options : TexRendererOptions or None, default = None
        TeX rendering options

    Examples
    --------
    Basic usage:

        >>> from texml2tex.ast import element
        >>> doc = element("TeXML", children=[
        ...     element("cmd", {"name": "section"}, [element("parm", children=["Intro_duction"])])
        ... ])
        >>> TexRenderer().render_to_string(doc)
        '\\section{Intro\\_{}duction} '

    Supporting a new node kind:

        >>> class BoxRenderer(TexRenderer):
        ...     HANDLERS = MappingProxyType({**TexRenderer.HANDLERS, "box": "visit_box"})
        ...
        ...     def visit_box(self, node):
        ...         return "\\fbox{" + self.render_children(node, ARGUMENT_CONTENT_KINDS) + "}"

    """

    HANDLERS: Mapping[str, str] = MappingProxyType(
        {
            NodeKind.TEXML.value: "visit_texml",
            NodeKind.CMD.value: "visit_cmd",
            NodeKind.ENV.value: "visit_env",
            NodeKind.OPT.value: "visit_opt",
            NodeKind.PARM.value: "visit_parm",
            NodeKind.CTRL.value: "visit_ctrl",
            NodeKind.GROUP.value: "visit_group",
            NodeKind.SPEC.value: "visit_spec",
            NodeKind.TEXT.value: "visit_text",
        }
    )

    def __init__(self, options: TexRendererOptions | None = None):
        """Initialize the TeX renderer with options."""
        BaseRenderer._validate_options_type(options, TexRendererOptions, "tex")
        options = options or TexRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: TexRendererOptions = options

    def render_to_string(self, doc: Node) -> str:
        """Render a document tree to TeX.

        Parameters
        ----------
        doc : Node
            Root node, normally of kind ``TeXML``

        Returns
        -------
        str
            TeX source. Empty when the root kind is not recognized.

        Raises
        ------
        InvalidArgumentError
            If ``doc`` is not a Node
        InvalidDocumentError
            If a ``cmd`` or ``env`` node has no name

        """
        if not isinstance(doc, Node):
            raise InvalidArgumentError("doc", "Node", doc)
        if self.handler_for(doc) is None:
            logger.warning("No handler for root node <%s>; nothing to render", doc.kind)
            return ""
        return self.visit(doc)

    def handler_for(self, node: Node) -> Optional[Callable[[Node], str]]:
        """Return the visit method for ``node``'s kind, or None if there is none."""
        method_name = self.HANDLERS.get(node.kind)
        if method_name is None:
            return None
        return getattr(self, method_name)

    def visit(self, node: Node) -> str:
        """Render a single node, producing the empty string for unknown kinds."""
        handler = self.handler_for(node)
        if handler is None:
            logger.debug("No handler for <%s>", node.kind)
            return ""
        return handler(node)

    def render_children(self, node: Node, permitted: Iterable[str]) -> str:
        """Render the children of ``node`` whose kind is in ``permitted``.

        Parameters
        ----------
        node : Node
            Container node
        permitted : iterable of str
            Child kinds to render; others are skipped

        Returns
        -------
        str
            Concatenated output of the rendered children, in document order

        """
        selected = list(node.iter_children(permitted))
        if len(selected) < len(node.children):
            skipped = {child.kind for child in node.children}.difference(child.kind for child in selected)
            logger.debug("Skipping <%s> inside <%s>", ", ".join(sorted(skipped)), node.kind)

        parts: list[str] = []
        for child in selected:
            handler = self.handler_for(child)
            if handler is None:
                logger.debug("No handler for <%s> inside <%s>", child.kind, node.kind)
                continue
            parts.append(handler(child))
        return "".join(parts)

    @staticmethod
    def _required(node: Node, attribute: str) -> str:
        value = node.get(attribute)
        if not value:
            raise InvalidDocumentError(node.kind, attribute, location=_node_path(node))
        return value

    def visit_texml(self, node: Node) -> str:
        """Render the document root."""
        return self.render_children(node, BLOCK_CONTENT_KINDS)

    def visit_cmd(self, node: Node) -> str:
        r"""Render a command as ``\name[opt]...{parm}... ``.

        All ``opt`` children come before all ``parm`` children regardless of
        their order in the source.
        """
        name = self._required(node, "name")
        nl_before = nl_after = ""
        if self.options.newline_hints:
            nl_before = "\n" if _is_set(node.get("nl1")) else ""
            nl_after = "\n" if _is_set(node.get("nl2")) else ""
        options = self.render_children(node, (NodeKind.OPT,))
        parameters = self.render_children(node, (NodeKind.PARM,))
        return f"{nl_before}\\{name}{options}{parameters} {nl_after}"

    def visit_env(self, node: Node) -> str:
        r"""Render an environment as ``\begin{name}`` ... ``\end{name}``."""
        name = self._required(node, "name")
        begin = node.get("begin") or DEFAULT_ENV_BEGIN
        end = node.get("end") or DEFAULT_ENV_END
        body = self.render_children(node, BLOCK_CONTENT_KINDS)
        return f"\\{begin}{{{name}}}\n{body}\\{end}{{{name}}}\n"

    def visit_opt(self, node: Node) -> str:
        """Render an optional argument."""
        return "[" + self.render_children(node, ARGUMENT_CONTENT_KINDS) + "]"

    def visit_parm(self, node: Node) -> str:
        """Render a required argument."""
        return "{" + self.render_children(node, ARGUMENT_CONTENT_KINDS) + "}"

    def visit_group(self, node: Node) -> str:
        """Render a brace group."""
        return "{" + self.render_children(node, BLOCK_CONTENT_KINDS) + "}"

    def visit_ctrl(self, node: Node) -> str:
        """Render the control character for ``ch`` (its code point masked with 0x9F)."""
        ch = node.get("ch")
        if not ch:
            logger.debug("Ignoring <ctrl> without a 'ch' attribute")
            return ""
        if len(ch) > 1:
            logger.warning("<ctrl ch=%r> has more than one character; using %r", ch, ch[0])
        return chr(ord(ch[0]) & CONTROL_CHAR_MASK)

    def visit_spec(self, node: Node) -> str:
        """Render the special symbol named by ``cat``."""
        category = node.get("cat")
        symbol = SPECIAL_SYMBOLS.get(category, "") if category is not None else ""
        if not symbol:
            logger.debug("Ignoring <spec> with unknown category %r", category)
        return symbol

    def visit_text(self, node: Node) -> str:
        """Render literal text, escaped unless it sits directly in a verbatim environment."""
        payload = node.text or ""
        parent = node.parent
        if (
            parent is not None
            and parent.kind == NodeKind.ENV.value
            and parent.get("name") in self.options.verbatim_environments
        ):
            return payload
        return escape_tex(payload)


__all__ = ["TexRenderer"]
