#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texml2tex/ast/nodes.py
"""Node tree for TeXML documents.

A TeXML document is a tree of typed nodes. Unlike a fixed class hierarchy,
every node here is a single :class:`Node` carrying its kind as a string, so
markup the converter does not know about still fits in the tree and can be
skipped during rendering instead of failing at parse time.

Node Kinds
----------
The kinds the converter understands are listed in
:class:`texml2tex.constants.NodeKind`:

    - TeXML (document root)
    - cmd, env, group (commands, environments and brace groups)
    - opt, parm (optional and required command arguments)
    - ctrl, spec (control characters and special symbols)
    - #text (literal text)

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional

from texml2tex.constants import NodeKind


@dataclass
class Node:
    """A single node of a TeXML document tree.

    Placing a node in another node's ``children`` at construction time sets
    its ``parent``. The converter only reads the tree.

    Parameters
    ----------
    kind : str
        Node kind, e.g. ``"cmd"`` or ``"#text"``
    attributes : dict, default = empty dict
        Attribute name to value mapping
    children : list of Node, default = empty list
        Child nodes in document order
    text : str or None, default = None
        Character payload for text nodes

    """

    kind: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    text: Optional[str] = None
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Link children back to this node."""
        for child in self.children:
            child.parent = self

    @property
    def is_text(self) -> bool:
        """Whether this is a literal text node."""
        return self.kind == NodeKind.TEXT.value

    def append(self, child: Node) -> Node:
        """Add ``child`` as the last child, link it back here and return it."""
        child.parent = self
        self.children.append(child)
        return child

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Look up an attribute value, returning ``default`` when absent."""
        return self.attributes.get(name, default)

    def iter_children(self, kinds: Iterable[str] | None = None) -> Iterator[Node]:
        """Iterate over children, optionally restricted to the given kinds.

        Parameters
        ----------
        kinds : iterable of str, optional
            Kinds to keep. ``NodeKind`` members are accepted since they are strings.

        Yields
        ------
        Node
            Matching children in document order

        """
        if kinds is None:
            yield from self.children
            return
        wanted = {str(getattr(kind, "value", kind)) for kind in kinds}
        for child in self.children:
            if child.kind in wanted:
                yield child

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            An object with a ``visit(node)`` method

        Returns
        -------
        Any
            Result from visitor.visit(self)

        """
        return visitor.visit(self)


def text_node(content: str) -> Node:
    """Create a literal text node."""
    return Node(kind=NodeKind.TEXT.value, text=content)


def element(
    kind: str | NodeKind,
    attributes: dict[str, str] | None = None,
    children: Iterable[Node | str] | None = None,
) -> Node:
    """Create an element node.

    Plain strings in ``children`` become text nodes, which keeps hand-built
    trees short::

        element("cmd", {"name": "section"}, [element("parm", children=["Intro"])])

    Parameters
    ----------
    kind : str or NodeKind
        Node kind
    attributes : dict, optional
        Attribute mapping
    children : iterable of Node or str, optional
        Child nodes or text

    Returns
    -------
    Node
        The new node, already linked to its children

    """
    kind_name = kind.value if isinstance(kind, NodeKind) else kind
    kids = [text_node(child) if isinstance(child, str) else child for child in children or ()]
    return Node(kind=kind_name, attributes=dict(attributes or {}), children=kids)


__all__ = ["Node", "element", "text_node"]
