#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texml2tex/parsers/texml.py
"""TeXML parser that converts XML markup to a node tree.

ElementTree stores character data as ``text`` and ``tail`` strings on
elements. The tree built here turns those strings into explicit ``#text``
nodes so every child, text included, is visited in document order.

"""

from __future__ import annotations

import codecs
import logging
from typing import Optional, Union

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from texml2tex.ast import Node, text_node
from texml2tex.exceptions import ParsingError
from texml2tex.options.texml import TexmlParserOptions
from texml2tex.parsers.base import BaseParser, ParserInput

logger = logging.getLogger(__name__)


def _local_name(name: str) -> str:
    """Strip a ``{namespace}`` prefix from a tag or attribute name."""
    if name.startswith("{"):
        return name.rsplit("}", 1)[-1]
    return name


class TexmlParser(BaseParser):
    """Parse TeXML markup into a :class:`~texml2tex.ast.Node` tree.

    Parameters
    ----------
    options : TexmlParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> root = TexmlParser().parse('<TeXML><cmd name="par"/></TeXML>')
        >>> root.kind, root.children[0].get("name")
        ('TeXML', 'par')

    """

    def __init__(self, options: Optional[TexmlParserOptions] = None):
        """Initialize the parser."""
        BaseParser._validate_options_type(options, TexmlParserOptions, "texml")
        options = options or TexmlParserOptions()
        super().__init__(options)
        self.options: TexmlParserOptions = options

    def parse(self, input_data: ParserInput) -> Node:
        """Parse TeXML input into its root node.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            XML text, a path to an XML file, raw bytes or a stream

        Returns
        -------
        Node
            Root node of the document

        Raises
        ------
        ParsingError
            If the XML is malformed or uses forbidden constructs (DTD entities,
            external references)

        """
        raw = self._load_input(input_data)
        root = self._parse_root(raw)
        document = self.convert_to_tree(root)
        logger.debug("Parsed TeXML input %s with root <%s>", self._describe_input(input_data), document.kind)
        return document

    def _retry_encodings(self) -> list[str]:
        """Encodings to decode undeclared bytes with after a UTF-8 parse fails.

        The configured encoding comes first, then the fallbacks; UTF-8 and
        duplicates are left out.
        """
        candidates: list[str] = []
        seen = {"utf-8"}
        for name in (self.options.encoding, *self.options.fallback_encodings):
            canonical = codecs.lookup(name).name
            if canonical not in seen:
                seen.add(canonical)
                candidates.append(name)
        return candidates

    @staticmethod
    def _fromstring(raw: Union[str, bytes]) -> ET.Element:
        try:
            return ET.fromstring(raw)
        except DefusedXmlException as e:
            raise ParsingError(
                f"Refusing to parse TeXML with forbidden XML construct: {e}",
                parsing_stage="xml_security",
                original_error=e,
            ) from e

    def _parse_root(self, raw: Union[str, bytes]) -> ET.Element:
        try:
            return self._fromstring(raw)
        except ET.ParseError as first_error:
            if isinstance(raw, bytes):
                for encoding in self._retry_encodings():
                    try:
                        decoded = raw.decode(encoding)
                    except UnicodeDecodeError:
                        continue
                    try:
                        root = self._fromstring(decoded)
                    except ET.ParseError:
                        continue
                    logger.info("Parsed TeXML input after decoding it as %s", encoding)
                    return root
            line, column = getattr(first_error, "position", (None, None))
            raise ParsingError(
                f"Failed to parse TeXML: {first_error}",
                parsing_stage="xml_parsing",
                original_error=first_error,
                line=line,
                column=column,
            ) from first_error

    def _new_node(self, element: ET.Element) -> Node:
        kind = element.tag
        attributes = dict(element.attrib)
        if self.options.strip_namespaces:
            kind = _local_name(kind)
            attributes = {_local_name(name): value for name, value in attributes.items()}
        return Node(kind=kind, attributes=attributes)

    def convert_to_tree(self, element: ET.Element) -> Node:
        """Convert a parsed ElementTree element, and its subtree, to nodes.

        The walk uses an explicit stack, so nesting depth is limited only by
        memory.

        Parameters
        ----------
        element : ET.Element
            The element to convert

        Returns
        -------
        Node
            Node for ``element`` with its text and child elements as children

        """
        root = self._new_node(element)
        pending = [(element, root)]
        while pending:
            source, node = pending.pop()
            if source.text:
                node.append(text_node(source.text))
            for child in source:
                pending.append((child, node.append(self._new_node(child))))
                if child.tail:
                    node.append(text_node(child.tail))
        return root


__all__ = ["TexmlParser"]
