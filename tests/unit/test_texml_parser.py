#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_texml_parser.py
"""Unit tests for the TeXML parser.

Tests cover:
- Element and attribute conversion
- Text and tail handling in document order
- Namespace stripping
- Input types: text, bytes, paths and streams
- Malformed and unsafe XML

"""

from io import BytesIO, StringIO
from pathlib import Path

import pytest

from texml2tex.ast import Node
from texml2tex.exceptions import FileError, FileNotFoundError, InvalidArgumentError, InvalidOptionsError, ParsingError
from texml2tex.options.tex import TexRendererOptions
from texml2tex.options.texml import TexmlParserOptions
from texml2tex.parsers.texml import TexmlParser


def kinds(node: Node) -> list[str]:
    """Return the kinds of a node's children."""
    return [child.kind for child in node.children]


@pytest.mark.unit
class TestTreeConstruction:
    """Tests for converting XML elements into nodes."""

    def test_root_and_attributes(self) -> None:
        """Test the root kind and element attributes are kept."""
        doc = TexmlParser().parse('<TeXML><cmd name="section" nl2="1"/></TeXML>')

        assert doc.kind == "TeXML"
        assert doc.children[0].kind == "cmd"
        assert doc.children[0].attributes == {"name": "section", "nl2": "1"}

    def test_text_and_tail_become_text_nodes(self) -> None:
        """Test character data before, between and after elements is kept in order."""
        doc = TexmlParser().parse('<TeXML>a<cmd name="x"/>b<spec cat="tilde"/>c</TeXML>')

        assert kinds(doc) == ["#text", "cmd", "#text", "spec", "#text"]
        assert [child.text for child in doc.children if child.is_text] == ["a", "b", "c"]

    def test_entities_are_decoded(self) -> None:
        """Test predefined entities reach the tree as plain characters."""
        doc = TexmlParser().parse("<TeXML>a &amp; b &lt;c&gt;</TeXML>")

        assert doc.children[0].text == "a & b <c>"

    def test_empty_elements_have_no_children(self) -> None:
        """Test an element without content has an empty child list."""
        doc = TexmlParser().parse("<TeXML><env name='center'></env></TeXML>")

        assert doc.children[0].children == []

    def test_parents_are_linked(self) -> None:
        """Test every child points back to its parent."""
        doc = TexmlParser().parse('<TeXML><env name="verbatim">raw</env></TeXML>')
        env = doc.children[0]

        assert env.parent is doc
        assert env.children[0].parent is env

    def test_unknown_elements_are_kept(self) -> None:
        """Test unknown markup is preserved in the tree."""
        doc = TexmlParser().parse('<TeXML><custom-extension foo="bar">x</custom-extension></TeXML>')

        assert doc.children[0].kind == "custom-extension"
        assert doc.children[0].get("foo") == "bar"

    def test_deep_nesting_builds_full_tree(self) -> None:
        """Test thousands of nested elements convert without hitting the recursion limit."""
        depth = 3000
        markup = "<TeXML>" + '<env name="e">' * depth + "core" + "</env>" * depth + "</TeXML>"

        node = TexmlParser().parse(markup)
        for _ in range(depth):
            assert kinds(node) == ["env"]
            node = node.children[0]

        assert node.get("name") == "e"
        assert node.children[0].text == "core"
        assert node.parent.parent.kind == "env"

    def test_order_kept_across_siblings_and_depth(self) -> None:
        """Test text, children and tails keep document order at every level."""
        doc = TexmlParser().parse('<TeXML>a<env name="o">b<cmd name="i"/>c</env>d<spec cat="esc"/>e</TeXML>')

        assert kinds(doc) == ["#text", "env", "#text", "spec", "#text"]
        assert kinds(doc.children[1]) == ["#text", "cmd", "#text"]
        assert [c.text for c in doc.children[1].children if c.is_text] == ["b", "c"]

    def test_sample_document(self, sample_texml: str) -> None:
        """Test the shared sample parses to the expected top-level structure."""
        doc = TexmlParser().parse(sample_texml)

        assert kinds(doc) == ["#text", "cmd", "#text", "env", "#text"]
        document_env = doc.children[3]
        assert document_env.get("name") == "document"
        assert "env" in kinds(document_env)


@pytest.mark.unit
class TestNamespaces:
    """Tests for namespace handling."""

    DOCUMENT = '<t:TeXML xmlns:t="urn:texml"><t:cmd t:name="par"/></t:TeXML>'

    def test_namespaces_stripped_by_default(self) -> None:
        """Test tags and attribute names lose their namespace."""
        doc = TexmlParser().parse(self.DOCUMENT)

        assert doc.kind == "TeXML"
        assert doc.children[0].kind == "cmd"
        assert doc.children[0].get("name") == "par"

    def test_namespaces_kept_when_disabled(self) -> None:
        """Test Clark notation names are kept when stripping is off."""
        doc = TexmlParser(TexmlParserOptions(strip_namespaces=False)).parse(self.DOCUMENT)

        assert doc.kind == "{urn:texml}TeXML"
        assert doc.children[0].get("{urn:texml}name") == "par"


@pytest.mark.unit
class TestInputTypes:
    """Tests for the accepted input types."""

    def test_bytes_input(self) -> None:
        """Test raw bytes are parsed."""
        doc = TexmlParser().parse(b"<TeXML>x</TeXML>")

        assert doc.children[0].text == "x"

    def test_leading_whitespace_text(self) -> None:
        """Test markup text with leading whitespace is still treated as markup."""
        doc = TexmlParser().parse("\n  <TeXML/>")

        assert doc.kind == "TeXML"

    def test_path_input(self, tmp_path: Path) -> None:
        """Test a Path is read from disk."""
        source = tmp_path / "doc.xml"
        source.write_text("<TeXML>from file</TeXML>", encoding="utf-8")

        assert TexmlParser().parse(source).children[0].text == "from file"

    def test_path_string_input(self, tmp_path: Path) -> None:
        """Test a string that is not markup is treated as a path."""
        source = tmp_path / "doc.xml"
        source.write_text("<TeXML>from file</TeXML>", encoding="utf-8")

        assert TexmlParser().parse(str(source)).children[0].text == "from file"

    def test_binary_stream_input(self) -> None:
        """Test a binary stream is read."""
        doc = TexmlParser().parse(BytesIO(b"<TeXML>stream</TeXML>"))

        assert doc.children[0].text == "stream"

    def test_text_stream_input(self) -> None:
        """Test a text stream is read."""
        doc = TexmlParser().parse(StringIO("<TeXML>café</TeXML>"))

        assert doc.children[0].text == "café"

    def test_declared_encoding_is_honoured(self) -> None:
        """Test bytes in a declared non-UTF-8 encoding decode correctly."""
        raw = '<?xml version="1.0" encoding="ISO-8859-1"?><TeXML>café</TeXML>'.encode("latin-1")

        assert TexmlParser().parse(raw).children[0].text == "café"

    def test_fallback_encoding_used_for_undeclared_bytes(self) -> None:
        """Test undeclared latin-1 bytes are retried with the fallback encoding."""
        raw = "<TeXML>café</TeXML>".encode("latin-1")

        assert TexmlParser().parse(raw).children[0].text == "café"

    def test_text_stream_declaration_is_not_reapplied(self) -> None:
        """Test text from a stream is parsed as-is even when it declares a byte encoding."""
        stream = StringIO('<?xml version="1.0" encoding="ISO-8859-1"?><TeXML>café</TeXML>')

        assert TexmlParser().parse(stream).children[0].text == "café"

    def test_configured_encoding_for_undeclared_bytes(self) -> None:
        """Test the configured encoding wins over the latin-1 fallback."""
        raw = "<TeXML>€</TeXML>".encode("cp1252")

        assert TexmlParser(TexmlParserOptions(encoding="cp1252")).parse(raw).children[0].text == "€"

    def test_configured_encoding_for_file(self, tmp_path: Path) -> None:
        """Test a file without a declaration is read in the configured encoding."""
        source = tmp_path / "cp1252.xml"
        source.write_bytes("<TeXML>€</TeXML>".encode("cp1252"))
        parser = TexmlParser(TexmlParserOptions(encoding="cp1252"))

        assert parser.parse(source).children[0].text == "€"
        assert parser.parse(str(source)).children[0].text == "€"

    def test_configured_encoding_for_binary_stream(self) -> None:
        """Test a binary stream is decoded with the configured encoding."""
        stream = BytesIO("<TeXML>€</TeXML>".encode("cp1252"))

        assert TexmlParser(TexmlParserOptions(encoding="cp1252")).parse(stream).children[0].text == "€"

    @pytest.mark.parametrize(
        ("encoding", "fallbacks", "expected"),
        [
            ("utf-8", ("latin-1",), ["latin-1"]),
            ("cp1252", ("latin-1",), ["cp1252", "latin-1"]),
            ("latin-1", ("iso-8859-1", "utf8"), ["latin-1"]),
            ("UTF8", (), []),
        ],
    )
    def test_retry_order(self, encoding: str, fallbacks: tuple[str, ...], expected: list[str]) -> None:
        """Test retries try the configured encoding first and skip UTF-8 and aliases already tried."""
        options = TexmlParserOptions(encoding=encoding, fallback_encodings=fallbacks)

        assert TexmlParser(options)._retry_encodings() == expected

    def test_no_fallback_encodings(self) -> None:
        """Test undeclared latin-1 bytes fail when no fallback is configured."""
        raw = "<TeXML>café</TeXML>".encode("latin-1")
        parser = TexmlParser(TexmlParserOptions(fallback_encodings=()))

        with pytest.raises(ParsingError):
            parser.parse(raw)

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing path raises FileNotFoundError."""
        missing = tmp_path / "missing.xml"

        with pytest.raises(FileNotFoundError) as exc_info:
            TexmlParser().parse(missing)

        assert exc_info.value.file_path == str(missing)
        assert isinstance(exc_info.value, FileError)

    def test_unsupported_type(self) -> None:
        """Test unsupported input types are rejected."""
        with pytest.raises(InvalidArgumentError):
            TexmlParser().parse(12345)  # type: ignore[arg-type]

    def test_wrong_options_type(self) -> None:
        """Test renderer options are rejected by the parser."""
        with pytest.raises(InvalidOptionsError):
            TexmlParser(TexRendererOptions())  # type: ignore[arg-type]


@pytest.mark.unit
class TestMalformedInput:
    """Tests for XML that cannot be parsed."""

    @pytest.mark.parametrize(
        "markup",
        [
            "<TeXML><cmd name='x'></TeXML>",
            "<TeXML>",
            "<TeXML/><TeXML/>",
            "",
            "   ",
        ],
    )
    def test_malformed_xml(self, markup: str) -> None:
        """Test malformed markup raises ParsingError."""
        with pytest.raises(ParsingError) as exc_info:
            TexmlParser().parse(markup)

        assert exc_info.value.parsing_stage == "xml_parsing"
        assert exc_info.value.original_error is not None

    def test_error_position_reported(self) -> None:
        """Test the line of a syntax error is carried on the exception."""
        with pytest.raises(ParsingError) as exc_info:
            TexmlParser().parse("<TeXML>\n<cmd name='x'>\n</TeXML>")

        assert exc_info.value.line == 3
        assert exc_info.value.column is not None

    def test_entity_expansion_is_refused(self) -> None:
        """Test documents declaring entities are refused."""
        bomb = (
            '<?xml version="1.0"?>'
            '<!DOCTYPE TeXML [<!ENTITY a "aaaaaaaaaa"><!ENTITY b "&a;&a;&a;&a;&a;&a;">]>'
            "<TeXML>&b;</TeXML>"
        )

        with pytest.raises(ParsingError) as exc_info:
            TexmlParser().parse(bomb)

        assert exc_info.value.parsing_stage == "xml_security"

    def test_entity_declaration_refused_on_encoding_retry(self) -> None:
        """Test forbidden constructs are still refused when bytes are retried in another encoding."""
        raw = '<!DOCTYPE TeXML [<!ENTITY a "é">]><TeXML>é&a;</TeXML>'.encode("latin-1")

        with pytest.raises(ParsingError) as exc_info:
            TexmlParser().parse(raw)

        assert exc_info.value.parsing_stage == "xml_security"
