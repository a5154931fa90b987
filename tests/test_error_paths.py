"""Error-path and malformed input tests.

Tests that exercise error handling, edge cases, and graceful degradation
for invalid reStructuredText input and malformed trees. These complement
the happy-path tests in test_api.py and the per-rule tests in
test_renderer.py.
"""

import pytest

from rstclass import RstHtml, parse, render, render_to_html
from rstclass.config import ParseConfig
from rstclass.errors import (
    ConfigError,
    NodeContractError,
    ParseError,
    RenderError,
    RstClassError,
)
from rstclass.nodes import BulletList, Document, Paragraph, Text
from rstclass.serialization import from_dict

# =========================================================================
# ParseError construction and formatting
# =========================================================================


class TestParseErrorFormatting:
    """Verify ParseError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = ParseError("unexpected token")
        assert str(err) == "unexpected token"
        assert err.lineno is None
        assert err.source_file is None

    def test_with_line_number(self) -> None:
        err = ParseError("bad syntax", lineno=42)
        assert str(err) == "42 bad syntax"
        assert err.message == "bad syntax"

    def test_with_source_file(self) -> None:
        err = ParseError("error", lineno=7, source_file="index.rst")
        assert str(err) == "index.rst:7 error"

    def test_source_file_without_line(self) -> None:
        err = ParseError("error", source_file="index.rst")
        assert str(err) == "index.rst error"

    def test_is_rstclass_error(self) -> None:
        assert isinstance(ParseError("x"), RstClassError)


# =========================================================================
# NodeContractError and the rest of the hierarchy
# =========================================================================


class TestNodeContractError:
    """Verify NodeContractError formatting and hierarchy."""

    def test_basic_format(self) -> None:
        err = NodeContractError("section", "has no title")
        assert str(err) == "Node 'section': has no title"
        assert err.node_type == "section"

    def test_without_type(self) -> None:
        assert str(NodeContractError("", "missing type")) == "Node: missing type"

    def test_is_render_error(self) -> None:
        err = NodeContractError("x", "y")
        assert isinstance(err, RenderError)
        assert isinstance(err, RstClassError)

    def test_config_error_hierarchy(self) -> None:
        err = ConfigError("bad")
        assert isinstance(err, RstClassError)
        assert isinstance(err, ValueError)


# =========================================================================
# Parser halts
# =========================================================================


class TestParserHalts:
    """Problems at or above halt_level abort parsing with ParseError."""

    def test_unknown_directive_halts_when_strict(self) -> None:
        with pytest.raises(ParseError, match="Unknown directive type") as exc_info:
            parse(".. frobnicate:: now\n", config=ParseConfig(halt_level=3))
        assert exc_info.value.lineno == 1

    def test_unknown_directive_dropped_by_default(self) -> None:
        doc = parse("Before.\n\n.. frobnicate:: now\n\nAfter.\n")
        assert doc.children == (
            from_dict({"type": "paragraph", "children": [{"type": "text", "value": "Before."}]}),
            from_dict({"type": "paragraph", "children": [{"type": "text", "value": "After."}]}),
        )

    def test_unknown_role_halts_when_strict(self) -> None:
        with pytest.raises(ParseError, match="Unknown interpreted text role"):
            parse("A :frobnicate:`x` role.\n", config=ParseConfig(halt_level=3))

    def test_processor_propagates_parse_error(self) -> None:
        rst = RstHtml(parse_config=ParseConfig(halt_level=3))
        with pytest.raises(ParseError):
            rst(".. frobnicate:: now\n")


# =========================================================================
# Malformed reStructuredText input: graceful degradation
# =========================================================================


class TestMalformedInput:
    """Verify parser handles malformed input without crashing."""

    def test_only_whitespace(self) -> None:
        assert parse("   \n\n   \n") == Document(children=())

    def test_only_newlines(self) -> None:
        assert parse("\n\n\n\n\n") == Document(children=())

    def test_unclosed_emphasis(self) -> None:
        html = render(parse("*unclosed emphasis\n"))
        assert "unclosed emphasis" in html
        assert "<em" not in html

    def test_unclosed_literal(self) -> None:
        html = render(parse("``unclosed literal\n"))
        assert "unclosed literal" in html
        assert "<tt" not in html

    def test_unknown_role_degrades(self) -> None:
        html = render(parse("A :frobnicate:`x` role.\n"))
        assert "role." in html

    def test_deeply_nested_block_quotes(self) -> None:
        source = "".join(f"{'  ' * i}level {i}\n\n" for i in range(30))
        doc = parse(source)
        assert isinstance(doc, Document)
        assert render(doc).count("<blockquote") == 29

    def test_deeply_nested_lists(self) -> None:
        source = "\n".join(f"{'  ' * i}- item {i}\n" for i in range(20))
        doc = parse(source)
        assert isinstance(doc.children[0], BulletList)
        assert render(doc).count('<ul class="rst-bullet-list">') == 20

    def test_very_long_line(self) -> None:
        doc = parse("word " * 10000)
        assert isinstance(doc.children[0], Paragraph)

    def test_long_line_kept_in_output(self) -> None:
        html = render_to_html("word " * 2001)
        assert html.startswith('<div class="rst-document">\n  <p class="rst-paragraph">\n')
        assert html.count("word") == 2001

    def test_line_over_limit_raises(self) -> None:
        source = "Short line.\n\n" + "x" * 81 + "\n"
        with pytest.raises(ParseError, match="line_length_limit") as exc_info:
            parse(source, source_file="wide.rst", config=ParseConfig(line_length_limit=80))
        assert exc_info.value.lineno == 3
        assert str(exc_info.value).startswith("wide.rst:3 ")

    def test_line_at_limit_accepted(self) -> None:
        doc = parse("x" * 80 + "\n", config=ParseConfig(line_length_limit=80))
        assert doc.children == (Paragraph(children=(Text(value="x" * 80),)),)

    def test_mixed_line_endings(self) -> None:
        doc = parse("line1\r\nline2\nline3\n")
        assert isinstance(doc, Document)
        assert "line3" in render(doc)

    def test_markup_characters_passed_through(self) -> None:
        html = render(parse("a < b & c > d\n"))
        assert '<span class="rst-text">a < b & c > d</span>' in html


# =========================================================================
# Malformed trees
# =========================================================================


class TestMalformedTrees:
    """Trees from other parsers that break the contract."""

    def test_section_without_title(self) -> None:
        with pytest.raises(NodeContractError, match="no title"):
            from_dict({"type": "section", "depth": 1, "children": []})

    def test_node_with_neither_children_nor_value(self) -> None:
        with pytest.raises(NodeContractError, match="neither"):
            from_dict({"type": "document", "children": [{"type": "strong"}]})

    def test_render_rejects_negative_level(self) -> None:
        from rstclass.renderers.html import HtmlRenderer

        with pytest.raises(RenderError):
            HtmlRenderer().render(Document(children=()), level=-3)
