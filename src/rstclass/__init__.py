"""
rstclass: reStructuredText to class-annotated HTML

Renders reStructuredText into HTML where every element carries a semantic
``rst-*`` class, ready for styling. Parsing is done by docutils; rendering
is a pure, deterministic tree walk.

Quick Start:
    >>> from rstclass import render_to_html
    >>> print(render_to_html("Hello *world*"))
    <div class="rst-document">
      <p class="rst-paragraph">
    <span class="rst-text">Hello </span><em class="rst-emphasis"><span class="rst-text">world</span></em>
      </p>
    <BLANKLINE>
    </div>
    <BLANKLINE>

    >>> # Or keep a configured processor around
    >>> from rstclass import RstHtml
    >>> rst = RstHtml(indent_width=4)
    >>> html = rst("Title\\n=====\\n\\nBody.")

Rendering trees from another parser:
    >>> from rstclass import from_dict, render
    >>> render(from_dict({"type": "text", "value": "hi\\n"}))
    '<span class="rst-text">hi</span>'

Installation:
    pip install rstclass
"""

from collections.abc import Iterable

from rstclass.config import ParseConfig, RenderConfig
from rstclass.errors import (
    ConfigError,
    NodeContractError,
    ParseError,
    RenderError,
    RstClassError,
)
from rstclass.nodes import (
    BlockQuote,
    BulletList,
    Composite,
    DefinitionList,
    Document,
    Emphasis,
    EnumeratedList,
    InterpretedText,
    Leaf,
    Line,
    LineBlock,
    ListItem,
    Literal,
    LiteralBlock,
    Node,
    Paragraph,
    Section,
    Strong,
    Text,
    Title,
    Transition,
    UnknownBlock,
    UnknownLeaf,
    type_of,
)
from rstclass.parser import DoctreeConverter, parse
from rstclass.renderers.html import HtmlRenderer
from rstclass.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"


def render(node: Node, *, indent_width: int = 2) -> str:
    """Render a document tree to HTML.

    Args:
        node: Tree root (normally a Document)
        indent_width: Spaces per nesting level

    Returns:
        HTML string

    Example:
        >>> doc = parse("Hello")
        >>> render(doc, indent_width=4)
        '<div class="rst-document">\\n    <p class="rst-paragraph">\\n...'
    """
    return HtmlRenderer(config=RenderConfig(indent_width=indent_width)).render(node)


def render_to_html(source: str, indent_width: int = 2) -> str:
    """Parse reStructuredText source and render it to HTML in one call.

    Args:
        source: reStructuredText source text
        indent_width: Spaces per nesting level

    Returns:
        HTML string

    Raises:
        ParseError: If the parser halts on the source.
        ConfigError: If indent_width is negative or not an integer.

    """
    config = RenderConfig(indent_width=indent_width)
    return HtmlRenderer(config=config).render(parse(source))


class RstHtml:
    """High-level processor combining parser and renderer.

    Usage:
        >>> rst = RstHtml(indent_width=4)
        >>> html = rst("Some *text*")

        >>> # Access the tree
        >>> doc = rst.parse("Title\\n=====\\n")
        >>> doc.children[0].depth
        1

    Thread Safety:
        Configuration is frozen at construction and rendering is stateless.
        Safe to share one instance across threads.

    """

    __slots__ = ("_parse_config", "_renderer")

    def __init__(
        self,
        *,
        indent_width: int = 2,
        parse_config: ParseConfig | None = None,
    ) -> None:
        """Initialize processor.

        Args:
            indent_width: Spaces per nesting level
            parse_config: docutils parser configuration (defaults if None)
        """
        self._parse_config = parse_config or ParseConfig()
        self._renderer = HtmlRenderer(config=RenderConfig(indent_width=indent_width))

    def __call__(self, source: str) -> str:
        """Parse and render reStructuredText in one call."""
        return self._renderer.render(self.parse(source))

    def parse(self, source: str, *, source_file: str | None = None) -> Document:
        """Parse reStructuredText source into a document tree."""
        return parse(source, source_file=source_file, config=self._parse_config)

    def render(self, doc: Node) -> str:
        """Render a document tree to HTML."""
        return self._renderer.render(doc)

    def render_many(self, sources: Iterable[str]) -> list[str]:
        """Parse and render each source, in order.

        Example:
            >>> rst = RstHtml()
            >>> pages = rst.render_many(["Page *one*", "Page *two*"])
        """
        return [self(source) for source in sources]


__all__ = [  # noqa: RUF022
    # Version
    "__version__",
    # Core API
    "parse",
    "render",
    "render_to_html",
    # High-level
    "RstHtml",
    # Base nodes
    "Node",
    "Composite",
    "Leaf",
    "type_of",
    # Block nodes
    "BlockQuote",
    "BulletList",
    "DefinitionList",
    "Document",
    "EnumeratedList",
    "Line",
    "LineBlock",
    "ListItem",
    "LiteralBlock",
    "Paragraph",
    "Section",
    "Title",
    "Transition",
    # Inline nodes
    "Emphasis",
    "InterpretedText",
    "Literal",
    "Strong",
    "Text",
    # Unrecognized nodes
    "UnknownBlock",
    "UnknownLeaf",
    # Parser and renderer
    "DoctreeConverter",
    "HtmlRenderer",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration
    "ParseConfig",
    "RenderConfig",
    # Errors
    "RstClassError",
    "ParseError",
    "RenderError",
    "NodeContractError",
    "ConfigError",
]
