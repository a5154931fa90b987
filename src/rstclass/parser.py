"""reStructuredText parsing via docutils.

docutils does the parsing; this module turns its doctree into the typed,
immutable tree of ``rstclass.nodes`` that the renderers consume.

Mapping:
- Element tag names that match a node class (``paragraph``,
  ``bullet_list``, ``literal_block``, ...) become that class
- ``section`` becomes Section, with its first child split off as the title
  and ``depth`` set from section nesting (1 = top)
- Inline role elements (``title_reference``, ``subscript``, ...) become
  InterpretedText with the role name (None for the default role)
- ``#text`` becomes Text
- ``system_message`` diagnostics are dropped
- Everything else becomes UnknownBlock, keeping its tag name

Thread Safety:
parse() builds a fresh docutils publisher per call and DoctreeConverter is
stateless, so concurrent calls are independent.
"""

from __future__ import annotations

import re

from docutils import nodes as du
from docutils.core import publish_doctree
from docutils.utils import SystemMessage

from rstclass.config import ParseConfig
from rstclass.errors import NodeContractError, ParseError
from rstclass.nodes import (
    COMPOSITE_TYPES,
    Document,
    InterpretedText,
    Node,
    Section,
    Text,
    Title,
    UnknownBlock,
)
from rstclass.utils.logger import get_logger

logger = get_logger(__name__)

# docutils inline elements produced by interpreted-text roles -> role name
ROLE_ELEMENTS: dict[str, str | None] = {
    "title_reference": None,
    "subscript": "subscript",
    "superscript": "superscript",
    "abbreviation": "abbreviation",
    "acronym": "acronym",
}

# "<source>:12: (SEVERE/4) Title level inconsistent: ..."
_SYSTEM_MESSAGE_RE = re.compile(r"^.*?:(\d+): \(\w+/\d\) (.*)$", re.DOTALL)


class DoctreeConverter:
    """Convert a docutils doctree into rstclass nodes.

    Usage:
        >>> converter = DoctreeConverter()
        >>> doc = converter.convert(publish_doctree("Hello"))

    """

    __slots__ = ()

    def convert(self, node: du.Node, depth: int = 0) -> Node:
        """Convert a docutils node and its subtree.

        Args:
            node: docutils node
            depth: Depth of the innermost enclosing section (0 outside any)

        Returns:
            Equivalent rstclass node

        """
        if isinstance(node, du.Text):
            return Text(value=node.astext())

        tagname = node.tagname
        if tagname == "section":
            return self._convert_section(node, depth + 1)

        children = self._convert_children(node, depth)
        if tagname in ROLE_ELEMENTS:
            return InterpretedText(children=children, role=ROLE_ELEMENTS[tagname])

        node_cls = COMPOSITE_TYPES.get(tagname)
        if node_cls is not None:
            return node_cls(children=children)
        return UnknownBlock(children=children, node_type=tagname)

    def _convert_children(self, node: du.Element, depth: int) -> tuple[Node, ...]:
        return tuple(
            self.convert(child, depth)
            for child in node.children
            if not isinstance(child, du.system_message)
        )

    def _convert_section(self, node: du.Element, depth: int) -> Section:
        if not node.children or not isinstance(node.children[0], du.title):
            raise NodeContractError("section", "first child is not a title")
        title_node = node.children[0]
        body = tuple(
            self.convert(child, depth)
            for child in node.children[1:]
            if not isinstance(child, du.system_message)
        )
        return Section(
            children=body,
            depth=depth,
            title=Title(children=self._convert_children(title_node, depth)),
        )


_CONVERTER = DoctreeConverter()


def _check_line_lengths(source: str, config: ParseConfig, source_file: str | None) -> None:
    # docutils reports an over-long line below the halt level and then
    # discards the whole document
    for lineno, line in enumerate(source.splitlines(), start=1):
        if len(line.expandtabs(config.tab_width).rstrip()) > config.line_length_limit:
            msg = f"line exceeds line_length_limit ({config.line_length_limit} characters)"
            raise ParseError(msg, lineno=lineno, source_file=source_file)


def parse(
    source: str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> Document:
    """Parse reStructuredText source into a typed document tree.

    Args:
        source: reStructuredText source text
        source_file: Optional source path for error messages
        config: Parser configuration (defaults to ParseConfig())

    Returns:
        Document root node

    Raises:
        ParseError: If docutils halts on a problem at or above
            ``config.halt_level``, or if a line is longer than
            ``config.line_length_limit``.

    Example:
        >>> doc = parse("Title\\n=====\\n\\nBody text.")
        >>> doc.children[0].depth
        1

    """
    config = config or ParseConfig()
    _check_line_lengths(source, config, source_file)
    try:
        doctree = publish_doctree(
            source,
            source_path=source_file,
            settings_overrides=config.to_docutils_settings(),
        )
    except SystemMessage as exc:
        match = _SYSTEM_MESSAGE_RE.match(str(exc))
        if match is None:
            raise ParseError(str(exc), source_file=source_file) from exc
        raise ParseError(
            match.group(2), lineno=int(match.group(1)), source_file=source_file
        ) from exc

    doc = _CONVERTER.convert(doctree)
    if not isinstance(doc, Document):
        raise NodeContractError(type(doc).TYPE, "parser root is not a document")
    logger.debug("Parsed %d top-level nodes from %s", len(doc.children), source_file or "<string>")
    return doc


__all__ = ["DoctreeConverter", "ROLE_ELEMENTS", "parse"]
