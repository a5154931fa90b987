"""Typed document tree nodes for rstclass.

All nodes are frozen dataclasses with slots for:
- Immutability: the renderer can never mutate its input
- Value equality: two renders of equal trees are comparable
- Pattern matching: match statements dispatch on the variant class

Node Hierarchy:
Node (base)
├── Composite (carries children)
│   ├── Document
│   ├── Section (+ depth, title)
│   ├── Title
│   ├── Paragraph
│   ├── BulletList
│   ├── EnumeratedList
│   ├── DefinitionList
│   ├── ListItem
│   ├── Line
│   ├── LineBlock
│   ├── LiteralBlock
│   ├── BlockQuote
│   ├── Transition
│   ├── InterpretedText (+ role)
│   ├── Emphasis
│   ├── Strong
│   ├── Literal
│   └── UnknownBlock (+ node_type)
└── Leaf (carries value)
    ├── Text
    └── UnknownLeaf (+ node_type)

A node has either children or a value, never both: the split between
Composite and Leaf makes that a property of the class, not of the data.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

# =============================================================================
# Base Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all tree nodes.

    ``TYPE`` is the parser's type tag for the node's syntactic category.

    """

    TYPE: ClassVar[str] = ""


@dataclass(frozen=True, slots=True)
class Composite(Node):
    """A node that owns an ordered sequence of child nodes.

    An empty ``children`` tuple is an empty composite, not a leaf.

    """

    children: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class Leaf(Node):
    """A terminal node carrying raw text extracted by the parser."""

    value: str


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Document(Composite):
    """Root of every parsed tree."""

    TYPE: ClassVar[str] = "document"


@dataclass(frozen=True, slots=True)
class Title(Composite):
    """Section heading content.

    Only meaningful as ``Section.title``; the heading level comes from the
    owning section.

    """

    TYPE: ClassVar[str] = "title"


@dataclass(frozen=True, slots=True)
class Section(Composite):
    """A titled section.

    RST:
        Title
        =====

    ``depth`` is the heading level (1 = top). ``children`` holds the body
    only; the title is kept apart so every section has exactly one.

    """

    TYPE: ClassVar[str] = "section"

    depth: int
    title: Title


@dataclass(frozen=True, slots=True)
class Paragraph(Composite):
    TYPE: ClassVar[str] = "paragraph"


@dataclass(frozen=True, slots=True)
class BulletList(Composite):
    """RST: ``- item`` or ``* item``"""

    TYPE: ClassVar[str] = "bullet_list"


@dataclass(frozen=True, slots=True)
class EnumeratedList(Composite):
    """RST: ``1. item`` or ``#. item``"""

    TYPE: ClassVar[str] = "enumerated_list"


@dataclass(frozen=True, slots=True)
class DefinitionList(Composite):
    """Term/definition pairs.

    Children are parser-specific item nodes (``definition_list_item`` etc.),
    which reach the renderer as unknown nodes.

    """

    TYPE: ClassVar[str] = "definition_list"


@dataclass(frozen=True, slots=True)
class ListItem(Composite):
    TYPE: ClassVar[str] = "list_item"


@dataclass(frozen=True, slots=True)
class Line(Composite):
    """One line of a line block. May be empty (blank line)."""

    TYPE: ClassVar[str] = "line"


@dataclass(frozen=True, slots=True)
class LineBlock(Composite):
    """RST: ``| line`` groups.

    Indented continuation lines arrive as a nested LineBlock among the
    Line children.

    """

    TYPE: ClassVar[str] = "line_block"


@dataclass(frozen=True, slots=True)
class LiteralBlock(Composite):
    """RST: a paragraph ending in ``::`` followed by an indented block."""

    TYPE: ClassVar[str] = "literal_block"


@dataclass(frozen=True, slots=True)
class BlockQuote(Composite):
    TYPE: ClassVar[str] = "block_quote"


@dataclass(frozen=True, slots=True)
class Transition(Composite):
    """RST: a line of four or more punctuation characters between paragraphs."""

    TYPE: ClassVar[str] = "transition"


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class InterpretedText(Composite):
    """Role-tagged inline text.

    RST: ```text``` or ``:role:`text```

    ``role`` is None for the default role.

    """

    TYPE: ClassVar[str] = "interpreted_text"

    role: str | None = None


@dataclass(frozen=True, slots=True)
class Emphasis(Composite):
    """RST: ``*text*``"""

    TYPE: ClassVar[str] = "emphasis"


@dataclass(frozen=True, slots=True)
class Strong(Composite):
    """RST: ``**text**``"""

    TYPE: ClassVar[str] = "strong"


@dataclass(frozen=True, slots=True)
class Literal(Composite):
    """RST: ````text````"""

    TYPE: ClassVar[str] = "literal"


@dataclass(frozen=True, slots=True)
class Text(Leaf):
    """Plain text content, exactly as extracted by the parser."""

    TYPE: ClassVar[str] = "text"


# =============================================================================
# Unrecognized Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class UnknownBlock(Composite):
    """Any composite node type without a dedicated class.

    Keeps parser extensions renderable without code changes.

    """

    node_type: str


@dataclass(frozen=True, slots=True)
class UnknownLeaf(Leaf):
    """Any leaf node type other than ``text``."""

    node_type: str


def type_of(node: Node) -> str:
    """Return the parser type tag of a node.

    Example:
        >>> type_of(Paragraph(children=()))
        'paragraph'
        >>> type_of(UnknownBlock(children=(), node_type="comment"))
        'comment'

    """
    match node:
        case UnknownBlock(node_type=name) | UnknownLeaf(node_type=name):
            return name
    return node.TYPE


# Type tag -> class, for every known composite variant except Section
# (which needs depth and title) and InterpretedText (which needs role).
COMPOSITE_TYPES: dict[str, type[Composite]] = {
    cls.TYPE: cls
    for cls in (
        Document,
        Title,
        Paragraph,
        BulletList,
        EnumeratedList,
        DefinitionList,
        ListItem,
        Line,
        LineBlock,
        LiteralBlock,
        BlockQuote,
        Transition,
        Emphasis,
        Strong,
        Literal,
    )
}
