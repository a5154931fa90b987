"""HTML renderer with semantic ``rst-*`` class annotations.

Renders a typed document tree to an HTML string by depth-first recursion.
Every call returns a string fragment; parents concatenate their children's
fragments according to one of three layouts:

Block:
    Indented opening tag line, children, newline, indented closing tag line.
    Children supply their own indentation.

Inline:
    Opening tag, children, closing tag, no whitespace added anywhere.

Leaf:
    Opening tag, text value minus one trailing newline, closing tag.

Node types without a rule fall back to a ``div`` with classes
``rst-unknown rst-{type}``, laid out as a block or a leaf depending on
whether the node has children.

Text is emitted verbatim; output is not sanitized.

Thread Safety:
All functions are pure. HtmlRenderer holds only its indent width and can be
shared across threads.
"""

from rstclass.config import RenderConfig
from rstclass.errors import NodeContractError, RenderError
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
    type_of,
)
from rstclass.utils.logger import get_logger

logger = get_logger(__name__)


# =============================================================================
# Dispatcher
# =============================================================================


def render_node(node: Node, level: int = 0, indent_width: int = 2) -> str:
    """Render any node and its subtree.

    Args:
        node: Tree node to render
        level: Nesting depth (0 for the document root)
        indent_width: Spaces per nesting level, unchanged through the recursion

    Returns:
        HTML fragment for the node

    """
    match node:
        case Document():
            return render_block("div", "rst-document", node, level, indent_width)
        case Section():
            return render_section(node, level, indent_width)
        case Transition():
            # No transition rule yet
            return render_unknown(node, level, indent_width)
        case Paragraph():
            return render_block("p", "rst-paragraph", node, level, indent_width)
        case BulletList():
            return render_block("ul", "rst-bullet-list", node, level, indent_width)
        case EnumeratedList():
            return render_block("ol", "rst-enumerated-list", node, level, indent_width)
        case DefinitionList():
            # TODO: render as <dl>/<dt>/<dd> once definition_list_item, term and
            # definition get node classes of their own.
            return render_unknown(node, level, indent_width)
        case ListItem():
            return render_block("li", "rst-list-item", node, level, indent_width)
        case Line():
            return render_block("div", "rst-line", node, level, indent_width)
        case LineBlock():
            return render_block("div", "rst-line-block", node, level, indent_width)
        case LiteralBlock():
            return render_block("pre", "rst-literal-block", node, level, indent_width)
        case BlockQuote():
            return render_block("blockquote", "rst-block-quote", node, level, indent_width)
        case InterpretedText():
            return render_interpreted_text(node, level, indent_width)
        case Text():
            return render_leaf("span", "rst-text", node)
        case Emphasis():
            return render_inline("em", "rst-emphasis", node, level, indent_width)
        case Strong():
            return render_inline("strong", "rst-strong", node, level, indent_width)
        case Literal():
            return render_inline("tt", "rst-literal", node, level, indent_width)
        case Title():
            # Titles only get a heading tag through their section
            return render_unknown(node, level, indent_width)
        case _:
            return render_unknown(node, level, indent_width)


# =============================================================================
# Layouts
# =============================================================================


def render_block(
    tag: str, class_name: str, node: Composite, level: int = 0, indent_width: int = 2
) -> str:
    """Render a composite node as an indented, newline-delimited block.

    Only the opening and closing tags are indented; each child is rendered
    one level deeper and brings its own indentation and trailing newline.
    """
    indent = " " * (indent_width * level)
    children = "".join(render_node(child, level + 1, indent_width) for child in node.children)
    return f'{indent}<{tag} class="{class_name}">\n{children}\n{indent}</{tag}>\n'


def render_inline(
    tag: str, class_name: str, node: Composite, level: int = 0, indent_width: int = 2
) -> str:
    """Render a composite node inside running text.

    ``level`` is threaded through to the children but never turned into
    whitespace: inline elements never break a line.
    """
    children = "".join(render_node(child, level + 1, indent_width) for child in node.children)
    return f'<{tag} class="{class_name}">{children}</{tag}>'


def render_leaf(tag: str, class_name: str, node: Leaf) -> str:
    """Render a text-bearing leaf, dropping exactly one trailing newline."""
    value = node.value
    if value.endswith("\n"):
        value = value[:-1]
    return f'<{tag} class="{class_name}">{value}</{tag}>'


def render_unknown(node: Node, level: int = 0, indent_width: int = 2) -> str:
    """Render a node type that has no dedicated rule.

    Composite nodes become a block ``div``, leaves a leaf ``div``, both with
    classes ``rst-unknown rst-{type}``. Content survives; meaning does not.

    Raises:
        NodeContractError: If the node has neither children nor a value.

    """
    node_type = type_of(node)
    class_name = f"rst-unknown rst-{node_type}"
    logger.debug("No rendering rule for node type %r, using fallback", node_type)
    match node:
        case Composite():
            return render_block("div", class_name, node, level, indent_width)
        case Leaf():
            return render_leaf("div", class_name, node)
    raise NodeContractError(node_type, "has neither children nor a value")


# =============================================================================
# Per-type rules
# =============================================================================


def render_section(section: Section, level: int = 0, indent_width: int = 2) -> str:
    """Render a section: its title as a heading, then its body.

    Body siblings are separated by a blank line; the closing tag follows the
    last sibling directly.
    """
    indent = " " * (indent_width * level)
    title = render_title(section.depth, section.title, level + 1, indent_width)
    body = "\n".join(render_node(child, level + 1, indent_width) for child in section.children)
    return f'{indent}<div class="rst-section">\n{title}{body}{indent}</div>\n'


def render_title(depth: int, title: Title, level: int = 0, indent_width: int = 2) -> str:
    """Render a section title as ``h{depth}`` with class ``rst-title-{depth}``."""
    return render_block(f"h{depth}", f"rst-title-{depth}", title, level, indent_width)


def render_interpreted_text(
    node: InterpretedText, level: int = 0, indent_width: int = 2
) -> str:
    """Render interpreted text, adding ``rst-role-{role}`` when a role is set."""
    class_name = "rst-interpreted_text"
    if node.role:
        class_name += f" rst-role-{node.role}"
    return render_inline("span", class_name, node, level, indent_width)


# =============================================================================
# Renderer object
# =============================================================================


class HtmlRenderer:
    """Render document trees to class-annotated HTML.

    Usage:
        >>> renderer = HtmlRenderer(indent_width=4)
        >>> html = renderer.render(doc)

    Thread Safety:
        Stateless apart from the indent width. One instance may serve
        concurrent render() calls from many threads.
    """

    __slots__ = ("_indent_width",)

    def __init__(self, indent_width: int = 2, *, config: RenderConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            indent_width: Spaces per nesting level
            config: Render configuration; takes precedence over indent_width
        """
        config = config or RenderConfig(indent_width=indent_width)
        self._indent_width = config.indent_width

    @property
    def indent_width(self) -> int:
        return self._indent_width

    def render(self, node: Node, level: int = 0) -> str:
        """Render a tree (normally a Document) to an HTML string.

        Args:
            node: Root of the tree to render
            level: Starting nesting depth

        Returns:
            HTML string

        Raises:
            RenderError: If level is negative.
            NodeContractError: If the tree contains a malformed node.

        """
        if level < 0:
            msg = f"level must be non-negative, got {level}"
            raise RenderError(msg)
        return render_node(node, level, self._indent_width)


__all__ = [
    "HtmlRenderer",
    "render_block",
    "render_inline",
    "render_interpreted_text",
    "render_leaf",
    "render_node",
    "render_section",
    "render_title",
    "render_unknown",
]
