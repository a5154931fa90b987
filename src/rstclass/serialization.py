"""Tree serialization: JSON round-trip for rstclass nodes.

Converts typed nodes to/from plain dicts in the shape reStructuredText
parsers commonly emit:

    {"type": "section", "depth": 1, "children": [
        {"type": "title", "children": [{"type": "text", "value": "Title"}]},
        {"type": "paragraph", "children": [...]}
    ]}

Useful for:
- Rendering trees produced by another parser (no docutils needed)
- Caching parsed trees to disk
- Debugging and inspection

``from_dict`` enforces the tree contract and raises NodeContractError for
malformed input rather than guessing.

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from typing import Any

from rstclass.errors import NodeContractError
from rstclass.nodes import (
    COMPOSITE_TYPES,
    Composite,
    InterpretedText,
    Leaf,
    Node,
    Section,
    Text,
    Title,
    UnknownBlock,
    UnknownLeaf,
    type_of,
)


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Sections emit their title as the first entry of ``children``.

    Args:
        node: Any rstclass node.

    Returns:
        Dict with ``type`` plus ``children`` or ``value`` and, where they
        apply, ``depth`` and ``role``.

    """
    result: dict[str, Any] = {"type": type_of(node)}
    match node:
        case Section():
            result["depth"] = node.depth
            result["children"] = [to_dict(node.title), *(to_dict(c) for c in node.children)]
        case Composite():
            result["children"] = [to_dict(c) for c in node.children]
            if isinstance(node, InterpretedText) and node.role is not None:
                result["role"] = node.role
        case Leaf():
            result["value"] = node.value
        case _:
            raise NodeContractError(type_of(node), "has neither children nor a value")
    return result


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed node from a dict.

    Unknown ``type`` strings are preserved as UnknownBlock or UnknownLeaf.
    Keys other than type/children/value/depth/role are ignored.

    Args:
        data: Dict as produced by to_dict() or an external parser.

    Returns:
        Typed node (frozen dataclass).

    Raises:
        NodeContractError: If the dict breaks the tree contract.

    """
    node_type = data.get("type")
    if not isinstance(node_type, str) or not node_type:
        msg = "missing or non-string 'type' field"
        raise NodeContractError("", msg)

    has_children = "children" in data
    has_value = "value" in data
    if has_children and has_value:
        raise NodeContractError(node_type, "has both children and a value")
    if not has_children and not has_value:
        raise NodeContractError(node_type, "has neither children nor a value")

    if has_value:
        value = data["value"]
        if not isinstance(value, str):
            raise NodeContractError(node_type, f"value must be a string, got {value!r}")
        if node_type == Text.TYPE:
            return Text(value=value)
        if node_type in COMPOSITE_TYPES or node_type in (Section.TYPE, InterpretedText.TYPE):
            raise NodeContractError(node_type, "must have children, not a value")
        return UnknownLeaf(value=value, node_type=node_type)

    raw_children = data["children"]
    if not isinstance(raw_children, list):
        raise NodeContractError(node_type, "children must be a list")

    if node_type == Section.TYPE:
        return _section_from_dict(data, raw_children)
    if node_type == Text.TYPE:
        raise NodeContractError(node_type, "must have a value, not children")

    children = _children_from_list(node_type, raw_children)
    if node_type == InterpretedText.TYPE:
        role = data.get("role")
        if role is not None and not isinstance(role, str):
            raise NodeContractError(node_type, f"role must be a string, got {role!r}")
        return InterpretedText(children=children, role=role)
    node_cls = COMPOSITE_TYPES.get(node_type)
    if node_cls is not None:
        return node_cls(children=children)
    return UnknownBlock(children=children, node_type=node_type)


def _children_from_list(node_type: str, raw_children: list[Any]) -> tuple[Node, ...]:
    for child in raw_children:
        if not isinstance(child, dict):
            raise NodeContractError(node_type, f"children must be objects, got {child!r}")
    return tuple(from_dict(c) for c in raw_children)


def _section_from_dict(data: dict[str, Any], raw_children: list[Any]) -> Section:
    depth = data.get("depth")
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise NodeContractError(Section.TYPE, f"depth must be an integer, got {depth!r}")
    if not raw_children:
        raise NodeContractError(Section.TYPE, "has no title")

    first, *rest = _children_from_list(Section.TYPE, raw_children)
    if not isinstance(first, Composite):
        raise NodeContractError(Section.TYPE, "title must have children")
    title = first if isinstance(first, Title) else Title(children=first.children)
    return Section(children=tuple(rest), depth=depth, title=title)


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize a tree to a JSON string.

    Output is deterministic (sorted keys).

    Args:
        node: Tree root to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(node), sort_keys=True, indent=indent)


def from_json(data: str) -> Node:
    """Deserialize a tree from a JSON string.

    Raises:
        NodeContractError: If the JSON is not an object or breaks the
            tree contract.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"expected a JSON object, got {type(raw).__name__}"
        raise NodeContractError("", msg)
    return from_dict(raw)


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
