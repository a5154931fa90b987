"""Exceptions raised by rstclass.

Three things can go wrong, each with its own class:

- docutils gives up on the source (ParseError)
- a tree handed to the renderer or to ``from_dict`` is malformed
  (NodeContractError, a RenderError)
- a config value is out of range (ConfigError)

Rendering never catches these; a failure anywhere in the tree aborts the
whole render.
"""

from __future__ import annotations


class RstClassError(Exception):
    """Root of the rstclass exception hierarchy; catch this to catch all."""

    pass


class ParseError(RstClassError):
    """docutils could not turn the source into a doctree.

    Raised for a docutils system message at or above ``halt_level`` (an
    unknown directive under a strict config, inconsistent title levels)
    and for lines longer than ``line_length_limit``. ``lineno`` is the
    1-indexed source line docutils reported, when it reported one.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class RenderError(RstClassError):
    """Rendering was asked to do something it cannot, such as start at a negative level."""

    pass


class NodeContractError(RenderError):
    """A tree node breaks the document tree contract.

    Raised for nodes with neither children nor value (or both), sections
    without a title, and similar upstream parser faults.
    """

    def __init__(self, node_type: str, message: str) -> None:
        """Initialize contract error.

        Args:
            node_type: Type tag of the offending node ("" if missing)
            message: Description of the violation
        """
        self.node_type = node_type
        label = f"Node {node_type!r}" if node_type else "Node"
        super().__init__(f"{label}: {message}")


class ConfigError(RstClassError, ValueError):
    """A RenderConfig value is out of range or of the wrong type."""

    pass
