"""Render and parse configuration for rstclass.

Both configs are frozen dataclasses: built once, shared freely, never
mutated. ``indent_width`` is the only output knob; everything else
configures the external reStructuredText parser.

Usage:
    render_config = RenderConfig(indent_width=4)
    parse_config = ParseConfig.from_dict({"tab_width": 4, "unknown": "ignored"})

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rstclass.errors import ConfigError


def _known_fields(cls: type, config_dict: dict[str, Any]) -> dict[str, Any]:
    """Keep only keys that name a field of the dataclass ``cls``."""
    valid_fields = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
    return {k: v for k, v in config_dict.items() if k in valid_fields}


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        indent_width: Spaces per nesting level for block element tags

    """

    indent_width: int = 2

    def __post_init__(self) -> None:
        # bool is an int subclass but never a meaningful width
        if isinstance(self.indent_width, bool) or not isinstance(self.indent_width, int):
            msg = f"indent_width must be an integer, got {self.indent_width!r}"
            raise ConfigError(msg)
        if self.indent_width < 0:
            msg = f"indent_width must be non-negative, got {self.indent_width}"
            raise ConfigError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> RenderConfig:
        """Create RenderConfig from dictionary, ignoring unknown keys.

        Example:
            >>> RenderConfig.from_dict({"indent_width": 4, "theme": "dark"})
            RenderConfig(indent_width=4)

        """
        return cls(**_known_fields(cls, config_dict))


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable configuration for the docutils parser.

    Attributes:
        tab_width: Spaces per tab stop in the source
        report_level: Lowest docutils message level kept (5 = none)
        halt_level: Message level that aborts parsing (4 = severe)
        strip_comments: Drop RST comments from the tree
        line_length_limit: Longest source line accepted, in characters

    """

    tab_width: int = 8
    report_level: int = 5
    halt_level: int = 4
    strip_comments: bool = True
    line_length_limit: int = 1_000_000

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> ParseConfig:
        """Create ParseConfig from dictionary, ignoring unknown keys."""
        return cls(**_known_fields(cls, config_dict))

    def to_docutils_settings(self) -> dict[str, Any]:
        """Build the ``settings_overrides`` mapping for docutils.

        Structural transforms that would reshape the tree (document title
        promotion, subtitle promotion, docinfo extraction) are always off,
        as are file inclusion and raw passthrough. ``traceback`` makes
        docutils raise instead of calling ``sys.exit``.
        """
        return {
            "tab_width": self.tab_width,
            "report_level": self.report_level,
            "halt_level": self.halt_level,
            "strip_comments": self.strip_comments,
            "line_length_limit": self.line_length_limit,
            "doctitle_xform": False,
            "sectsubtitle_xform": False,
            "docinfo_xform": False,
            "file_insertion_enabled": False,
            "raw_enabled": False,
            "traceback": True,
            "_disable_config": True,
        }


__all__ = [
    "ParseConfig",
    "RenderConfig",
]
