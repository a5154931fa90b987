"""rstclass renderers.

Renderers convert typed document trees into output formats.

Available Renderers:
- HtmlRenderer: Renders trees to HTML with ``rst-*`` class annotations

Thread Safety:
Rendering is pure recursion with no shared mutable state.
Safe for concurrent use from multiple threads.

"""

from rstclass.renderers.html import HtmlRenderer, render_node

__all__ = ["HtmlRenderer", "render_node"]
