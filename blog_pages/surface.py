"""HTML rendering surface for :class:`~blog_pages.nodes.RenderNode` trees.

The page pipeline never produces markup itself; this module is the single
place where a node tree becomes HTML. Text and attribute values are escaped
here with MarkupSafe, the same escaping Jinja2 applies when autoescape is on.

Example
-------
>>> from blog_pages.nodes import make_element, make_text
>>> from blog_pages.surface import HtmlSurface
>>> node = make_element("a", {"href": "/?q=1&r=2"}, [make_text("Tom & Jerry")])
>>> str(HtmlSurface().materialize(node))
'<a href="/?q=1&amp;r=2">Tom &amp; Jerry</a>'
"""

from __future__ import annotations

import typing as typ

from markupsafe import Markup, escape

from .nodes import NodeKind

if typ.TYPE_CHECKING:
    from .nodes import RenderNode

VOID_ELEMENTS = frozenset({"br", "hr", "img", "input", "link", "meta"})


class HtmlSurface:
    """Convert node trees into escaped HTML fragments."""

    def materialize(self, node: RenderNode) -> Markup:
        """Return the HTML for ``node``.

        Children are materialized before their parent, each node exactly once,
        and concatenated in their stored order.
        """
        if node.kind is NodeKind.TEXT:
            return escape(node.text or "")
        inner = Markup("").join(self.materialize(child) for child in node.children)
        tag = node.tag or ""
        open_tag = Markup("<{tag}{attrs}>").format(
            tag=Markup(tag), attrs=self._format_attributes(node.attributes)
        )
        if tag.lower() in VOID_ELEMENTS and not node.children:
            return open_tag
        return open_tag + inner + Markup("</{tag}>").format(tag=Markup(tag))

    @staticmethod
    def _format_attributes(attributes: typ.Mapping[str, str]) -> Markup:
        rendered = Markup("")
        for name, value in attributes.items():
            rendered += Markup(' {name}="{value}"').format(name=escape(name), value=value)
        return rendered


__all__ = ["VOID_ELEMENTS", "HtmlSurface"]
