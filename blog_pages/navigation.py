"""Navigation list rendering for the page header and footer.

Header navigation and footer social links share one renderer; only the
mapping differs. Entries render in the mapping's iteration order and are
never sorted or deduplicated.
"""

from __future__ import annotations

import typing as typ

from ._constants import COPYRIGHT_TEMPLATE
from .models import nav_entries
from .nodes import make_element, text_element

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .nodes import RenderNode


def render_nav(entries: cabc.Mapping[str, str]) -> RenderNode:
    """Render ``entries`` as a ``ul`` of ``li > a`` items.

    Parameters
    ----------
    entries : Mapping[str, str]
        Ordered label to target mapping. An empty mapping yields a list node
        with no children.

    Returns
    -------
    RenderNode
        A list node with one item per entry, in iteration order.
    """
    items = [
        make_element("li", children=[text_element("a", entry.label, {"href": entry.target})])
        for entry in nav_entries(entries)
    ]
    return make_element("ul", children=items)


def render_header(entries: cabc.Mapping[str, str]) -> RenderNode:
    """Wrap the navigation list in ``header > nav``."""
    return make_element("header", children=[make_element("nav", children=[render_nav(entries)])])


def render_footer(entries: cabc.Mapping[str, str], year: int) -> RenderNode:
    """Render the footer: a copyright line followed by the link list."""
    return make_element(
        "footer",
        children=[
            text_element("p", COPYRIGHT_TEMPLATE.format(year=year)),
            render_nav(entries),
        ],
    )


__all__ = ["render_footer", "render_header", "render_nav"]
