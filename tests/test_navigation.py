"""Unit tests for navigation, header, and footer rendering."""

from __future__ import annotations

import pytest

from blog_pages.models import NavEntry, nav_entries
from blog_pages.navigation import render_footer, render_header, render_nav
from blog_pages.nodes import NodeKind


def _links(node) -> list[tuple[str, str]]:  # noqa: ANN001 - RenderNode helper
    pairs = []
    for item in node.children:
        assert item.tag == "li", f"expected li items, got {item.tag!r}"
        (anchor,) = item.children
        pairs.append((anchor.text_content, anchor.attributes["href"]))
    return pairs


def test_render_nav_home_and_about() -> None:
    """Two entries yield a two-item list in mapping order."""
    node = render_nav({"Home": "/home", "About": "/about"})
    assert node.kind is NodeKind.LIST
    assert node.tag == "ul"
    assert _links(node) == [("Home", "/home"), ("About", "/about")], (
        f"unexpected nav links {_links(node)!r}"
    )


@pytest.mark.parametrize(
    "entries",
    [
        {"Zebra": "/z", "Alpha": "/a", "Middle": "/m"},
        {f"Item {n}": f"/{n}" for n in range(12, 0, -1)},
        {"Same": "/same", "Also same": "/same"},
    ],
)
def test_render_nav_preserves_order(entries: dict[str, str]) -> None:
    """Entries are neither sorted nor deduplicated."""
    node = render_nav(entries)
    assert len(node.children) == len(entries)
    assert _links(node) == list(entries.items())


def test_render_nav_empty_mapping() -> None:
    """An empty mapping renders an empty list rather than failing."""
    node = render_nav({})
    assert node.tag == "ul"
    assert node.children == ()


def test_render_nav_is_idempotent() -> None:
    """Same input, structurally equal but distinct trees."""
    entries = {"Home": "/home", "About": "/about"}
    first, second = render_nav(entries), render_nav(entries)
    assert first == second
    assert first is not second


def test_render_header_wraps_nav() -> None:
    """The header holds a nav element around the list."""
    header = render_header({"Home": "/home"})
    assert header.tag == "header"
    (nav,) = header.children
    assert nav.tag == "nav"
    assert _links(nav.children[0]) == [("Home", "/home")]


def test_render_footer_has_copyright_then_links() -> None:
    """The footer starts with the copyright line."""
    footer = render_footer({"Facebook": "https://facebook.com"}, 2024)
    copyright_line, links = footer.children
    assert copyright_line.text_content == "Copyright 2024"
    assert _links(links) == [("Facebook", "https://facebook.com")]


def test_nav_entries_follow_iteration_order() -> None:
    """``nav_entries`` mirrors ``mapping.items()``."""
    assert nav_entries({"b": "/b", "a": "/a"}) == [
        NavEntry("b", "/b"),
        NavEntry("a", "/a"),
    ]
