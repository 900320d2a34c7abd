"""Article card rendering.

Turns one :class:`~blog_pages.models.ArticleRecord` into an ``article`` node
with a fixed child layout: title, meta info (author block and publish date),
body, tags, reading time, and a "Read More" action link.

Example
-------
>>> import datetime as dt
>>> from blog_pages.cards import render_card
>>> from blog_pages.models import ArticleRecord, Author
>>> record = ArticleRecord(
...     title="Maps and Sets",
...     author=Author(name="Ada", avatar="/img/ada.png"),
...     published_at=dt.datetime(2024, 1, 15),
...     body="Keyed collections in practice.",
...     tags=("js", "collections"),
...     reading_time=5,
... )
>>> card = render_card(record)
>>> [child.attributes.get("class") for child in card.children]
[None, 'meta-info', None, 'tags', 'reading-time', 'read-more-button']
"""

from __future__ import annotations

import typing as typ

from ._constants import (
    LOCALE_DATE_FORMAT,
    PLACEHOLDER_HREF,
    READ_MORE_LABEL,
    READING_TIME_TEMPLATE,
)
from .models import InvalidRecordError
from .nodes import make_element, text_element

if typ.TYPE_CHECKING:
    import datetime as dt

    from .models import ArticleRecord
    from .nodes import RenderNode


def render_card(record: ArticleRecord) -> RenderNode:
    """Render a single article card.

    Parameters
    ----------
    record : ArticleRecord
        Article to render.

    Returns
    -------
    RenderNode
        An ``article.blog-card`` element.

    Raises
    ------
    InvalidRecordError
        If the record has an empty title or author name; a blank card would
        hide the data problem.
    """
    if not record.title.strip():
        msg = "Article record has an empty title."
        raise InvalidRecordError(msg)
    if not record.author.name.strip():
        msg = f"Article '{record.title}' has an empty author name."
        raise InvalidRecordError(msg)

    return make_element(
        "article",
        {"class": "blog-card"},
        [
            text_element("h2", record.title),
            _render_meta_info(record),
            text_element("p", record.body),
            _render_tags(record.tags),
            text_element(
                "span",
                READING_TIME_TEMPLATE.format(minutes=record.reading_time),
                {"class": "reading-time"},
            ),
            text_element(
                "a",
                READ_MORE_LABEL,
                {"class": "read-more-button", "href": record.link or PLACEHOLDER_HREF},
            ),
        ],
    )


def format_publish_date(value: dt.datetime) -> str:
    """Format ``value`` using the host locale's date representation."""
    return value.strftime(LOCALE_DATE_FORMAT)


def _render_meta_info(record: ArticleRecord) -> RenderNode:
    author = record.author
    author_info = make_element(
        "div",
        {"class": "author-info"},
        [
            make_element(
                "img",
                {"class": "author-avatar", "src": author.avatar, "alt": author.name},
            ),
            text_element("span", author.name, {"class": "author-name"}),
        ],
    )
    published = text_element(
        "span", format_publish_date(record.published_at), {"class": "publish-date"}
    )
    return make_element("div", {"class": "meta-info"}, [author_info, published])


def _render_tags(tags: typ.Iterable[str]) -> RenderNode:
    return make_element(
        "div",
        {"class": "tags"},
        [text_element("span", tag, {"class": "tag"}) for tag in tags],
    )


__all__ = ["format_publish_date", "render_card"]
