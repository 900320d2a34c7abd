"""Content records consumed by the page renderers."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class InvalidRecordError(ValueError):
    """Raised when an article record is missing data a card cannot omit."""


@dc.dataclass(frozen=True, slots=True)
class Author:
    """Byline shown on an article card."""

    name: str
    avatar: str


@dc.dataclass(frozen=True, slots=True)
class ArticleRecord:
    """One article as delivered by the content resource.

    Attributes
    ----------
    title : str
        Headline rendered at the top of the card.
    author : Author
        Author name and avatar image reference.
    published_at : datetime.datetime
        Publication timestamp; formatted with the host locale when rendered.
    body : str
        Summary paragraph.
    tags : tuple[str, ...]
        Tags in source order; duplicates are kept.
    reading_time : int
        Estimated reading time in minutes.
    link : str | None
        Target of the card's action link; ``None`` falls back to a placeholder.
    """

    title: str
    author: Author
    published_at: dt.datetime
    body: str
    tags: tuple[str, ...]
    reading_time: int
    link: str | None = None


@dc.dataclass(frozen=True, slots=True)
class NavEntry:
    """A navigation label and the target it links to."""

    label: str
    target: str


def nav_entries(mapping: cabc.Mapping[str, str]) -> list[NavEntry]:
    """Return the mapping's items as entries, in the mapping's iteration order."""
    return [
        NavEntry(label=str(label), target=str(target))
        for label, target in mapping.items()
    ]


__all__ = [
    "ArticleRecord",
    "Author",
    "InvalidRecordError",
    "NavEntry",
    "nav_entries",
]
