"""Shared fixtures for the blog_pages test-suite."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import datetime as dt
import json
import typing as typ

import pytest

from blog_pages.loader import LoadFailure, LoadResult, LoadSuccess
from blog_pages.models import ArticleRecord, Author


def build_record(**overrides: typ.Any) -> ArticleRecord:  # noqa: ANN401 - test helper
    """Return a valid ArticleRecord, replacing any field given in ``overrides``."""
    record = ArticleRecord(
        title="Keyed Collections",
        author=Author(name="Ayse", avatar="/img/ayse.png"),
        published_at=dt.datetime(2024, 3, 2, tzinfo=dt.UTC),
        body="Ordered keys and fast membership checks.",
        tags=("javascript", "collections"),
        reading_time=6,
        link="/articles/keyed-collections.html",
    )
    return dc.replace(record, **overrides)


def article_payload(**overrides: typ.Any) -> dict[str, typ.Any]:  # noqa: ANN401
    """Return one article in the wire format of the JSON feed."""
    payload: dict[str, typ.Any] = {
        "title": "Keyed Collections",
        "author": {"name": "Ayse", "avatar": "/img/ayse.png"},
        "date": "2024-03-02",
        "content": "Ordered keys and fast membership checks.",
        "tags": ["javascript", "collections"],
        "readingTime": 6,
    }
    payload.update(overrides)
    return payload


def feed_bytes(articles: cabc.Iterable[dict[str, typ.Any]]) -> bytes:
    """Encode ``articles`` as a feed document."""
    return json.dumps({"articles": list(articles)}).encode("utf-8")


class StubLoader:
    """ContentLoader stand-in returning a fixed result and counting calls."""

    def __init__(self, result: LoadResult) -> None:
        self.result = result
        self.calls: list[str] = []

    async def load(self, resource_ref: str) -> LoadResult:
        self.calls.append(resource_ref)
        return self.result


@pytest.fixture
def record_a() -> ArticleRecord:
    """First article of the end-to-end scenarios."""
    return build_record(title="Record A", tags=("maps",))


@pytest.fixture
def record_b() -> ArticleRecord:
    """Second article of the end-to-end scenarios."""
    return build_record(title="Record B", link=None)


@pytest.fixture
def success_loader(record_a: ArticleRecord, record_b: ArticleRecord) -> StubLoader:
    """Loader that succeeds with ``[record_a, record_b]``."""
    return StubLoader(LoadSuccess((record_a, record_b)))


@pytest.fixture
def failing_loader() -> StubLoader:
    """Loader that fails with a network timeout."""
    return StubLoader(LoadFailure("network timeout"))
