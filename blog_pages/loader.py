r"""Fetch and decode the article resource for the page's content section.

:class:`ContentLoader` performs exactly one fetch per :meth:`~ContentLoader.load`
call and reports the outcome as a value: :class:`LoadSuccess` with the decoded
records or :class:`LoadFailure` with a reason. Transport errors, non-2xx
responses, and malformed payloads never escape as exceptions. There is no
retry and no caching; callers wanting either layer it on top.

Transports only need an async ``fetch_resource(resource_ref)`` method returning
a :class:`TransportResponse`. Two are provided: :class:`HttpTransport` (httpx)
and :class:`FileTransport` (local files).

Example
-------
>>> import asyncio
>>> from blog_pages.loader import ContentLoader, transport_for
>>> loader = ContentLoader(transport_for("data/articles.json"))
>>> result = asyncio.run(loader.load("data/articles.json"))  # doctest: +SKIP
>>> type(result).__name__  # doctest: +SKIP
'LoadSuccess'
"""

from __future__ import annotations

import asyncio
import collections.abc as cabc
import dataclasses as dc
import logging
import typing as typ
from http import HTTPStatus
from pathlib import Path

import httpx
import msgspec

from ._constants import USER_AGENT
from .models import ArticleRecord, Author
from .timestamps import parse_timestamp

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_S = 10.0


class TransportError(RuntimeError):
    """Raised by a transport when the resource could not be reached."""


class ArticleDecodeError(ValueError):
    """Raised when a response body is not a valid article document."""


@dc.dataclass(frozen=True, slots=True)
class TransportResponse:
    """Status code and raw body returned by a transport."""

    status: int
    body: bytes


@dc.dataclass(frozen=True, slots=True)
class LoadSuccess:
    """Decoded records from a successful load."""

    records: tuple[ArticleRecord, ...]


@dc.dataclass(frozen=True, slots=True)
class LoadFailure:
    """A load that produced no records, with a human-readable reason."""

    reason: str


LoadResult = LoadSuccess | LoadFailure


class Transport(typ.Protocol):
    """Anything able to fetch a resource reference asynchronously."""

    async def fetch_resource(self, resource_ref: str) -> TransportResponse:
        """Return the status and body for ``resource_ref``."""
        ...


Decoder = cabc.Callable[[bytes], cabc.Sequence[ArticleRecord]]


class HttpTransport:
    """Fetch resources over HTTP(S) with httpx.

    A client passed in by the caller is reused and left open; otherwise a
    short-lived client is created per request.
    """

    def __init__(
        self,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT_S,
        user_agent: str = USER_AGENT,
    ) -> None:
        self._client = client
        self.timeout = timeout
        self._headers = {"User-Agent": user_agent, "Accept": "application/json"}

    async def fetch_resource(self, resource_ref: str) -> TransportResponse:
        """GET ``resource_ref`` and return its status and body.

        Raises
        ------
        TransportError
            If the request could not be completed (DNS, connect, timeout...).
        """
        try:
            if self._client is not None:
                response = await self._get(self._client, resource_ref)
            else:
                async with httpx.AsyncClient(
                    timeout=httpx.Timeout(self.timeout), follow_redirects=True
                ) as client:
                    response = await self._get(client, resource_ref)
        except httpx.HTTPError as exc:
            msg = f"Failed to reach '{resource_ref}': {exc}"
            raise TransportError(msg) from exc
        return TransportResponse(status=response.status_code, body=response.content)

    async def _get(self, client: httpx.AsyncClient, url: str) -> httpx.Response:
        return await client.get(url, headers=self._headers)


class FileTransport:
    """Read resources from the local filesystem.

    Relative references resolve against ``base_dir`` (the working directory
    by default). A missing file is reported as HTTP 404 so callers see the same
    shape of failure as with the HTTP transport.
    """

    def __init__(self, base_dir: Path | None = None) -> None:
        self.base_dir = base_dir

    def resolve(self, resource_ref: str) -> Path:
        """Return the filesystem path for ``resource_ref``."""
        path = Path(resource_ref.removeprefix("file://")).expanduser()
        if not path.is_absolute() and self.base_dir is not None:
            path = self.base_dir / path
        return path

    async def fetch_resource(self, resource_ref: str) -> TransportResponse:
        """Read the referenced file in a worker thread."""
        path = self.resolve(resource_ref)
        try:
            body = await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError:
            return TransportResponse(status=HTTPStatus.NOT_FOUND.value, body=b"")
        except (OSError, ValueError) as exc:
            msg = f"Failed to read '{path}': {exc}"
            raise TransportError(msg) from exc
        return TransportResponse(status=HTTPStatus.OK.value, body=body)


def transport_for(
    resource_ref: str,
    *,
    base_dir: Path | None = None,
    timeout: float = DEFAULT_TIMEOUT_S,
) -> Transport:
    """Pick the HTTP transport for ``http(s)://`` references, files otherwise."""
    if resource_ref.startswith(("http://", "https://")):
        return HttpTransport(timeout=timeout)
    return FileTransport(base_dir)


class _AuthorPayload(msgspec.Struct):
    name: str
    avatar: str


class _ArticlePayload(msgspec.Struct, rename="camel"):
    title: str
    author: _AuthorPayload
    date: str
    content: str
    tags: list[str]
    reading_time: int
    link: str | None = None


class _ArticlesDocument(msgspec.Struct):
    articles: list[_ArticlePayload]


def decode_articles(body: bytes | str) -> list[ArticleRecord]:
    """Decode a ``{"articles": [...]}`` JSON document into records.

    Raises
    ------
    ArticleDecodeError
        If the JSON is malformed, does not match the article schema, or
        carries a date that cannot be parsed.
    """
    try:
        document = msgspec.json.decode(body, type=_ArticlesDocument)
    except msgspec.DecodeError as exc:
        msg = f"Article payload is invalid: {exc}"
        raise ArticleDecodeError(msg) from exc
    return [_to_record(index, article) for index, article in enumerate(document.articles)]


def _to_record(index: int, payload: _ArticlePayload) -> ArticleRecord:
    published_at = parse_timestamp(payload.date)
    if published_at is None:
        msg = f"Article #{index} has an unparseable date {payload.date!r}."
        raise ArticleDecodeError(msg)
    return ArticleRecord(
        title=payload.title,
        author=Author(name=payload.author.name, avatar=payload.author.avatar),
        published_at=published_at,
        body=payload.content,
        tags=tuple(payload.tags),
        reading_time=payload.reading_time,
        link=payload.link or None,
    )


class ContentLoader:
    """Single-attempt article loader returning a :data:`LoadResult`."""

    def __init__(self, transport: Transport, *, decoder: Decoder = decode_articles) -> None:
        """Bind the loader to a transport and a decoder.

        Parameters
        ----------
        transport : Transport
            Object exposing ``async fetch_resource(resource_ref)``.
        decoder : Callable[[bytes], Sequence[ArticleRecord]], optional
            Turns a response body into records; defaults to
            :func:`decode_articles`.
        """
        self._transport = transport
        self._decoder = decoder

    async def load(self, resource_ref: str) -> LoadResult:
        """Fetch and decode ``resource_ref`` exactly once."""
        logger.debug("Loading articles from %s", resource_ref)
        try:
            response = await self._transport.fetch_resource(resource_ref)
        except Exception as exc:  # noqa: BLE001 - any transport fault is a load failure
            logger.debug("Transport for %s raised %r", resource_ref, exc)
            return LoadFailure(str(exc) or type(exc).__name__)

        if not HTTPStatus.OK <= response.status < HTTPStatus.MULTIPLE_CHOICES:
            return LoadFailure(f"HTTP {response.status} from '{resource_ref}'")

        try:
            records = self._decoder(response.body)
        except (msgspec.DecodeError, ValueError) as exc:
            return LoadFailure(str(exc))

        logger.debug("Loaded %d articles from %s", len(records), resource_ref)
        return LoadSuccess(tuple(records))


__all__ = [
    "ArticleDecodeError",
    "ContentLoader",
    "Decoder",
    "FileTransport",
    "HttpTransport",
    "LoadFailure",
    "LoadResult",
    "LoadSuccess",
    "Transport",
    "TransportError",
    "TransportResponse",
    "decode_articles",
    "transport_for",
]
