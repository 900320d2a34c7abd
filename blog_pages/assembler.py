"""Assemble the full page tree from static links and loaded articles.

:class:`PageAssembler` renders the header and footer straight from the
configured link mappings, then awaits the :class:`~blog_pages.loader.ContentLoader`
for the article cards. The root always holds the header first and the footer
last; the ``main`` content section sits between them only when the articles
loaded. A failed load is handed to the diagnostics sink and the page still
renders with working navigation.

Example
-------
>>> import asyncio
>>> from blog_pages.assembler import PageAssembler
>>> from blog_pages.loader import ContentLoader, FileTransport
>>> assembler = PageAssembler(
...     navigation={"Home": "/home"},
...     social_links={"GitHub": "https://github.com"},
...     loader=ContentLoader(FileTransport()),
...     resource_ref="data/articles.json",
... )
>>> root = asyncio.run(assembler.assemble())  # doctest: +SKIP
>>> [child.tag for child in root.children]  # doctest: +SKIP
['header', 'main', 'footer']
"""

from __future__ import annotations

import datetime as dt
import enum
import logging
import typing as typ

from ._constants import ROOT_ID
from .cards import render_card
from .loader import LoadFailure, LoadSuccess
from .models import InvalidRecordError
from .navigation import render_footer, render_header
from .nodes import make_element

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .loader import ContentLoader
    from .models import ArticleRecord
    from .nodes import RenderNode

logger = logging.getLogger(__name__)

FailureSink = typ.Callable[[str], None]


class AssemblyState(enum.Enum):
    """Lifecycle of a single :meth:`PageAssembler.assemble` call."""

    IDLE = "idle"
    LOADING = "loading"
    RENDERED = "rendered"
    ERRORED = "errored"


def log_failure(reason: str) -> None:
    """Default diagnostics sink: log the failure reason at error level."""
    logger.error("Error loading data: %s", reason)


class PageAssembler:
    """Build one page tree from configuration and a content loader.

    An assembler is single-use: it moves from ``IDLE`` to ``LOADING`` when
    :meth:`assemble` starts and ends in ``RENDERED`` or ``ERRORED``. Separate
    assemblers may run concurrently and share the (read-only) link mappings.
    """

    def __init__(
        self,
        navigation: cabc.Mapping[str, str],
        social_links: cabc.Mapping[str, str],
        loader: ContentLoader,
        resource_ref: str,
        *,
        report_failure: FailureSink = log_failure,
        copyright_year: int | None = None,
    ) -> None:
        """Configure the assembler.

        Parameters
        ----------
        navigation : Mapping[str, str]
            Header navigation, label to target, in rendering order.
        social_links : Mapping[str, str]
            Footer links, label to target, in rendering order.
        loader : ContentLoader
            Loader used for the article resource.
        resource_ref : str
            Reference handed to the loader (URL or path).
        report_failure : Callable[[str], None], optional
            Diagnostics sink called once with the reason when loading fails.
            Defaults to :func:`log_failure`.
        copyright_year : int, optional
            Year shown in the footer; defaults to the current year.
        """
        self.navigation = navigation
        self.social_links = social_links
        self.loader = loader
        self.resource_ref = resource_ref
        self.report_failure = report_failure
        self.copyright_year = copyright_year
        self.state = AssemblyState.IDLE
        self.failure_reason: str | None = None
        self.skipped_records: list[ArticleRecord] = []

    async def assemble(self) -> RenderNode:
        """Render the page and return its root node.

        Raises
        ------
        RuntimeError
            If this assembler has already been used.
        """
        if self.state is not AssemblyState.IDLE:
            msg = f"PageAssembler already used (state: {self.state.value})."
            raise RuntimeError(msg)
        self.state = AssemblyState.LOADING

        year = self.copyright_year or dt.datetime.now(dt.UTC).year
        header = render_header(self.navigation)
        footer = render_footer(self.social_links, year)

        result = await self.loader.load(self.resource_ref)
        match result:
            case LoadSuccess(records=records):
                content = self._render_content(records)
                self.state = AssemblyState.RENDERED
                return make_element("div", {"id": ROOT_ID}, [header, content, footer])
            case LoadFailure(reason=reason):
                self.failure_reason = reason
                self.state = AssemblyState.ERRORED
                self.report_failure(reason)
                return make_element("div", {"id": ROOT_ID}, [header, footer])
            case _:  # pragma: no cover - exhaustive over LoadResult
                msg = f"Unexpected load result: {result!r}"
                raise TypeError(msg)

    def _render_content(self, records: cabc.Iterable[ArticleRecord]) -> RenderNode:
        cards: list[RenderNode] = []
        for record in records:
            try:
                cards.append(render_card(record))
            except InvalidRecordError as exc:
                logger.warning("Skipping article card: %s", exc)
                self.skipped_records.append(record)
        return make_element("main", {"class": "cards-container"}, cards)


__all__ = ["AssemblyState", "FailureSink", "PageAssembler", "log_failure"]
