"""Tests for the page assembler state machine."""

from __future__ import annotations

import asyncio
import typing as typ

import pytest

import blog_pages.assembler as assembler_module
from blog_pages.assembler import AssemblyState, PageAssembler
from blog_pages.loader import (
    ContentLoader,
    LoadFailure,
    LoadResult,
    LoadSuccess,
    TransportResponse,
)
from tests.conftest import StubLoader, build_record

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from pytest_mock import MockerFixture

    from blog_pages.models import ArticleRecord
    from blog_pages.nodes import RenderNode

NAVIGATION = {"Home": "/home", "About": "/about"}
SOCIAL_LINKS = {"Facebook": "https://facebook.com"}


def _assembler(loader: object, sink: list[str] | None = None) -> PageAssembler:
    reasons = sink if sink is not None else []
    return PageAssembler(
        NAVIGATION,
        SOCIAL_LINKS,
        loader,  # type: ignore[arg-type]
        "data/articles.json",
        report_failure=reasons.append,
        copyright_year=2024,
    )


def _walk(node: RenderNode) -> cabc.Iterator[RenderNode]:
    yield node
    for child in node.children:
        yield from _walk(child)


@pytest.mark.asyncio
async def test_success_renders_header_content_footer(
    success_loader: StubLoader, record_a: ArticleRecord, record_b: ArticleRecord
) -> None:
    """Successful loads produce header, content, footer with cards in order."""
    reasons: list[str] = []
    assembler = _assembler(success_loader, reasons)
    root = await assembler.assemble()

    assert root.attributes == {"id": "app"}
    assert [child.tag for child in root.children] == ["header", "main", "footer"], (
        f"unexpected root layout {[c.tag for c in root.children]!r}"
    )
    content = root.children[1]
    assert len(content.children) == 2
    titles = [card.children[0].text_content for card in content.children]
    assert titles == [record_a.title, record_b.title]
    assert assembler.state is AssemblyState.RENDERED
    assert reasons == [], "expected no failure reports on success"
    assert success_loader.calls == ["data/articles.json"]


@pytest.mark.asyncio
async def test_failure_renders_header_and_footer_only(failing_loader: StubLoader) -> None:
    """A failed load omits the content and reports the reason once."""
    reasons: list[str] = []
    assembler = _assembler(failing_loader, reasons)
    root = await assembler.assemble()

    assert [child.tag for child in root.children] == ["header", "footer"]
    assert reasons == ["network timeout"]
    assert assembler.state is AssemblyState.ERRORED
    assert assembler.failure_reason == "network timeout"


@pytest.mark.asyncio
async def test_empty_feed_renders_empty_content() -> None:
    """An empty record list still renders the content section."""
    root = await _assembler(StubLoader(LoadSuccess(()))).assemble()
    assert root.children[1].tag == "main"
    assert root.children[1].children == ()


@pytest.mark.asyncio
async def test_invalid_records_are_skipped() -> None:
    """Bad records are dropped without disturbing their siblings."""
    good_first = build_record(title="First")
    bad = build_record(title="")
    good_last = build_record(title="Last")
    assembler = _assembler(StubLoader(LoadSuccess((good_first, bad, good_last))))
    root = await assembler.assemble()

    titles = [card.children[0].text_content for card in root.children[1].children]
    assert titles == ["First", "Last"]
    assert assembler.skipped_records == [bad]
    assert assembler.state is AssemblyState.RENDERED


@pytest.mark.asyncio
async def test_header_and_footer_render_from_configuration(
    success_loader: StubLoader,
) -> None:
    """Header nav and footer links follow their mappings."""
    root = await _assembler(success_loader).assemble()
    header, _content, footer = root.children
    nav_list = header.children[0].children[0]
    assert [item.text_content for item in nav_list.children] == ["Home", "About"]
    assert footer.children[0].text_content == "Copyright 2024"
    assert [item.text_content for item in footer.children[1].children] == ["Facebook"]


@pytest.mark.asyncio
async def test_assembler_is_single_use(success_loader: StubLoader) -> None:
    """A second assemble() on the same instance is refused."""
    assembler = _assembler(success_loader)
    await assembler.assemble()
    with pytest.raises(RuntimeError, match="already used"):
        await assembler.assemble()
    assert success_loader.calls == ["data/articles.json"]


@pytest.mark.asyncio
async def test_header_and_footer_do_not_wait_for_the_loader(
    mocker: MockerFixture,
) -> None:
    """Static chrome is built before the fetch suspends."""
    release = asyncio.Event()
    header_spy = mocker.spy(assembler_module, "render_header")
    footer_spy = mocker.spy(assembler_module, "render_footer")
    seen: list[tuple[AssemblyState, int, int]] = []

    class BlockingLoader:
        async def load(self, resource_ref: str) -> LoadResult:
            seen.append((assembler.state, header_spy.call_count, footer_spy.call_count))
            await release.wait()
            return LoadFailure("late")

    assembler = _assembler(BlockingLoader())
    task = asyncio.create_task(assembler.assemble())
    await asyncio.sleep(0)
    assert assembler.state is AssemblyState.LOADING
    assert seen == [(AssemblyState.LOADING, 1, 1)], (
        f"expected header and footer rendered before the load started, got {seen!r}"
    )
    release.set()
    root = await task
    assert [child.tag for child in root.children] == ["header", "footer"]
    assert root.children[0] is header_spy.spy_return
    assert root.children[1] is footer_spy.spy_return


@pytest.mark.asyncio
async def test_raising_transport_still_renders_navigation() -> None:
    """A transport fault reaches the sink once and the page keeps its chrome."""

    class BrokenTransport:
        async def fetch_resource(self, resource_ref: str) -> TransportResponse:
            msg = "disk unplugged"
            raise OSError(msg)

    reasons: list[str] = []
    assembler = _assembler(ContentLoader(BrokenTransport()), reasons)
    root = await assembler.assemble()

    assert [child.tag for child in root.children] == ["header", "footer"]
    assert reasons == ["disk unplugged"], f"expected one report, got {reasons!r}"
    assert assembler.state is AssemblyState.ERRORED


@pytest.mark.asyncio
async def test_concurrent_assemblies_share_no_nodes(
    record_a: ArticleRecord, record_b: ArticleRecord
) -> None:
    """Concurrent calls produce independent trees."""

    class YieldingLoader(StubLoader):
        async def load(self, resource_ref: str) -> LoadResult:
            await asyncio.sleep(0)
            return await super().load(resource_ref)

    first = _assembler(YieldingLoader(LoadSuccess((record_a,))))
    second = _assembler(YieldingLoader(LoadSuccess((record_b, record_a))))
    root_one, root_two = await asyncio.gather(first.assemble(), second.assemble())

    ids_one = {id(node) for node in _walk(root_one)}
    ids_two = {id(node) for node in _walk(root_two)}
    assert ids_one.isdisjoint(ids_two), "expected no node shared between the two trees"
    assert len(root_one.children[1].children) == 1
    assert len(root_two.children[1].children) == 2
