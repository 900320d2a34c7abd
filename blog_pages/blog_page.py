"""Blog page rendering pipeline.

This module turns a :class:`~blog_pages.config.SiteConfig` into the static
``public/index.html`` artefact. It wires the configuration model, the
:class:`~blog_pages.assembler.PageAssembler`, the HTML surface, and the Jinja
document template. The main entry point is ``BlogPageBuilder``.

Typical usage mirrors the build pipeline:

>>> import asyncio
>>> from pathlib import Path
>>> from blog_pages.config import load_site_config
>>> builder = BlogPageBuilder(load_site_config(Path("config/pages.yaml")))  # doctest: +SKIP
>>> result = asyncio.run(builder.run())  # doctest: +SKIP
>>> print(result.output_path)  # doctest: +SKIP
public/index.html

The builder expects templates to reside under ``blog_pages/templates`` unless a
custom directory is provided. Side effects include fetching the article
resource, reading template files, and writing the rendered HTML to disk.
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .assembler import AssemblyState, FailureSink, PageAssembler, log_failure
from .loader import ContentLoader, transport_for
from .surface import HtmlSurface

if typ.TYPE_CHECKING:
    from .config import SiteConfig
    from .nodes import RenderNode


@dc.dataclass(slots=True)
class BuildResult:
    """Outcome of one page build."""

    output_path: Path
    state: AssemblyState
    failure_reason: str | None = None

    @property
    def content_loaded(self) -> bool:
        """Return ``True`` when the article cards made it onto the page."""
        return self.state is AssemblyState.RENDERED


class BlogPageBuilder:
    """Render the blog page from structured config data."""

    def __init__(
        self,
        site: SiteConfig,
        *,
        templates_dir: Path | None = None,
        loader: ContentLoader | None = None,
        report_failure: FailureSink = log_failure,
        output: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        site : SiteConfig
            Parsed configuration providing the title, link tables, article
            source, and output path.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``blog_pages/templates``.
        loader : ContentLoader, optional
            Loader for the article resource; by default one is built with the
            transport matching ``site.articles_source``.
        report_failure : Callable[[str], None], optional
            Diagnostics sink for content load failures.
        output : Path, optional
            Override for ``site.output``.
        """
        self.site = site
        self.output = output or site.output
        self.loader = loader or ContentLoader(
            transport_for(
                site.articles_source,
                base_dir=site.base_dir,
                timeout=site.fetch_timeout,
            )
        )
        self.report_failure = report_failure
        self.surface = HtmlSurface()
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("blog_page.jinja")

    async def render(self) -> tuple[str, PageAssembler]:
        """Assemble the page and return the HTML with the finished assembler."""
        assembler = PageAssembler(
            self.site.navigation,
            self.site.social_links,
            self.loader,
            self.site.articles_source,
            report_failure=self.report_failure,
            copyright_year=self.site.copyright_year,
        )
        root: RenderNode = await assembler.assemble()
        context = {
            "site": self.site,
            "body": self.surface.materialize(root),
            "generated_at": dt.datetime.now(dt.UTC),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html, assembler

    async def run(self) -> BuildResult:
        """Render and write the page HTML.

        Notes
        -----
        Parent directories are created as needed and the file is written as
        UTF-8. A failed article load still writes the page (header and footer
        only); the outcome is reported through the returned
        :class:`BuildResult`. Filesystem errors propagate.
        """
        html, assembler = await self.render()
        output_path = self.output
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        return BuildResult(
            output_path=output_path,
            state=assembler.state,
            failure_reason=assembler.failure_reason,
        )


__all__ = ["BlogPageBuilder", "BuildResult"]
