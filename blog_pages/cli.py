"""Cyclopts CLI entrypoint for generating the blog page.

The ``pages`` console script defined here renders the static blog page from
``config/pages.yaml``: header navigation and footer links come straight from
the configuration, while article cards are built from the configured article
resource (a local JSON file or an HTTP URL). ``pages articles`` loads the same
resource and lists the records, which is handy for checking a feed before a
build.

Examples
--------
Generate the page for the default configuration:

>>> from blog_pages.cli import main
>>> main()  # doctest: +SKIP

Render into a custom file from a remote article feed:

>>> from blog_pages.cli import app
>>> app(
...     ["generate", "--output", "dist/index.html",
...      "--articles", "https://example.com/articles.json"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import asyncio
import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .blog_page import BlogPageBuilder
from .config import load_site_config
from .loader import ContentLoader, LoadFailure, LoadSuccess, transport_for

DEFAULT_CONFIG = Path("config/pages.yaml")
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _configure_logging(*, verbose: bool) -> None:
    """Route library logging to stderr at INFO (or DEBUG when verbose)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        force=True,
    )


def _resolve_source_override(source: str) -> str:
    """Return ``source`` with relative paths anchored at the working directory."""
    if source.startswith(("http://", "https://")):
        return source
    return str(Path(source.removeprefix("file://")).expanduser().resolve())


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Generate the static blog page from configuration and articles.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the output file", env_var="INPUT_OUTPUT"),
    ] = None,
    articles: typ.Annotated[
        str | None,
        Parameter(
            help="Override the article source (URL, or path relative to the cwd)",
            env_var="INPUT_ARTICLES",
        ),
    ] = None,
    strict: typ.Annotated[
        bool, Parameter(help="Exit non-zero when the articles fail to load")
    ] = False,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Generate the blog page for the requested site configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the ``pages.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output : Path or None, optional
        Write the page here instead of the configured output path.
    articles : str or None, optional
        Replace the configured article source; relative paths resolve
        against the current working directory.
    strict : bool, optional
        Raise ``SystemExit(1)`` after writing the page if the content section
        could not be loaded.
    verbose : bool, optional
        Log at DEBUG level.

    Returns
    -------
    None
        Writes the rendered page and prints its path.
    """
    _configure_logging(verbose=verbose)
    site_config = load_site_config(config)
    if articles:
        site_config = dc.replace(
            site_config, articles_source=_resolve_source_override(articles)
        )

    result = asyncio.run(BlogPageBuilder(site_config, output=output).run())
    print(f"wrote {_format_path(result.output_path)}")
    if strict and not result.content_loaded:
        raise SystemExit(1)


@app.command(name="articles", help="Load the article source and list its records.")
def list_articles(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    articles: typ.Annotated[
        str | None,
        Parameter(
            help="Override the article source (URL, or path relative to the cwd)",
            env_var="INPUT_ARTICLES",
        ),
    ] = None,
) -> None:
    """Print one line per article, or the load failure reason.

    Raises
    ------
    SystemExit
        With status 1 when the article source cannot be loaded.
    """
    _configure_logging(verbose=False)
    site_config = load_site_config(config)
    source = (
        _resolve_source_override(articles) if articles else site_config.articles_source
    )
    loader = ContentLoader(
        transport_for(
            source, base_dir=site_config.base_dir, timeout=site_config.fetch_timeout
        )
    )
    match asyncio.run(loader.load(source)):
        case LoadSuccess(records=records):
            for record in records:
                print(
                    f"{record.title} by {record.author.name} "
                    f"({record.reading_time} min read)"
                )
        case LoadFailure(reason=reason):
            print(f"failed to load {source}: {reason}")
            raise SystemExit(1)


def main() -> None:
    """Invoke the Cyclopts application that powers the `pages` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
