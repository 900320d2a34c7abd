"""Typed dataclasses describing blog page configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path  # noqa: TC003 - used for runtime type metadata


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteConfig:
    """A fully resolved page definition sourced from YAML config.

    Attributes
    ----------
    title : str
        Document title placed in the page ``<title>``.
    output : Path
        Where the rendered HTML is written.
    articles_source : str
        URL or filesystem path of the article JSON document.
    navigation : dict[str, str]
        Header navigation, label to target, in configuration order.
    social_links : dict[str, str]
        Footer links, label to target, in configuration order.
    base_dir : Path
        Directory relative article paths resolve against (the config's folder).
    fetch_timeout : float
        Per-request timeout in seconds for HTTP article sources.
    copyright_year : int | None
        Year printed in the footer; ``None`` uses the current year.
    lang : str
        Value of the document's ``lang`` attribute.
    """

    title: str
    output: Path
    articles_source: str
    navigation: dict[str, str]
    social_links: dict[str, str]
    base_dir: Path
    fetch_timeout: float = 10.0
    copyright_year: int | None = None
    lang: str = "en"

    @property
    def is_remote_source(self) -> bool:
        """Return ``True`` when articles are fetched over HTTP(S)."""
        return self.articles_source.startswith(("http://", "https://"))


__all__ = ["SiteConfig", "SiteConfigError"]
