"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _build_link_mapping,
    _coerce_positive_float,
    _optional_str,
    _optional_year,
)
from .models import SiteConfig, SiteConfigError

DEFAULT_OUTPUT = Path("public/index.html")


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the blog page.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/pages.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with navigation and social links in file order.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required fields are missing or invalid (for example, no title or
        no article source).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from blog_pages.config import load_site_config
    >>> config = load_site_config(Path("config/pages.yaml"))  # doctest: +SKIP
    >>> list(config.navigation)  # doctest: +SKIP
    ['Home', 'About', 'Contact', 'Articles']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    match raw.get("site"):
        case dict() as site:
            pass
        case None:
            msg = "Configuration requires a 'site' section."
            raise SiteConfigError(msg)
        case _:
            msg = "'site' must be a mapping."
            raise SiteConfigError(msg)

    title = _optional_str(site.get("title"))
    if not title:
        msg = "Site configuration requires a 'title'."
        raise SiteConfigError(msg)
    articles_source = _optional_str(site.get("articles"))
    if not articles_source:
        msg = "Site configuration requires an 'articles' source."
        raise SiteConfigError(msg)

    base_dir = path.resolve().parent
    return SiteConfig(
        title=title,
        output=Path(site.get("output") or DEFAULT_OUTPUT),
        articles_source=articles_source,
        navigation=_build_link_mapping("navigation", raw.get("navigation")),
        social_links=_build_link_mapping("social_links", raw.get("social_links")),
        base_dir=base_dir,
        fetch_timeout=_coerce_positive_float(
            "fetch_timeout", site.get("fetch_timeout"), 10.0
        ),
        copyright_year=_optional_year(site.get("copyright_year")),
        lang=_optional_str(site.get("lang")) or "en",
    )


__all__ = ["load_site_config"]
