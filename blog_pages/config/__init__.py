"""Load and validate the blog page configuration YAML.

This subpackage parses the project's ``pages.yaml`` file and produces a
:class:`SiteConfig` carrying the page title, output path, article source, and
the two ordered link tables (header navigation and footer social links). The
primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from blog_pages.config import load_site_config
>>> site = load_site_config(Path("config/pages.yaml"))  # doctest: +SKIP
>>> site.social_links  # doctest: +SKIP
{'Facebook': 'https://facebook.com', 'Twitter': 'https://twitter.com', ...}
"""

from .loader import load_site_config
from .models import SiteConfig, SiteConfigError

__all__ = ["SiteConfig", "SiteConfigError", "load_site_config"]
