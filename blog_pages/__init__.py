"""Utilities for generating the static blog page.

This package assembles a page tree from two ordered link tables (header
navigation and footer social links) and an article feed loaded at build time,
then renders it to HTML. It exposes the CLI entry points used by
``uv run pages``.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from blog_pages import main
>>> main()  # doctest: +SKIP
>>> from blog_pages import app
>>> app(["generate", "--strict"])  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
