"""Utilities for generating AI Arena detail pages and syncing the arena list.

This package exposes the CLI entry points used by ``arena-pages`` to parse
arena content documents, render detail pages, and regenerate the arena list
outputs from the spreadsheet.

Exports
-------
- ``app``: Cyclopts application with the ``generate``, ``sync``, and
  ``inspect`` subcommands.
- ``main``: Convenience function that invokes the app.

Examples
--------
>>> from arena_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
