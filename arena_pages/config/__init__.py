"""Load and validate the arena site configuration YAML.

This subpackage parses the project's ``arena.yaml`` file, merges global
defaults with per-arena overrides, resolves content folders, and produces
typed dataclasses (:class:`SiteConfig`, :class:`ArenaConfig`,
:class:`SyncConfig`) consumed by the page generator and the arena list sync.

Examples
--------
>>> from pathlib import Path
>>> from arena_pages.config import load_site_config
>>> site = load_site_config(Path("config/arena.yaml"))  # doctest: +SKIP
>>> site.get_arena("10-nl2sql").folder  # doctest: +SKIP
PosixPath('Content/Arena/All Arenas/10-nl2sql')
"""

from .loader import load_site_config
from .models import ArenaConfig, SiteConfig, SiteConfigError, SyncConfig, ThemeConfig

__all__ = [
    "ArenaConfig",
    "SiteConfig",
    "SiteConfigError",
    "SyncConfig",
    "ThemeConfig",
    "load_site_config",
]
