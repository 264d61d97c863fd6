"""Load arena site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _build_arena_config,
    _build_locales,
    _build_theme_config,
    _discover_arenas,
)
from .models import ArenaConfig, SiteConfig, SiteConfigError, SyncConfig

DEFAULT_CONTENT_ROOT = "Content/Arena/All Arenas"


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing arenas and sync paths.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/arena.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with arena definitions, shared defaults, and the
        optional sync section.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a section or field is invalid, or no arena can be found.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from arena_pages.config import load_site_config
    >>> config = load_site_config(Path("config/arena.yaml"))  # doctest: +SKIP
    >>> sorted(config.arenas)[:1]  # doctest: +SKIP
    ['1-intelligent-research-system']
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
    defaults = raw.get("defaults", {}) or {}

    content_root = Path(defaults.get("content_root", DEFAULT_CONTENT_ROOT))
    output_dir = Path(defaults.get("output_dir", "public"))
    locales = _build_locales(defaults.get("locales"))
    pygments_style = defaults.get("pygments_style", "monokai")
    theme = _build_theme_config(defaults.get("theme", {}) or {})

    arenas = _build_arenas(raw.get("arenas"), content_root)
    if not arenas:
        msg = "No arenas defined in configuration or found under the content root."
        raise SiteConfigError(msg)

    return SiteConfig(
        arenas=arenas,
        content_root=content_root,
        output_dir=output_dir,
        locales=locales,
        pygments_style=pygments_style,
        theme=theme,
        sync=_build_sync_config(raw.get("sync"), content_root),
    )


def _build_arenas(payload: object, content_root: Path) -> dict[str, ArenaConfig]:
    """Return configured arenas, or discover them when none are listed."""
    if not payload:
        return _discover_arenas(content_root)
    if not isinstance(payload, dict):
        msg = "'arenas' must be a mapping of arena keys to settings."
        raise SiteConfigError(msg)

    arenas: dict[str, ArenaConfig] = {}
    for key, entry in payload.items():
        match entry:
            case dict():
                arenas[str(key)] = _build_arena_config(str(key), entry, content_root)
            case None:
                arenas[str(key)] = _build_arena_config(str(key), {}, content_root)
            case _:
                continue
    return arenas


def _build_sync_config(payload: object, content_root: Path) -> SyncConfig | None:
    """Build the sync section, requiring the workbook path when present."""
    if not payload:
        return None
    if not isinstance(payload, dict):
        msg = "'sync' must be a mapping."
        raise SiteConfigError(msg)
    workbook = payload.get("workbook")
    if not workbook:
        msg = "Sync configuration is missing 'workbook'."
        raise SiteConfigError(msg)

    header_rows = payload.get("header_rows", 2)
    if not isinstance(header_rows, int) or isinstance(header_rows, bool) or header_rows < 0:
        msg = "'header_rows' must be a non-negative integer."
        raise SiteConfigError(msg)

    workbook_path = Path(workbook)
    output_dir = Path(payload.get("output_dir") or workbook_path.parent)
    return SyncConfig(
        workbook=workbook_path,
        output_dir=output_dir,
        data_module=Path(payload.get("data_module", "lib/data.ts")),
        content_root=Path(payload.get("content_root") or content_root),
        header_rows=header_rows,
    )


__all__ = ["DEFAULT_CONTENT_ROOT", "load_site_config"]
