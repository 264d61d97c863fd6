"""Utility helpers shared by the arena configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import ArenaConfig, SiteConfigError, ThemeConfig

SUPPORTED_LOCALES: tuple[str, ...] = ("zh", "en")


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _build_theme_config(payload: typ.Mapping[str, typ.Any]) -> ThemeConfig:
    """Build a ThemeConfig instance from the provided mapping payload."""
    base = ThemeConfig()
    return ThemeConfig(
        site_name=payload.get("site_name", base.site_name),
        page_title_suffix=payload.get("page_title_suffix", base.page_title_suffix),
    )


def _build_locales(value: object) -> list[str]:
    """Return the configured locales, rejecting ones without content tables."""
    match value:
        case None:
            return list(SUPPORTED_LOCALES)
        case str() as single:
            locales = [single]
        case list() as many:
            locales = [str(item).strip() for item in many if str(item).strip()]
        case _:
            msg = "'locales' must be a string or a list of strings."
            raise SiteConfigError(msg)
    unknown = [locale for locale in locales if locale not in SUPPORTED_LOCALES]
    if unknown:
        msg = f"Unsupported locales: {', '.join(unknown)}."
        raise SiteConfigError(msg)
    if not locales:
        msg = "At least one locale must be configured."
        raise SiteConfigError(msg)
    return locales


def _build_title_map(value: object) -> dict[str, str]:
    """Normalise a title entry into a ``{locale: title}`` mapping."""
    match value:
        case None:
            return {}
        case str() as text:
            return dict.fromkeys(SUPPORTED_LOCALES, text)
        case dict() as mapping:
            titles: dict[str, str] = {}
            for locale, title in mapping.items():
                cleaned = _optional_str(title)
                if cleaned:
                    titles[str(locale)] = cleaned
            return titles
        case _:
            return {}


def _discover_arenas(content_root: Path) -> dict[str, ArenaConfig]:
    """Return one arena per sub-directory of ``content_root``, sorted by name."""
    if not content_root.is_dir():
        msg = f"Content root '{content_root}' does not exist."
        raise SiteConfigError(msg)
    return {
        child.name: ArenaConfig(key=child.name, folder=child)
        for child in sorted(content_root.iterdir())
        if child.is_dir() and not child.name.startswith(".")
    }


def _build_arena_config(
    key: str, payload: typ.Mapping[str, typ.Any], content_root: Path
) -> ArenaConfig:
    """Build an ArenaConfig, resolving its folder against ``content_root``."""
    folder = Path(payload.get("folder") or key)
    if not folder.is_absolute():
        folder = content_root / folder
    return ArenaConfig(key=key, folder=folder, title=_build_title_map(payload.get("title")))


__all__ = [
    "SUPPORTED_LOCALES",
    "_build_arena_config",
    "_build_locales",
    "_build_theme_config",
    "_build_title_map",
    "_discover_arenas",
    "_optional_str",
]
