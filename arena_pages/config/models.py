"""Typed dataclasses describing the arena site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class ThemeConfig:
    """Visual theming applied to generated arena pages."""

    site_name: str = "Real World AI Arena"
    page_title_suffix: str = "AI Arena"


@dc.dataclass(slots=True)
class ArenaConfig:
    """A single arena whose detail page is generated.

    Attributes
    ----------
    key : str
        Identifier used on the command line and in the output filename.
    folder : Path
        Directory holding the arena's ``<tab>.<locale>.md`` documents.
    title : dict[str, str]
        Optional per-locale titles used when no arena list record matches.
    """

    key: str
    folder: Path
    title: dict[str, str] = dc.field(default_factory=dict)


@dc.dataclass(slots=True)
class SyncConfig:
    """Paths used by the arena list sync."""

    workbook: Path
    output_dir: Path
    data_module: Path
    content_root: Path
    header_rows: int = 2

    @property
    def raw_markdown(self) -> Path:
        """Return the path of the raw Chinese listing."""
        return self.output_dir / "page.raw.md"

    @property
    def zh_markdown(self) -> Path:
        """Return the path of the Chinese listing."""
        return self.output_dir / "page.zh.md"

    @property
    def en_markdown(self) -> Path:
        """Return the path of the English listing."""
        return self.output_dir / "page.en.md"


@dc.dataclass(slots=True)
class SiteConfig:
    """Arena definitions alongside shared defaults."""

    arenas: dict[str, ArenaConfig]
    content_root: Path
    output_dir: Path = Path("public")
    locales: list[str] = dc.field(default_factory=lambda: ["zh", "en"])
    pygments_style: str = "monokai"
    theme: ThemeConfig = dc.field(default_factory=ThemeConfig)
    sync: SyncConfig | None = None

    def get_arena(self, key: str) -> ArenaConfig:
        """Return the arena configured under ``key``.

        Raises
        ------
        KeyError
            If no arena uses ``key``; the message lists the known keys.
        """
        try:
            return self.arenas[key]
        except KeyError as exc:
            available = ", ".join(sorted(self.arenas))
            msg = f"Unknown arena '{key}'. Known arenas: {available}"
            raise KeyError(msg) from exc


__all__ = ["ArenaConfig", "SiteConfig", "SiteConfigError", "SyncConfig", "ThemeConfig"]
