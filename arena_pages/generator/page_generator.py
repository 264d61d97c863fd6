"""High-level orchestration for arena detail page generation.

This module reads each arena's per-locale content documents, parses them with
the matching grammar, turns the section trees into view models, and renders
one themed HTML page per arena and locale. It exposes
:class:`ArenaPageGenerator`, which consumes a
:class:`~arena_pages.config.SiteConfig` and, when the arena list workbook is
configured, uses the matching arena record for the page hero.

Example
-------
>>> from pathlib import Path
>>> from arena_pages.config import load_site_config
>>> from arena_pages.generator import ArenaPageGenerator
>>> config = load_site_config(Path("config/arena.yaml"))  # doctest: +SKIP
>>> ArenaPageGenerator(config).run("10-nl2sql")  # doctest: +SKIP
[PosixPath('public/zh/arena/10-nl2sql.html'), PosixPath('public/en/arena/10-nl2sql.html')]
"""

from __future__ import annotations

import datetime as dt
import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from arena_pages._constants import (
    CONTENT_FILENAME_TEMPLATE,
    PAGE_PATH_TEMPLATE,
    PAGE_TEMPLATE,
    TAB_KEYS,
)
from arena_pages.generator.models import ArenaPageModel, TabKind, TabView
from arena_pages.generator.renderer import ArenaContentRenderer
from arena_pages.parsing import parse_phases, parse_sections, parse_steps
from arena_pages.sync.workbook import read_arena_records
from arena_pages.views import (
    build_configuration_fallback,
    build_hero,
    build_phase_views,
    build_step_views,
    render_overview,
)
from arena_pages.views.items import localized

if typ.TYPE_CHECKING:
    from arena_pages.config import ArenaConfig, SiteConfig
    from arena_pages.sync.records import ArenaRecord

LOGGER = logging.getLogger(__name__)

TAB_LABELS: dict[str, tuple[str, str]] = {
    "overview": ("概览", "Overview"),
    "implementation": ("实施指南", "Implementation"),
    "tech-configuration": ("技术配置", "Technical Configuration"),
}


class ArenaPageGenerator:
    """Parse arena content documents and emit one HTML page per locale."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
        records: list[ArenaRecord] | None = None,
    ) -> None:
        """Initialize the generator with configuration and template context.

        Parameters
        ----------
        site_config : SiteConfig
            Arena definitions, locales, and theming.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        output_dir : Path, optional
            Override for the HTML output directory.
        records : list[ArenaRecord], optional
            Arena list records used for the hero; read from the configured
            workbook when omitted.
        """
        self.site = site_config
        self.output_dir = output_dir or site_config.output_dir
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.renderer = ArenaContentRenderer(site_config.pygments_style)
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "html.jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template(PAGE_TEMPLATE)
        loaded = records if records is not None else self._load_records()
        self.records = {record.folder_id: record for record in loaded}

    def run(self, arena_key: str | None = None) -> list[Path]:
        """Render the requested arena, or every arena, for each locale.

        Parameters
        ----------
        arena_key : str, optional
            Key of a single arena to render; all arenas when ``None``.

        Returns
        -------
        list[Path]
            Paths of the written HTML pages, grouped by arena.

        Raises
        ------
        KeyError
            If ``arena_key`` names no configured arena.
        """
        if arena_key is not None:
            arenas = [self.site.get_arena(arena_key)]
        else:
            arenas = list(self.site.arenas.values())

        generated_at = dt.datetime.now(dt.UTC)
        written: list[Path] = []
        for arena in arenas:
            for locale in self.site.locales:
                model = self.build_page_model(arena, locale)
                html = self.template.render(
                    page=model,
                    theme=self.site.theme,
                    pygments_css=self.renderer.stylesheet,
                    generated_at=generated_at,
                )
                output_path = self.output_dir / PAGE_PATH_TEMPLATE.format(
                    locale=locale, folder=arena.folder.name
                )
                output_path.parent.mkdir(parents=True, exist_ok=True)
                output_path.write_text(html, encoding="utf-8")
                written.append(output_path)
        return written

    def build_page_model(self, arena: ArenaConfig, locale: str) -> ArenaPageModel:
        """Return the page model for ``arena`` in ``locale``."""
        record = self.records.get(arena.folder.name)
        title = self._resolve_title(arena, record, locale)
        tabs = [
            self._build_tab(arena, typ.cast("TabKind", tab), locale) for tab in TAB_KEYS
        ]
        return ArenaPageModel(
            key=arena.key,
            locale=locale,
            title=title,
            html_title=f"{title} | {self.site.theme.page_title_suffix}",
            hero=build_hero(record, locale) if record is not None else None,
            tabs=tabs,
        )

    def _build_tab(self, arena: ArenaConfig, tab: TabKind, locale: str) -> TabView:
        """Parse one tab document and build its views."""
        zh_label, en_label = TAB_LABELS[tab]
        view = TabView(
            key=tab,
            label=localized(locale, zh_label, en_label),
            has_content=False,
            empty_note=localized(locale, "暂无内容", "No content available yet."),
        )
        text = self._read_tab(arena, tab, locale)
        if text is None:
            return view

        view.has_content = True
        match tab:
            case "overview":
                view.overview = render_overview(parse_sections(text), locale)
            case "implementation":
                view.entries = build_phase_views(parse_phases(text))
            case "tech-configuration":
                steps = parse_steps(text)
                if steps:
                    view.entries = build_step_views(steps, self.renderer)
                else:
                    LOGGER.warning(
                        "no configuration steps found for %s (%s); showing raw content",
                        arena.key,
                        locale,
                    )
                    view.fallback = build_configuration_fallback(
                        text, locale, self.renderer
                    )
        return view

    @staticmethod
    def _read_tab(arena: ArenaConfig, tab: str, locale: str) -> str | None:
        """Return the tab document text, or None when it does not exist."""
        path = arena.folder / CONTENT_FILENAME_TEMPLATE.format(tab=tab, locale=locale)
        if not path.is_file():
            LOGGER.debug("missing %s", path)
            return None
        return path.read_text(encoding="utf-8")

    @staticmethod
    def _resolve_title(
        arena: ArenaConfig, record: ArenaRecord | None, locale: str
    ) -> str:
        """Prefer the arena list title, then the configured title, then the key."""
        if record is not None:
            return record.title(locale)
        return arena.title.get(locale) or arena.title.get("zh") or arena.key

    def _load_records(self) -> list[ArenaRecord]:
        """Read arena records from the configured workbook, if any."""
        sync = self.site.sync
        if sync is None:
            return []
        try:
            return read_arena_records(
                sync.workbook,
                content_root=sync.content_root,
                header_rows=sync.header_rows,
            )
        except FileNotFoundError:
            LOGGER.warning("arena list %s not found; pages render without hero", sync.workbook)
            return []


__all__ = ["TAB_LABELS", "ArenaPageGenerator"]
