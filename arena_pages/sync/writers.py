"""Render arena list outputs from Jinja templates."""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .translations import (
    ascii_slug,
    polish_english_title,
    translate_metric_value,
    translate_verification_status,
)

if typ.TYPE_CHECKING:
    from .records import ArenaRecord

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


TS_ESCAPES = str.maketrans(
    {
        "\\": "\\\\",
        "'": "\\'",
        "\n": "\\n",
        "\r": "\\r",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


def ts_string(value: str) -> str:
    """Escape ``value`` for a single-quoted TypeScript string literal.

    Backslashes, quotes, and line terminators are escaped so a multi-line
    spreadsheet cell stays on one line of the generated module.
    """
    return value.translate(TS_ESCAPES)


def format_timestamp(moment: dt.datetime) -> str:
    """Return an ISO 8601 UTC timestamp with millisecond precision and ``Z``."""
    utc = moment.astimezone(dt.UTC)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ArenaListWriter:
    """Render the markdown listings and the data module for arena records."""

    def __init__(
        self,
        *,
        templates_dir: Path | None = None,
        source_name: str = "List of Arenas.xlsx",
    ) -> None:
        self.source_name = source_name
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self.env.filters.update(
            ts=ts_string,
            ascii_slug=ascii_slug,
            polish_title=polish_english_title,
            metric_en=translate_metric_value,
            verification_en=translate_verification_status,
        )

    def _render(
        self, template: str, arenas: list[ArenaRecord], generated_at: dt.datetime
    ) -> str:
        return self.env.get_template(template).render(
            arenas=arenas,
            source_name=self.source_name,
            generated_at=format_timestamp(generated_at),
        )

    def raw_markdown(self, arenas: list[ArenaRecord], generated_at: dt.datetime) -> str:
        """Return the Chinese listing used for ``page.raw.md`` and ``page.zh.md``."""
        return self._render("page_raw.md.jinja", arenas, generated_at)

    def english_markdown(
        self, arenas: list[ArenaRecord], generated_at: dt.datetime
    ) -> str:
        """Return the English listing with translated labels and values."""
        return self._render("page_en.md.jinja", arenas, generated_at)

    def data_module(self, arenas: list[ArenaRecord], generated_at: dt.datetime) -> str:
        """Return the TypeScript module exporting the arena array and helpers."""
        return self._render("data.ts.jinja", arenas, generated_at)


__all__ = ["ArenaListWriter", "format_timestamp", "ts_string"]
