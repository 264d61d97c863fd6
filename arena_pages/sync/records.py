"""Arena records built from spreadsheet rows."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from .translations import (
    arena_slug,
    english_title,
    folder_id,
    translate_category,
    translate_champion,
    translate_highlights,
    translate_industry,
)

VERIFIED_STATUS = "已验证"
PLACEHOLDER_MARKER = "敬请期待"

# Column positions in the arena list worksheet.
COLUMNS: tuple[str, ...] = (
    "number",
    "name",
    "champion",
    "verification_status",
    "highlights",
    "industry",
    "category",
    "speed",
    "quality",
    "security",
    "cost",
    "challenger",
)

ArenaStatus = typ.Literal["verified", "in-arena"]


@dc.dataclass(slots=True)
class ArenaMetrics:
    """Qualitative metric values exactly as entered in the spreadsheet."""

    speed: str = ""
    quality: str = ""
    security: str = ""
    cost: str = ""


@dc.dataclass(slots=True)
class ArenaRecord:
    """One translated arena list row.

    Attributes
    ----------
    id : str
        Lowercase slug of the Chinese title; CJK characters are kept.
    folder_id : str
        Name of the content folder holding the arena's detail documents.
    title_zh, title_en : str
        Chinese title and its English translation.
    category, industry : str
        Raw comma-separated lists from the spreadsheet.
    category_en, industry_en : str
        English translations of the lists.
    champion, challenger : str
        Raw champion and challenger labels.
    champion_en, challenger_en : str
        English translations of the labels.
    highlights, highlights_en : str
        One-sentence summary and its translation.
    metrics : ArenaMetrics
        Speed, quality, security, and cost ratings.
    status : str
        ``"verified"`` when the verification status reads 已验证, otherwise
        ``"in-arena"``.
    verification_status : str
        Raw verification status text.
    has_content : bool
        True when the content folder exists.
    """

    id: str
    folder_id: str
    title_zh: str
    title_en: str
    category: str
    category_en: str
    industry: str
    industry_en: str
    champion: str
    champion_en: str
    challenger: str
    challenger_en: str
    highlights: str
    highlights_en: str
    metrics: ArenaMetrics
    status: ArenaStatus
    verification_status: str
    has_content: bool = False

    def title(self, locale: str) -> str:
        """Return the title for ``locale``, falling back to Chinese."""
        return self.title_en if locale == "en" and self.title_en else self.title_zh


def cell_text(value: object) -> str:
    """Return a cell value as text, with empty cells as ``""``."""
    if value is None:
        return ""
    return str(value)


def is_arena_number(value: object) -> bool:
    """Return True when the id cell holds a number."""
    return isinstance(value, int | float) and not isinstance(value, bool)


def is_arena_row(row: typ.Sequence[object]) -> bool:
    """Return True for rows describing an arena.

    Rows need a numeric id and must not be the "coming soon" placeholder.
    """
    if not row or not is_arena_number(row[0]):
        return False
    name = row[1] if len(row) > 1 else None
    return not (isinstance(name, str) and PLACEHOLDER_MARKER in name)


def row_mapping(row: typ.Sequence[object]) -> dict[str, str]:
    """Map a worksheet row onto :data:`COLUMNS`, padding missing cells."""
    padded = list(row) + [None] * (len(COLUMNS) - len(row))
    return {column: cell_text(value) for column, value in zip(COLUMNS, padded, strict=False)}


def build_record(
    row: typ.Sequence[object], content_root: Path | None = None
) -> ArenaRecord:
    """Translate one arena row into an :class:`ArenaRecord`.

    Parameters
    ----------
    row : Sequence[object]
        Cell values in :data:`COLUMNS` order.
    content_root : Path, optional
        Directory holding one folder per arena; used to set
        ``has_content``.
    """
    fields = row_mapping(row)
    title_zh = fields["name"]
    folder = folder_id(title_zh)
    has_content = bool(
        content_root is not None and folder and (content_root / folder).is_dir()
    )
    status: ArenaStatus = (
        "verified" if fields["verification_status"] == VERIFIED_STATUS else "in-arena"
    )
    return ArenaRecord(
        id=arena_slug(title_zh),
        folder_id=folder,
        title_zh=title_zh,
        title_en=english_title(title_zh),
        category=fields["category"],
        category_en=translate_category(fields["category"]),
        industry=fields["industry"],
        industry_en=translate_industry(fields["industry"]),
        champion=fields["champion"],
        champion_en=translate_champion(fields["champion"]),
        challenger=fields["challenger"],
        challenger_en=translate_champion(fields["challenger"]),
        highlights=fields["highlights"],
        highlights_en=translate_highlights(fields["highlights"]),
        metrics=ArenaMetrics(
            speed=fields["speed"],
            quality=fields["quality"],
            security=fields["security"],
            cost=fields["cost"],
        ),
        status=status,
        verification_status=fields["verification_status"],
        has_content=has_content,
    )


__all__ = [
    "COLUMNS",
    "ArenaMetrics",
    "ArenaRecord",
    "build_record",
    "cell_text",
    "is_arena_number",
    "is_arena_row",
    "row_mapping",
]
