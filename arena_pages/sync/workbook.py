"""Read arena rows from the arena list workbook."""

from __future__ import annotations

import logging
import typing as typ

from openpyxl import load_workbook

from .records import ArenaRecord, build_record, is_arena_row

if typ.TYPE_CHECKING:
    from pathlib import Path

LOGGER = logging.getLogger(__name__)

# A title row supplies the column keys and a second row repeats them in
# Chinese; arena rows follow.
DEFAULT_HEADER_ROWS = 2


def read_sheet_rows(
    path: Path, *, header_rows: int = DEFAULT_HEADER_ROWS
) -> list[tuple[object, ...]]:
    """Return the non-blank rows of the first worksheet after the header rows.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    """
    if not path.exists():
        msg = f"Arena list workbook '{path}' not found."
        raise FileNotFoundError(msg)

    workbook = load_workbook(path, read_only=True, data_only=True)
    try:
        worksheet = workbook.worksheets[0]
        rows = [
            tuple(row)
            for row in worksheet.iter_rows(values_only=True)
            if any(cell is not None and str(cell).strip() for cell in row)
        ]
    finally:
        workbook.close()
    LOGGER.info("found %d rows in %s", len(rows), path)
    return rows[header_rows:]


def read_arena_records(
    path: Path,
    *,
    content_root: Path | None = None,
    header_rows: int = DEFAULT_HEADER_ROWS,
) -> list[ArenaRecord]:
    """Return translated records for every arena row of the workbook.

    Rows without a numeric id and "coming soon" placeholder rows are skipped.
    """
    records = [
        build_record(row, content_root)
        for row in read_sheet_rows(path, header_rows=header_rows)
        if is_arena_row(row)
    ]
    LOGGER.info("parsed %d arenas", len(records))
    return records


__all__ = ["DEFAULT_HEADER_ROWS", "read_arena_records", "read_sheet_rows"]
