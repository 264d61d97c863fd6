"""Run the arena list sync from workbook to generated files."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import logging
import typing as typ

from .workbook import read_arena_records
from .writers import ArenaListWriter

if typ.TYPE_CHECKING:
    from pathlib import Path

    from arena_pages.config import SyncConfig

    from .records import ArenaRecord

LOGGER = logging.getLogger(__name__)


class ArenaSyncError(RuntimeError):
    """Raised when the arena list yields nothing to write."""


@dc.dataclass(slots=True)
class SyncResult:
    """Outcome of a sync run."""

    arenas: list[ArenaRecord]
    written: list[Path]

    @property
    def arena_count(self) -> int:
        """Return the number of arenas written."""
        return len(self.arenas)


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    LOGGER.info("updated %s", path)
    return path


def sync_arena_list(
    config: SyncConfig,
    *,
    writer: ArenaListWriter | None = None,
    generated_at: dt.datetime | None = None,
) -> SyncResult:
    """Read the arena list workbook and write the listings and data module.

    Parameters
    ----------
    config : SyncConfig
        Workbook, output, and content paths.
    writer : ArenaListWriter, optional
        Template renderer; defaults to one using the packaged templates.
    generated_at : datetime, optional
        Timestamp recorded in the outputs; defaults to the current UTC time.

    Returns
    -------
    SyncResult
        The translated records and the written paths, in write order:
        ``page.raw.md``, ``page.zh.md``, ``page.en.md``, and the data module.

    Raises
    ------
    FileNotFoundError
        If the workbook does not exist.
    ArenaSyncError
        If the workbook contains no arena rows.
    """
    records = read_arena_records(
        config.workbook,
        content_root=config.content_root,
        header_rows=config.header_rows,
    )
    if not records:
        msg = f"No arenas found in '{config.workbook}'."
        raise ArenaSyncError(msg)

    writer = writer or ArenaListWriter(source_name=config.workbook.name)
    moment = generated_at or dt.datetime.now(dt.UTC)
    raw = writer.raw_markdown(records, moment)
    written = [
        _write(config.raw_markdown, raw),
        _write(config.zh_markdown, raw),
        _write(config.en_markdown, writer.english_markdown(records, moment)),
        _write(config.data_module, writer.data_module(records, moment)),
    ]
    return SyncResult(arenas=records, written=written)


__all__ = ["ArenaSyncError", "SyncResult", "sync_arena_list"]
