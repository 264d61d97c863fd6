"""Sync the arena list spreadsheet into markdown listings and a data module.

The sync reads the first worksheet of the arena list workbook, translates each
arena row through static lookup tables, and writes ``page.raw.md``,
``page.zh.md``, ``page.en.md``, and a TypeScript data module. It is a one-shot
batch job: a missing workbook or an empty arena list aborts the run.
"""

from .records import ArenaMetrics, ArenaRecord, build_record
from .runner import ArenaSyncError, SyncResult, sync_arena_list
from .workbook import read_arena_records
from .writers import ArenaListWriter

__all__ = [
    "ArenaListWriter",
    "ArenaMetrics",
    "ArenaRecord",
    "ArenaSyncError",
    "SyncResult",
    "build_record",
    "read_arena_records",
    "sync_arena_list",
]
