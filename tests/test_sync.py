"""Tests for the arena list sync from workbook to generated files."""

from __future__ import annotations

import datetime as dt
import typing as typ

import pytest

from arena_pages.config import SyncConfig
from arena_pages.sync import ArenaSyncError, read_arena_records, sync_arena_list
from arena_pages.sync.writers import format_timestamp, ts_string

if typ.TYPE_CHECKING:
    from pathlib import Path

WorkbookFactory = typ.Callable[..., "Path"]

GENERATED_AT = dt.datetime(2026, 1, 2, 3, 4, 5, tzinfo=dt.UTC)


def _sync_config(tmp_path: Path, workbook: Path) -> SyncConfig:
    content_root = tmp_path / "content"
    (content_root / "1-intelligent-research-system").mkdir(parents=True)
    return SyncConfig(
        workbook=workbook,
        output_dir=tmp_path / "out",
        data_module=tmp_path / "lib" / "data.ts",
        content_root=content_root,
    )


def test_reader_skips_placeholder_and_non_numeric_rows(
    make_workbook: WorkbookFactory,
) -> None:
    """Only rows with a numeric id that are not placeholders become arenas."""
    records = read_arena_records(make_workbook())

    assert [record.title_zh for record in records] == [
        "智能调研报告生成",
        "SQL语言智能生成",
    ], "expected the two real arenas in sheet order"
    first = records[0]
    assert first.id == "智能调研报告生成", f"unexpected id {first.id!r}"
    assert first.status == "verified", "expected verified status"
    assert records[1].status == "in-arena", "expected in-arena status"
    assert first.industry_en == "Finance & Trade, Information Technology", (
        "expected translated industries"
    )
    assert records[1].challenger == "", "expected empty challenger cell as blank"


def test_sync_writes_all_outputs(tmp_path: Path, make_workbook: WorkbookFactory) -> None:
    """A sync writes three listings and the data module."""
    config = _sync_config(tmp_path, make_workbook())

    result = sync_arena_list(config, generated_at=GENERATED_AT)

    assert result.arena_count == 2, f"expected two arenas, got {result.arena_count}"
    assert result.written == [
        config.raw_markdown,
        config.zh_markdown,
        config.en_markdown,
        config.data_module,
    ], "expected outputs in write order"
    assert all(path.is_file() for path in result.written), "expected files on disk"
    assert config.zh_markdown.read_text(encoding="utf-8") == (
        config.raw_markdown.read_text(encoding="utf-8")
    ), "expected the Chinese listing to match the raw listing"


def test_raw_listing_keeps_source_values(
    tmp_path: Path, make_workbook: WorkbookFactory
) -> None:
    """The Chinese listing shows raw values with a placeholder for no challenger."""
    config = _sync_config(tmp_path, make_workbook())
    sync_arena_list(config, generated_at=GENERATED_AT)

    raw = config.raw_markdown.read_text(encoding="utf-8")
    assert "> This file is auto-generated from List of Arenas.xlsx" in raw, (
        "expected the source workbook name"
    )
    assert "> Last updated: 2026-01-02T03:04:05.000Z" in raw, "expected the timestamp"
    assert "### 1. 智能调研报告生成" in raw, "expected numbered arena headings"
    assert "**攻擂中**: 寻找攻擂者" in raw, "expected the raw challenger"
    assert "**攻擂中**: 暂无" in raw, "expected the empty challenger placeholder"
    assert "- 速度: 较快" in raw, "expected raw metric values"


def test_english_listing_translates_fields(
    tmp_path: Path, make_workbook: WorkbookFactory
) -> None:
    """The English listing translates titles, statuses, and metric values."""
    config = _sync_config(tmp_path, make_workbook())
    sync_arena_list(config, generated_at=GENERATED_AT)

    english = config.en_markdown.read_text(encoding="utf-8")
    assert (
        "### 2. Universal Practice of SQL Language Intelligent Generation (NL2SQL)"
        in english
    ), "expected the English title"
    assert (
        "**ID**: `universal-practice-of-sql-language-intelligent-generation-nl2sql`"
        in english
    ), "expected an ASCII slug id"
    assert "**Verification Status**: In Verification" in english, (
        "expected translated status"
    )
    assert "**Challenger**: None" in english, "expected None for a blank challenger"
    assert "**Challenger**: Looking for Challengers" in english, (
        "expected the translated placeholder"
    )
    assert "- Speed: Relatively Fast" in english, "expected translated metric values"
    assert "**Champion**: Private Deployment: Dify(v1.2)" in english, (
        "expected translated champion"
    )


def test_data_module_records_folder_and_content_flag(
    tmp_path: Path, make_workbook: WorkbookFactory
) -> None:
    """The data module carries folder ids and content availability."""
    config = _sync_config(tmp_path, make_workbook())
    sync_arena_list(config, generated_at=GENERATED_AT)

    module = config.data_module.read_text(encoding="utf-8")
    assert "folderId: '1-intelligent-research-system'," in module, (
        "expected the mapped folder id"
    )
    assert "id: 'sql语言智能生成'," in module, "expected the CJK slug id"
    assert module.count("hasContent: true") == 1, "expected one arena with content"
    assert module.count("hasContent: false") == 1, "expected one arena without content"
    assert "export function getArenaByFolderId" in module, "expected lookup helpers"


def test_data_module_escapes_quotes(
    tmp_path: Path, make_workbook: WorkbookFactory
) -> None:
    """Single quotes in translated text are escaped for TypeScript."""
    row = (5, "儿童教育趣味应用", "私部署版：Dify", "已验证", "一周搭建一个儿童教育应用Demo")
    config = _sync_config(tmp_path, make_workbook(rows=[row]))
    sync_arena_list(config, generated_at=GENERATED_AT)

    module = config.data_module.read_text(encoding="utf-8")
    assert "highlightsEn: 'Build a children\\'s education app demo in one week'," in (
        module
    ), "expected the apostrophe escaped"


def test_data_module_escapes_line_breaks(
    tmp_path: Path, make_workbook: WorkbookFactory
) -> None:
    """Multi-line cells stay on one line of the generated module."""
    row = (2, "智能研究系统", "云端版：Coze", "已验证", "第一行\n第二行\u2028第三行")
    config = _sync_config(tmp_path, make_workbook(rows=[row]))
    sync_arena_list(config, generated_at=GENERATED_AT)

    lines = config.data_module.read_text(encoding="utf-8").split("\n")
    expected = "    highlights: '第一行\\n第二行\\u2028第三行',"
    assert expected in lines, "expected line terminators escaped in the literal"


def test_empty_arena_list_is_an_error(
    tmp_path: Path, make_workbook: WorkbookFactory
) -> None:
    """A workbook without arena rows aborts the sync."""
    workbook = make_workbook(rows=[(13, "敬请期待"), ("备注", "not an arena")])
    config = _sync_config(tmp_path, workbook)

    with pytest.raises(ArenaSyncError, match="No arenas found"):
        sync_arena_list(config, generated_at=GENERATED_AT)
    assert not config.raw_markdown.exists(), "expected nothing written"


def test_missing_workbook_raises(tmp_path: Path) -> None:
    """A missing workbook is reported before anything is written."""
    config = _sync_config(tmp_path, tmp_path / "missing.xlsx")

    with pytest.raises(FileNotFoundError, match="missing.xlsx"):
        sync_arena_list(config)


def test_helpers() -> None:
    """Timestamps end in Z and TypeScript strings escape backslashes first."""
    assert format_timestamp(GENERATED_AT) == "2026-01-02T03:04:05.000Z", (
        "expected millisecond precision"
    )
    assert ts_string("a\\b'c") == "a\\\\b\\'c", "expected escaped string"
    assert ts_string("x\r\ny\u2029") == "x\\r\\ny\\u2029", (
        "expected line terminators escaped"
    )
