"""Tests for loading the arena site configuration."""

from __future__ import annotations

import typing as typ

import pytest

from arena_pages.config import SiteConfigError, load_site_config

if typ.TYPE_CHECKING:
    from pathlib import Path


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "arena.yaml"
    path.write_text(body, encoding="utf-8")
    return path


def test_configured_arenas_resolve_against_content_root(tmp_path: Path) -> None:
    """Arena folders default to their key under the content root."""
    content_root = tmp_path / "arenas"
    config = load_site_config(
        _write_config(
            tmp_path,
            f"""
defaults:
  content_root: {content_root}
  output_dir: {tmp_path / "site"}
  pygments_style: friendly
  theme:
    site_name: Test Arena
arenas:
  10-nl2sql:
    title:
      zh: SQL语言智能生成
      en: NL2SQL
  custom:
    folder: elsewhere
""",
        )
    )

    arena = config.get_arena("10-nl2sql")
    assert arena.folder == content_root / "10-nl2sql", "expected the key as folder"
    assert arena.title == {"zh": "SQL语言智能生成", "en": "NL2SQL"}, "unexpected titles"
    assert config.get_arena("custom").folder == content_root / "elsewhere", (
        "expected an explicit folder relative to the content root"
    )
    assert config.pygments_style == "friendly", "expected the configured style"
    assert config.theme.site_name == "Test Arena", "expected the theme override"
    assert config.theme.page_title_suffix == "AI Arena", "expected the theme default"
    assert config.locales == ["zh", "en"], "expected both locales by default"
    assert config.sync is None, "expected no sync section"


def test_arenas_are_discovered_when_not_listed(tmp_path: Path) -> None:
    """Without an arenas section every content folder becomes an arena."""
    content_root = tmp_path / "arenas"
    for name in ("b-second", "a-first", ".hidden"):
        (content_root / name).mkdir(parents=True)
    (content_root / "notes.md").write_text("x", encoding="utf-8")

    config = load_site_config(
        _write_config(tmp_path, f"defaults:\n  content_root: {content_root}\n")
    )

    assert list(config.arenas) == ["a-first", "b-second"], (
        "expected visible directories in sorted order"
    )


def test_unknown_arena_lists_known_keys(tmp_path: Path) -> None:
    """Looking up an unknown arena names the configured ones."""
    config = load_site_config(_write_config(tmp_path, "arenas:\n  one:\n  two:\n"))

    with pytest.raises(KeyError, match="Known arenas: one, two"):
        config.get_arena("three")


def test_sync_section(tmp_path: Path) -> None:
    """The sync section derives its output directory from the workbook."""
    config = load_site_config(
        _write_config(
            tmp_path,
            "arenas:\n  one:\nsync:\n  workbook: data/List.xlsx\n  header_rows: 1\n",
        )
    )

    assert config.sync is not None, "expected a sync section"
    assert config.sync.output_dir.as_posix() == "data", "expected the workbook folder"
    assert config.sync.data_module.as_posix() == "lib/data.ts", "expected default module"
    assert config.sync.header_rows == 1, "expected the configured header rows"
    assert config.sync.en_markdown.as_posix() == "data/page.en.md", (
        "expected listings beside the workbook"
    )


@pytest.mark.parametrize(
    ("body", "message"),
    [
        ("arenas:\n  one:\nsync:\n  output_dir: out\n", "missing 'workbook'"),
        (
            "arenas:\n  one:\nsync:\n  workbook: a.xlsx\n  header_rows: -1\n",
            "non-negative integer",
        ),
        ("defaults:\n  locales: [zh, fr]\narenas:\n  one:\n", "Unsupported locales: fr"),
        ("arenas:\n  - one\n", "'arenas' must be a mapping"),
    ],
)
def test_invalid_configuration(tmp_path: Path, body: str, message: str) -> None:
    """Invalid sections raise SiteConfigError with a helpful message."""
    with pytest.raises(SiteConfigError, match=message):
        load_site_config(_write_config(tmp_path, body))


def test_missing_content_root_without_arenas(tmp_path: Path) -> None:
    """Discovery fails when the content root does not exist."""
    path = _write_config(tmp_path, f"defaults:\n  content_root: {tmp_path / 'nope'}\n")

    with pytest.raises(SiteConfigError, match="does not exist"):
        load_site_config(path)


def test_missing_file(tmp_path: Path) -> None:
    """A missing configuration file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="not found"):
        load_site_config(tmp_path / "absent.yaml")
