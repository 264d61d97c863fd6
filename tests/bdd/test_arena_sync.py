"""Behaviour tests for the arena list sync.

The scenarios build an arena list workbook with openpyxl, run the sync into a
temporary directory, and check the generated listings and data module.
"""

from __future__ import annotations

import datetime as dt
import re
import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from arena_pages.config import SyncConfig
from arena_pages.sync import ArenaSyncError, sync_arena_list

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "arena_sync.feature"
scenarios(FEATURE_FILE)

WorkbookFactory = typ.Callable[..., Path]

ARENA_FLAG_PATTERN = re.compile(
    r"folderId: '([^']*)',.*?hasContent: (true|false),", re.DOTALL
)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _store_config(
    tmp_path: Path, scenario_state: dict[str, object], workbook: Path
) -> None:
    content_root = tmp_path / "All Arenas"
    (content_root / "10-nl2sql").mkdir(parents=True)
    scenario_state["config"] = SyncConfig(
        workbook=workbook,
        output_dir=tmp_path / "Arena",
        data_module=tmp_path / "lib" / "data.ts",
        content_root=content_root,
    )


@given("an arena list workbook with two arenas and a placeholder row")
def given_populated_workbook(
    tmp_path: Path,
    make_workbook: WorkbookFactory,
    scenario_state: dict[str, object],
) -> None:
    """Write the default workbook with two arenas and skipped rows."""
    _store_config(tmp_path, scenario_state, make_workbook())


@given("an arena list workbook with only placeholder rows")
def given_placeholder_workbook(
    tmp_path: Path,
    make_workbook: WorkbookFactory,
    scenario_state: dict[str, object],
) -> None:
    """Write a workbook whose only rows are placeholders."""
    workbook = make_workbook(rows=[(13, "敬请期待"), (14, "更多擂台敬请期待")])
    _store_config(tmp_path, scenario_state, workbook)


@when("I sync the arena list")
def when_sync(scenario_state: dict[str, object]) -> None:
    """Run the sync, recording either the result or the raised error."""
    config: SyncConfig = scenario_state["config"]  # type: ignore[assignment]
    try:
        scenario_state["result"] = sync_arena_list(
            config, generated_at=dt.datetime(2026, 3, 1, tzinfo=dt.UTC)
        )
    except ArenaSyncError as exc:
        scenario_state["error"] = exc


def _read(scenario_state: dict[str, object], attribute: str) -> str:
    config: SyncConfig = scenario_state["config"]  # type: ignore[assignment]
    path: Path = getattr(config, attribute)
    return path.read_text(encoding="utf-8")


@then(parsers.parse("{count:d} arenas are written"))
def then_arena_count(scenario_state: dict[str, object], count: int) -> None:
    """Verify the number of synced arenas."""
    result = scenario_state.get("result")
    assert result is not None, f"expected a sync result, got {scenario_state!r}"
    assert result.arena_count == count, (  # type: ignore[attr-defined]
        f"expected {count} arenas"
    )


@then("the English listing shows translated metrics")
def then_english_metrics(scenario_state: dict[str, object]) -> None:
    """Verify metric values are translated in the English listing."""
    english = _read(scenario_state, "en_markdown")
    assert "- Quality: Very High" in english, "expected translated quality"
    assert "- Cost: Medium" in english, "expected translated cost"
    assert "敬请期待" not in english, "expected placeholder rows skipped"


@then("the data module marks which arenas have content")
def then_content_flags(scenario_state: dict[str, object]) -> None:
    """Verify only arenas with a content folder are flagged."""
    module = _read(scenario_state, "data_module")
    listing = module.split("export const arenas")[1].split("\n];")[0]
    flags = {
        match.group(1): match.group(2) == "true"
        for match in ARENA_FLAG_PATTERN.finditer(listing)
    }
    assert flags == {"1-intelligent-research-system": False, "10-nl2sql": True}, (
        f"unexpected content flags {flags!r}"
    )


@then(parsers.parse('the sync fails with "{message}"'))
def then_sync_fails(scenario_state: dict[str, object], message: str) -> None:
    """Verify the sync raised an error naming the problem."""
    error = scenario_state.get("error")
    assert error is not None, "expected the sync to fail"
    assert message in str(error), f"expected {message!r} in {error!s}"


@then("no listing is written")
def then_nothing_written(scenario_state: dict[str, object]) -> None:
    """Verify no output files exist after a failed sync."""
    config: SyncConfig = scenario_state["config"]  # type: ignore[assignment]
    assert not config.raw_markdown.exists(), "expected no raw listing"
    assert not config.data_module.exists(), "expected no data module"
