"""Tests for the overview renderer selector and its section builders."""

from __future__ import annotations

import doctest

import pytest

from arena_pages.parsing import Section, Subsection, parse_sections
from arena_pages.views import overview
from arena_pages.views.models import (
    BasicInfoView,
    BestPracticeView,
    HighlightGridView,
    StandardCardView,
)
from arena_pages.views.overview import (
    RENDER_RULES,
    pair_problems,
    render_overview,
    select_rule,
)

BASIC_INFO = """\
## 2. 基本信息
### 2.1 概况
**业务背景**: 调研耗时长
**解决方案**：自动化调研流程
### 2.2 分类标签
**行业类别**: 金融，零售
**应用类别**: 服务, 管理
### 2.3 实施周期
- 一周
### 2.4 团队构成
- **产品经理** 1名
- 工程师 2名
### 2.5 业务痛点
- 资料分散：需要人工整理
- 报告慢：至少两天
- 质量不稳
### 2.6 核心功能
- 自动搜集
- 一键生成
"""

BEST_PRACTICE = """\
## 4. Best Practice
### 4.1 私部署（服务器版）
**入选最佳实践理由**
- 效果最好
- 成本最低
**版本基本信息**
**实践者称呼**: 张三
**首发日期**: 2025-12-01
**实施详情**
[完整文档](https://example.invalid/docs)
"""


def _section(title: str) -> Section:
    return Section(title=title, icon="📄", subsections=[Subsection(content=["x"])])


@pytest.mark.parametrize(
    ("title", "rule"),
    [
        ("1. Business Highlights", "highlights"),
        ("业务亮点", "highlights"),
        ("2. Basic Information", "basic_info"),
        ("最佳实践版本", "best_practice"),
        ("Demo Video", "demo"),
        ("Key Metrics", "key_metrics"),
        ("核心指标", "key_metrics"),
        ("Pain Points", "pain_points"),
        ("5. Lessons Learned", "standard"),
    ],
)
def test_select_rule_matches_keywords(title: str, rule: str) -> None:
    """Titles select the first rule whose keywords they contain."""
    assert select_rule(_section(title)).name == rule, (
        f"expected {title!r} to select the {rule!r} rule"
    )


def test_rule_table_ends_with_unconditional_default() -> None:
    """The last rule matches every section."""
    assert RENDER_RULES[-1].name == "standard", "expected standard card last"
    assert RENDER_RULES[-1].matches(_section("anything")), (
        "expected the default rule to match any title"
    )


def test_first_match_wins_for_overlapping_titles() -> None:
    """A title mentioning two keywords uses the earlier rule."""
    section = _section("Business Highlights and Key Metrics")
    assert select_rule(section).name == "highlights", (
        "expected the highlights rule to win over key metrics"
    )


@pytest.mark.parametrize("title", ["Key Metrics", "核心指标", "3. key metrics"])
def test_key_metrics_never_rendered(title: str) -> None:
    """Key metrics sections are suppressed regardless of their content."""
    sections = parse_sections(f"## {title}\n### Speed\n- Very fast\n## Other\ntext")

    views = render_overview(sections, "en")
    assert len(views) == 1, f"expected only the other section, got {views!r}"
    assert isinstance(views[0], StandardCardView), "expected a standard card"
    assert views[0].title == "Other", "expected the remaining section"


def test_highlights_grid_is_localized() -> None:
    """The highlights grid carries four localized entries."""
    zh_view = render_overview(parse_sections("## 业务亮点\n无关内容"), "zh")[0]
    en_view = render_overview(parse_sections("## 业务亮点\n无关内容"), "en")[0]

    assert isinstance(zh_view, HighlightGridView), "expected a highlight grid"
    assert isinstance(en_view, HighlightGridView), "expected a highlight grid"
    assert len(zh_view.cards) == 4, "expected four highlight cards"
    assert zh_view.cta_label == "立即开始", "expected the Chinese call to action"
    assert en_view.cards[0].title == "Ranked #2 in DeepResearch Bench", (
        "expected the English title of the first card"
    )


def test_basic_info_view_extracts_blocks() -> None:
    """The basic information view reads overview, tags, timeline, and team."""
    view = render_overview(parse_sections(BASIC_INFO), "zh")[0]

    assert isinstance(view, BasicInfoView), "expected a basic information view"
    assert view.title == "基本信息", f"expected stripped title, got {view.title!r}"
    assert view.business_background == "调研耗时长", "unexpected background text"
    assert view.solution == "自动化调研流程", "unexpected solution text"
    assert [(tag.label, tag.items) for tag in view.tags] == [
        ("行业类别", ["金融", "零售"]),
        ("应用类别", ["服务", "管理"]),
    ], "expected tags split on ASCII and full-width commas"
    assert view.timeline == ["一周"], "unexpected timeline"
    assert view.team == ["产品经理 1名", "工程师 2名"], "expected bold markers stripped"


def test_basic_info_pairs_clamp_to_last_solution() -> None:
    """Pain points past the last core function share it."""
    view = render_overview(parse_sections(BASIC_INFO), "zh")[0]

    assert isinstance(view, BasicInfoView), "expected a basic information view"
    observed = [
        ([pain.title for pain in pair.pains], pair.solution) for pair in view.pairs
    ]
    assert observed == [
        (["资料分散"], "自动搜集"),
        (["报告慢", "质量不稳"], "一键生成"),
    ], f"unexpected pairs {observed!r}"
    assert view.pairs[0].pains[0].description == "需要人工整理", (
        "expected the pain description after the colon"
    )


def test_pairs_without_solutions() -> None:
    """Pain points without core functions pair with no solution."""
    pairs = pair_problems(["a", "b"], [])
    assert len(pairs) == 1, "expected pains with no solution to merge"
    assert pairs[0].solution is None, "expected no solution"


def test_best_practice_card_reads_metadata() -> None:
    """The best practice card reads version, reasons, metadata, and link."""
    view = render_overview(parse_sections(BEST_PRACTICE), "en")[0]

    assert isinstance(view, BestPracticeView), "expected a best practice view"
    assert view.deployment_version == "私部署（服务器版）", (
        f"expected the ordinal stripped from the version, got {view.deployment_version!r}"
    )
    assert view.reasons == ["- 效果最好", "- 成本最低"], f"unexpected reasons {view.reasons!r}"
    assert view.practitioner == "张三", "expected the practitioner from the info block"
    assert view.first_released == "2025-12-01", "expected the first release date"
    assert view.last_updated == "2026-02-04", "expected the default last-updated date"
    assert view.detail_link == "https://example.invalid/docs", "expected the detail link"
    assert [card.title for card in view.outcomes] == [
        "Quality Leadership",
        "Faster Generation",
        "Lower Cost",
        "Enterprise Ready",
    ], "expected four localized outcomes"


def test_best_practice_defaults_without_deployment_subsection() -> None:
    """Missing deployment details fall back to defaults."""
    view = render_overview(parse_sections("## 最佳实践\n### Notes\ntext"), "zh")[0]

    assert isinstance(view, BestPracticeView), "expected a best practice view"
    assert view.deployment_version == "私部署（服务器版）", "expected default version"
    assert view.practitioner == "Real-World AI", "expected default practitioner"
    assert view.detail_link is None, "expected no detail link"


def test_standard_card_classifies_lines() -> None:
    """Standard cards strip ordinals and classify bullets and bold lines."""
    text = "## 3. Lessons\n### 3.1. First\n- **one**\n**Bold**\nplain\n"
    view = render_overview(parse_sections(text), "en")[0]

    assert isinstance(view, StandardCardView), "expected a standard card"
    assert view.title == "Lessons", "expected section ordinal stripped"
    sub = view.subsections[0]
    assert sub.title == "First", f"expected subsection ordinal stripped, got {sub.title!r}"
    assert [(item.kind, item.text) for item in sub.items] == [
        ("bullet", "one"),
        ("bold", "Bold"),
        ("text", "plain"),
    ], "unexpected item classification"


def test_module_examples_run() -> None:
    """The usage examples in the selector module's docstrings pass."""
    failed, attempted = doctest.testmod(overview)

    assert attempted > 0, "expected docstring examples to be collected"
    assert failed == 0, f"expected the examples to pass, {failed} failed"
