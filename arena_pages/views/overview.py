r"""Choose and build the presentation for each overview section.

Overview sections are matched against :data:`RENDER_RULES`, an ordered table
of ``(predicate, builder)`` rules evaluated first-match-wins. The final rule
matches every section and renders the generic card. A builder returning
``None`` suppresses the section; key metrics and pain points are folded into
the basic information view, and the demo is shown in the page hero.

Example
-------
>>> from arena_pages.parsing import parse_sections
>>> from arena_pages.views.overview import render_overview, select_rule
>>> sections = parse_sections("## Key Metrics\n- fast\n## 3. Notes\nPlain")
>>> select_rule(sections[0]).name
'key_metrics'
>>> [view.title for view in render_overview(sections, "en")]
['Notes']
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import re
import typing as typ

from arena_pages.parsing.icons import title_matches

from .items import (
    BOLD_LABEL_PATTERN,
    bullet_items,
    classify_card_line,
    find_link,
    key_value,
    localized,
    split_list,
    strip_ordinal,
    strip_subsection_ordinal,
)
from .models import (
    BasicInfoView,
    BestPracticeView,
    CardSubsection,
    HighlightCard,
    HighlightGridView,
    OutcomeCard,
    OverviewView,
    PainPoint,
    ProblemSolutionPair,
    StandardCardView,
    TagGroup,
)

if typ.TYPE_CHECKING:
    from arena_pages.parsing.models import Section, Subsection

Builder = cabc.Callable[["Section", "list[Section]", str], "OverviewView | None"]

PAIN_TITLE_PATTERN = re.compile(r"^(.+?)[:：]\s*")
VERSION_PREFIX_PATTERN = re.compile(r"^[0-9.]+\s*")
BACKGROUND_LABEL = re.compile(r"\*\*(?:业务背景|Business Background)\*\*[:：]?\s*", re.I)
SOLUTION_LABEL = re.compile(r"\*\*(?:解决方案|Solution)\*\*[:：]?\s*", re.I)

DEFAULT_PRACTITIONER = "Real-World AI"
DEFAULT_FIRST_RELEASED = "2025-11-20"
DEFAULT_LAST_UPDATED = "2026-02-04"


@dc.dataclass(frozen=True, slots=True)
class RenderRule:
    """Named predicate paired with the builder used when it matches."""

    name: str
    predicate: cabc.Callable[[Section], bool]
    build: Builder

    def matches(self, section: Section) -> bool:
        """Return True when this rule applies to ``section``."""
        return self.predicate(section)


def _title_has(*keywords: str) -> cabc.Callable[[Section], bool]:
    """Return a predicate testing a section title for any of ``keywords``."""

    def _predicate(section: Section) -> bool:
        return title_matches(section.title, keywords)

    return _predicate


def _always(_section: Section) -> bool:
    return True


def _suppress(
    _section: Section, _sections: list[Section], _locale: str
) -> OverviewView | None:
    return None


def _find_subsection(section: Section, *keywords: str) -> Subsection | None:
    """Return the first subsection whose title mentions any keyword."""
    for subsection in section.subsections:
        if subsection.title and title_matches(subsection.title, keywords):
            return subsection
    return None


# Business highlights ---------------------------------------------------------

# TODO: bind these entries to the parsed section once the overview documents
# carry per-arena highlight data; they currently describe the research arena.
_HIGHLIGHTS: tuple[dict[str, str], ...] = (
    {
        "zh_title": "DeepResearch Bench排名第2",
        "en_title": "Ranked #2 in DeepResearch Bench",
        "zh_desc": "权威基准测试综合得分51.86，与第一名差距<1.5%",
        "en_desc": "Score 51.86 on authoritative benchmark, <1.5% gap from #1",
        "icon": "📈",
        "color": "yellow",
    },
    {
        "zh_title": "减少95%手动研究工作量",
        "en_title": "Reduce 95% Manual Research Workload",
        "zh_desc": "自动化资料搜集、信息整合，大幅提升调研效率",
        "en_desc": "Automated data collection and integration, greatly improving efficiency",
        "icon": "⚡",
        "color": "violet",
    },
    {
        "zh_title": "报告≤15分钟生成",
        "en_title": "Generate Reports in ≤15 Minutes",
        "zh_desc": "快速输出高质量结构化调研文档，支持批量生成",
        "en_desc": "Quickly output high-quality structured research documents, support batch generation",
        "icon": "🎯",
        "color": "violet",
    },
    {
        "zh_title": "支持国产大模型",
        "en_title": "Support Domestic LLMs",
        "zh_desc": "节省90%成本，GLM-4.7等国产模型性能优异",
        "en_desc": "Save 90% cost, domestic models like GLM-4.7 perform excellently",
        "icon": "💲",
        "color": "blue",
    },
)


def build_highlights(
    _section: Section, _sections: list[Section], locale: str
) -> HighlightGridView:
    """Return the highlights grid; the parsed section supplies only the match."""
    cards = [
        HighlightCard(
            title=localized(locale, entry["zh_title"], entry["en_title"]),
            description=localized(locale, entry["zh_desc"], entry["en_desc"]),
            icon=entry["icon"],
            color=entry["color"],
        )
        for entry in _HIGHLIGHTS
    ]
    return HighlightGridView(
        eyebrow=localized(locale, "核心价值", "CORE VALUE"),
        heading=localized(locale, "业务亮点", "Business Highlights"),
        cards=cards,
        cta_title=localized(locale, "立即可用，快速部署", "Ready to Use, Quick Deploy"),
        cta_body=localized(
            locale,
            "完整的开源方案，企业级质量保证",
            "Complete open-source solution, enterprise-grade quality",
        ),
        cta_label=localized(locale, "立即开始", "Get Started"),
    )


# Basic information -----------------------------------------------------------


def _overview_text(subsection: Subsection | None) -> tuple[str, str]:
    if subsection is None:
        return "", ""
    background = next(
        (line for line in subsection.content if BACKGROUND_LABEL.search(line)), ""
    )
    solution = next(
        (line for line in subsection.content if SOLUTION_LABEL.search(line)), ""
    )
    return (
        BACKGROUND_LABEL.sub("", background, count=1).strip(),
        SOLUTION_LABEL.sub("", solution, count=1).strip(),
    )


def _tag_groups(subsection: Subsection | None) -> list[TagGroup]:
    if subsection is None:
        return []
    groups: list[TagGroup] = []
    for line in subsection.content:
        pair = key_value(line)
        if pair is not None:
            groups.append(TagGroup(label=pair[0], items=split_list(pair[1])))
    return groups


def _split_pain(pain: str) -> PainPoint:
    match = PAIN_TITLE_PATTERN.match(pain)
    if match is None:
        return PainPoint(title=pain, description="")
    return PainPoint(title=match.group(1), description=pain[match.end() :])


def pair_problems(pains: list[str], solutions: list[str]) -> list[ProblemSolutionPair]:
    """Pair each pain point with the core function at the same position.

    Positions past the end of ``solutions`` reuse its last entry, and pain
    points that end up with the same solution share a single pair.

    Examples
    --------
    >>> pairs = pair_problems(["a: x", "b", "c"], ["S1", "S2"])
    >>> [([p.title for p in pair.pains], pair.solution) for pair in pairs]
    [(['a'], 'S1'), (['b', 'c'], 'S2')]
    """
    pairs: list[ProblemSolutionPair] = []
    for index, pain in enumerate(pains):
        solution = solutions[min(index, len(solutions) - 1)] if solutions else None
        existing = next((pair for pair in pairs if pair.solution == solution), None)
        if existing is None:
            pairs.append(ProblemSolutionPair(pains=[_split_pain(pain)], solution=solution))
        else:
            existing.pains.append(_split_pain(pain))
    return pairs


def build_basic_info(
    section: Section, _sections: list[Section], locale: str
) -> BasicInfoView:
    """Return the four-block basic information view."""
    overview = _find_subsection(section, "概况", "Overview")
    tags = _find_subsection(section, "分类标签", "Classification", "Tags")
    cycle = _find_subsection(section, "实施周期", "Implementation Cycle", "Timeline")
    team = _find_subsection(section, "团队构成", "Team")
    pains = _find_subsection(section, "业务痛点", "Pain Points")
    functions = _find_subsection(section, "核心功能", "Core Functions")

    background, solution = _overview_text(overview)
    return BasicInfoView(
        title=strip_ordinal(section.title),
        business_background=background,
        solution=solution,
        tags=_tag_groups(tags),
        timeline=bullet_items(cycle.content) if cycle else [],
        team=bullet_items(team.content) if team else [],
        pairs=pair_problems(
            bullet_items(pains.content) if pains else [],
            bullet_items(functions.content) if functions else [],
        ),
        labels={
            "overview": localized(locale, "概述", "Overview"),
            "tags": localized(locale, "分类标签", "Classification"),
            "implementation": localized(locale, "实施", "Implementation"),
            "timeline": localized(locale, "周期", "Timeline"),
            "team": localized(locale, "团队", "Team"),
            "pairs": localized(locale, "问题 → 解决方案", "Problem → Solution"),
        },
    )


# Best practice ---------------------------------------------------------------

REASON_KEYWORDS = (
    "入选最佳实践理由",
    "最佳实践理由",
    "理由",
    "指标提升",
    "成本优化",
    "Reason",
)
INFO_KEYWORDS = (
    "版本基本信息",
    "基本信息",
    "实践者信息",
    "原作者信息",
    "版本状态",
    "Version Info",
    "Practitioner Info",
)
DETAIL_KEYWORDS = ("实施详情", "详情", "Implementation Details", "Details")

_METADATA_KEYS = {
    "实践者": "practitioner",
    "practitioner": "practitioner",
    "首发日期": "first_released",
    "first released": "first_released",
    "最近更新": "last_updated",
    "last updated": "last_updated",
}

# TODO: source these outcomes from the best practice reason block once its
# wording is standardised across arenas.
_OUTCOMES: tuple[dict[str, str], ...] = (
    {
        "zh_title": "效果领先",
        "en_title": "Quality Leadership",
        "zh_desc": "在 DeepResearch Bench 开源方案中排名 第 2，生成内容稳定、可信，适用于正式业务决策场景。",
        "en_desc": "Ranked #2 on DeepResearch Bench. Stable, trustworthy output for business decisions.",
        "icon": "⭐",
        "color": "yellow",
    },
    {
        "zh_title": "生成更快",
        "en_title": "Faster Generation",
        "zh_desc": "单篇报告 ≤15 分钟完成，显著快于同类方案（普遍 ≥20 分钟）。",
        "en_desc": "≤15 min per report, significantly faster than alternatives (typically ≥20 min).",
        "icon": "⚡",
        "color": "violet",
    },
    {
        "zh_title": "成本更低",
        "en_title": "Lower Cost",
        "zh_desc": "支持国产大模型（如 GLM 系列），在保持效果的前提下，整体成本降低 60%+。",
        "en_desc": "Supports domestic models (e.g., GLM series), 60%+ cost reduction while maintaining quality.",
        "icon": "💰",
        "color": "blue",
    },
    {
        "zh_title": "企业可用",
        "en_title": "Enterprise Ready",
        "zh_desc": "模板契合度 ≥95%，格式规范度 ≥99%，可直接用于内部汇报与对外材料。",
        "en_desc": "≥95% template match, ≥99% format compliance. Ready for internal and external use.",
        "icon": "✓",
        "color": "emerald",
    },
)


def extract_block(subsection: Subsection | None, keywords: tuple[str, ...]) -> list[str]:
    """Return the lines following the first line that mentions a keyword.

    Collection stops at the next heading or bold-only label line, which opens
    the following block.
    """
    if subsection is None:
        return []
    start = next(
        (
            index
            for index, line in enumerate(subsection.content)
            if any(keyword in line for keyword in keywords)
        ),
        None,
    )
    if start is None:
        return []
    block: list[str] = []
    for line in subsection.content[start + 1 :]:
        stripped = line.strip()
        if stripped.startswith("#") or BOLD_LABEL_PATTERN.match(stripped):
            break
        if stripped:
            block.append(line)
    return block


def parse_metadata(lines: list[str]) -> dict[str, str]:
    """Read practitioner and release dates from ``**Key**: value`` lines."""
    metadata: dict[str, str] = {}
    for line in lines:
        pair = key_value(line)
        if pair is None:
            continue
        key = pair[0].replace("信息", "").strip()
        key = key.removesuffix("称呼").strip().casefold()
        field = _METADATA_KEYS.get(key)
        if field is not None:
            metadata[field] = pair[1]
    return metadata


def build_best_practice(
    section: Section, _sections: list[Section], locale: str
) -> BestPracticeView:
    """Return the best practice version card."""
    deployment = _find_subsection(section, "私部署", "部署", "Server", "Deployment")
    version = ""
    if deployment is not None and deployment.title:
        version = VERSION_PREFIX_PATTERN.sub("", deployment.title, count=1)
    if not version:
        version = localized(locale, "私部署（服务器版）", "Private Deployment (Server)")

    metadata = parse_metadata(extract_block(deployment, INFO_KEYWORDS))
    detail_link = None
    for line in extract_block(deployment, DETAIL_KEYWORDS):
        link = find_link(line)
        if link is not None:
            detail_link = link[1]
            break

    outcomes = [
        OutcomeCard(
            title=localized(locale, entry["zh_title"], entry["en_title"]),
            description=localized(locale, entry["zh_desc"], entry["en_desc"]),
            icon=entry["icon"],
            color=entry["color"],
        )
        for entry in _OUTCOMES
    ]
    return BestPracticeView(
        heading=localized(locale, "最佳实践版本", "Best Practice Version"),
        deployment_version=version,
        summary=localized(
            locale,
            "当前最成熟、性能最优的企业级方案。由 RWAI 团队自研并在多家企业真实场景中验证，兼顾效果、速度与成本。",
            "The most mature and high-performance enterprise solution. "
            "Developed and validated by RWAI team across real-world scenarios.",
        ),
        reasons=[line.strip() for line in extract_block(deployment, REASON_KEYWORDS)],
        practitioner=metadata.get("practitioner", DEFAULT_PRACTITIONER),
        first_released=metadata.get("first_released", DEFAULT_FIRST_RELEASED),
        last_updated=metadata.get("last_updated", DEFAULT_LAST_UPDATED),
        detail_link=detail_link,
        outcomes=outcomes,
        labels={
            "why": localized(locale, "为什么它是目前最好的版本", "Why It's the Best Version"),
            "info": localized(locale, "实践者 & 版本信息", "Practitioner & Version"),
            "practitioner": localized(locale, "实践者", "Practitioner"),
            "version": localized(locale, "版本状态", "Version"),
            "first": localized(locale, "首发：", "First: "),
            "updated": localized(locale, "更新：", "Updated: "),
            "docs": localized(locale, "外部文档", "External Docs"),
            "details": localized(locale, "查看完整实践细节", "View Full Implementation Details"),
        },
    )


# Standard card ---------------------------------------------------------------


def build_standard_card(
    section: Section, _sections: list[Section], _locale: str
) -> StandardCardView:
    """Return the generic card with ordinals stripped and lines classified."""
    subsections = [
        CardSubsection(
            title=strip_subsection_ordinal(sub.title) if sub.title else None,
            icon=sub.icon,
            items=[
                classify_card_line(line)
                for line in sub.content
                if line and not line.startswith("####")
            ],
        )
        for sub in section.subsections
    ]
    return StandardCardView(
        title=strip_ordinal(section.title), icon=section.icon, subsections=subsections
    )


RENDER_RULES: tuple[RenderRule, ...] = (
    RenderRule("highlights", _title_has("business highlights", "业务亮点"), build_highlights),
    RenderRule("basic_info", _title_has("basic information", "基本信息"), build_basic_info),
    RenderRule("best_practice", _title_has("best practice", "最佳实践"), build_best_practice),
    RenderRule("demo", _title_has("demo", "演示"), _suppress),
    RenderRule("key_metrics", _title_has("key metrics", "核心指标"), _suppress),
    RenderRule("pain_points", _title_has("pain points", "痛点"), _suppress),
    RenderRule("standard", _always, build_standard_card),
)


def select_rule(section: Section) -> RenderRule:
    """Return the first rule in :data:`RENDER_RULES` matching ``section``."""
    return next(rule for rule in RENDER_RULES if rule.matches(section))


def render_section(
    section: Section, sections: list[Section], locale: str
) -> OverviewView | None:
    """Build the view for ``section``, or None when it is suppressed."""
    return select_rule(section).build(section, sections, locale)


def render_overview(sections: list[Section], locale: str) -> list[OverviewView]:
    """Return views for every visible section, preserving document order."""
    views: list[OverviewView] = []
    for section in sections:
        view = render_section(section, sections, locale)
        if view is not None:
            views.append(view)
    return views


__all__ = [
    "RENDER_RULES",
    "RenderRule",
    "build_basic_info",
    "build_best_practice",
    "build_highlights",
    "build_standard_card",
    "extract_block",
    "pair_problems",
    "parse_metadata",
    "render_overview",
    "render_section",
    "select_rule",
]
