"""Keyword tables that decorate parsed titles with presentational icons.

Icons are cosmetic: they never influence how a document is parsed. Each table
is an ordered tuple of ``(keywords, icon)`` pairs and the first entry with a
keyword contained in the (case-folded) title wins.

Examples
--------
>>> section_icon("2. Key Metrics")
'📊'
>>> section_icon("业务亮点")
'🎯'
>>> phase_icon(9)
'📌'
"""

from __future__ import annotations

import typing as typ

IconTable = tuple[tuple[tuple[str, ...], str], ...]

DEFAULT_ICON = "📄"

SECTION_ICONS: IconTable = (
    (("key metrics", "核心指标"), "📊"),
    (("business highlights", "业务亮点"), "🎯"),
    (("solution overview", "解决方案概览"), "💡"),
    (("pain points", "痛点"), "⚠️"),
    (("performance metrics", "性能指标"), "📈"),
    (("best practice", "最佳实践"), "🏅"),
    (("demo", "演示"), "🎬"),
    (("basic information", "基本信息"), "📋"),
)

PHASE_SUBSECTION_ICONS: IconTable = (
    (("team", "团队"), "👥"),
    (("content", "内容"), "📝"),
    (("resource", "资源"), "🔗"),
    (("deliverable", "产出", "结果"), "📦"),
    (("cycle", "周期"), "⏱️"),
    (("step", "步骤"), "🔄"),
)

STEP_SUBSECTION_ICONS: IconTable = (
    (("step name", "步骤名称"), "📌"),
    (("step definition", "步骤定义"), "📝"),
    (("participants", "参与人员"), "👥"),
    (("step input", "本步输入"), "📥"),
    (("step output", "本步产出"), "📤"),
    (("estimated time", "预估时间"), "⏱️"),
)

PHASE_ICONS: tuple[str, ...] = ("🎯", "📋", "⚙️", "🚀")
PHASE_DEFAULT_ICON = "📌"
STEP_ICONS: tuple[str, ...] = ("🔧", "⚙️", "🔌", "🌐", "📡", "🤖")
STEP_DEFAULT_ICON = "📋"


def title_matches(title: str, keywords: typ.Iterable[str]) -> bool:
    """Return True when any keyword occurs in ``title``, ignoring case."""
    folded = title.casefold()
    return any(keyword.casefold() in folded for keyword in keywords)


def lookup_icon(title: str, table: IconTable, default: str = DEFAULT_ICON) -> str:
    """Return the icon of the first table entry matching ``title``."""
    for keywords, icon in table:
        if title_matches(title, keywords):
            return icon
    return default


def _numbered_icon(number: int, icons: tuple[str, ...], default: str) -> str:
    if 1 <= number <= len(icons):
        return icons[number - 1]
    return default


def section_icon(title: str) -> str:
    """Return the icon for an overview section title."""
    return lookup_icon(title, SECTION_ICONS)


def phase_icon(number: int) -> str:
    """Return the icon for an implementation phase number."""
    return _numbered_icon(number, PHASE_ICONS, PHASE_DEFAULT_ICON)


def step_icon(number: int) -> str:
    """Return the icon for a configuration step number."""
    return _numbered_icon(number, STEP_ICONS, STEP_DEFAULT_ICON)


def phase_subsection_icon(title: str) -> str:
    """Return the icon for a subsection inside an implementation phase."""
    return lookup_icon(title, PHASE_SUBSECTION_ICONS)


def step_subsection_icon(title: str) -> str:
    """Return the icon for a subsection inside a configuration step."""
    return lookup_icon(title, STEP_SUBSECTION_ICONS)


__all__ = [
    "DEFAULT_ICON",
    "PHASE_SUBSECTION_ICONS",
    "SECTION_ICONS",
    "STEP_SUBSECTION_ICONS",
    "lookup_icon",
    "phase_icon",
    "phase_subsection_icon",
    "section_icon",
    "step_icon",
    "step_subsection_icon",
    "title_matches",
]
