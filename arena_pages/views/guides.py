"""Build uniform views for implementation phases and configuration steps."""

from __future__ import annotations

import typing as typ

from arena_pages.parsing.blocks import group_blocks
from arena_pages.parsing.icons import DEFAULT_ICON

from .items import classify_guide_line, localized, strip_bold
from .models import (
    ConfigurationFallbackView,
    ContentItem,
    GuideEntryView,
    GuideSubsectionView,
    StepBlockView,
)

if typ.TYPE_CHECKING:
    from arena_pages.parsing.blocks import ContentBlock
    from arena_pages.parsing.models import Phase, Step, Subsection

PREVIEW_LENGTH = 500


class SnippetRenderer(typ.Protocol):
    """Subset of the HTML renderer used by guide views."""

    def markdown(self, text: str) -> str: ...

    def code_block(self, code: str, language: str | None = None) -> str: ...


def _classify_lines(lines: list[str]) -> list[ContentItem]:
    items: list[ContentItem] = []
    for line in lines:
        item = classify_guide_line(line.strip())
        if item is not None:
            items.append(item)
    return items


def _subsection_title(subsection: Subsection) -> str:
    return subsection.title or ""


def build_phase_views(phases: list[Phase]) -> list[GuideEntryView]:
    """Return one card per phase with classified subsection items."""
    return [
        GuideEntryView(
            number=phase.number,
            title=phase.title,
            icon=phase.icon,
            subsections=[
                GuideSubsectionView(
                    title=_subsection_title(sub),
                    icon=sub.icon or DEFAULT_ICON,
                    items=_classify_lines(sub.content),
                )
                for sub in phase.subsections
            ],
        )
        for phase in phases
    ]


def _render_block(block: ContentBlock, renderer: SnippetRenderer) -> StepBlockView:
    match block.kind:
        case "code":
            code = "\n".join(block.lines)
            return StepBlockView(
                kind="code", html=renderer.code_block(code, block.language or None)
            )
        case "list" | "link":
            return StepBlockView(kind=block.kind, items=_classify_lines(block.lines))
        case _:
            return StepBlockView(
                kind="text", text=" ".join(strip_bold(line) for line in block.lines)
            )


def build_step_views(
    steps: list[Step], renderer: SnippetRenderer
) -> list[GuideEntryView]:
    """Return one card per configuration step.

    Subsection content is grouped into blocks first so fenced code keeps its
    verbatim lines and is highlighted by ``renderer``.
    """
    return [
        GuideEntryView(
            number=step.number,
            title=step.title,
            icon=step.icon,
            subsections=[
                GuideSubsectionView(
                    title=_subsection_title(sub),
                    icon=sub.icon or DEFAULT_ICON,
                    blocks=[_render_block(block, renderer) for block in group_blocks(sub)],
                )
                for sub in step.subsections
            ],
        )
        for step in steps
    ]


def build_configuration_fallback(
    text: str, locale: str, renderer: SnippetRenderer
) -> ConfigurationFallbackView:
    """Return the raw rendering shown when no configuration step was found.

    Parameters
    ----------
    text : str
        The configuration document that produced zero steps.
    locale : str
        Locale used for the notice and debug labels.
    renderer : SnippetRenderer
        Renderer that turns ``text`` into HTML.

    Returns
    -------
    ConfigurationFallbackView
        Rendered markdown plus the input length and a preview of its first
        characters for authors debugging the document.
    """
    return ConfigurationFallbackView(
        notice=localized(
            locale,
            "⚠️ 内容解析失败，显示原始内容：",
            "⚠️ Content parsing failed, showing raw content:",
        ),
        html=renderer.markdown(text),
        content_length=len(text),
        preview=text[:PREVIEW_LENGTH],
        debug_label=localized(locale, "查看调试信息", "Show debug info"),
    )


__all__ = [
    "PREVIEW_LENGTH",
    "SnippetRenderer",
    "build_configuration_fallback",
    "build_phase_views",
    "build_step_views",
]
