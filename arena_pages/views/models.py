"""View-model dataclasses handed from the renderer selector to templates.

Every overview view carries a ``layout`` class attribute naming the Jinja
macro that draws it, mirroring how section layouts are chosen elsewhere in
the page pipeline.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

ItemKind = typ.Literal["bullet", "ordered", "bold", "link", "text"]


@dc.dataclass(slots=True)
class ContentItem:
    """Single classified content line.

    Attributes
    ----------
    kind : str
        ``"bullet"``, ``"ordered"``, ``"bold"``, ``"link"``, or ``"text"``.
    text : str
        Display text with list markers and bold markers removed.
    href : str or None
        Link target for ``"link"`` items.
    """

    kind: ItemKind
    text: str
    href: str | None = None


@dc.dataclass(slots=True)
class HighlightCard:
    """One entry of the business highlights grid."""

    title: str
    description: str
    icon: str
    color: str


@dc.dataclass(slots=True)
class HighlightGridView:
    """Business highlights grid with its call-to-action banner."""

    layout: typ.ClassVar[str] = "highlights"

    eyebrow: str
    heading: str
    cards: list[HighlightCard]
    cta_title: str
    cta_body: str
    cta_label: str


@dc.dataclass(slots=True)
class TagGroup:
    """Classification label with its comma-separated values."""

    label: str
    items: list[str]


@dc.dataclass(slots=True)
class PainPoint:
    """Pain point split into a short title and its description."""

    title: str
    description: str


@dc.dataclass(slots=True)
class ProblemSolutionPair:
    """Pain points that share one core function as their solution."""

    pains: list[PainPoint]
    solution: str | None


@dc.dataclass(slots=True)
class BasicInfoView:
    """Four-block summary built from the basic information section.

    Attributes
    ----------
    title : str
        Section title with its ordinal prefix removed.
    business_background : str
        Text of the business background line, label removed.
    solution : str
        Text of the solution line, label removed.
    tags : list[TagGroup]
        Classification tags from ``**Label**: a, b`` lines.
    timeline : list[str]
        Bullet items of the implementation cycle subsection.
    team : list[str]
        Bullet items of the team composition subsection.
    pairs : list[ProblemSolutionPair]
        Pain points paired with core functions.
    labels : dict[str, str]
        Localized block headings.
    """

    layout: typ.ClassVar[str] = "basic_info"

    title: str
    business_background: str
    solution: str
    tags: list[TagGroup]
    timeline: list[str]
    team: list[str]
    pairs: list[ProblemSolutionPair]
    labels: dict[str, str]


@dc.dataclass(slots=True)
class OutcomeCard:
    """One reason the best-practice version leads its alternatives."""

    title: str
    description: str
    icon: str
    color: str


@dc.dataclass(slots=True)
class BestPracticeView:
    """Version card for the best practice section."""

    layout: typ.ClassVar[str] = "best_practice"

    heading: str
    deployment_version: str
    summary: str
    reasons: list[str]
    practitioner: str
    first_released: str
    last_updated: str
    detail_link: str | None
    outcomes: list[OutcomeCard]
    labels: dict[str, str]


@dc.dataclass(slots=True)
class CardSubsection:
    """Subsection rendered inside a card, with classified items."""

    title: str | None
    icon: str | None
    items: list[ContentItem]


@dc.dataclass(slots=True)
class StandardCardView:
    """Generic card used for sections without a specialised layout."""

    layout: typ.ClassVar[str] = "standard"

    title: str
    icon: str
    subsections: list[CardSubsection]


@dc.dataclass(slots=True)
class StepBlockView:
    """Rendered block of a configuration step subsection.

    Attributes
    ----------
    kind : str
        Block kind from :func:`~arena_pages.parsing.group_blocks`.
    items : list[ContentItem]
        Items for list and link blocks.
    text : str
        Joined text for text blocks.
    html : str
        Highlighted HTML for code blocks.
    """

    kind: str
    items: list[ContentItem] = dc.field(default_factory=list)
    text: str = ""
    html: str = ""


@dc.dataclass(slots=True)
class GuideSubsectionView:
    """Subsection of a phase or step card."""

    title: str
    icon: str
    items: list[ContentItem] = dc.field(default_factory=list)
    blocks: list[StepBlockView] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class GuideEntryView:
    """Numbered phase or step card."""

    number: int
    title: str
    icon: str
    subsections: list[GuideSubsectionView]


@dc.dataclass(slots=True)
class ConfigurationFallbackView:
    """Raw rendering shown when a configuration document has no steps."""

    notice: str
    html: str
    content_length: int
    preview: str
    debug_label: str


@dc.dataclass(slots=True)
class MetricRating:
    """Star rating shown in the hero for one metric."""

    label: str
    stars: int
    color: str


@dc.dataclass(slots=True)
class HeroView:
    """Hero block built from the arena record."""

    title: str
    verified: bool
    status_label: str
    champion: str
    challenger: str
    description: str
    speed_label: str
    ratings: list[MetricRating]


OverviewView = HighlightGridView | BasicInfoView | BestPracticeView | StandardCardView

__all__ = [
    "BasicInfoView",
    "BestPracticeView",
    "CardSubsection",
    "ConfigurationFallbackView",
    "ContentItem",
    "GuideEntryView",
    "GuideSubsectionView",
    "HeroView",
    "HighlightCard",
    "HighlightGridView",
    "MetricRating",
    "OutcomeCard",
    "OverviewView",
    "PainPoint",
    "ProblemSolutionPair",
    "StandardCardView",
    "StepBlockView",
    "TagGroup",
]
