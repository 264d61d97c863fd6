"""Shared dataclasses used by the arena page generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from arena_pages.views.models import (
        ConfigurationFallbackView,
        GuideEntryView,
        HeroView,
        OverviewView,
    )

TabKind = typ.Literal["overview", "implementation", "tech-configuration"]


@dc.dataclass(slots=True)
class TabView:
    """Structured data passed to the template for one content tab.

    Attributes
    ----------
    key : str
        Tab identifier, also used as the anchor of the tab panel.
    label : str
        Localized tab label.
    has_content : bool
        False when the tab document is missing.
    empty_note : str
        Localized note shown when the tab has no content.
    overview : list[OverviewView]
        Section views of the overview tab.
    entries : list[GuideEntryView]
        Phase or step cards of the implementation and configuration tabs.
    fallback : ConfigurationFallbackView or None
        Raw rendering used when the configuration document has no steps.
    """

    key: TabKind
    label: str
    has_content: bool
    empty_note: str
    overview: list[OverviewView] = dc.field(default_factory=list)
    entries: list[GuideEntryView] = dc.field(default_factory=list)
    fallback: ConfigurationFallbackView | None = None


@dc.dataclass(slots=True)
class ArenaPageModel:
    """Everything the arena page template renders for one locale."""

    key: str
    locale: str
    title: str
    html_title: str
    hero: HeroView | None
    tabs: list[TabView]


__all__ = ["ArenaPageModel", "TabKind", "TabView"]
