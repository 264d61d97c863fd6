"""View models and the builders that turn section trees into them.

Overview sections go through the renderer selector in :mod:`.overview`;
implementation phases and configuration steps are rendered uniformly by
:mod:`.guides`; the page hero comes from an arena list record via
:mod:`.hero`.
"""

from .guides import build_configuration_fallback, build_phase_views, build_step_views
from .hero import build_hero, speed_label, star_rating
from .models import (
    ConfigurationFallbackView,
    GuideEntryView,
    HeroView,
    OverviewView,
)
from .overview import RENDER_RULES, RenderRule, render_overview, select_rule

__all__ = [
    "RENDER_RULES",
    "ConfigurationFallbackView",
    "GuideEntryView",
    "HeroView",
    "OverviewView",
    "RenderRule",
    "build_configuration_fallback",
    "build_hero",
    "build_phase_views",
    "build_step_views",
    "render_overview",
    "select_rule",
    "speed_label",
    "star_rating",
]
