"""Utilities for parsing, rendering, and generating arena detail pages."""

from .models import ArenaPageModel, TabView
from .page_generator import ArenaPageGenerator
from .renderer import ArenaContentRenderer

__all__ = ["ArenaContentRenderer", "ArenaPageGenerator", "ArenaPageModel", "TabView"]
