"""Hero block built from an arena list record.

Examples
--------
>>> star_rating("较低"), star_rating("中等"), star_rating("很高"), star_rating("?")
(1, 2, 3, 2)
>>> extract_duration("两天半搭建")
'2-3天'
>>> speed_label("", "较快", "en")
'1 week'
"""

from __future__ import annotations

import re
import typing as typ

from arena_pages.sync.translations import CHALLENGER_PLACEHOLDER

from .items import localized
from .models import HeroView, MetricRating

if typ.TYPE_CHECKING:
    from arena_pages.sync.records import ArenaRecord

DEFAULT_STARS = 2

STAR_RATINGS: dict[str, int] = {
    "很慢": 1,
    "较低": 1,
    "慢": 1,
    "差": 1,
    "中等": 2,
    "较快": 3,
    "较高": 3,
    "很较": 3,
    "很快": 3,
    "很高": 3,
    "较优": 3,
    "优": 3,
}

SPEED_LABELS: dict[str, str] = {
    "很快": "1-2 days",
    "较快": "1 week",
    "中等": "2 weeks",
    "较慢": "1 month",
    "一周": "1 week",
    "1~2天": "1-2 days",
    "1-2天": "1-2 days",
    "两周": "2 weeks",
    "一月": "1 month",
    "半天": "Half day",
}

# Ordered: numeric ranges first, then half-day phrases before whole days.
DURATION_PATTERNS: tuple[tuple[re.Pattern[str], str | None], ...] = (
    (re.compile(r"(\d+[-~]\d+[天小时分钟]+)"), None),
    (re.compile(r"两天半"), "2-3天"),
    (re.compile(r"三天半"), "3-4天"),
    (re.compile(r"四天半"), "4-5天"),
    (re.compile(r"五天半"), "5-6天"),
    (re.compile(r"半天"), "半天"),
    (re.compile(r"一周|七天"), "一周"),
    (re.compile(r"两周|十四天"), "两周"),
    (re.compile(r"十天"), "10天"),
    (re.compile(r"九天"), "9天"),
    (re.compile(r"八天"), "8天"),
    (re.compile(r"六天"), "6天"),
    (re.compile(r"五天"), "5天"),
    (re.compile(r"四天"), "4天"),
    (re.compile(r"三天"), "3天"),
    (re.compile(r"两天(?!半)"), "2天"),
    (re.compile(r"一天"), "1天"),
    (re.compile(r"半小时|30分钟"), "半小时"),
    (re.compile(r"一小时|60分钟"), "1小时"),
    (re.compile(r"两小时|2小时"), "2小时"),
    (re.compile(r"三小时|3小时"), "3小时"),
    (re.compile(r"四小时|4小时"), "4小时"),
    (re.compile(r"五小时|5小时"), "5小时"),
    (re.compile(r"六小时|6小时"), "6小时"),
)

# Shown when the arena list leaves a metric blank.
METRIC_DEFAULTS: dict[str, str] = {
    "speed": "较快",
    "quality": "较高",
    "security": "较优",
    "cost": "较高",
}


def star_rating(value: str) -> int:
    """Return the 1-3 star rating for a qualitative metric value."""
    return STAR_RATINGS.get(value, DEFAULT_STARS)


def extract_duration(description: str) -> str:
    """Return the first duration phrase found in ``description``, or ``""``."""
    for pattern, label in DURATION_PATTERNS:
        match = pattern.search(description)
        if match is not None:
            return label if label is not None else match.group(1)
    return ""


def speed_label(description: str, speed: str, locale: str) -> str:
    """Return the speed label shown in the hero.

    An explicit duration in the description wins. Otherwise the speed metric
    is shown as is for Chinese and mapped to a duration for English.
    """
    duration = extract_duration(description)
    if duration:
        return duration
    if locale == "zh":
        return speed
    return SPEED_LABELS.get(speed, speed)


def visible_challenger(challenger: str) -> str:
    """Return ``challenger`` unless it is blank or the placeholder."""
    if not challenger.strip() or challenger == CHALLENGER_PLACEHOLDER:
        return ""
    return challenger


def _metric(record: ArenaRecord, name: str) -> str:
    return getattr(record.metrics, name) or METRIC_DEFAULTS[name]


def build_hero(record: ArenaRecord, locale: str) -> HeroView:
    """Return the hero view for ``record`` in ``locale``."""
    english = locale != "zh"
    description = record.highlights_en if english else record.highlights
    ratings = [
        MetricRating(
            label=localized(locale, "质量", "Quality"),
            stars=star_rating(_metric(record, "quality")),
            color="yellow",
        ),
        MetricRating(
            label=localized(locale, "安全", "Security"),
            stars=star_rating(_metric(record, "security")),
            color="emerald",
        ),
        MetricRating(
            label=localized(locale, "成本", "Cost"),
            stars=star_rating(_metric(record, "cost")),
            color="blue",
        ),
    ]
    return HeroView(
        title=record.title(locale),
        verified=record.status == "verified",
        status_label=localized(locale, "已验证", "Verified"),
        champion=record.champion_en if english else record.champion,
        challenger=(record.challenger_en if english else record.challenger)
        if visible_challenger(record.challenger)
        else "",
        description=description,
        speed_label=speed_label(description, _metric(record, "speed"), locale),
        ratings=ratings,
    )


__all__ = [
    "DURATION_PATTERNS",
    "METRIC_DEFAULTS",
    "SPEED_LABELS",
    "STAR_RATINGS",
    "build_hero",
    "extract_duration",
    "speed_label",
    "star_rating",
    "visible_challenger",
]
