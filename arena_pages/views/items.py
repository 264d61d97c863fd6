"""Line classification helpers shared by the card builders."""

from __future__ import annotations

import re

from .models import ContentItem

LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
ORDINAL_PATTERN = re.compile(r"^\d+\.\s*")
SUBSECTION_ORDINAL_PATTERN = re.compile(r"^\d+\.(?:\d+\.?)?\s*")
ORDERED_PATTERN = re.compile(r"^\d+\.")
BULLET_PREFIX = re.compile(r"^-\s*")
KEY_VALUE_PATTERN = re.compile(r"\*\*([^*]+)\*\*:\s*(.+)")
BOLD_LABEL_PATTERN = re.compile(r"^\*\*[^*]+\*\*[:：]?$")
LIST_SPLIT_PATTERN = re.compile(r"[，,]")


def localized(locale: str, zh: str, en: str) -> str:
    """Return the Chinese string for the ``zh`` locale, English otherwise."""
    return zh if locale == "zh" else en


def strip_bold(text: str) -> str:
    """Remove ``**`` emphasis markers."""
    return text.replace("**", "")


def strip_ordinal(title: str) -> str:
    """Remove a leading ``N.`` prefix from a section title."""
    return ORDINAL_PATTERN.sub("", title, count=1)


def strip_subsection_ordinal(title: str) -> str:
    """Remove ``N.``, ``N.M`` or ``N.M.`` prefixes from a subsection title."""
    return SUBSECTION_ORDINAL_PATTERN.sub("", title, count=1)


def bullet_text(line: str) -> str:
    """Return a bullet line's text without its marker and bold markers."""
    return strip_bold(BULLET_PREFIX.sub("", line, count=1))


def bullet_items(content: list[str]) -> list[str]:
    """Return the text of every ``-`` bullet in ``content``."""
    return [bullet_text(line) for line in content if line.startswith("-")]


def find_link(line: str) -> tuple[str, str] | None:
    """Return ``(text, href)`` for the first markdown link in ``line``."""
    match = LINK_PATTERN.search(line)
    if match is None:
        return None
    return match.group(1), match.group(2)


def key_value(line: str) -> tuple[str, str] | None:
    """Return ``(key, value)`` from a ``**Key**: value`` line."""
    match = KEY_VALUE_PATTERN.search(line)
    if match is None:
        return None
    return match.group(1), match.group(2).strip()


def split_list(value: str) -> list[str]:
    """Split a comma list that may use ASCII or full-width commas."""
    return [item.strip() for item in LIST_SPLIT_PATTERN.split(value) if item.strip()]


def classify_card_line(line: str) -> ContentItem:
    """Classify an overview card line as a bullet, bold label, or text."""
    if line.startswith("-"):
        return ContentItem(kind="bullet", text=bullet_text(line))
    if line.startswith("**") and line.endswith("**"):
        return ContentItem(kind="bold", text=strip_bold(line))
    return ContentItem(kind="text", text=line)


def classify_guide_line(line: str) -> ContentItem | None:
    """Classify an implementation guide line.

    Ordered items and bullets keep their text, markdown links become link
    items, and remaining lines become plain text. Lines that begin with
    ``__`` are structural leftovers and yield ``None``.
    """
    if ORDERED_PATTERN.match(line):
        return ContentItem(kind="ordered", text=ORDINAL_PATTERN.sub("", line, count=1))
    if line.startswith("-"):
        return ContentItem(kind="bullet", text=bullet_text(line))
    if "[" in line and "]" in line:
        link = find_link(line)
        if link is not None:
            return ContentItem(kind="link", text=link[0], href=link[1])
    if not line or line.startswith("__"):
        return None
    return ContentItem(kind="text", text=strip_bold(line))


__all__ = [
    "BOLD_LABEL_PATTERN",
    "LINK_PATTERN",
    "bullet_items",
    "bullet_text",
    "classify_card_line",
    "classify_guide_line",
    "find_link",
    "key_value",
    "localized",
    "split_list",
    "strip_bold",
    "strip_ordinal",
    "strip_subsection_ordinal",
]
