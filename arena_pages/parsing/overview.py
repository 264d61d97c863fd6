r"""Parse arena overview documents into ordered sections.

Overview documents use ``##`` for sections and ``###`` for subsections.
Lines beginning with ``####`` mark the secondary language and carry no
content. Text that follows a section heading before any subsection heading is
collected into an implicit, untitled subsection.

Example
-------
>>> from arena_pages.parsing.overview import parse_sections
>>> sections = parse_sections("## Title A\ncontent 1\n### Sub\ncontent 2")
>>> [(sub.title, sub.content) for sub in sections[0].subsections]
[(None, ['content 1']), ('Sub', ['content 2'])]
"""

from __future__ import annotations

import re

from .icons import section_icon
from .models import Section, Subsection

SECTION_PATTERN = re.compile(r"^##\s+(.+)")
SUBSECTION_PATTERN = re.compile(r"^###\s+(.+)")
LANGUAGE_MARKER = "####"
SEPARATOR = "---"


def is_noise(line: str) -> bool:
    """Return True for blank lines and ``---`` separators."""
    return not line or line == SEPARATOR


def parse_sections(text: str) -> list[Section]:
    """Split an overview document into sections and subsections.

    Parameters
    ----------
    text : str
        Locale-resolved overview markdown.

    Returns
    -------
    list[Section]
        Sections in document order. Content appearing before the first
        section heading is discarded, and a ``###`` heading outside a section
        is ignored.
    """
    sections: list[Section] = []
    section: Section | None = None
    subsection: Subsection | None = None

    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if is_noise(line):
            continue

        if match := SECTION_PATTERN.match(line):
            if section is not None:
                if subsection is not None:
                    section.subsections.append(subsection)
                sections.append(section)
            title = match.group(1).strip()
            section = Section(title=title, icon=section_icon(title))
            subsection = None
            continue

        match = SUBSECTION_PATTERN.match(line)
        if match and section is not None:
            if subsection is not None:
                section.subsections.append(subsection)
            subsection = Subsection(title=match.group(1).strip())
            continue

        if line.startswith(LANGUAGE_MARKER):
            continue

        if section is None:
            continue
        if subsection is None:
            subsection = Subsection(content=[line])
        else:
            subsection.content.append(line)

    if section is not None:
        if subsection is not None:
            section.subsections.append(subsection)
        sections.append(section)
    return sections


__all__ = ["SECTION_PATTERN", "SUBSECTION_PATTERN", "is_noise", "parse_sections"]
