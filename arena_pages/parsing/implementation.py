r"""Parse implementation guides into numbered phases.

Phases open with ``__PHASE <n> <title>__`` and subsections with any other line
wrapped in double underscores. Content is only recorded while both a phase and
a subsection are open; stray lines inside a phase are dropped rather than
collected into an implicit subsection.

Example
-------
>>> from arena_pages.parsing.implementation import parse_phases
>>> phase = parse_phases("__PHASE 1 Plan__\n__Team__\nAlice")[0]
>>> (phase.number, phase.title, phase.subsections[0].content)
(1, 'Plan', ['Alice'])
"""

from __future__ import annotations

import re

from .icons import phase_icon, phase_subsection_icon
from .models import Phase, Subsection
from .overview import is_noise

PHASE_PATTERN = re.compile(r"^__PHASE\s+([0-9]+)\s+(.+)__$")
WRAPPED_PATTERN = re.compile(r"^__(.+)__$")


def parse_phases(text: str) -> list[Phase]:
    """Split an implementation guide into phases and subsections.

    Parameters
    ----------
    text : str
        Locale-resolved implementation markdown.

    Returns
    -------
    list[Phase]
        Phases in document order, each numbered from its header.
    """
    phases: list[Phase] = []
    phase: Phase | None = None
    subsection: Subsection | None = None

    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if is_noise(line):
            continue

        if match := PHASE_PATTERN.match(line):
            if phase is not None:
                if subsection is not None:
                    phase.subsections.append(subsection)
                phases.append(phase)
            number = int(match.group(1))
            phase = Phase(
                title=match.group(2).strip(),
                icon=phase_icon(number),
                number=number,
            )
            subsection = None
            continue

        match = WRAPPED_PATTERN.match(line)
        if match and phase is not None:
            if subsection is not None:
                phase.subsections.append(subsection)
            title = match.group(1).strip()
            subsection = Subsection(title=title, icon=phase_subsection_icon(title))
            continue

        if phase is not None and subsection is not None:
            subsection.content.append(line)

    if phase is not None:
        if subsection is not None:
            phase.subsections.append(subsection)
        phases.append(phase)
    return phases


__all__ = ["PHASE_PATTERN", "WRAPPED_PATTERN", "parse_phases"]
