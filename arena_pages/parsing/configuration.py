r"""Parse technical configuration documents into numbered steps.

Configuration documents are exported from a tabular template, so each step
is introduced by a ``__Step Number__`` marker followed by the number, a
``__Step Name__`` marker followed by the name, and then any number of
``__Heading__`` subsections. Everything before the first language marker
(``####``) or document title (``# ``) is preamble and ignored.

Fenced code blocks are captured verbatim: lines inside a fence keep their
indentation and are never read as headings, list items, or links. The fence
lines themselves are dropped and the captured range is recorded on the
subsection as a :class:`~arena_pages.parsing.models.CodeFence`.

Example
-------
>>> from arena_pages.parsing.configuration import parse_steps
>>> doc = (
...     "# Setup\n__Step Number__\n2\n__Step Name__\nInstall\n"
...     "__Step Input__\n```bash\n  - pip install x\n```\n"
... )
>>> step = parse_steps(doc)[0]
>>> (step.number, step.title, step.subsections[0].content)
(2, 'Install', ['  - pip install x'])
"""

from __future__ import annotations

import re

from .icons import step_icon, step_subsection_icon
from .models import CodeFence, Step, Subsection
from .overview import is_noise

STEP_NUMBER_MARKERS = frozenset({"__Step Number__", "__步骤序号__"})
STEP_NAME_MARKERS = frozenset({"__Step Name__", "__步骤名称__"})
STRUCTURAL_TITLES = frozenset({"Step Number", "步骤序号", "Step Name", "步骤名称"})
CONTENT_START_PREFIXES = ("####", "# ")
FENCE_PREFIX = "```"
WRAPPED_PATTERN = re.compile(r"^__(.+)__$")
LEADING_INT_PATTERN = re.compile(r"^[+-]?\d+")

DEFAULT_STEP_NUMBER = 1


def _leading_int(text: str) -> int | None:
    """Return the integer at the start of ``text``, or None when absent."""
    match = LEADING_INT_PATTERN.match(text)
    return int(match.group(0)) if match else None


def _lookahead_number(lines: list[str], start: int) -> int:
    """Return the step number written after the marker at ``start``."""
    for raw_line in lines[start + 1 :]:
        line = raw_line.strip()
        if line and not line.startswith("__"):
            return _leading_int(line) or DEFAULT_STEP_NUMBER
    return DEFAULT_STEP_NUMBER


def _lookahead_name(lines: list[str], start: int) -> str | None:
    """Return the step name that follows the next name marker, if any."""
    after_marker = False
    for raw_line in lines[start + 1 :]:
        line = raw_line.strip()
        if not after_marker:
            after_marker = line in STEP_NAME_MARKERS
            continue
        if line and not line.startswith("__"):
            return line
    return None


class _StepBuilder:
    """Accumulate steps while scanning a configuration document."""

    def __init__(self) -> None:
        self.steps: list[Step] = []
        self.step: Step | None = None
        self.subsection: Subsection | None = None
        self.fence: CodeFence | None = None
        self.in_code = False

    def open_step(self, number: int, title: str | None) -> None:
        self._close_step()
        self.step = Step(
            title=title or f"Step {number}",
            icon=step_icon(number),
            number=number,
        )

    def open_subsection(self, title: str) -> None:
        if self.step is None:
            return
        self._close_subsection()
        self.subsection = Subsection(title=title, icon=step_subsection_icon(title))

    def toggle_fence(self, marker: str) -> None:
        if self.in_code:
            self._close_fence()
            self.in_code = False
            return
        self.in_code = True
        if self.step is not None and self.subsection is not None:
            language = marker[len(FENCE_PREFIX) :].strip()
            start = len(self.subsection.content)
            self.fence = CodeFence(language=language, start=start, end=start)

    def add_code(self, raw_line: str) -> None:
        if self.fence is not None and self.subsection is not None:
            self.subsection.content.append(raw_line)

    def add_content(self, raw_line: str) -> None:
        if self.step is not None and self.subsection is not None:
            self.subsection.content.append(raw_line)

    def finish(self) -> list[Step]:
        self._close_step()
        return self.steps

    def _close_fence(self) -> None:
        if self.fence is not None and self.subsection is not None:
            self.fence.end = len(self.subsection.content)
            self.subsection.fences.append(self.fence)
        self.fence = None

    def _close_subsection(self) -> None:
        self._close_fence()
        if self.step is not None and self.subsection is not None:
            self.step.subsections.append(self.subsection)
        self.subsection = None

    def _close_step(self) -> None:
        self._close_subsection()
        if self.step is not None:
            self.steps.append(self.step)
        self.step = None


def parse_steps(text: str) -> list[Step]:
    """Split a technical configuration document into steps.

    Parameters
    ----------
    text : str
        Locale-resolved configuration markdown.

    Returns
    -------
    list[Step]
        Steps in document order. An empty list means the document carried no
        step markers; callers show the raw text instead.
    """
    lines = text.split("\n")
    builder = _StepBuilder()
    started = False

    for index, raw_line in enumerate(lines):
        line = raw_line.strip()
        if not started:
            started = line.startswith(CONTENT_START_PREFIXES)
            continue

        if line.startswith(FENCE_PREFIX):
            builder.toggle_fence(line)
            continue
        if builder.in_code:
            builder.add_code(raw_line)
            continue

        if line.startswith(CONTENT_START_PREFIXES) or is_noise(line):
            continue

        if line in STEP_NUMBER_MARKERS:
            number = _lookahead_number(lines, index)
            builder.open_step(number, _lookahead_name(lines, index))
            continue

        if match := WRAPPED_PATTERN.match(line):
            title = match.group(1).strip()
            if title not in STRUCTURAL_TITLES:
                builder.open_subsection(title)
            continue

        if not line.startswith("__"):
            builder.add_content(raw_line)

    return builder.finish()


__all__ = [
    "STEP_NAME_MARKERS",
    "STEP_NUMBER_MARKERS",
    "parse_steps",
]
