"""Dataclasses shared by the arena content grammars."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(slots=True)
class CodeFence:
    """Range of fenced code lines captured inside a subsection.

    Attributes
    ----------
    language : str
        Label following the opening fence; empty when none was given.
    start : int
        Index of the first fenced line within ``Subsection.content``.
    end : int
        Index one past the last fenced line.
    """

    language: str
    start: int
    end: int


@dc.dataclass(slots=True)
class Subsection:
    """Nested block of content lines.

    Attributes
    ----------
    title : str or None
        Heading text; ``None`` for an implicit subsection created to hold
        content that arrived before any explicit heading.
    icon : str or None
        Presentational tag derived from ``title``; only the phase and step
        grammars assign one.
    content : list[str]
        Lines in their original order.
    fences : list[CodeFence]
        Fenced code ranges within ``content`` (configuration grammar only).
    """

    title: str | None = None
    icon: str | None = None
    content: list[str] = dc.field(default_factory=list)
    fences: list[CodeFence] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class Section:
    """Titled top-level block parsed from an overview document.

    Attributes
    ----------
    title : str
        Raw text following the ``##`` marker.
    icon : str
        Tag derived from keywords in ``title``.
    subsections : list[Subsection]
        Child blocks in document order.
    """

    title: str
    icon: str
    subsections: list[Subsection] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class Phase(Section):
    """Implementation phase; a section carrying its phase number."""

    number: int = 0


@dc.dataclass(slots=True)
class Step(Section):
    """Technical configuration step; a section carrying its step number."""

    number: int = 1


__all__ = ["CodeFence", "Phase", "Section", "Step", "Subsection"]
