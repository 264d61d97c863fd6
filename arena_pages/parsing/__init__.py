"""Grammars that turn arena content documents into ordered section trees.

Three document shapes share the same tree model:

- overview documents (``##``/``###`` headings) via :func:`parse_sections`;
- implementation guides (``__PHASE n title__``) via :func:`parse_phases`;
- technical configuration exports (``__Step Number__`` markers) via
  :func:`parse_steps`.

Every parser is a pure function of its input text.
"""

from .blocks import ContentBlock, group_blocks
from .configuration import parse_steps
from .implementation import parse_phases
from .models import CodeFence, Phase, Section, Step, Subsection
from .overview import parse_sections

__all__ = [
    "CodeFence",
    "ContentBlock",
    "Phase",
    "Section",
    "Step",
    "Subsection",
    "group_blocks",
    "parse_phases",
    "parse_sections",
    "parse_steps",
]
