"""Group configuration subsection content into renderable blocks."""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

if typ.TYPE_CHECKING:
    from .models import CodeFence, Subsection

BlockKind = typ.Literal["code", "list", "link", "text"]

ORDERED_ITEM_PATTERN = re.compile(r"^\d+\.")


@dc.dataclass(slots=True)
class ContentBlock:
    """Run of subsection lines sharing one presentation.

    Attributes
    ----------
    kind : str
        One of ``"code"``, ``"list"``, ``"link"``, or ``"text"``.
    lines : list[str]
        Verbatim lines for code blocks, trimmed lines otherwise.
    language : str
        Fence label for code blocks; empty for other kinds.
    """

    kind: BlockKind
    lines: list[str] = dc.field(default_factory=list)
    language: str = ""


def is_list_item(line: str) -> bool:
    """Return True for ``-`` bullets and ``N.`` ordered items."""
    return bool(ORDERED_ITEM_PATTERN.match(line)) or line.startswith("-")


def is_link_line(line: str) -> bool:
    """Return True when ``line`` looks like it carries a markdown link."""
    return "[" in line and "](" in line


def group_blocks(subsection: Subsection) -> list[ContentBlock]:
    """Return ``subsection`` content grouped into code, list, link, and text blocks."""
    starts: dict[int, list[CodeFence]] = {}
    for fence in subsection.fences:
        starts.setdefault(fence.start, []).append(fence)
    content = subsection.content
    blocks: list[ContentBlock] = []
    current: ContentBlock | None = None

    def flush() -> None:
        nonlocal current
        if current is not None:
            blocks.append(current)
        current = None

    index = 0
    while index < len(content) or index in starts:
        if index in starts:
            flush()
            end = index
            for fence in starts.pop(index):
                blocks.append(
                    ContentBlock(
                        kind="code",
                        lines=content[fence.start : fence.end],
                        language=fence.language,
                    )
                )
                end = max(end, fence.end)
            index = end
            continue

        line = content[index].strip()
        index += 1
        if not line:
            flush()
            continue

        if is_list_item(line):
            if current is not None and current.kind != "list":
                flush()
            if current is None:
                current = ContentBlock(kind="list")
            current.lines.append(line)
        elif is_link_line(line):
            flush()
            blocks.append(ContentBlock(kind="link", lines=[line]))
        else:
            if current is not None and current.kind == "list":
                flush()
            if current is None:
                current = ContentBlock(kind="text")
            current.lines.append(line)

    flush()
    return blocks


__all__ = ["ContentBlock", "group_blocks", "is_link_line", "is_list_item"]
