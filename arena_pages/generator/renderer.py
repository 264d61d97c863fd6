"""Render markdown and highlighted code for arena pages."""

from __future__ import annotations

import re
from html import escape

from markdown import Markdown
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

MARKDOWN_EXTENSIONS: tuple[str, ...] = ("fenced_code", "codehilite", "tables", "sane_lists")
FENCE_PATTERN = re.compile(r"^[ \t]*```([A-Za-z0-9_+#.-]*)", re.MULTILINE)
FENCE_INDENT_PATTERN = re.compile(r"^[ \t]{1,3}(```)", re.MULTILINE)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')


class ArenaContentRenderer:
    """Render markdown documents and code snippets with one Pygments style."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render ``text`` into HTML, labelling each code block with its language.

        Indented fences are pulled to the margin first so exported documents
        that nest fences under list items still highlight.
        """
        normalized = FENCE_INDENT_PATTERN.sub(r"\1", text)
        if not normalized.strip():
            return ""
        md = Markdown(
            extensions=list(MARKDOWN_EXTENSIONS),
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        html = md.convert(normalized)
        return self._label_code_blocks(html, _fence_languages(normalized))

    def code_block(self, code: str, language: str | None = None) -> str:
        """Render ``code`` into highlighted HTML.

        Parameters
        ----------
        code : str
            Source snippet to highlight.
        language : str, optional
            Pygments lexer alias; unknown or missing aliases fall back to
            plain text.

        Returns
        -------
        str
            HTML with a ``data-language`` attribute on the wrapper.
        """
        lang = language or "text"
        try:
            lexer = get_lexer_by_name(lang)
        except ClassNotFound:
            lexer = get_lexer_by_name("text")
        html = highlight(code, lexer, self._formatter)
        return self._label_code_blocks(html, [lang])

    @staticmethod
    def _label_code_blocks(html: str, languages: list[str]) -> str:
        """Attach ``data-language`` to the first ``len(languages)`` code blocks."""
        if not languages:
            return html
        labels = iter(languages)

        def _repl(_match: re.Match[str]) -> str:
            lang = escape(next(labels, "text") or "text", quote=True)
            return f'<div class="codehilite" data-language="{lang}">'

        return CODEHILITE_OPEN_TAG.sub(_repl, html, len(languages))


def _fence_languages(text: str) -> list[str]:
    """Return the language label of every opening fence in ``text``."""
    languages: list[str] = []
    inside = False
    for match in FENCE_PATTERN.finditer(text):
        if not inside:
            languages.append(match.group(1) or "text")
        inside = not inside
    return languages


__all__ = ["MARKDOWN_EXTENSIONS", "ArenaContentRenderer"]
