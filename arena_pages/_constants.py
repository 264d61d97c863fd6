"""Common literal values used across arena_pages.

These constants keep tab identifiers, document filenames, and output paths
centralized so the generator, the CLI, and tests build the same paths.

Examples
--------
>>> from arena_pages import _constants
>>> _constants.CONTENT_FILENAME_TEMPLATE.format(tab="overview", locale="en")
'overview.en.md'
>>> _constants.PAGE_PATH_TEMPLATE.format(locale="zh", folder="10-nl2sql")
'zh/arena/10-nl2sql.html'
"""

TAB_KEYS: tuple[str, ...] = ("overview", "implementation", "tech-configuration")
CONTENT_FILENAME_TEMPLATE = "{tab}.{locale}.md"
PAGE_PATH_TEMPLATE = "{locale}/arena/{folder}.html"
PAGE_TEMPLATE = "arena_page.html.jinja"
