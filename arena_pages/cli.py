"""Cyclopts CLI entrypoint for arena detail pages and the arena list sync.

The ``arena-pages`` console script defined here renders static HTML detail
pages from each arena's content documents, syncs the arena list spreadsheet
into markdown listings and a TypeScript data module, and prints the parsed
tree of a single content document so authors can check its structure.

Examples
--------
Generate every arena page for the default configuration:

>>> from arena_pages.cli import main
>>> main()  # doctest: +SKIP

Inspect how a configuration export parses:

>>> from arena_pages.cli import app
>>> app.run(
...     ["inspect", "--grammar", "configuration", "tech-configuration.zh.md"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .generator import ArenaPageGenerator
from .parsing import parse_phases, parse_sections, parse_steps
from .sync import ArenaSyncError, sync_arena_list

if typ.TYPE_CHECKING:
    from .parsing import Section

DEFAULT_CONFIG = Path("config/arena.yaml")

Grammar = typ.Literal["overview", "implementation", "configuration"]

GRAMMARS: dict[str, typ.Callable[[str], typ.Sequence[Section]]] = {
    "overview": parse_sections,
    "implementation": parse_phases,
    "configuration": parse_steps,
}

app = App(name="arena-pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _fail(message: str) -> typ.NoReturn:
    print(message, file=sys.stderr)
    sys.exit(1)


@app.command(help="Generate static HTML arena detail pages from content documents.")
def generate(
    *,
    arena: typ.Annotated[
        str | None, Parameter(help="Arena identifier", env_var="INPUT_ARENA")
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
) -> None:
    """Generate arena detail pages for the requested site configuration.

    Parameters
    ----------
    arena : str or None, optional
        Specific arena key to render; when ``None`` (default) every arena is
        rendered.
    config : Path, optional
        Path to the ``arena.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Override for the HTML output directory.

    Returns
    -------
    None
        Writes rendered pages and prints the generated paths.
    """
    site_config = load_site_config(config)
    generator = ArenaPageGenerator(site_config, output_dir=output_dir)
    for path in generator.run(arena):
        print(f"wrote {_format_path(path)}")


@app.command(help="Sync the arena list spreadsheet into listings and a data module.")
def sync(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Read the arena list workbook and write the generated files.

    A missing workbook, a missing ``sync`` section, or an empty arena list is
    reported on stderr and exits with status 1.
    """
    site_config = load_site_config(config)
    if site_config.sync is None:
        _fail(f"No 'sync' section in {_format_path(config)}.")
    try:
        result = sync_arena_list(site_config.sync)
    except (FileNotFoundError, ArenaSyncError) as exc:
        _fail(str(exc))
    for path in result.written:
        print(f"wrote {_format_path(path)}")
    print(f"total arenas: {result.arena_count}")


def format_tree(sections: typ.Sequence[Section]) -> str:
    """Return the parsed tree as indented text, one node per line."""
    lines: list[str] = []
    for section in sections:
        number = getattr(section, "number", None)
        prefix = f"{number}. " if number is not None else ""
        lines.append(f"{section.icon} {prefix}{section.title}")
        for sub in section.subsections:
            title = sub.title if sub.title is not None else "(untitled)"
            icon = f"{sub.icon} " if sub.icon else ""
            lines.append(f"  {icon}{title} [{len(sub.content)} lines]")
            lines.extend(
                f"    code {fence.language or 'text'} [{fence.end - fence.start} lines]"
                for fence in sub.fences
            )
    return "\n".join(lines)


@app.command(help="Print the section tree parsed from a content document.")
def inspect(
    path: typ.Annotated[Path, Parameter(help="Content document to parse")],
    *,
    grammar: typ.Annotated[
        Grammar, Parameter(help="Grammar used to parse the document")
    ] = "overview",
) -> None:
    """Parse ``path`` with ``grammar`` and print the resulting tree."""
    if not path.is_file():
        _fail(f"Content document '{_format_path(path)}' not found.")
    sections = GRAMMARS[grammar](path.read_text(encoding="utf-8"))
    if not sections:
        print(f"no {grammar} sections found")
        return
    print(format_tree(sections))


def main() -> None:
    """Invoke the Cyclopts application that powers the ``arena-pages`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
