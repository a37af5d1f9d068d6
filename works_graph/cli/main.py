# works_graph/cli/main.py

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from works_graph.config.settings import get_settings
from works_graph.errors import DocumentLoadError, RendererError, WorksValidationError
from works_graph.graph.builder import build_citation_graph, citation_counts
from works_graph.graph.dot import render_graph, write_graph
from works_graph.loader import load_works
from works_graph.models.works import Works, find_problems
from works_graph.render import RAW_OUTPUT_TYPE, render

app = typer.Typer(help="Build citation graphs of related works.")

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _load(works_file: Path) -> Works:
    try:
        return load_works(works_file)
    except DocumentLoadError as e:
        err_console.print(f"[red]Failed to load works:[/red] {escape(str(e))}", soft_wrap=True, highlight=False)
        raise typer.Exit(code=1)


def _load_valid(works_file: Path) -> Works:
    document = _load(works_file)
    try:
        document.validate()
    except WorksValidationError as e:
        err_console.print(f"[red]Invalid works document:[/red] {escape(str(e))}", soft_wrap=True, highlight=False)
        raise typer.Exit(code=1)
    return document


@contextmanager
def _open_output(output_path: Optional[Path]) -> Iterator[BinaryIO]:
    """
    Binary sink for the result: the given file (created or truncated) or
    standard output. Files are closed on every exit path; stdout is only
    flushed.
    """
    if output_path is None:
        sys.stdout.flush()
        out = sys.stdout.buffer
        try:
            yield out
        finally:
            out.flush()
        return

    with Path(output_path).open("wb") as f:
        yield f


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level. Defaults to settings.LOG_LEVEL.",
    ),
) -> None:
    level = (log_level or get_settings().LOG_LEVEL).upper()
    if level not in logging.getLevelNamesMapping():
        err_console.print(f"[red]Unknown log level:[/red] {escape(level)}", soft_wrap=True, highlight=False)
        raise typer.Exit(code=1)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@app.command("gen")
def gen(
    works_file: Path = typer.Argument(
        ...,
        help="TOML file describing works and authors.",
    ),
    output_type: Optional[str] = typer.Option(
        None,
        "-t",
        "--type",
        help="Output format (svg, png, pdf, ...). 'dot' writes the raw graph description. "
        "Defaults to settings.DEFAULT_OUTPUT_TYPE.",
    ),
    output_path: Optional[Path] = typer.Option(
        None,
        "-o",
        "--output",
        help="Output file. Defaults to standard output.",
    ),
    renderer: Optional[str] = typer.Option(
        None,
        "--renderer",
        help="Graphviz command to render with. Defaults to settings.DOT_COMMAND.",
    ),
):
    """
    Generate the citation graph of WORKS_FILE.
    """
    output_type = output_type or get_settings().DEFAULT_OUTPUT_TYPE
    document = _load_valid(works_file)

    if output_type == RAW_OUTPUT_TYPE:
        try:
            with _open_output(output_path) as sink:
                write_graph(document, sink)
        except OSError as e:
            err_console.print(f"[red]Failed to write graph:[/red] {escape(str(e))}", soft_wrap=True, highlight=False)
            raise typer.Exit(code=1)
        return

    # Render before opening the output so a failing renderer leaves no file.
    try:
        image = render(render_graph(document).encode("utf-8"), output_type, command=renderer)
    except RendererError as e:
        err_console.print(f"[red]Rendering failed:[/red] {escape(str(e))}", soft_wrap=True, highlight=False)
        raise typer.Exit(code=1)

    try:
        with _open_output(output_path) as sink:
            sink.write(image)
    except OSError as e:
        err_console.print(f"[red]Failed to write output:[/red] {escape(str(e))}", soft_wrap=True, highlight=False)
        raise typer.Exit(code=1)

    logger.info("Wrote %d byte(s) of %s output", len(image), output_type)


@app.command("check")
def check(
    works_file: Path = typer.Argument(
        ...,
        help="TOML file describing works and authors.",
    ),
):
    """
    Validate WORKS_FILE and list every dangling author or work id.
    """
    document = _load(works_file)
    problems = find_problems(document)

    if not problems:
        console.print(
            f"[green]OK:[/green] {len(document.works)} works, {len(document.authors)} authors",
            highlight=False,
        )
        return

    for problem in problems:
        err_console.print(f"[red]-[/red] {escape(str(problem))}", soft_wrap=True, highlight=False)
    err_console.print(f"[red]{len(problems)} problem(s) found.[/red]")
    raise typer.Exit(code=1)


@app.command("summary")
def summary(
    works_file: Path = typer.Argument(
        ...,
        help="TOML file describing works and authors.",
    ),
):
    """
    Show each work with its reference and cited-by counts.
    """
    document = _load_valid(works_file)
    G = build_citation_graph(document)

    table = Table(title=f"Works ({len(document.works)})")
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Year", justify="right")
    table.add_column("Title")
    table.add_column("Authors")
    table.add_column("Refs", justify="right")
    table.add_column("Cited by", justify="right")

    for row in citation_counts(G):
        table.add_row(
            row["work_id"],
            "" if row["year"] is None else str(row["year"]),
            row["title"],
            ", ".join(row["authors"]),
            str(row["references"]),
            str(row["cited_by"]),
        )

    console.print(table)


if __name__ == "__main__":
    app()
