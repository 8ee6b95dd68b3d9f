# src/chronoline/cli.py
"""
chronoline Command Line Interface (CLI).

Builds timeline widget data from a JSON document (see
:mod:`chronoline.documents`) using `typer` and `rich`.

Usage
-----
    # Print the widget JSON to stdout
    $ chronoline build samples/events.json

    # Write to a file, forcing colors and the year span
    $ chronoline build samples/works.json -o timeline.json --color red --start-year 1800

    # Only print the year span
    $ chronoline span samples/events.json
"""

from __future__ import annotations

import traceback
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from chronoline import __version__
from chronoline.core.errors import TimelineError
from chronoline.core.source import TimelineSource
from chronoline.documents import load_document

load_dotenv()

app = typer.Typer(
    help="chronoline: normalize dated records into timeline widget data.",
    rich_markup_mode="markdown",
)
# Diagnostics go to stderr so stdout stays valid JSON.
console = Console(stderr=True)


DocumentArg = Annotated[
    Path,
    typer.Argument(
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="JSON document with either `events` or `sources`.",
    ),
]


def _load(document: Path, verbose: bool = False, **overrides: object) -> TimelineSource:
    """Helper: build the timeline, turning library errors into exit code 1."""
    try:
        return load_document(document).build(**overrides)
    except TimelineError as e:
        console.print(f"[bold red]❌ {type(e).__name__}:[/bold red] {e}")
        if verbose:
            traceback.print_exc()
        raise typer.Exit(code=1) from e


def _render_summary(timeline: TimelineSource) -> None:
    """Helper: short table of the built events."""
    table = Table(title=f"{len(timeline)} events, {timeline.first_year()}-{timeline.last_year()}")
    table.add_column("start")
    table.add_column("end")
    table.add_column("title")
    for event in timeline:
        table.add_row(event.start, event.end or "[dim]duration[/dim]", event.title)
    console.print(table)


@app.command()  # type: ignore[misc]
def build(
    document: DocumentArg,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the JSON here instead of stdout."),
    ] = None,
    color: Annotated[str | None, typer.Option(help="Default event color.")] = None,
    text_color: Annotated[str | None, typer.Option(help="Default event text color.")] = None,
    start_year: Annotated[int | None, typer.Option(help="Override the first year.")] = None,
    final_year: Annotated[int | None, typer.Option(help="Override the last year.")] = None,
    only_with_data: Annotated[
        bool,
        typer.Option("--only-with-data", help="Produce no output for an empty timeline."),
    ] = False,
    summary: Annotated[
        bool, typer.Option("--summary/--no-summary", help="Show an event table on stderr.")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show full error tracebacks.")
    ] = False,
) -> None:
    """Build the timeline widget JSON for DOCUMENT."""
    timeline = _load(
        document,
        verbose,
        color=color,
        text_color=text_color,
        start_year=start_year,
        final_year=final_year,
    )

    if timeline.is_empty() and only_with_data:
        console.print("[dim]Timeline is empty; nothing written.[/dim]")
        return

    if summary:
        _render_summary(timeline)

    payload = timeline.serialize()
    if output is None:
        typer.echo(payload)
        return

    output.write_text(payload + "\n", encoding="utf-8")
    console.print(
        Panel(
            f"{len(timeline)} events, years {timeline.first_year()}-{timeline.last_year()}\n"
            f"Saved to: [link=file://{output}]{output}[/link]",
            title="Timeline",
            border_style="green",
        )
    )


@app.command()  # type: ignore[misc]
def span(document: DocumentArg) -> None:
    """Print the first and last year covered by DOCUMENT."""
    timeline = _load(document)
    typer.echo(f"{timeline.first_year()} {timeline.last_year()}")


@app.command()  # type: ignore[misc]
def version() -> None:
    """Print the package version."""
    typer.echo(__version__)


if __name__ == "__main__":
    app()
