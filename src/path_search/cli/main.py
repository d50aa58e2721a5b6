"""Main CLI entry point using Typer."""

import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from path_search import __version__
from path_search.protocol import (
    SCAN_ACTION,
    RequestError,
    handle_request,
    read_request,
)
from path_search.scanner.emitter import ResponseEmitter
from path_search.scanner.walker import scan_request
from path_search.schemas.request import SearchRequest
from path_search.schemas.responses import SearchResponse, display_name

app = typer.Typer(
    name="path-search",
    help="Fuzzy file name and path search over a directory tree.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"path-search v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """path-search - streaming fuzzy file finder."""
    pass


@app.command()
def request(
    input_file: Annotated[
        Path | None,
        typer.Option(
            "--input",
            "-i",
            help="Read the JSON request from a file instead of stdin.",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """Read a JSON request and stream JSON responses to stdout."""
    try:
        if input_file is None:
            search_request = read_request(sys.stdin)
        else:
            with open(input_file, encoding="utf-8") as f:
                search_request = read_request(f)
        handle_request(search_request, ResponseEmitter(sys.stdout))
    except RequestError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1) from e


@app.command()
def scan(
    project_path: Annotated[
        Path,
        typer.Argument(help="Root directory to scan."),
    ],
    query: Annotated[
        str,
        typer.Option(
            "--query",
            "-q",
            help="Search string. Empty lists every file.",
        ),
    ] = "",
    skip_dir: Annotated[
        list[str] | None,
        typer.Option(
            "--skip-dir",
            "-s",
            help="Extra directory name to skip (can repeat).",
        ),
    ] = None,
    max_time: Annotated[
        int,
        typer.Option("--max-time", help="Time budget in seconds (0 = default)."),
    ] = 0,
    max_results: Annotated[
        int,
        typer.Option("--max-results", help="Maximum number of results (0 = default)."),
    ] = 0,
    chunk_size: Annotated[
        int,
        typer.Option("--chunk-size", help="Results per partial response (0 = default)."),
    ] = 0,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            "-j",
            help="Stream JSON responses instead of a table.",
        ),
    ] = False,
) -> None:
    """Search a directory tree for files matching a query."""
    search_request = SearchRequest(
        action=SCAN_ACTION,
        project_path=str(project_path),
        query=query,
        skip_dirs=skip_dir or [],
        max_time=max_time,
        max_results=max_results,
        chunk_size=chunk_size,
    )

    if json_output:
        handle_request(search_request, ResponseEmitter(sys.stdout))
        return

    console = Console()
    final: SearchResponse | None = None

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("🔍 Scanning...", total=None)
        for response in scan_request(search_request):
            progress.update(task, description=f"🔍 Scanning... {response.count} matches")
            final = response

    if final is None or not final.files:
        console.print("[yellow]No matching files.[/yellow]")
    else:
        table = Table(title=f"🔎 Results for '{escape(query)}'" if query else "🔎 Files")
        table.add_column("Score", justify="right", style="green")
        table.add_column("Name", style="cyan")
        table.add_column("Path")

        for result in final.files:
            table.add_row(
                f"{result.score:g}",
                escape(display_name(result.name)),
                escape(display_name(result.relative_path)),
            )

        console.print(table)
        console.print(f"\nTotal: [green]{final.count}[/green] files")

    if final is not None and final.error:
        console.print(f"[yellow]⚠️  {final.error}[/yellow]")


if __name__ == "__main__":
    app()
