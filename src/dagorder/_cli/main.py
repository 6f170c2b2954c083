import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from dagorder._errors import CycleError, GraphError
from dagorder._graph import DirectedGraph

from .config import ConfigError, get_config
from .pairs import PairsError, build_graph, parse_pairs
from .render import render_cycle, render_order, render_summary

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

InputArgument = Annotated[
    Path | None,
    typer.Argument(
        help=(
            "File of whitespace separated name pairs ('-' for stdin). "
            "Defaults to the input configured in pyproject.toml, then stdin"
        ),
    ),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Order names so that every name comes after the names it depends on."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _read_input(file: Path | None, config_input: Path | None) -> str:
    effective = file if file is not None else config_input
    if effective is None or str(effective) == "-":
        logger.debug("Reading pairs from stdin")
        return sys.stdin.read()
    logger.debug(f"Reading pairs from {effective}")
    return effective.read_text(encoding="utf-8")


def _load_graph(file: Path | None) -> DirectedGraph:
    """Load config and input, exiting with code 2 on bad input."""
    try:
        config = get_config()
    except ConfigError as e:
        err_console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        raise typer.Exit(code=2) from e

    try:
        text = _read_input(file, config.input)
    except (OSError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Error: cannot read input: {escape(str(e))}[/red]")
        raise typer.Exit(code=2) from e

    try:
        pairs = parse_pairs(text)
    except PairsError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=2) from e

    return build_graph(pairs, config.capacity)


@app.command()
def sort(file: InputArgument = None) -> None:
    """Print names in topological order, one per line."""
    graph = _load_graph(file)

    try:
        elements = graph.destructive_toposort()
    except CycleError as e:
        render_cycle(e, err_console)
        raise typer.Exit(code=1) from e
    except GraphError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=2) from e

    render_order(elements, out_console)


@app.command()
def check(file: InputArgument = None) -> None:
    """Check that the input has a topological order."""
    graph = _load_graph(file)
    render_summary(graph, err_console)

    try:
        graph.destructive_toposort()
    except CycleError as e:
        render_cycle(e, err_console)
        raise typer.Exit(code=1) from e
    except GraphError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=2) from e

    err_console.print("[green]✓ No cycles[/green]")


def main() -> None:
    app()
