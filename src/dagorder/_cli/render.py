"""Rich rendering utilities for CLI commands."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from dagorder._element import Element
from dagorder._errors import CycleError
from dagorder._graph import DirectedGraph


def render_order(elements: list[Element], console: Console) -> None:
    """Print element names one per line, without markup or wrapping.

    Args:
        elements: Elements in topological order.
        console: Rich Console to output to.

    """
    for element in elements:
        console.print(element.name, markup=False, highlight=False, soft_wrap=True)


def render_cycle(error: CycleError, console: Console) -> None:
    """Render a cycle error as a Rich panel.

    Args:
        error: The error raised by the sort.
        console: Rich Console to output to.

    """
    path = " [dim]->[/dim] ".join(escape(name) for name in error.cycle)
    unresolved = ", ".join(escape(name) for name in error.unresolved)
    console.print(
        Panel(
            f"{path}\n\n[dim]Unresolved ({len(error.unresolved)}):[/dim] {unresolved}",
            title="[bold red]Cycle detected[/bold red]",
            border_style="red",
        ),
    )


def render_summary(graph: DirectedGraph, console: Console) -> None:
    """Render node and edge counts of a graph as a Rich table."""
    table = Table(show_header=True, header_style="bold cyan", box=None)
    table.add_column("Nodes", justify="right")
    table.add_column("Edges", justify="right")
    table.add_column("Sources", justify="right")
    table.add_row(
        str(len(graph)),
        str(len(graph.edges())),
        str(sum(1 for name in graph.nodes if graph.indegree(name) == 0)),
    )
    console.print(table)
