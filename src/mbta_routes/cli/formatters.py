"""Output formatters for CLI display."""

import json

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..core.models import Interchange, RoutePath, StopCountSummary

console = Console()


def format_routes_table(names: list[str]) -> None:
    """Display route names as a rich table."""
    if not names:
        console.print("No routes found.")
        return

    table = Table(
        title="Heavy Rail and Light Rail Routes",
        show_header=True,
        header_style="bold magenta",
        min_width=40,
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("Route", style="cyan")
    for idx, name in enumerate(names, 1):
        table.add_row(str(idx), name)
    console.print(table)


def format_routes_json(names: list[str]) -> str:
    """Format route names as JSON."""
    return json.dumps(names, ensure_ascii=False, indent=2)


def format_statistics_table(
    summary: StopCountSummary, stops: list[Interchange]
) -> None:
    """Display stop-count extremes and interchange stops."""
    table = Table(title="Stops per Route", show_header=True, header_style="bold magenta")
    table.add_column("", style="cyan", no_wrap=True)
    table.add_column("Route", style="green")
    table.add_column("Stops", style="yellow", justify="right")
    table.add_row("Fewest stops", summary.min_route.long_name, str(summary.min_count))
    table.add_row("Most stops", summary.max_route.long_name, str(summary.max_count))
    console.print(table)
    console.print()

    if not stops:
        console.print("[dim]No stops connect multiple routes[/dim]")
        return

    interchange_table = Table(
        title="Stops Connecting Multiple Routes",
        show_header=True,
        header_style="bold blue",
    )
    interchange_table.add_column("Stop", style="cyan")
    interchange_table.add_column("Routes", style="green")
    for interchange in stops:
        interchange_table.add_row(
            interchange.stop.name,
            ", ".join(route.long_name for route in interchange.routes),
        )
    console.print(interchange_table)


def format_statistics_json(
    summary: StopCountSummary, stops: list[Interchange]
) -> str:
    """Format stop statistics as JSON."""
    data = {
        "min_route": summary.min_route.long_name,
        "min_count": summary.min_count,
        "max_route": summary.max_route.long_name,
        "max_count": summary.max_count,
        "interchanges": [
            {
                "stop": interchange.stop.name,
                "routes": [route.long_name for route in interchange.routes],
            }
            for interchange in stops
        ],
    }
    return json.dumps(data, ensure_ascii=False, indent=2)


def format_path_detailed(path: RoutePath) -> None:
    """Display a route path."""
    if not path.routes:
        console.print(
            f"The path from [cyan]{path.start.name}[/cyan] to [cyan]{path.end.name}[/cyan] "
            "is to take no routes, as they are the same stop."
        )
        return

    lines = [f"[bold]{i}.[/bold] {route.long_name}" for i, route in enumerate(path.routes, 1)]
    summary_text = "\n".join(
        [
            f"[bold]From:[/bold] {path.start.name}",
            f"[bold]To:[/bold] {path.end.name}",
            f"[bold]Transfers:[/bold] {path.transfer_count}",
            "",
            *lines,
        ]
    )
    console.print(Panel(summary_text, title="Routes to Take", border_style="blue"))


def format_path_json(path: RoutePath) -> str:
    """Format a route path as JSON."""
    data = {
        "start": {"id": path.start.id, "name": path.start.name},
        "end": {"id": path.end.id, "name": path.end.name},
        "transfer_count": path.transfer_count,
        "routes": [{"id": r.id, "long_name": r.long_name} for r in path.routes],
    }
    return json.dumps(data, ensure_ascii=False, indent=2)
