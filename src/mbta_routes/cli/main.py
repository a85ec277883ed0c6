"""CLI main entry point for MBTA route search."""

import logging
import sys

import click
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console

from .. import __version__
from ..config import Settings, get_settings
from ..core import (
    SEARCH_STRATEGIES,
    MBTAClient,
    NoPathFoundError,
    StopNotFoundError,
    TransitService,
    TransportError,
    ValidationError,
)
from .formatters import (
    format_path_detailed,
    format_path_json,
    format_routes_json,
    format_routes_table,
    format_statistics_json,
    format_statistics_table,
)

console = Console()
error_console = Console(stderr=True)

timeout_option = click.option(
    "--timeout", "-t", type=int, default=None, help="Request timeout in seconds"
)
verbose_option = click.option(
    "--verbose", "-v", is_flag=True, help="Show debug logging"
)
format_option = click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)


def _fail(message: str, verbose: bool = False) -> None:
    error_console.print(message)
    if verbose:
        error_console.print_exception()
    sys.exit(1)


def _load_settings() -> Settings:
    try:
        return get_settings()
    except PydanticValidationError as e:
        _fail(f"[red]Configuration error:[/red] {e}")


def _configure_logging(settings: Settings, verbose: bool) -> None:
    level = logging.DEBUG if verbose else settings.log_level
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def _create_service(settings: Settings, timeout: int | None) -> TransitService:
    client = MBTAClient(
        base_url=settings.api_base_url,
        api_key=settings.api_key,
        timeout=timeout if timeout is not None else settings.timeout,
        max_attempts=settings.retry_attempts,
        retry_wait=settings.retry_wait_seconds,
    )
    return TransitService(client=client, route_types=settings.route_types)


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """MBTA Route Search - Explore MBTA rail routes and find connections."""
    pass


@cli.command()
@format_option
@timeout_option
@verbose_option
def routes(output_format: str, timeout: int | None, verbose: bool) -> None:
    """List the light and heavy rail routes.

    Examples:
        mbta-routes routes
        mbta-routes routes --format json
    """
    settings = _load_settings()
    _configure_logging(settings, verbose)
    try:
        with console.status("[bold green]Fetching routes..."):
            names = _create_service(settings, timeout).list_routes()
    except TransportError as e:
        _fail(f"[red]Network error:[/red] {e}", verbose)
    except Exception as e:
        _fail(f"[red]Unexpected error:[/red] {e}", verbose)

    if output_format == "json":
        click.echo(format_routes_json(names))
    else:
        format_routes_table(names)


@cli.command()
@format_option
@timeout_option
@verbose_option
def stops(output_format: str, timeout: int | None, verbose: bool) -> None:
    """Show routes with the fewest and most stops, and interchange stops.

    Examples:
        mbta-routes stops
        mbta-routes stops --format json
    """
    settings = _load_settings()
    _configure_logging(settings, verbose)
    try:
        with console.status("[bold green]Fetching routes and stops..."):
            summary, interchanges = _create_service(settings, timeout).stop_statistics()
    except TransportError as e:
        _fail(f"[red]Network error:[/red] {e}", verbose)
    except ValidationError as e:
        _fail(f"[red]Error:[/red] {e}", verbose)
    except Exception as e:
        _fail(f"[red]Unexpected error:[/red] {e}", verbose)

    if output_format == "json":
        click.echo(format_statistics_json(summary, interchanges))
    else:
        format_statistics_table(summary, interchanges)


@cli.command()
@click.argument("start_stop", required=False)
@click.argument("end_stop", required=False)
@click.option(
    "--strategy",
    "-s",
    type=click.Choice(list(SEARCH_STRATEGIES)),
    default="first-match",
    help="first-match returns the first path found; fewest-transfers minimizes routes",
)
@format_option
@timeout_option
@verbose_option
def path(
    start_stop: str | None,
    end_stop: str | None,
    strategy: str,
    output_format: str,
    timeout: int | None,
    verbose: bool,
) -> None:
    """Find routes connecting two stops.

    Stops missing from the command line are prompted for.

    Examples:
        mbta-routes path "Davis" "Kendall/MIT"
        mbta-routes path "Ashmont" "Arlington" --strategy fewest-transfers
        mbta-routes path
    """
    settings = _load_settings()
    _configure_logging(settings, verbose)
    if start_stop is None:
        start_stop = click.prompt("Enter Starting Stop")
    if end_stop is None:
        end_stop = click.prompt("Enter Ending Stop")

    try:
        with console.status(
            f"[bold green]Searching routes from {start_stop.strip()} to {end_stop.strip()}..."
        ):
            result = _create_service(settings, timeout).find_route_path(
                start_stop, end_stop, strategy=strategy
            )
    except ValidationError as e:
        _fail(f"[red]Error:[/red] {e}", verbose)
    except StopNotFoundError as e:
        _fail(f"[yellow]Stop not found:[/yellow] {e}", verbose)
    except NoPathFoundError as e:
        _fail(f"[yellow]No path found:[/yellow] {e}", verbose)
    except TransportError as e:
        _fail(f"[red]Network error:[/red] {e}", verbose)
    except Exception as e:
        _fail(f"[red]Unexpected error:[/red] {e}", verbose)

    if output_format == "json":
        click.echo(format_path_json(result))
    else:
        format_path_detailed(result)


@cli.group()
def config() -> None:
    """Configuration management."""
    pass


@config.command("show")
def show_config() -> None:
    """Show current configuration.

    Values come from MBTA_* environment variables, e.g. MBTA_API_KEY.
    """
    settings = _load_settings()
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"• API base URL: {settings.api_base_url}")
    console.print(f"• API key: {settings.masked_api_key()}")
    console.print(f"• Default timeout: {settings.timeout} seconds")
    console.print(f"• Route types: {', '.join(str(t) for t in settings.route_types)}")
    console.print(f"• Retry attempts: {settings.retry_attempts}")
    console.print(f"• Log level: {settings.log_level}")


if __name__ == "__main__":
    cli()
