"""Summary statistics over the route/stop graph."""

from collections.abc import Iterable, Mapping, Sequence

from .exceptions import ValidationError
from .models import Interchange, Route, Stop, StopCountSummary


def route_names(routes: Iterable[Route]) -> list[str]:
    """Return route long names in input order."""
    return [route.long_name for route in routes]


def summarize(route_stops: Mapping[Route, Sequence[Stop]]) -> StopCountSummary:
    """Find the routes with the fewest and the most stops.

    Ties go to the route encountered first.

    Raises:
        ValidationError: If there are no routes to compare
    """
    if not route_stops:
        raise ValidationError("Cannot summarize stop counts without routes")

    items = iter(route_stops.items())
    first_route, first_stops = next(items)
    min_route, min_count = first_route, len(first_stops)
    max_route, max_count = first_route, len(first_stops)

    for route, stops in items:
        if len(stops) < min_count:
            min_route, min_count = route, len(stops)
        if len(stops) > max_count:
            max_route, max_count = route, len(stops)

    return StopCountSummary(
        min_route=min_route,
        min_count=min_count,
        max_route=max_route,
        max_count=max_count,
    )


def interchanges(stop_routes: Mapping[Stop, Sequence[Route]]) -> list[Interchange]:
    """List stops served by more than one route, in discovery order."""
    return [
        Interchange(stop=stop, routes=tuple(routes))
        for stop, routes in stop_routes.items()
        if len(routes) > 1
    ]
