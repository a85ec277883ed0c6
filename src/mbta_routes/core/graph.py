"""Route/stop adjacency graph construction."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .exceptions import ValidationError
from .models import Route, Stop

logger = logging.getLogger(__name__)

StopLookup = Callable[[Route], Sequence[Stop]]


@dataclass(frozen=True)
class TransitGraph:
    """Bidirectional route/stop adjacency built from one snapshot.

    Both mappings preserve discovery order, which the search relies on for
    deterministic results.
    """

    route_stops: dict[Route, tuple[Stop, ...]]
    stop_routes: dict[Stop, tuple[Route, ...]]

    @property
    def stops(self) -> list[Stop]:
        return list(self.stop_routes)

    def find_stop(self, name: str) -> Stop | None:
        """Find a stop by its exact display name.

        Every route's stop list is scanned in build order and the last
        matching stop wins, so a stop seen again on a later route counts as
        discovered at that later position.
        """
        found = None
        for route_stops in self.route_stops.values():
            for stop in route_stops:
                if stop.name == name:
                    found = stop
        return found


def build_graph(routes: Sequence[Route], get_stops: StopLookup) -> TransitGraph:
    """Build the route/stop adjacency mappings.

    Routes are processed in input order. A failed stop lookup propagates
    unchanged and no graph is returned.

    Args:
        routes: Routes to include
        get_stops: Returns the ordered stops served by a route

    Returns:
        The populated TransitGraph

    Raises:
        ValidationError: If no routes are given
        TransportError: If any stop lookup fails
    """
    if not routes:
        raise ValidationError("Cannot build a transit graph without routes")

    route_stops: dict[Route, tuple[Stop, ...]] = {}
    stop_routes: dict[Stop, list[Route]] = {}

    for route in routes:
        stops = tuple(get_stops(route))
        logger.debug(f"Route {route.long_name} serves {len(stops)} stops")
        route_stops[route] = stops
        for stop in stops:
            serving = stop_routes.setdefault(stop, [])
            # A route listing the same stop twice still serves it once
            if route not in serving:
                serving.append(route)

    logger.info(f"Built transit graph: {len(route_stops)} routes, {len(stop_routes)} stops")
    return TransitGraph(
        route_stops=route_stops,
        stop_routes={stop: tuple(serving) for stop, serving in stop_routes.items()},
    )
