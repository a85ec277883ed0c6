"""Route path search over the route/stop graph."""

import logging
from collections import deque
from collections.abc import Mapping, Sequence

from .exceptions import NoPathFoundError, StopNotFoundError
from .models import Route, Stop

logger = logging.getLogger(__name__)

RouteStops = Mapping[Route, Sequence[Stop]]
StopRoutes = Mapping[Stop, Sequence[Route]]


class _BranchExhausted(Exception):
    """No path to the end stop from the current branch."""


def _check_endpoints(stop_routes: StopRoutes, start: Stop, end: Stop) -> None:
    if start not in stop_routes:
        raise StopNotFoundError("start", start.name)
    if end not in stop_routes:
        raise StopNotFoundError("end", end.name)


def find_path(
    route_stops: RouteStops, stop_routes: StopRoutes, start: Stop, end: Stop
) -> list[Route]:
    """Find a sequence of routes leading from ``start`` to ``end``.

    Depth-first backtracking over the route/stop graph in discovery order.
    When a route serves the end stop it is taken immediately, so the result is
    the first path found rather than the one with the fewest routes.

    Args:
        route_stops: Stops served by each route
        stop_routes: Routes serving each stop
        start: Stop to travel from
        end: Stop to travel to

    Returns:
        Routes to take in order; empty when start and end are the same stop

    Raises:
        StopNotFoundError: If start or end is not served by any route
        NoPathFoundError: If no sequence of routes connects the stops
    """
    _check_endpoints(stop_routes, start, end)

    path: list[Route] = []
    # Routes on the current branch; pushed on descent and popped on backtrack
    explored: set[Route] = set()

    def explore(current: Stop) -> list[Route]:
        if current == end:
            return list(path)

        for route in stop_routes.get(current, ()):
            if route in explored:
                continue
            stops = route_stops[route]
            if end in stops:
                return [*path, route]

            path.append(route)
            explored.add(route)
            try:
                for stop in stops:
                    if stop == current:
                        continue
                    try:
                        return explore(stop)
                    except _BranchExhausted:
                        continue
            finally:
                path.pop()
                explored.discard(route)

        raise _BranchExhausted

    try:
        routes = explore(start)
    except _BranchExhausted:
        logger.debug(f"Search exhausted without reaching {end.name}")
        raise NoPathFoundError(start.name, end.name) from None

    logger.debug(
        f"Found path {start.name} → {end.name}: {[r.long_name for r in routes]}"
    )
    return routes


def find_fewest_transfers(
    route_stops: RouteStops, stop_routes: StopRoutes, start: Stop, end: Stop
) -> list[Route]:
    """Find a sequence with the fewest routes from ``start`` to ``end``.

    Breadth-first search treating each route as one hop. Ties go to the path
    discovered first in insertion order.

    Raises:
        StopNotFoundError: If start or end is not served by any route
        NoPathFoundError: If no sequence of routes connects the stops
    """
    _check_endpoints(stop_routes, start, end)
    if start == end:
        return []

    previous: dict[Route, Route | None] = {}
    queue: deque[Route] = deque()
    for route in stop_routes[start]:
        if route not in previous:
            previous[route] = None
            queue.append(route)

    while queue:
        route = queue.popleft()
        if end in route_stops[route]:
            routes = [route]
            while (parent := previous[routes[-1]]) is not None:
                routes.append(parent)
            routes.reverse()
            return routes
        for stop in route_stops[route]:
            for next_route in stop_routes[stop]:
                if next_route not in previous:
                    previous[next_route] = route
                    queue.append(next_route)

    raise NoPathFoundError(start.name, end.name)
