"""Top-level route listing, statistics and path queries."""

import logging
from collections.abc import Sequence

from .aggregator import interchanges, route_names, summarize
from .client import MBTAClient
from .exceptions import StopNotFoundError, ValidationError
from .graph import TransitGraph, build_graph
from .models import RAIL_ROUTE_TYPES, Interchange, RoutePath, StopCountSummary
from .search import find_fewest_transfers, find_path

logger = logging.getLogger(__name__)

SEARCH_STRATEGIES = {
    "first-match": find_path,
    "fewest-transfers": find_fewest_transfers,
}


class TransitService:
    """Answers route questions against a fresh snapshot of the network.

    Every operation re-fetches routes and stops; nothing is cached between
    calls.
    """

    def __init__(
        self,
        client: MBTAClient | None = None,
        route_types: Sequence[int] = RAIL_ROUTE_TYPES,
    ):
        self.client = client or MBTAClient()
        self.route_types = tuple(route_types)

    def list_routes(self) -> list[str]:
        """Return the long names of the configured route types."""
        return route_names(self.client.fetch_routes(self.route_types))

    def build_graph(self) -> TransitGraph:
        """Fetch routes and their stops and build the adjacency graph."""
        routes = self.client.fetch_routes(self.route_types)
        return build_graph(routes, self.client.fetch_stops)

    def stop_statistics(self) -> tuple[StopCountSummary, list[Interchange]]:
        """Return min/max stop-count routes and the interchange stops."""
        graph = self.build_graph()
        return summarize(graph.route_stops), interchanges(graph.stop_routes)

    def find_route_path(
        self, start_name: str, end_name: str, strategy: str = "first-match"
    ) -> RoutePath:
        """Find routes connecting two stops given by name.

        Names are stripped of surrounding whitespace and then matched
        exactly, case-sensitive.

        Args:
            start_name: Name of the stop to travel from
            end_name: Name of the stop to travel to
            strategy: "first-match" (depth-first) or "fewest-transfers"

        Returns:
            RoutePath with the routes to take

        Raises:
            ValidationError: If a name is empty or the strategy is unknown
            StopNotFoundError: If a stop name is not served by any route
            NoPathFoundError: If the stops are not connected
            TransportError: If fetching routes or stops fails
        """
        start_name = start_name.strip() if start_name else ""
        end_name = end_name.strip() if end_name else ""
        if not start_name:
            raise ValidationError("Starting stop name cannot be empty")
        if not end_name:
            raise ValidationError("Ending stop name cannot be empty")
        if strategy not in SEARCH_STRATEGIES:
            raise ValidationError(f"Unknown search strategy: {strategy}")

        graph = self.build_graph()
        start = graph.find_stop(start_name)
        if start is None:
            raise StopNotFoundError("start", start_name)
        end = graph.find_stop(end_name)
        if end is None:
            raise StopNotFoundError("end", end_name)

        logger.info(f"Searching {strategy} path from {start.name} to {end.name}")
        routes = SEARCH_STRATEGIES[strategy](
            graph.route_stops, graph.stop_routes, start, end
        )
        return RoutePath(start=start, end=end, routes=routes)
