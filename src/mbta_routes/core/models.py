"""Data models for MBTA routes and stops."""

from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RouteType(IntEnum):
    """MBTA route types as used by the ``filter[type]`` query parameter."""

    LIGHT_RAIL = 0
    HEAVY_RAIL = 1
    COMMUTER_RAIL = 2
    BUS = 3
    FERRY = 4


RAIL_ROUTE_TYPES = (RouteType.LIGHT_RAIL, RouteType.HEAVY_RAIL)


class Route(BaseModel):
    """Represents a transit route.

    Routes are frozen so they can key the adjacency mappings. Equality and
    hashing cover every field, not just the ID.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Server-assigned route ID")
    long_name: str = Field(..., description="Human-readable route name")

    def __str__(self) -> str:
        return self.long_name

    @classmethod
    def from_resource(cls, resource: dict[str, Any]) -> "Route":
        """Build a route from a JSON:API resource object."""
        return cls(
            id=resource["id"],
            long_name=resource["attributes"]["long_name"],
        )


class Stop(BaseModel):
    """Represents a stop served by one or more routes."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Server-assigned stop ID")
    name: str = Field(..., description="Human-readable stop name")

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_resource(cls, resource: dict[str, Any]) -> "Stop":
        """Build a stop from a JSON:API resource object."""
        return cls(id=resource["id"], name=resource["attributes"]["name"])


class StopCountSummary(BaseModel):
    """Routes with the fewest and the most stops."""

    model_config = ConfigDict(frozen=True)

    min_route: Route
    min_count: int
    max_route: Route
    max_count: int


class Interchange(BaseModel):
    """A stop connecting more than one route."""

    model_config = ConfigDict(frozen=True)

    stop: Stop
    routes: tuple[Route, ...]

    def __str__(self) -> str:
        return f"{self.stop.name}: {', '.join(r.long_name for r in self.routes)}"


class RoutePath(BaseModel):
    """Result of a path query between two stops."""

    start: Stop
    end: Stop
    routes: list[Route] = Field(
        default_factory=list, description="Routes to take, in order"
    )

    @property
    def transfer_count(self) -> int:
        """Number of route changes along the path."""
        return max(len(self.routes) - 1, 0)

    def __str__(self) -> str:
        if not self.routes:
            return f"{self.start.name} → {self.end.name} (no routes needed)"
        return f"{self.start.name} → {self.end.name} via {' → '.join(r.long_name for r in self.routes)}"
