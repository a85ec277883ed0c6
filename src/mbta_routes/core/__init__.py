"""Core route graph and search functionality."""

from .client import MBTAClient
from .exceptions import (
    MBTARoutesError,
    NoPathFoundError,
    StopNotFoundError,
    TransportError,
    ValidationError,
)
from .graph import TransitGraph, build_graph
from .models import (
    Interchange,
    Route,
    RoutePath,
    RouteType,
    Stop,
    StopCountSummary,
)
from .search import find_fewest_transfers, find_path
from .service import SEARCH_STRATEGIES, TransitService

__all__ = [
    "Interchange",
    "MBTAClient",
    "Route",
    "RoutePath",
    "RouteType",
    "SEARCH_STRATEGIES",
    "Stop",
    "StopCountSummary",
    "TransitGraph",
    "TransitService",
    "build_graph",
    "find_fewest_transfers",
    "find_path",
    "MBTARoutesError",
    "TransportError",
    "StopNotFoundError",
    "NoPathFoundError",
    "ValidationError",
]
