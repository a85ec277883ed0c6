"""MBTA Route Search Package

Lists MBTA rail routes, reports stop statistics and finds which routes
connect two stops.
"""

__version__ = "0.1.0"

from .core.models import Route, RoutePath, Stop
from .core.service import TransitService

__all__ = ["Route", "RoutePath", "Stop", "TransitService"]
