"""Test configuration and fixtures."""

import pytest

from mbta_routes.config import reset_settings
from mbta_routes.core.models import Route, Stop


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from its own environment."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def red_line():
    return Route(id="Red", long_name="Red Line")


@pytest.fixture
def orange_line():
    return Route(id="Orange", long_name="Orange Line")


@pytest.fixture
def green_b():
    return Route(id="Green-B", long_name="Green Line B")


@pytest.fixture
def sample_stops():
    """A handful of stops keyed by ID."""
    return {
        "alewife": Stop(id="place-alfcl", name="Alewife"),
        "davis": Stop(id="place-davis", name="Davis"),
        "park": Stop(id="place-pktrm", name="Park Street"),
        "dtx": Stop(id="place-dwnxg", name="Downtown Crossing"),
        "oak_grove": Stop(id="place-ogmnl", name="Oak Grove"),
        "forest_hills": Stop(id="place-forhl", name="Forest Hills"),
        "boylston": Stop(id="place-boyls", name="Boylston"),
        "kenmore": Stop(id="place-kencl", name="Kenmore"),
    }


@pytest.fixture
def sample_network(red_line, orange_line, green_b, sample_stops):
    """Stop lists per route, in the order the API would return them."""
    s = sample_stops
    return {
        red_line: [s["alewife"], s["davis"], s["park"], s["dtx"]],
        orange_line: [s["oak_grove"], s["dtx"], s["forest_hills"]],
        green_b: [s["kenmore"], s["boylston"], s["park"]],
    }


@pytest.fixture
def sample_routes_payload():
    """Sample /routes JSON:API response."""
    return {
        "data": [
            {
                "type": "route",
                "id": "Red",
                "attributes": {"long_name": "Red Line", "type": 1},
            },
            {
                "type": "route",
                "id": "Mattapan",
                "attributes": {"long_name": "Mattapan Trolley", "type": 0},
            },
        ],
        "jsonapi": {"version": "1.0"},
    }


@pytest.fixture
def sample_stops_payload():
    """Sample /stops JSON:API response."""
    return {
        "data": [
            {
                "type": "stop",
                "id": "place-alfcl",
                "attributes": {"name": "Alewife", "location_type": 1},
            },
            {
                "type": "stop",
                "id": "place-davis",
                "attributes": {"name": "Davis", "location_type": 1},
            },
        ],
        "jsonapi": {"version": "1.0"},
    }
