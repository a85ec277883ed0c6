"""Unit tests for the transit service."""

from unittest.mock import Mock

import pytest

from mbta_routes.core.exceptions import (
    NoPathFoundError,
    StopNotFoundError,
    TransportError,
    ValidationError,
)
from mbta_routes.core.models import Route, RouteType, Stop
from mbta_routes.core.service import TransitService


@pytest.fixture
def client(sample_network):
    """Mock API client serving the sample network."""
    mock_client = Mock()
    mock_client.fetch_routes.return_value = list(sample_network)
    mock_client.fetch_stops.side_effect = sample_network.__getitem__
    return mock_client


class TestTransitService:
    """Test top-level operations."""

    def test_list_routes(self, client):
        service = TransitService(client=client)
        assert service.list_routes() == ["Red Line", "Orange Line", "Green Line B"]
        client.fetch_routes.assert_called_once_with(
            (RouteType.LIGHT_RAIL, RouteType.HEAVY_RAIL)
        )
        client.fetch_stops.assert_not_called()

    def test_custom_route_types(self, client):
        service = TransitService(client=client, route_types=[2])
        service.list_routes()
        client.fetch_routes.assert_called_once_with((2,))

    def test_stop_statistics(self, client, red_line, sample_stops):
        summary, found = TransitService(client=client).stop_statistics()

        assert summary.max_route == red_line
        assert summary.max_count == 4
        assert summary.min_route.id == "Orange"
        assert summary.min_count == 3
        assert [i.stop for i in found] == [sample_stops["park"], sample_stops["dtx"]]

    def test_graph_rebuilt_per_operation(self, client, sample_network):
        service = TransitService(client=client)
        service.stop_statistics()
        service.stop_statistics()

        assert client.fetch_routes.call_count == 2
        assert client.fetch_stops.call_count == 2 * len(sample_network)

    def test_find_route_path(self, client):
        result = TransitService(client=client).find_route_path("Davis", "Forest Hills")

        assert result.start.name == "Davis"
        assert result.end.name == "Forest Hills"
        assert [r.id for r in result.routes] == ["Red", "Orange"]

    def test_find_route_path_trims_whitespace(self, client):
        result = TransitService(client=client).find_route_path(
            "  Davis\n", "\tAlewife "
        )
        assert [r.id for r in result.routes] == ["Red"]

    def test_same_stop_needs_no_routes(self, client):
        result = TransitService(client=client).find_route_path("Davis", "Davis")
        assert result.routes == []

    def test_fewest_transfers_strategy(self, client):
        result = TransitService(client=client).find_route_path(
            "Kenmore", "Oak Grove", strategy="fewest-transfers"
        )
        assert [r.id for r in result.routes] == ["Green-B", "Red", "Orange"]

    def test_names_are_case_sensitive(self, client):
        with pytest.raises(StopNotFoundError) as exc_info:
            TransitService(client=client).find_route_path("davis", "Alewife")
        assert exc_info.value.role == "start"
        assert exc_info.value.stop == "davis"

    def test_unknown_end_stop(self, client):
        with pytest.raises(StopNotFoundError) as exc_info:
            TransitService(client=client).find_route_path("Davis", "Wonderland")
        assert exc_info.value.role == "end"

    def test_no_path(self, client, sample_network):
        island = Route(id="Island", long_name="Island Line")
        sample_network[island] = [Stop(id="place-isl", name="Island")]
        client.fetch_routes.return_value = list(sample_network)

        with pytest.raises(NoPathFoundError):
            TransitService(client=client).find_route_path("Davis", "Island")

    @pytest.mark.parametrize("start,end", [("", "Davis"), ("   ", "Davis"), ("Davis", "")])
    def test_empty_names_rejected(self, client, start, end):
        with pytest.raises(ValidationError):
            TransitService(client=client).find_route_path(start, end)
        client.fetch_routes.assert_not_called()

    def test_unknown_strategy_rejected(self, client):
        with pytest.raises(ValidationError, match="Unknown search strategy"):
            TransitService(client=client).find_route_path("Davis", "Alewife", strategy="astar")

    def test_transport_error_propagates(self, client):
        client.fetch_stops.side_effect = TransportError("timeout")
        with pytest.raises(TransportError):
            TransitService(client=client).stop_statistics()
