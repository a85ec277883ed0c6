"""MBTA v3 API client."""

import logging
from collections.abc import Iterable
from typing import Any

import requests
from pydantic import ValidationError as PydanticValidationError
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from .exceptions import TransportError
from .models import RAIL_ROUTE_TYPES, Route, Stop

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api-v3.mbta.com"


class MBTAClient:
    """Client for the MBTA v3 JSON:API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: str | None = None,
        timeout: int = 30,
        max_attempts: int = 3,
        retry_wait: float = 1.0,
    ):
        """Initialize the client.

        Args:
            base_url: API root URL
            api_key: Optional MBTA API key, sent as ``x-api-key``
            timeout: Request timeout in seconds
            max_attempts: Attempts per request on connection errors and timeouts
            retry_wait: Multiplier for the exponential backoff between attempts
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_attempts = max_attempts
        self.retry_wait = retry_wait
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/vnd.api+json"})
        if api_key:
            self.session.headers["x-api-key"] = api_key

    def fetch_routes(
        self, route_types: Iterable[int] = RAIL_ROUTE_TYPES
    ) -> list[Route]:
        """Fetch routes of the given types.

        The type filter is applied server-side so only the requested routes
        are transferred.

        Args:
            route_types: Route types to include, light and heavy rail by default

        Returns:
            Routes in the order the API returns them

        Raises:
            TransportError: If the request or decoding fails
        """
        type_filter = ",".join(str(int(t)) for t in route_types)
        data = self._get_data("/routes", {"filter[type]": type_filter})
        return self._decode(data, Route.from_resource, "route")

    def fetch_stops(self, route: Route) -> list[Stop]:
        """Fetch all stops served by a route.

        The API only includes route information for a single route filter, so
        stops are requested one route at a time.

        Raises:
            TransportError: If the request or decoding fails
        """
        data = self._get_data("/stops", {"filter[route]": route.id})
        return self._decode(data, Stop.from_resource, "stop")

    def _get_data(self, path: str, params: dict[str, str]) -> list[dict[str, Any]]:
        """GET a JSON:API endpoint and return its ``data`` array."""
        url = f"{self.base_url}{path}"
        try:
            for attempt in Retrying(
                stop=stop_after_attempt(self.max_attempts),
                wait=wait_exponential(multiplier=self.retry_wait, max=10),
                retry=retry_if_exception_type(
                    (requests.exceptions.ConnectionError, requests.exceptions.Timeout)
                ),
                reraise=True,
            ):
                with attempt:
                    logger.debug(
                        f"GET {url} {params} (attempt {attempt.retry_state.attempt_number})"
                    )
                    response = self.session.get(url, params=params, timeout=self.timeout)
                    response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.warning(f"Request to {url} failed: {e}")
            raise TransportError(f"Failed to fetch {path}: {str(e)}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise TransportError(f"Invalid JSON from {path}: {str(e)}") from e

        if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
            raise TransportError(f"Unexpected response shape from {path}")
        return payload["data"]

    @staticmethod
    def _decode(data: list[dict[str, Any]], factory: Any, kind: str) -> list[Any]:
        try:
            return [factory(item) for item in data]
        except (KeyError, TypeError, PydanticValidationError) as e:
            raise TransportError(f"Malformed {kind} resource: {str(e)}") from e
