"""Custom exceptions for MBTA route search."""


class MBTARoutesError(Exception):
    """Base exception for MBTA route search errors."""

    pass


class TransportError(MBTARoutesError):
    """Raised when routes or stops cannot be fetched or decoded."""

    pass


class StopNotFoundError(MBTARoutesError):
    """Raised when a start or end stop is not served by any route."""

    def __init__(self, role: str, stop: str):
        self.role = role
        self.stop = stop
        super().__init__(f"Could not find {role} stop: {stop}")


class NoPathFoundError(MBTARoutesError):
    """Raised when no sequence of routes connects two stops."""

    def __init__(self, start: str, end: str):
        self.start = start
        self.end = end
        super().__init__(f"No connecting routes found from {start} to {end}")


class ValidationError(MBTARoutesError):
    """Raised when input validation fails."""

    pass
