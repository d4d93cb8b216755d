"""Exceptions raised at the boundary with the upstream services."""


class WellMapError(Exception):
    """Base class for all WellMap errors."""


class UpstreamError(WellMapError):
    """The upstream service could not be reached or answered with an error status."""

    def __init__(self, service: str, message: str, status_code: int | None = None):
        super().__init__(f"{service}: {message}")
        self.service = service
        self.status_code = status_code


class UpstreamResponseError(WellMapError):
    """The upstream answered, but the body does not match the expected schema."""

    def __init__(self, service: str, message: str):
        super().__init__(f"{service}: malformed response ({message})")
        self.service = service


class LocationNotFound(WellMapError):
    """A geocoding query returned no matches."""

    def __init__(self, query: str):
        super().__init__(f"No results for {query!r}")
        self.query = query


class RouteNotFound(WellMapError):
    """The router returned no route candidates."""


class GeolocationError(WellMapError):
    """The current position is unavailable (unsupported or denied)."""
