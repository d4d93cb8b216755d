"""Data models for geocoding and routing."""

from .coordinates import Coordinates
from .geocoding import Address, GeocodeMatch, ReverseGeocodeResult
from .routing import Route, RouteGeometry, RouteResponse, RouteSummary

__all__ = [
    "Coordinates",
    "Address",
    "GeocodeMatch",
    "ReverseGeocodeResult",
    "Route",
    "RouteGeometry",
    "RouteResponse",
    "RouteSummary",
]
