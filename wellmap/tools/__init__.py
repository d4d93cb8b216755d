"""Clients for the upstream geocoding and routing services."""

from .geocoding import geocode_location, reverse_geocode, search_places
from .routing import calculate_route
from .export import route_to_gpx, save_gpx
from .http import upstream_client

__all__ = [
    "geocode_location",
    "reverse_geocode",
    "search_places",
    "calculate_route",
    "route_to_gpx",
    "save_gpx",
    "upstream_client",
]
