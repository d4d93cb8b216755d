"""Map client: UI state plus the operations that drive it."""

from .backends import Backend, DirectBackend, ProxyBackend, create_backend
from .geolocation import StaticGeolocator
from .map_client import EMPTY_SEARCH_MESSAGE, GEOLOCATION_UNSUPPORTED_MESSAGE, MapClient
from .state import MapState, Phase

__all__ = [
    "Backend",
    "DirectBackend",
    "ProxyBackend",
    "create_backend",
    "StaticGeolocator",
    "EMPTY_SEARCH_MESSAGE",
    "GEOLOCATION_UNSUPPORTED_MESSAGE",
    "MapClient",
    "MapState",
    "Phase",
]
