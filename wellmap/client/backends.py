"""Where the map client sends its requests: straight upstream or via the proxy."""

import logging

import httpx

from wellmap.config import Settings, settings as default_settings
from wellmap.models import Coordinates, GeocodeMatch, Route
from wellmap.tools import geocoding, routing
from wellmap.tools.http import send, upstream_client


logger = logging.getLogger(__name__)


class Backend:
    """Common interface of the direct and proxied backends."""

    name = "backend"

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or default_settings
        self._owns_client = client is None
        self.client = client or upstream_client(self.settings, transport)

    async def search(self, query: str) -> list[GeocodeMatch]:
        raise NotImplementedError

    async def route(self, start: Coordinates, end: Coordinates) -> Route:
        raise NotImplementedError

    async def reverse(self, latitude: float, longitude: float) -> str | None:
        # The proxy exposes no reverse endpoint, so both backends go direct
        return await geocoding.reverse_geocode(latitude, longitude, self.client, self.settings)

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()


class DirectBackend(Backend):
    """Calls Nominatim and OSRM directly."""

    name = "direct"

    async def search(self, query: str) -> list[GeocodeMatch]:
        return await geocoding.search_places(query, self.client, self.settings)

    async def route(self, start: Coordinates, end: Coordinates) -> Route:
        return await routing.calculate_route(start, end, self.client, self.settings)


class ProxyBackend(Backend):
    """Calls the WellMap proxy's /api/search and /api/route endpoints."""

    name = "proxy"

    async def search(self, query: str) -> list[GeocodeMatch]:
        response = await send(
            self.client,
            "proxy",
            f"{self.settings.proxy_url}/api/search",
            params={"query": query},
        )
        return geocoding.parse_matches(response)

    async def route(self, start: Coordinates, end: Coordinates) -> Route:
        response = await send(
            self.client,
            "proxy",
            f"{self.settings.proxy_url}/api/route",
            params={
                "start": start.to_lonlat(),
                "end": end.to_lonlat(),
                **routing.CLIENT_ROUTE_OPTIONS,
            },
        )
        return routing.parse_route(response)


def create_backend(
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Backend:
    """Pick the backend according to ``settings.use_proxy``."""
    settings = settings or default_settings
    backend_cls = ProxyBackend if settings.use_proxy else DirectBackend
    logger.debug("Using %s backend", backend_cls.name)
    return backend_cls(settings, client, transport)
