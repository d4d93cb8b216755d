"""Geocoding against Nominatim (OpenStreetMap)."""

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from wellmap.config import Settings, settings as default_settings
from wellmap.errors import LocationNotFound, UpstreamResponseError
from wellmap.models import GeocodeMatch, ReverseGeocodeResult

from .http import parse_json, send, upstream_client, validate


logger = logging.getLogger(__name__)

SERVICE = "nominatim"

_matches_adapter = TypeAdapter(list[GeocodeMatch])


async def fetch_search(
    client: httpx.AsyncClient,
    query: str,
    settings: Settings | None = None,
) -> httpx.Response:
    """Raw forward-geocoding request. The response is returned untouched."""
    settings = settings or default_settings
    return await send(
        client,
        SERVICE,
        f"{settings.nominatim_url}/search",
        params={"format": "json", "q": query},
    )


def parse_matches(response: httpx.Response) -> list[GeocodeMatch]:
    """Validate a forward-geocoding body into a list of matches."""
    data = parse_json(response, SERVICE)
    try:
        return _matches_adapter.validate_python(data)
    except ValidationError as e:
        raise UpstreamResponseError(SERVICE, f"{e.error_count()} schema error(s)") from e


async def search_places(
    query: str,
    client: httpx.AsyncClient | None = None,
    settings: Settings | None = None,
) -> list[GeocodeMatch]:
    """
    Convert a place name to a list of candidate matches.

    Args:
        query: Free-text place name (e.g. 'Oviedo')
        client: Optional shared client; a temporary one is created otherwise

    Returns:
        All matches in the order Nominatim ranks them
    """
    if client is None:
        async with upstream_client(settings) as own_client:
            return await search_places(query, own_client, settings)

    response = await fetch_search(client, query, settings)
    matches = parse_matches(response)
    logger.debug("Geocoded %r: %d match(es)", query, len(matches))
    return matches


async def geocode_location(
    query: str,
    client: httpx.AsyncClient | None = None,
    settings: Settings | None = None,
) -> GeocodeMatch:
    """Return the first match for ``query``; raises LocationNotFound if there is none."""
    matches = await search_places(query, client, settings)
    if not matches:
        raise LocationNotFound(query)
    return matches[0]


async def reverse_geocode(
    latitude: float,
    longitude: float,
    client: httpx.AsyncClient | None = None,
    settings: Settings | None = None,
) -> str | None:
    """
    Convert coordinates to a locality name (city, else town, else village).

    Returns None when Nominatim knows no locality for the position.
    """
    settings = settings or default_settings
    if client is None:
        async with upstream_client(settings) as own_client:
            return await reverse_geocode(latitude, longitude, own_client, settings)

    response = await send(
        client,
        SERVICE,
        f"{settings.nominatim_url}/reverse",
        params={"format": "json", "lat": latitude, "lon": longitude},
    )
    result = validate(ReverseGeocodeResult, parse_json(response, SERVICE), SERVICE)
    if result.error:
        logger.info("Reverse geocoding (%s, %s): %s", latitude, longitude, result.error)
    return result.locality
