"""Driving routes from OSRM."""

import logging

import httpx

from wellmap.config import Settings, settings as default_settings
from wellmap.errors import RouteNotFound
from wellmap.models import Coordinates, Route, RouteResponse

from .http import parse_json, send, upstream_client, validate


logger = logging.getLogger(__name__)

SERVICE = "osrm"

# What the map client asks for: full geometry as GeoJSON plus turn-by-turn steps
CLIENT_ROUTE_OPTIONS = {"steps": "true", "geometries": "geojson"}


async def fetch_route(
    client: httpx.AsyncClient,
    start: str,
    end: str,
    steps: str | None = None,
    geometries: str | None = None,
    settings: Settings | None = None,
) -> httpx.Response:
    """
    Raw routing request between two 'lon,lat' segments.

    The segments are placed into the URL path as given; the response is
    returned untouched.
    """
    settings = settings or default_settings
    params = {"overview": "full"}
    if steps is not None:
        params["steps"] = steps
    if geometries is not None:
        params["geometries"] = geometries

    return await send(
        client,
        SERVICE,
        f"{settings.osrm_url}/route/v1/driving/{start};{end}",
        params=params,
    )


def parse_route(response: httpx.Response) -> Route:
    """Validate a routing body and pick the first route candidate."""
    body = validate(RouteResponse, parse_json(response, SERVICE), SERVICE)
    route = body.first_route()
    if route is None:
        raise RouteNotFound(body.message or f"no route ({body.code})")
    return route


async def calculate_route(
    start: Coordinates,
    end: Coordinates,
    client: httpx.AsyncClient | None = None,
    settings: Settings | None = None,
) -> Route:
    """
    Calculate a driving route between two points.

    Returns the first candidate OSRM proposes, with GeoJSON geometry.
    """
    if client is None:
        async with upstream_client(settings) as own_client:
            return await calculate_route(start, end, own_client, settings)

    response = await fetch_route(
        client,
        start.to_lonlat(),
        end.to_lonlat(),
        settings=settings,
        **CLIENT_ROUTE_OPTIONS,
    )
    route = parse_route(response)
    logger.debug(
        "Route %s -> %s: %.0f s, %.0f m", start.to_lonlat(), end.to_lonlat(),
        route.duration, route.distance,
    )
    return route
