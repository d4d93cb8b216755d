"""Pass-through endpoints.

Upstream bodies and status codes are relayed unchanged, error bodies
included. Only transport failures are translated (to 502, see app.py).
"""

import logging

import httpx
from fastapi import APIRouter, Request, Response

from wellmap.tools.geocoding import fetch_search
from wellmap.tools.routing import fetch_route


logger = logging.getLogger(__name__)

router = APIRouter(tags=["proxy"])


def relay(upstream: httpx.Response) -> Response:
    """Copy an upstream response's body, status and content type."""
    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        media_type=upstream.headers.get("content-type", "application/json"),
    )


@router.get("/search")
async def search(request: Request, query: str = "") -> Response:
    """
    Forward a free-text query to the geocoder.

    The query is URL-encoded as a parameter rather than spliced raw into
    the upstream URL, so characters like '&' stay part of the text.
    """
    upstream = await fetch_search(request.app.state.http, query, request.app.state.settings)
    logger.info("search %r -> %d", query, upstream.status_code)
    return relay(upstream)


@router.get("/route")
async def route(
    request: Request,
    start: str = "",
    end: str = "",
    steps: str | None = None,
    geometries: str | None = None,
) -> Response:
    """Forward two 'lon,lat' segments to the router."""
    upstream = await fetch_route(
        request.app.state.http,
        start,
        end,
        steps=steps,
        geometries=geometries,
        settings=request.app.state.settings,
    )
    logger.info("route %s;%s -> %d", start, end, upstream.status_code)
    return relay(upstream)
