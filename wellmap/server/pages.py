"""Browser pages: the folium map driven by a server-side MapClient."""

import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse

from wellmap.client import DirectBackend, MapClient
from wellmap.models import Coordinates
from wellmap.render import render_html


logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])


def _client(request: Request, alerts: list[str]) -> MapClient:
    settings = request.app.state.settings
    backend = DirectBackend(settings, client=request.app.state.http)
    return MapClient(backend=backend, settings=settings, alert=alerts.append)


@router.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    """Empty map centered on the default origin."""
    client = _client(request, [])
    return HTMLResponse(render_html(client.state, request.app.state.settings))


@router.get("/map", response_class=HTMLResponse)
async def map_page(
    request: Request,
    city: str | None = None,
    dest: str | None = None,
) -> HTMLResponse:
    """
    Search for ``city`` and draw the route to it.

    With ``dest`` ('lat,lon') the geocoder is skipped and the route to that
    destination is recomputed.
    """
    alerts: list[str] = []
    client = _client(request, alerts)

    if dest:
        try:
            destination = Coordinates.parse(dest)
        except ValueError:
            raise HTTPException(status_code=400, detail=f"Invalid destination: {dest!r}")
        client.set_input(city or "")
        await client.route_to(city or dest, destination)
    elif city is not None:
        await client.search(city)

    html = render_html(
        client.state,
        request.app.state.settings,
        search_url=client.external_search_url(),
        alerts=alerts,
    )
    return HTMLResponse(html)
