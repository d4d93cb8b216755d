"""Render the map state as a Leaflet page with folium."""

import json
import logging
from html import escape
from pathlib import Path
from urllib.parse import quote_plus

import folium

from wellmap.client.state import MapState
from wellmap.config import Settings, settings as default_settings
from wellmap.utils.geo import bounds


logger = logging.getLogger(__name__)

TITLE_HTML = """
<div style="position: absolute; top: 20px; right: 20px; z-index: 1000;
            font-size: 24px; font-weight: bold; color: #32CD32;
            font-family: Arial, sans-serif;">WellMap</div>
"""

SEARCH_FORM_HTML = """
<form method="get" action="/map" style="position: absolute; top: 70px; left: 50px; z-index: 1000;">
  <input type="text" name="city" placeholder="Search city" value="{value}"
         style="width: 250px; padding: 10px; border-radius: 25px; border: 1px solid #ccc;
                box-shadow: 0px 4px 6px rgba(0, 0, 0, 0.1); outline: none; font-size: 16px;">
</form>
"""

INFO_PANEL_HTML = """
<div style="position: absolute; bottom: 20px; right: 20px; background: white;
            padding: 20px; border-radius: 15px; box-shadow: 0px 4px 6px rgba(0, 0, 0, 0.1);
            z-index: 1000; width: 250px; font-family: Arial, sans-serif;">
  <h3>{place}</h3>
  <p><strong>Duration:</strong> {minutes} minutes</p>
  <p><strong>Distance:</strong> {km} km</p>
  {search_link}
  <a href="/map?city={query}&amp;dest={dest}" style="display: block; padding: 5px 10px; background-color: #007BFF;
     color: white; border-radius: 5px; text-align: center; text-decoration: none;">Calculate route</a>
</div>
"""

SEARCH_LINK_HTML = """
  <a href="{url}" target="_blank" style="display: block; padding: 5px 10px; background-color: #32CD32;
     color: white; border-radius: 5px; text-align: center; text-decoration: none;
     margin-bottom: 10px;">Search on Google</a>
"""


def _format_number(value: float) -> str:
    # No rounding; 60.0 prints as 60
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return str(value)


def format_minutes(seconds: float) -> str:
    """Route duration in minutes, as shown in the info panel."""
    return _format_number(seconds / 60)


def format_km(meters: float) -> str:
    """Route distance in kilometers, as shown in the info panel."""
    return _format_number(meters / 1000)


def build_map(
    state: MapState,
    settings: Settings | None = None,
    search_url: str | None = None,
    interactive: bool = True,
    alerts: list[str] | None = None,
) -> folium.Map:
    """
    Build a folium map for the current state.

    Args:
        state: What to draw (origin, destination, route, info panel)
        search_url: External search link shown in the info panel
        interactive: Include the search box, which submits to the proxy's
            /map page
        alerts: Messages to pop up with window.alert when the page loads

    Returns:
        The folium Map; call ``.save()`` or ``get_root().render()`` on it
    """
    settings = settings or default_settings

    fmap = folium.Map(
        location=list(state.origin.as_tuple()),
        zoom_start=settings.zoom_start,
        tiles=None,
    )
    folium.TileLayer(tiles=settings.tile_url, attr=settings.tile_attribution).add_to(fmap)

    folium.Marker(
        location=list(state.origin.as_tuple()),
        popup=folium.Popup("Current location"),
        tooltip="Current location",
    ).add_to(fmap)

    if state.destination is not None:
        folium.Marker(
            location=list(state.destination.as_tuple()),
            popup=folium.Popup("Destination"),
            tooltip=escape(state.place) if state.place else "Destination",
        ).add_to(fmap)

    points = []
    if state.route is not None:
        points = state.route.latlon_points()
        if points:
            folium.PolyLine(locations=points, color="blue").add_to(fmap)

    # Frame the route, or both markers when the route has no geometry
    frame = points or [
        p.as_tuple() for p in (state.origin, state.destination) if p is not None
    ]
    if len(frame) > 1:
        fmap.fit_bounds(bounds(frame))

    html = fmap.get_root().html
    html.add_child(folium.Element(TITLE_HTML))
    if interactive:
        html.add_child(folium.Element(
            SEARCH_FORM_HTML.format(value=escape(state.input_text, quote=True))
        ))

    if state.show_info and state.route is not None:
        place = state.place or state.input_text
        search_link = ""
        if search_url:
            search_link = SEARCH_LINK_HTML.format(url=escape(search_url, quote=True))
        html.add_child(folium.Element(INFO_PANEL_HTML.format(
            place=escape(place),
            minutes=format_minutes(state.route.duration),
            km=format_km(state.route.distance),
            search_link=search_link,
            query=escape(quote_plus(place), quote=True),
            dest=state.destination.to_latlon() if state.destination else "",
        )))

    for message in alerts or ():
        fmap.get_root().script.add_child(folium.Element(f"alert({json.dumps(message)});"))

    return fmap


def render_html(state: MapState, settings: Settings | None = None, **kwargs) -> str:
    """Render the map as a standalone HTML document."""
    return build_map(state, settings, **kwargs).get_root().render()


def save_map(
    state: MapState,
    path: Path | str | None = None,
    settings: Settings | None = None,
    **kwargs,
) -> Path:
    """Write the map HTML to ``path`` (default: output/map.html)."""
    settings = settings or default_settings
    path = Path(path) if path else settings.output_dir / "map.html"
    path.parent.mkdir(parents=True, exist_ok=True)

    build_map(state, settings, **kwargs).save(str(path))
    logger.info("Map saved to %s", path)
    return path
