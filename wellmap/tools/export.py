"""Route export for GPS devices and other map apps."""

import logging
from datetime import datetime
from pathlib import Path

import gpxpy
import gpxpy.gpx

from wellmap.config import settings
from wellmap.models import Coordinates, Route


logger = logging.getLogger(__name__)


def route_to_gpx(
    route: Route,
    name: str,
    origin: Coordinates | None = None,
    destination: Coordinates | None = None,
) -> str:
    """
    Create a GPX document from a computed route.

    Args:
        route: The route whose geometry becomes the track
        name: Name of the track (usually the destination)
        origin, destination: Optional endpoints added as waypoints

    Returns:
        GPX XML string
    """
    gpx = gpxpy.gpx.GPX()
    gpx.name = name
    gpx.description = f"{route.distance_km} km, {route.duration_minutes} min by car"
    gpx.creator = "WellMap"

    for label, coords in (("Origin", origin), ("Destination", destination)):
        if coords is None:
            continue
        waypoint = gpxpy.gpx.GPXWaypoint(
            latitude=coords.latitude,
            longitude=coords.longitude,
        )
        waypoint.name = label
        gpx.waypoints.append(waypoint)

    track = gpxpy.gpx.GPXTrack()
    track.name = name
    track.type = "driving"
    gpx.tracks.append(track)

    segment = gpxpy.gpx.GPXTrackSegment()
    track.segments.append(segment)
    for lat, lon in route.latlon_points():
        segment.points.append(gpxpy.gpx.GPXTrackPoint(latitude=lat, longitude=lon))

    return gpx.to_xml()


def save_gpx(gpx_content: str, route_name: str, output_dir: Path | None = None) -> Path:
    """Save GPX content under the output directory with a timestamped name."""
    output_dir = output_dir or settings.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    safe_name = "".join(c if c.isalnum() or c in "-_" else "_" for c in route_name)
    filepath = output_dir / f"{safe_name}_{timestamp}.gpx"

    filepath.write_text(gpx_content, encoding="utf-8")
    logger.info("GPX saved to %s", filepath)
    return filepath
