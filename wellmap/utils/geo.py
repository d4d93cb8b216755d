"""Geospatial utility functions."""

from typing import Sequence


def bounds(
    points: Sequence[tuple[float, float]],
) -> list[list[float]] | None:
    """
    Compute the bounding box of a set of points.

    Args:
        points: (lat, lon) pairs in degrees

    Returns:
        [[south, west], [north, east]] as Leaflet expects, or None if empty
    """
    if not points:
        return None

    lats = [p[0] for p in points]
    lons = [p[1] for p in points]

    return [[min(lats), min(lons)], [max(lats), max(lons)]]

