"""Position providers for 'use my location'."""

from wellmap.errors import GeolocationError


class StaticGeolocator:
    """Reports a fixed position, e.g. from WELLMAP_POSITION.

    With no position configured it behaves like a denied permission prompt.
    """

    def __init__(self, position: tuple[float, float] | None):
        self.position = position

    def __call__(self) -> tuple[float, float]:
        if self.position is None:
            raise GeolocationError("Position unavailable (set WELLMAP_POSITION=lat,lon)")
        return self.position
