"""Coordinate model shared by geocoding and routing."""

from pydantic import BaseModel


class Coordinates(BaseModel):
    """GPS coordinates in degrees. Ranges are not validated."""
    latitude: float
    longitude: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)

    @classmethod
    def from_tuple(cls, coords: tuple[float, float]) -> "Coordinates":
        return cls(latitude=coords[0], longitude=coords[1])

    def to_lonlat(self) -> str:
        """Format as the 'lon,lat' segment used by OSRM."""
        return f"{self.longitude},{self.latitude}"

    def to_latlon(self) -> str:
        return f"{self.latitude},{self.longitude}"

    @classmethod
    def parse(cls, text: str) -> "Coordinates":
        """Parse a 'lat,lon' string; raises ValueError if malformed."""
        lat, lon = (float(part) for part in text.split(","))
        return cls(latitude=lat, longitude=lon)
