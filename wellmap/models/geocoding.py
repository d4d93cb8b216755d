"""Nominatim response models."""

from pydantic import BaseModel, Field

from .coordinates import Coordinates


class GeocodeMatch(BaseModel):
    """A single forward-geocoding hit.

    Nominatim returns ``lat``/``lon`` as strings; they are parsed to floats.
    """

    lat: float
    lon: float
    display_name: str | None = None
    place_id: int | None = None
    type: str | None = None
    importance: float | None = None

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(latitude=self.lat, longitude=self.lon)

    class Config:
        json_schema_extra = {
            "example": {
                "place_id": 123456,
                "lat": "43.5322015",
                "lon": "-5.6611195",
                "display_name": "Gijón/Xixón, Asturias, España",
                "type": "city",
                "importance": 0.72,
            }
        }


class Address(BaseModel):
    """The address block of a reverse-geocoding result."""
    city: str | None = None
    town: str | None = None
    village: str | None = None
    country: str | None = None

    @property
    def locality(self) -> str | None:
        return self.city or self.town or self.village


class ReverseGeocodeResult(BaseModel):
    """Reverse-geocoding response. ``error`` is set when nothing was found."""

    display_name: str | None = None
    address: Address = Field(default_factory=Address)
    error: str | None = None

    @property
    def locality(self) -> str | None:
        return self.address.locality
