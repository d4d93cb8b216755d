"""OSRM response models."""

from pydantic import BaseModel, Field


class RouteGeometry(BaseModel):
    """GeoJSON LineString; coordinates are [longitude, latitude] pairs."""
    type: str = "LineString"
    coordinates: list[list[float]] = Field(default_factory=list)

    def latlon_points(self) -> list[tuple[float, float]]:
        return [(point[1], point[0]) for point in self.coordinates]


class Route(BaseModel):
    """A single route candidate."""

    duration: float = Field(..., description="Total duration in seconds")
    distance: float = Field(..., description="Total distance in meters")
    geometry: RouteGeometry | None = None

    @property
    def duration_minutes(self) -> float:
        return self.duration / 60

    @property
    def distance_km(self) -> float:
        return self.distance / 1000

    def latlon_points(self) -> list[tuple[float, float]]:
        """Route geometry as (lat, lon) points, ready to draw."""
        if self.geometry is None:
            return []
        return self.geometry.latlon_points()

    class Config:
        json_schema_extra = {
            "example": {
                "duration": 3600.0,
                "distance": 5000.0,
                "geometry": {
                    "type": "LineString",
                    "coordinates": [[-5.661, 43.545], [-5.85, 43.36]],
                },
            }
        }


class RouteResponse(BaseModel):
    """Routing response: a status code and a list of route candidates."""
    code: str
    message: str | None = None
    routes: list[Route] = Field(default_factory=list)

    def first_route(self) -> Route | None:
        return self.routes[0] if self.routes else None


class RouteSummary(BaseModel):
    """What the info panel shows for a computed route."""
    place: str
    duration_minutes: float
    distance_km: float

    @classmethod
    def from_route(cls, place: str, route: Route) -> "RouteSummary":
        return cls(
            place=place,
            duration_minutes=route.duration_minutes,
            distance_km=route.distance_km,
        )
