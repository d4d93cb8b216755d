"""Shared fixtures: settings pointing at fake upstreams, and a fake upstream."""

import httpx
import pytest

from wellmap.client import DirectBackend, MapClient
from wellmap.config import Settings


NOMINATIM_URL = "https://nominatim.test"
OSRM_URL = "https://osrm.test"
PROXY_URL = "http://proxy.test"

GIJON = (43.545, -5.661)

OVIEDO_MATCHES = [
    {
        "place_id": 1,
        "lat": "43.3602900",
        "lon": "-5.8447600",
        "display_name": "Oviedo, Asturias, España",
        "type": "city",
        "importance": 0.7,
    },
    {
        "place_id": 2,
        "lat": "28.0",
        "lon": "-81.0",
        "display_name": "Oviedo, Florida, United States",
    },
]

LEON_MATCHES = [
    {"place_id": 3, "lat": "42.5987", "lon": "-5.5671", "display_name": "León, España"},
]

ROUTE_BODY = {
    "code": "Ok",
    "routes": [
        {
            "duration": 3600,
            "distance": 5000,
            "geometry": {
                "type": "LineString",
                "coordinates": [[-5.661, 43.545], [-5.75, 43.45], [-5.84476, 43.36029]],
            },
        },
        {
            "duration": 4200,
            "distance": 6100,
            "geometry": {"type": "LineString", "coordinates": []},
        },
    ],
    "waypoints": [],
}

REVERSE_BODY = {
    "display_name": "Gijón/Xixón, Asturias, España",
    "address": {"city": "Gijón", "country": "España"},
}


class FakeUpstream:
    """Answers like Nominatim and OSRM, and records what was asked."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.search_results = {"Oviedo": OVIEDO_MATCHES, "León": LEON_MATCHES}
        self.route_body = ROUTE_BODY
        self.route_status = 200
        self.reverse_body = REVERSE_BODY

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path == "/search":
            query = request.url.params.get("q", "")
            return httpx.Response(200, json=self.search_results.get(query, []))
        if path == "/reverse":
            return httpx.Response(200, json=self.reverse_body)
        if path.startswith("/route/v1/driving/"):
            return httpx.Response(self.route_status, json=self.route_body)
        return httpx.Response(404, json={"error": "unknown path"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def paths(self, prefix: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.startswith(prefix)]


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        nominatim_url=NOMINATIM_URL,
        osrm_url=OSRM_URL,
        proxy_url=PROXY_URL,
        use_proxy=False,
        request_retries=0,
        request_timeout=5.0,
        default_origin=GIJON,
        position=None,
        cors_origins=["*"],
        output_dir=tmp_path / "output",
    )


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def alerts() -> list[str]:
    return []


@pytest.fixture
def make_client(settings, upstream, alerts):
    """Build a MapClient talking to the fake upstream through a DirectBackend."""

    def factory(transport: httpx.AsyncBaseTransport | None = None) -> MapClient:
        backend = DirectBackend(settings, transport=transport or upstream.transport)
        return MapClient(backend=backend, settings=settings, alert=alerts.append)

    return factory
