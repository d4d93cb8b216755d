"""Tests for map rendering."""

import pytest

from wellmap.client import MapState
from wellmap.models import Coordinates, Route
from wellmap.render import build_map, format_km, format_minutes, render_html, save_map

from .conftest import GIJON, ROUTE_BODY


@pytest.mark.parametrize("seconds,expected", [
    (3600, "60"),
    (90, "1.5"),
    (0, "0"),
    (100, str(100 / 60)),
])
def test_format_minutes(seconds, expected):
    assert format_minutes(seconds) == expected


@pytest.mark.parametrize("meters,expected", [
    (5000, "5"),
    (1234, "1.234"),
    (12345.6, str(12345.6 / 1000)),
])
def test_format_km(meters, expected):
    assert format_km(meters) == expected


class TestBuildMap:
    """Test the folium map built from state."""

    def make_state(self, **kwargs) -> MapState:
        return MapState(origin=Coordinates.from_tuple(GIJON), **kwargs)

    def test_origin_only(self):
        html = render_html(self.make_state())

        assert "WellMap" in html
        assert "Current location" in html
        assert "Destination" not in html
        assert "Search city" in html

    def test_route_and_info_panel(self):
        state = self.make_state(
            destination=Coordinates(latitude=43.36029, longitude=-5.84476),
            route=Route.model_validate(ROUTE_BODY["routes"][0]),
            place="Oviedo",
            show_info=True,
        )

        html = render_html(state, search_url="https://www.google.com/search?q=Oviedo")

        assert "Destination" in html
        assert "<h3>Oviedo</h3>" in html
        assert "60 minutes" in html
        assert "5 km" in html
        assert "dest=43.36029,-5.84476" in html
        assert "https://www.google.com/search?q=Oviedo" in html

    def test_info_panel_needs_route(self):
        state = self.make_state(
            destination=Coordinates(latitude=43.36029, longitude=-5.84476),
            place="Oviedo",
            show_info=True,
        )

        assert "Duration" not in render_html(state)

    def test_polyline_uses_lat_lon(self):
        state = self.make_state(route=Route.model_validate(ROUTE_BODY["routes"][0]))

        fmap = build_map(state)
        lines = [child for child in fmap._children.values() if type(child).__name__ == "PolyLine"]

        assert len(lines) == 1
        assert lines[0].locations[0] == [43.545, -5.661]

    def test_place_is_escaped(self):
        state = self.make_state(
            route=Route(duration=60, distance=1000),
            place="<script>x</script>",
            show_info=True,
        )

        assert "<h3>&lt;script&gt;x&lt;/script&gt;</h3>" in render_html(state)

    def test_alerts(self):
        html = render_html(self.make_state(), alerts=["Please enter a valid city."])

        assert 'alert("Please enter a valid city.");' in html

    def test_static_map_has_no_search_box(self):
        assert "Search city" not in render_html(self.make_state(), interactive=False)


def test_save_map(settings):
    state = MapState(origin=Coordinates.from_tuple(GIJON))

    path = save_map(state, settings=settings)

    assert path == settings.output_dir / "map.html"
    assert "WellMap" in path.read_text(encoding="utf-8")
