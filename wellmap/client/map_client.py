"""The map client: turns user actions into requests and state transitions.

Upstream failures never propagate to the caller. They are logged, stored
in ``state.last_error`` and the action becomes a no-op. Only an empty
search and missing geolocation support are reported through ``alert``.
"""

import logging
import webbrowser
from typing import Callable
from urllib.parse import quote_plus

from wellmap.config import Settings, settings as default_settings
from wellmap.errors import GeolocationError, LocationNotFound, WellMapError
from wellmap.models import Coordinates, Route, RouteSummary

from .backends import Backend, create_backend
from .state import MapState


logger = logging.getLogger(__name__)

EMPTY_SEARCH_MESSAGE = "Please enter a valid city."
GEOLOCATION_UNSUPPORTED_MESSAGE = "Geolocation is not supported."


def _log_alert(message: str) -> None:
    logger.warning(message)


class MapClient:
    """
    Drives a MapState through idle -> searching -> destination found ->
    route computed -> info displayed.

    Usage:
        async with MapClient() as client:
            await client.search("Oviedo")
            print(client.summary())
    """

    def __init__(
        self,
        backend: Backend | None = None,
        settings: Settings | None = None,
        alert: Callable[[str], None] | None = None,
        state: MapState | None = None,
    ):
        self.settings = settings or default_settings
        self.backend = backend or create_backend(self.settings)
        self.alert = alert or _log_alert
        self.state = state or MapState(
            origin=Coordinates.from_tuple(self.settings.default_origin)
        )

    async def __aenter__(self) -> "MapClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.backend.aclose()

    def set_input(self, text: str) -> None:
        self.state.set_input(text)

    async def use_my_location(
        self,
        geolocate: Callable[[], tuple[float, float]] | None,
    ) -> str | None:
        """
        Fill the input field with the locality at the current position.

        Args:
            geolocate: Returns (lat, lon) or raises GeolocationError;
                None means the platform has no geolocation at all

        Returns:
            The locality name, or None if nothing changed
        """
        if geolocate is None:
            self.alert(GEOLOCATION_UNSUPPORTED_MESSAGE)
            return None

        try:
            latitude, longitude = geolocate()
        except GeolocationError as e:
            logger.warning("Geolocation failed: %s", e)
            return None

        token = self.state.next_input_token()
        try:
            city = await self.backend.reverse(latitude, longitude)
        except WellMapError as e:
            logger.error("Error getting the city: %s", e)
            return None

        if not city:
            logger.info("No locality found at (%s, %s)", latitude, longitude)
            return None
        if not self.state.is_current_input(token):
            return None

        self.state.set_input(city)
        return city

    async def search(self, text: str | None = None) -> Coordinates | None:
        """
        Geocode the input, set the destination and route to it.

        Args:
            text: Replaces the input field, if given and not blank

        Returns:
            The new destination, or None if the search did not set one
        """
        city = (self.state.input_text if text is None else text).strip()
        if not city:
            self.alert(EMPTY_SEARCH_MESSAGE)
            return None
        if text is not None:
            self.state.set_input(text)

        token = self.state.begin_search()
        try:
            matches = await self.backend.search(city)
        except WellMapError as e:
            logger.error("Error searching for the city: %s", e)
            self.state.fail(token, e)
            return None

        if not matches:
            logger.info("No results for %r", city)
            self.state.fail(token, LocationNotFound(city))
            return None

        destination = matches[0].coordinates
        if not self.state.destination_found(token, city, destination):
            return None

        await self._compute_route(token, self.state.origin, destination)
        self.state.show_info_panel(token)
        return self.state.destination

    async def route_to(self, place: str, destination: Coordinates) -> Route | None:
        """Set a known destination and route to it, skipping the geocoder."""
        token = self.state.begin_search()
        self.state.destination_found(token, place, destination)
        route = await self._compute_route(token, self.state.origin, destination)
        self.state.show_info_panel(token)
        return route

    async def calculate_route(self, start: Coordinates, end: Coordinates) -> Route | None:
        """Route between two points and store the result in state."""
        token = self.state.next_token()
        return await self._compute_route(token, start, end)

    async def recalculate_route(self) -> Route | None:
        """Recompute origin -> destination without geocoding again."""
        if self.state.destination is None:
            logger.info("No destination to route to")
            return None
        return await self.calculate_route(self.state.origin, self.state.destination)

    async def _compute_route(
        self,
        token: int,
        start: Coordinates,
        end: Coordinates,
    ) -> Route | None:
        try:
            route = await self.backend.route(start, end)
        except WellMapError as e:
            logger.error("Error calculating the route: %s", e)
            self.state.fail(token, e)
            return None

        if not self.state.route_computed(token, route):
            return None
        return route

    def summary(self) -> RouteSummary | None:
        """Duration and distance of the current route, if any."""
        if self.state.route is None:
            return None
        return RouteSummary.from_route(self.state.place or self.state.input_text, self.state.route)

    def external_search_url(self) -> str | None:
        if not self.state.input_text:
            return None
        return self.settings.external_search_url.format(query=quote_plus(self.state.input_text))

    def open_in_search(self) -> str | None:
        """Open the input text in a web search, in a new browser tab."""
        url = self.external_search_url()
        if url:
            webbrowser.open(url, new=2)
        return url
