"""UI state for the map client.

All writes go through the transition methods below. Every request the
client issues is tagged with a token; a response whose token is older
than the latest one issued is dropped instead of overwriting newer state.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from wellmap.models import Coordinates, Route


logger = logging.getLogger(__name__)


class Phase(str, Enum):
    """Where the client is in the search flow."""
    IDLE = "idle"
    SEARCHING = "searching"
    DESTINATION_FOUND = "destination_found"
    ROUTE_COMPUTED = "route_computed"
    INFO_DISPLAYED = "info_displayed"


@dataclass
class MapState:
    """Everything the map view renders."""
    origin: Coordinates
    destination: Coordinates | None = None
    route: Route | None = None
    input_text: str = ""
    place: str = ""  # query that produced the current destination
    show_info: bool = False
    phase: Phase = Phase.IDLE
    last_error: str | None = None
    _sequence: int = field(default=0, repr=False)
    # Separate counter: filling the input never invalidates a search or route
    _input_sequence: int = field(default=0, repr=False)

    @property
    def latest_token(self) -> int:
        return self._sequence

    def next_token(self) -> int:
        """Issue a token for a new request, invalidating all older ones."""
        self._sequence += 1
        return self._sequence

    def is_current(self, token: int) -> bool:
        if token != self._sequence:
            logger.debug("Dropping stale response (token %d, latest %d)", token, self._sequence)
            return False
        return True

    def next_input_token(self) -> int:
        """Issue a token for a request whose answer only fills the input field."""
        self._input_sequence += 1
        return self._input_sequence

    def is_current_input(self, token: int) -> bool:
        if token != self._input_sequence:
            logger.debug("Dropping stale input (token %d, latest %d)", token, self._input_sequence)
            return False
        return True

    def set_input(self, text: str) -> None:
        self.input_text = text

    def begin_search(self) -> int:
        self.phase = Phase.SEARCHING
        self.last_error = None
        return self.next_token()

    def destination_found(self, token: int, place: str, coords: Coordinates) -> bool:
        if not self.is_current(token):
            return False
        self.destination = coords
        self.place = place
        self.route = None
        self.phase = Phase.DESTINATION_FOUND
        return True

    def route_computed(self, token: int, route: Route) -> bool:
        if not self.is_current(token):
            return False
        self.route = route
        self.last_error = None
        self._settle()
        return True

    def show_info_panel(self, token: int) -> bool:
        if not self.is_current(token):
            return False
        self.show_info = True
        self._settle()
        return True

    def fail(self, token: int, error: Exception) -> bool:
        """Record a failed request; whatever was on the map stays there."""
        if not self.is_current(token):
            return False
        self.last_error = str(error)
        self._settle()
        return True

    def _settle(self) -> None:
        if self.route is not None:
            self.phase = Phase.INFO_DISPLAYED if self.show_info else Phase.ROUTE_COMPUTED
        elif self.destination is not None:
            self.phase = Phase.DESTINATION_FOUND
        else:
            self.phase = Phase.IDLE
