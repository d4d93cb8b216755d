"""WellMap: find a city and draw the driving route to it on a map."""

__version__ = "1.0.0"
