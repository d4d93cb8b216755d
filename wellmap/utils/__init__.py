"""Utility functions for the map client and proxy."""

from .geo import bounds
from .log import setup_logging

__all__ = [
    "bounds",
    "setup_logging",
]
