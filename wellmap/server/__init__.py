"""HTTP proxy for the geocoding and routing services, plus the browser map."""

from .app import app, create_app

__all__ = ["app", "create_app"]
