"""Configuration management."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field


# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


COORD_ENV_VARS = ("WELLMAP_ORIGIN", "WELLMAP_POSITION")


def _parse_coords(raw: str) -> tuple[float, float] | None:
    try:
        lat, lon = (float(part) for part in raw.split(","))
    except ValueError:
        return None
    return (lat, lon)


def _env_coords(name: str, default: str | None = None) -> tuple[float, float] | None:
    """
    Parse a 'lat,lon' environment variable.

    A malformed value falls back to ``default``; validate_required() reports it.
    """
    raw = os.getenv(name) or default
    if not raw:
        return None
    coords = _parse_coords(raw)
    if coords is None and default:
        return _parse_coords(default)
    return coords


class Settings(BaseModel):
    """Application settings."""

    # Upstream services (public instances by default)
    nominatim_url: str = Field(
        default_factory=lambda: os.getenv("NOMINATIM_URL", "https://nominatim.openstreetmap.org")
    )
    osrm_url: str = Field(
        default_factory=lambda: os.getenv("OSRM_URL", "http://router.project-osrm.org")
    )
    user_agent: str = Field(
        default_factory=lambda: os.getenv("WELLMAP_USER_AGENT", "WellMap/1.0")
    )
    request_timeout: float = Field(
        default_factory=lambda: float(os.getenv("WELLMAP_TIMEOUT", "30"))
    )
    request_retries: int = Field(
        default_factory=lambda: int(os.getenv("WELLMAP_RETRIES", "2"))
    )

    # Proxy service
    proxy_url: str = Field(
        default_factory=lambda: os.getenv("WELLMAP_PROXY_URL", "http://localhost:3001")
    )
    use_proxy: bool = Field(
        default_factory=lambda: _env_bool("WELLMAP_USE_PROXY")
    )
    host: str = Field(
        default_factory=lambda: os.getenv("WELLMAP_HOST", "0.0.0.0")
    )
    port: int = Field(
        default_factory=lambda: int(os.getenv("WELLMAP_PORT", "3001"))
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: [
            origin.strip()
            for origin in os.getenv("WELLMAP_CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
    )

    # Map client
    default_origin: tuple[float, float] = Field(
        default_factory=lambda: _env_coords("WELLMAP_ORIGIN", "43.545,-5.661")  # Gijón
    )
    position: tuple[float, float] | None = Field(
        default_factory=lambda: _env_coords("WELLMAP_POSITION")
    )
    tile_url: str = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
    tile_attribution: str = "&copy; OpenStreetMap contributors"
    zoom_start: int = 13
    external_search_url: str = "https://www.google.com/search?q={query}"

    # Output settings
    log_level: str = Field(
        default_factory=lambda: os.getenv("WELLMAP_LOG_LEVEL", "INFO")
    )
    output_dir: Path = Field(
        default_factory=lambda: Path(__file__).parent.parent / "output"
    )

    def validate_required(self) -> list[str]:
        """Check for missing or malformed required configuration."""
        missing = []

        if not self.nominatim_url:
            missing.append("NOMINATIM_URL")
        if not self.osrm_url:
            missing.append("OSRM_URL")
        if self.use_proxy and not self.proxy_url:
            missing.append("WELLMAP_PROXY_URL")
        for name in COORD_ENV_VARS:
            raw = os.getenv(name)
            if raw and _parse_coords(raw) is None:
                missing.append(f"{name} (expected 'lat,lon', got {raw!r})")

        return missing


# Global settings instance
settings = Settings()
