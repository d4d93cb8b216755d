"""Shared HTTP plumbing for talking to upstream services."""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from wellmap.config import Settings, settings as default_settings
from wellmap.errors import UpstreamError, UpstreamResponseError


logger = logging.getLogger(__name__)


def upstream_client(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Build an AsyncClient with the configured timeout, retries and User-Agent.

    Retries apply to connection failures only; a response with an error
    status is never retried.
    """
    settings = settings or default_settings
    if transport is None:
        transport = httpx.AsyncHTTPTransport(retries=settings.request_retries)

    return httpx.AsyncClient(
        transport=transport,
        timeout=settings.request_timeout,
        headers={"User-Agent": settings.user_agent},
        follow_redirects=True,
    )


async def send(
    client: httpx.AsyncClient,
    service: str,
    url: str,
    params: dict[str, Any] | None = None,
) -> httpx.Response:
    """GET ``url``; transport failures become UpstreamError."""
    try:
        return await client.get(url, params=params)
    except httpx.TimeoutException as e:
        logger.warning("%s timed out: %s", service, url)
        raise UpstreamError(service, f"timed out ({e.__class__.__name__})") from e
    except httpx.RequestError as e:
        logger.warning("%s unreachable: %s", service, e)
        raise UpstreamError(service, str(e) or e.__class__.__name__) from e


def parse_json(response: httpx.Response, service: str) -> Any:
    """Decode a successful JSON body; error statuses become UpstreamError."""
    if response.status_code != 200:
        raise UpstreamError(
            service,
            f"HTTP {response.status_code}: {response.text[:200]}",
            status_code=response.status_code,
        )
    try:
        return response.json()
    except ValueError as e:
        raise UpstreamResponseError(service, "body is not JSON") from e


def validate(model: type[BaseModel], data: Any, service: str) -> Any:
    """Validate ``data`` against ``model``, mapping schema errors to UpstreamResponseError."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise UpstreamResponseError(service, f"{e.error_count()} schema error(s)") from e
