"""FastAPI application for the WellMap proxy."""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wellmap.config import Settings, settings as default_settings
from wellmap.errors import UpstreamError
from wellmap.tools.http import upstream_client

from . import api, pages


logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """
    Build the proxy application.

    Args:
        settings: Upstream URLs, timeouts, CORS origins
        transport: Optional httpx transport for the upstream client
            (tests pass an httpx.MockTransport)
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with upstream_client(settings, transport) as client:
            app.state.http = client
            logger.info(
                "Proxying geocoding to %s and routing to %s",
                settings.nominatim_url, settings.osrm_url,
            )
            yield

    app = FastAPI(title="WellMap Proxy API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.exception_handler(UpstreamError)
    async def upstream_unavailable(request: Request, exc: UpstreamError) -> JSONResponse:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    @app.get("/health", tags=["root"])
    async def health():
        return {"status": "ok"}

    app.include_router(api.router, prefix="/api")
    app.include_router(pages.router)

    return app


app = create_app()
