"""FastAPI application factory."""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from api.handlers import build_handler, handle_unexpected_error
from core.config import Config
from core.headers import HeaderBuilder
from core.protocols import RequestLogger
from core.routes import ROUTES
from services.upstream import UpstreamClient


def create_app(
    config: Config,
    logger: RequestLogger,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        limits = httpx.Limits(max_connections=100, max_keepalive_connections=20)
        client = httpx.AsyncClient(limits=limits, transport=transport)
        app.state.upstream_client = UpstreamClient(
            client,
            config,
            logger,
            header_builder=HeaderBuilder(),
        )
        try:
            yield
        finally:
            await client.aclose()

    app = FastAPI(title="YT Relay", version="0.1.0", lifespan=lifespan)
    app.state.logger = logger
    app.add_exception_handler(Exception, handle_unexpected_error)

    for route in ROUTES:
        handler = build_handler(route)
        app.add_api_route(route.path, handler, methods=["GET"])
        if route.bare_path:
            # Missing path segment answers 400 instead of 404
            app.add_api_route(route.bare_path, handler, methods=["GET"])

    return app
