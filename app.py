"""FastAPI application factory."""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from api.handlers import POST_ROUTES, make_handler
from core.config import Config
from core.headers import HeaderMerger
from core.protocols import RequestLogger
from services.upstream import ForwardingClient
from services.writer import ResponseWriter


def create_app(
    config: Config,
    logger: RequestLogger,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        limits = httpx.Limits(
            max_connections=config.limits.max_connections,
            max_keepalive_connections=config.limits.max_keepalive_connections,
        )
        client = httpx.AsyncClient(
            limits=limits,
            follow_redirects=config.upstream.follow_redirects,
            transport=transport,
        )
        app.state.upstream_client = ForwardingClient(
            client,
            HeaderMerger(config.upstream.default_headers),
            logger,
        )
        app.state.response_writer = ResponseWriter(logger)
        try:
            yield
        finally:
            await client.aclose()

    app = FastAPI(title="Posts Proxy", version="0.1.0", lifespan=lifespan)

    for route in POST_ROUTES:
        app.add_api_route(
            route.path,
            make_handler(route, config, logger),
            methods=[route.method],
            name=route.name,
        )

    return app
