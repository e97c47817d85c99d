"""FastAPI route handlers for the posts resource."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from fastapi import Request, Response
from pydantic import TypeAdapter

from core.config import Config
from core.exceptions import ForwardingError
from core.models import POST_SHAPE, POSTS_SHAPE, SERVER_ERROR, SERVER_ERROR_MESSAGE
from core.protocols import RequestLogger
from ui.log_utils import write_incoming_log


@dataclass(frozen=True)
class RouteSpec:
    """Everything that differs between the posts endpoints."""

    name: str
    method: str
    path: str
    with_id: bool
    forward_query: bool
    forward_headers: bool
    shape: TypeAdapter[Any]


POST_ROUTES = (
    RouteSpec("list_posts", "GET", "/posts", False, True, True, POSTS_SHAPE),
    RouteSpec("get_post", "GET", "/posts/{id}", True, False, False, POST_SHAPE),
    RouteSpec("create_post", "POST", "/posts", False, False, True, POST_SHAPE),
    RouteSpec("update_post", "PUT", "/posts/{id}", True, False, True, POST_SHAPE),
    RouteSpec("patch_post", "PATCH", "/posts/{id}", True, False, True, POST_SHAPE),
    RouteSpec("delete_post", "DELETE", "/posts/{id}", True, False, True, POST_SHAPE),
)


def build_upstream_url(base_url: str, route: RouteSpec, request: Request) -> str:
    """Resolve the upstream URL; the query string is passed through untouched."""
    url = base_url
    if route.with_id:
        url = f"{url}/{request.path_params['id']}"
    if route.forward_query and request.url.query:
        url = f"{url}?{request.url.query}"
    return url


def make_handler(
    route: RouteSpec,
    config: Config,
    logger: RequestLogger,
) -> Callable[[Request], Awaitable[Response]]:
    """Build the endpoint that forwards ``route`` upstream."""

    async def handler(request: Request) -> Response:
        upstream = request.app.state.upstream_client
        writer = request.app.state.response_writer
        url = build_upstream_url(config.upstream.base_url, route, request)
        headers = request.headers if route.forward_headers else None

        try:
            result = await upstream.forward(route.method, url, request, headers)
        except ForwardingError as e:
            logger.log_error(route.name, 500, f"{e.kind}: {e}")
            return writer.write_error(SERVER_ERROR, SERVER_ERROR_MESSAGE)

        if config.proxy.debug:
            body = await request.body()
            write_incoming_log(
                request.method,
                request.url.path,
                dict(request.headers),
                body.decode("utf-8", errors="replace"),
            )

        return writer.write_json(result, route.shape, route.name)

    handler.__name__ = route.name
    return handler
