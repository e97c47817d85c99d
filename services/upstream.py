"""HTTP forwarding to the upstream posts API."""

from collections.abc import Iterable, Mapping
from typing import Protocol

import httpx
from starlette.requests import ClientDisconnect

from core.exceptions import BodyReadError, ResponseReadError, TransportError
from core.headers import HeaderMerger
from core.protocols import RequestLogger
from core.request_types import ForwardResult

ALLOWED_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})

HeaderSource = Mapping[str, str] | Iterable[tuple[str, str]] | None


class InboundRequest(Protocol):
    """Anything that can hand over a buffered body (a Starlette Request)."""

    async def body(self) -> bytes: ...


class ForwardingClient:
    """Replay inbound requests against the upstream with merged headers."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        merger: HeaderMerger,
        logger: RequestLogger,
    ) -> None:
        self._client = client
        self._merger = merger
        self._logger = logger

    async def get(self, url: str, request: InboundRequest, headers: HeaderSource = None) -> ForwardResult:
        return await self.forward("GET", url, request, headers)

    async def post(self, url: str, request: InboundRequest, headers: HeaderSource = None) -> ForwardResult:
        return await self.forward("POST", url, request, headers)

    async def put(self, url: str, request: InboundRequest, headers: HeaderSource = None) -> ForwardResult:
        return await self.forward("PUT", url, request, headers)

    async def patch(self, url: str, request: InboundRequest, headers: HeaderSource = None) -> ForwardResult:
        return await self.forward("PATCH", url, request, headers)

    async def delete(self, url: str, request: InboundRequest, headers: HeaderSource = None) -> ForwardResult:
        return await self.forward("DELETE", url, request, headers)

    async def forward(
        self,
        method: str,
        url: str,
        request: InboundRequest,
        override_headers: HeaderSource = None,
    ) -> ForwardResult:
        """Issue one upstream call carrying the inbound body.

        Raises:
            BodyReadError: the inbound body could not be read
            TransportError: the upstream could not be reached
            ResponseReadError: the upstream body was cut short
        """
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported method: {method}")

        try:
            body = await request.body()
        except (ClientDisconnect, OSError) as e:
            raise BodyReadError(f"error copying request body ({e})", method, url) from e

        headers = self._merger.merge(override_headers)

        try:
            async with self._client.stream(method, url, content=body, headers=headers) as response:
                try:
                    payload = await response.aread()
                except httpx.HTTPError as e:
                    raise ResponseReadError(f"error reading bytes ({e})", method, url) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise TransportError(f"error doing {method} {url} ({e})", method, url) from e

        self._logger.log_forward(method, url, response.status_code)
        return ForwardResult(
            status_code=response.status_code,
            status_text=f"{response.status_code} {response.reason_phrase}".strip(),
            body=payload,
        )
