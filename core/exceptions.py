"""Custom exception hierarchy for the posts proxy."""


class ProxyError(Exception):
    """Base exception for all proxy errors."""


class ConfigurationError(ProxyError):
    """Raised when configuration is missing or invalid."""


class ForwardingError(ProxyError):
    """Raised when a forwarded call cannot produce a usable result.

    Attributes:
        message: Error message
        method: HTTP method of the upstream call
        url: Upstream URL
    """

    kind = "forwarding_error"

    def __init__(
        self,
        message: str,
        method: str | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url


class BodyReadError(ForwardingError):
    """Raised when the inbound request body cannot be read."""

    kind = "body_read_error"


class TransportError(ForwardingError):
    """Raised when the upstream cannot be reached (DNS, connect, timeout)."""

    kind = "transport_error"


class ResponseReadError(ForwardingError):
    """Raised when the upstream response body is truncated or interrupted."""

    kind = "response_read_error"


class DecodeError(ForwardingError):
    """Upstream body is not valid JSON of the expected shape."""

    kind = "decode_error"
