"""Shared request data types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ForwardResult:
    """Buffered outcome of one upstream call."""

    status_code: int
    status_text: str
    body: bytes
