"""Terminate inbound requests with a forwarded payload or an error envelope."""

from typing import Any

from fastapi import Response
from pydantic import TypeAdapter, ValidationError

from core.classify import classify_status
from core.exceptions import DecodeError
from core.models import SERVER_ERROR, SERVER_ERROR_MESSAGE, ErrorEnvelope
from core.protocols import RequestLogger
from core.request_types import ForwardResult

JSON_MEDIA_TYPE = "application/json"
ERROR_STATUS = 500


class ResponseWriter:
    """Build JSON responses from upstream results."""

    def __init__(self, logger: RequestLogger) -> None:
        self._logger = logger

    def write_json(self, result: ForwardResult, shape: TypeAdapter[Any], route: str) -> Response:
        """Classify, then decode and re-encode a forwarded result."""
        envelope = classify_status(result.status_code)
        if envelope is not None:
            self._logger.log_error(route, result.status_code, f"{envelope.type}: {result.status_text}")
            return self.write_envelope(envelope)

        try:
            return self.write_success(result, shape)
        except DecodeError as e:
            self._logger.log_error(route, ERROR_STATUS, f"{e.kind}: {e}")
            return self.write_error(SERVER_ERROR, SERVER_ERROR_MESSAGE)

    def write_success(self, result: ForwardResult, shape: TypeAdapter[Any]) -> Response:
        """Round-trip the upstream body through ``shape`` and mirror its status.

        Raises:
            DecodeError: the body is not JSON matching ``shape``
        """
        try:
            value = shape.validate_json(result.body)
        except ValidationError as e:
            raise DecodeError(f"couldn't decode upstream JSON ({e.error_count()} errors)") from e

        return Response(
            content=shape.dump_json(value, by_alias=True),
            status_code=result.status_code,
            media_type=JSON_MEDIA_TYPE,
        )

    def write_error(self, error_type: str, message: str) -> Response:
        return self.write_envelope(ErrorEnvelope.single(error_type, message))

    def write_envelope(self, envelope: ErrorEnvelope) -> Response:
        # Status is fixed; the type tag in the body carries the category.
        return Response(
            content=envelope.model_dump_json(),
            status_code=ERROR_STATUS,
            media_type=JSON_MEDIA_TYPE,
        )
