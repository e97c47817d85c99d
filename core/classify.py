"""Upstream status classification."""

from core.models import BAD_EXTERNAL_REQUEST, NOT_FOUND, SERVER_ERROR, SERVER_ERROR_MESSAGE, ErrorEnvelope


def classify_status(status_code: int) -> ErrorEnvelope | None:
    """Map an upstream status code to an error envelope, or None on success.

    Codes of 600 and above are outside every bucket and pass as success.
    """
    if status_code < 400:
        return None
    if status_code == 404:
        return ErrorEnvelope.single(NOT_FOUND, "Resource not found")
    if status_code < 500:
        return ErrorEnvelope.single(BAD_EXTERNAL_REQUEST, "Bad external request")
    if status_code < 600:
        return ErrorEnvelope.single(SERVER_ERROR, SERVER_ERROR_MESSAGE)
    return None
