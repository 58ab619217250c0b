"""Reduction of /verify/ responses to a KeyStatus.

Possible responses:
- ``{"status": "great"}``: key verified, credits remaining
- ``{"status": "exceeded"}``: valid key with no remaining image credits
- ``{"error": "invalid"}`` or an empty body: the key is not valid
"""

from .classifier import parse_json_object
from .constants import STATUS_INVALID
from .exceptions import UnexpectedBackendResponse
from .models import KeyStatus


def parse_key_status(body: bytes) -> KeyStatus:
    """Interpret the body of a /verify/ response.

    Unknown error codes and statuses are rejected rather than guessed.

    Raises:
        UnexpectedBackendResponse: If the body is not one of the known shapes
    """
    if not body:
        return KeyStatus.INVALID

    text = body.decode("utf-8", errors="replace")
    data = parse_json_object(body)
    if data is None:
        raise UnexpectedBackendResponse(
            f"Ewww returned unexpected response to verify request: {text}",
            raw_body=body,
        )

    if data.get("error") is not None:
        if data["error"] == STATUS_INVALID:
            return KeyStatus.INVALID
        raise UnexpectedBackendResponse(
            f"Ewww returned unexpected error: {text}", raw_body=body
        )

    if "status" not in data:
        raise UnexpectedBackendResponse(
            f"Ewww returned unexpected response to verify request: {text}",
            raw_body=body,
        )

    status = data["status"]
    if status in (KeyStatus.GREAT.value, KeyStatus.EXCEEDED.value):
        return KeyStatus(status)

    raise UnexpectedBackendResponse(
        f'Ewww returned unexpected status to verify request: "{status}"',
        raw_body=body,
    )
