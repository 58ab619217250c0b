"""Classification of raw EWWW API responses.

The backend answers failures with HTTP 200 as well, so the status code
says nothing. An image is recognised only by its
``application/octet-stream`` content type; anything else is an error
object such as ``{"error":"invalid","t":"exceeded"}`` or free text.
"""

import json
from typing import Any, Dict, Optional

from .constants import IMAGE_CONTENT_TYPE
from .models import (
    AnomalyOutcome,
    BackendErrorOutcome,
    ConversionOutcome,
    SuccessOutcome,
)

EMPTY_RESPONSE = "empty response"
NOT_AN_IMAGE = "did not return an image"


def media_type(content_type: Optional[str]) -> str:
    """Return the bare, lower-cased media type of a Content-Type header."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def parse_json_object(body: bytes) -> Optional[Dict[str, Any]]:
    """Decode a response body as a JSON object, or return None."""
    if not body:
        return None
    try:
        data = json.loads(body)
    except (ValueError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None
    return data


def classify_response(content_type: Optional[str], body: bytes) -> ConversionOutcome:
    """Decide what a conversion response contains.

    Args:
        content_type: Value of the response Content-Type header
        body: Raw response body

    Returns:
        SuccessOutcome, BackendErrorOutcome or AnomalyOutcome
    """
    if media_type(content_type) == IMAGE_CONTENT_TYPE:
        if not body:
            return AnomalyOutcome(reason=EMPTY_RESPONSE, raw_body=body)
        return SuccessOutcome(payload=body)

    data = parse_json_object(body)
    if data is not None and data.get("error") is not None:
        return BackendErrorOutcome(
            error_code=str(data["error"]),
            raw_message=body.decode("utf-8", errors="replace"),
        )

    return AnomalyOutcome(reason=NOT_AN_IMAGE, raw_body=body)
