"""HTTP transport for the EWWW cloud client.

Every operation opens its own ``httpx.Client`` with ``open_client`` and
closes it when the exchange is done; no connection is reused between calls.
"""

import importlib.util
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

import httpx

from .config import EwwwSettings
from .exceptions import TransportError
from .utils.logging import get_logger

logger = get_logger(__name__)


def transport_available() -> bool:
    """Return True if this interpreter can make HTTPS requests."""
    return importlib.util.find_spec("ssl") is not None


@contextmanager
def open_client(
    settings: EwwwSettings,
    *,
    user_agent: str,
    timeout: float,
    extra_headers: Optional[Dict[str, str]] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> Iterator[httpx.Client]:
    """Open a single-use HTTP client for one request/response exchange.

    Args:
        settings: Client settings (base URL, TLS verification)
        user_agent: User-Agent header for the request
        timeout: Request timeout in seconds
        extra_headers: Additional headers
        transport: Optional httpx transport, used by tests

    Yields:
        Configured httpx.Client, closed on exit
    """
    headers = {"User-Agent": user_agent}
    if extra_headers:
        headers.update(extra_headers)

    client = httpx.Client(
        base_url=settings.base_url,
        headers=headers,
        timeout=timeout,
        verify=settings.verify_ssl,
        follow_redirects=False,
        transport=transport,
    )
    try:
        yield client
    finally:
        client.close()


def post(client: httpx.Client, endpoint: str, **kwargs: Any) -> httpx.Response:
    """POST to an endpoint, translating httpx failures into TransportError.

    The response status code is not checked; the EWWW API signals errors
    in the body.
    """
    logger.debug("ewww_request", endpoint=endpoint)
    try:
        response = client.post(endpoint, **kwargs)
    except httpx.HTTPError as e:
        raise TransportError(f"Request to {endpoint} failed: {e}") from e

    logger.debug(
        "ewww_response",
        endpoint=endpoint,
        status_code=response.status_code,
        content_type=response.headers.get("content-type", ""),
        size=len(response.content),
    )
    return response
