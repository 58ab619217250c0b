"""Operationality gate run before any conversion attempt."""

from typing import Optional

from .client import EwwwClient
from .exceptions import NotOperationalError, SystemRequirementsNotMetError
from .models import KeyStatus
from .transport import transport_available as _transport_available
from .validation import validate_key


def check_operationality(
    client: EwwwClient,
    api_key: Optional[str],
    transport_available: Optional[bool] = None,
) -> None:
    """Check that conversions can be attempted with this key.

    Local checks run first, so a missing or short key never reaches the
    network.

    Args:
        client: EWWW client used for the key status request
        api_key: EWWW API key
        transport_available: Override for the HTTPS transport check

    Raises:
        SystemRequirementsNotMetError: If HTTPS is not available
        ConfigurationError: If the key is missing or too short
        NotOperationalError: If the key is invalid or its quota has exceeded
        TransportError: If the verify request fails
        UnexpectedBackendResponse: If the verify response is not understood
    """
    if transport_available is None:
        transport_available = _transport_available()
    if not transport_available:
        raise SystemRequirementsNotMetError(
            "Required HTTPS support (ssl module) is not available."
        )

    validate_key(api_key)

    status = client.get_key_status(api_key)
    if status == KeyStatus.GREAT:
        return
    elif status == KeyStatus.EXCEEDED:
        raise NotOperationalError("quota has exceeded")
    elif status == KeyStatus.INVALID:
        raise NotOperationalError("key is invalid")
    else:
        raise ValueError(f"Unhandled key status: {status!r}")
