"""Exception classes for the EWWW cloud client.

Messages never include the API key. Raw backend responses are attached
where available so unexpected replies can be diagnosed.
"""

from typing import Optional, Dict, Any


class EwwwError(Exception):
    """Base exception for all EWWW client errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize exception.

        Args:
            message: Error message (must not contain the API key)
            error_code: Error category code
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class NotOperationalError(EwwwError):
    """Raised when the backend cannot be used: bad key, no quota, no transport.

    Conversion must not be attempted once this has been raised.
    """

    def __init__(self, message: str, error_code: str = "not_operational"):
        super().__init__(message, error_code=error_code)


class SystemRequirementsNotMetError(NotOperationalError):
    """Raised when the local HTTPS transport is unavailable."""

    def __init__(self, message: str = "HTTPS transport is not available"):
        super().__init__(message, error_code="system_requirements")


class ConfigurationError(NotOperationalError):
    """Raised when the API key is missing or obviously malformed."""

    def __init__(self, message: str, error_code: str = "configuration"):
        super().__init__(message, error_code=error_code)


class ConversionError(EwwwError):
    """Raised when a request to the backend does not yield an image."""

    def __init__(
        self,
        message: str = "Conversion failed",
        error_code: str = "conversion",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, error_code=error_code, details=details)


class TransportError(ConversionError):
    """Raised on network or connection failure during any request."""

    def __init__(self, message: str = "Request to the EWWW API failed"):
        super().__init__(message, error_code="transport")


class BackendError(ConversionError):
    """Raised when the backend answers with a structured error object."""

    def __init__(
        self,
        message: str = "The key is invalid",
        backend_code: str = "invalid",
        raw_message: Optional[str] = None,
    ):
        super().__init__(
            message,
            error_code=backend_code,
            details={"raw_message": raw_message} if raw_message else None,
        )
        self.backend_code = backend_code
        self.raw_message = raw_message


class ProtocolAnomalyError(ConversionError):
    """Raised when a response cannot be interpreted.

    The raw response body is kept on ``raw_body`` and echoed in the message.
    """

    def __init__(
        self,
        message: str,
        raw_body: bytes = b"",
        error_code: str = "protocol_anomaly",
    ):
        super().__init__(message, error_code=error_code)
        self.raw_body = raw_body


class UnexpectedBackendResponse(ProtocolAnomalyError):
    """Raised when /verify/ returns an error or status not seen before."""

    def __init__(self, message: str, raw_body: bytes = b""):
        super().__init__(message, raw_body=raw_body, error_code="unexpected_response")


class PersistenceError(EwwwError):
    """Raised when a converted image could not be written to its destination."""

    def __init__(self, message: str = "Error saving file"):
        # Never include the destination path in the message
        super().__init__(message, error_code="persistence")
