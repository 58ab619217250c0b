"""EWWW cloud client for Python - WebP conversion through the EWWW optimizer API."""

from .client import EwwwClient
from .converter import EwwwConverter
from .classifier import classify_response
from .config import EwwwSettings
from .models import (
    ConversionRequest,
    ConversionOutcome,
    SuccessOutcome,
    BackendErrorOutcome,
    AnomalyOutcome,
    KeepAliveResult,
    KeyStatus,
    MetadataPolicy,
)
from .exceptions import (
    EwwwError,
    NotOperationalError,
    SystemRequirementsNotMetError,
    ConfigurationError,
    ConversionError,
    TransportError,
    BackendError,
    ProtocolAnomalyError,
    UnexpectedBackendResponse,
    PersistenceError,
)
from .operationality import check_operationality
from .validation import validate_key
from .auth import CredentialStore

__version__ = "1.0.0"
__all__ = [
    "EwwwClient",
    "EwwwConverter",
    "EwwwSettings",
    "classify_response",
    "check_operationality",
    "validate_key",
    "ConversionRequest",
    "ConversionOutcome",
    "SuccessOutcome",
    "BackendErrorOutcome",
    "AnomalyOutcome",
    "KeepAliveResult",
    "KeyStatus",
    "MetadataPolicy",
    "EwwwError",
    "NotOperationalError",
    "SystemRequirementsNotMetError",
    "ConfigurationError",
    "ConversionError",
    "TransportError",
    "BackendError",
    "ProtocolAnomalyError",
    "UnexpectedBackendResponse",
    "PersistenceError",
    "CredentialStore",
]
