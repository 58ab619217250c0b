"""Client for the EWWW cloud optimizer API."""

from pathlib import Path
from typing import Dict, Optional, Union

import httpx
from pydantic import ValidationError

from . import transport as http
from .classifier import EMPTY_RESPONSE, classify_response
from .config import EwwwSettings
from .config import settings as default_settings
from .constants import (
    CONVERT_ENDPOINT,
    METADATA_KEEP,
    METADATA_STRIP,
    QUOTA_ENDPOINT,
    VERIFY_ENDPOINT,
    WEBP_DISABLED,
    WEBP_ENABLED,
)
from .exceptions import (
    BackendError,
    ConversionError,
    EwwwError,
    PersistenceError,
    ProtocolAnomalyError,
)
from .key_status import parse_key_status
from .models import (
    AnomalyOutcome,
    BackendErrorOutcome,
    ConversionOutcome,
    ConversionRequest,
    KeepAliveResult,
    KeyStatus,
    MetadataPolicy,
    SuccessOutcome,
)
from .utils.logging import get_logger

logger = get_logger(__name__)


class EwwwClient:
    """Stateless client for the EWWW cloud API.

    The API key is passed to every call and never kept on the instance.
    Each call opens and closes its own HTTP connection.
    """

    def __init__(
        self,
        settings: Optional[EwwwSettings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize client.

        Args:
            settings: Client settings, defaults to environment configuration
            transport: Optional httpx transport, used by tests
        """
        self.settings = settings or default_settings
        self._transport = transport

    def _open(self, *, user_agent: str, timeout: float, extra_headers=None):
        return http.open_client(
            self.settings,
            user_agent=user_agent,
            timeout=timeout,
            extra_headers=extra_headers,
            transport=self._transport,
        )

    def _post_form(self, endpoint: str, api_key: str) -> httpx.Response:
        with self._open(
            user_agent=self.settings.browser_user_agent,
            timeout=self.settings.request_timeout,
        ) as client:
            return http.post(client, endpoint, data={"api_key": api_key})

    def _post_image(
        self,
        request: ConversionRequest,
        api_key: str,
        webp: str,
        timeout: float,
    ) -> ConversionOutcome:
        try:
            image_data = request.read_source()
        except OSError as e:
            raise ConversionError(
                "Failed to read source image", error_code="source"
            ) from e

        files = {"file": (request.filename, image_data, "application/octet-stream")}
        data: Dict[str, str] = {
            "api_key": api_key,
            "webp": webp,
            "domain": request.domain,
            "quality": str(request.quality),
            "metadata": (
                METADATA_STRIP
                if request.metadata == MetadataPolicy.STRIP
                else METADATA_KEEP
            ),
        }

        with self._open(
            user_agent=self.settings.user_agent,
            timeout=timeout,
            extra_headers={"Accept": "image/*"},
        ) as client:
            response = http.post(client, CONVERT_ENDPOINT, data=data, files=files)

        return classify_response(response.headers.get("content-type"), response.content)

    def get_key_status(self, api_key: str) -> KeyStatus:
        """Ask the backend whether a key is usable.

        Returns:
            KeyStatus.GREAT, KeyStatus.EXCEEDED or KeyStatus.INVALID

        Raises:
            TransportError: If the request fails
            UnexpectedBackendResponse: If the response is not understood
        """
        response = self._post_form(VERIFY_ENDPOINT, api_key)
        return parse_key_status(response.content)

    def is_working_key(self, api_key: str) -> bool:
        """Return True if the key is valid and has credits left."""
        return self.get_key_status(api_key) == KeyStatus.GREAT

    def is_valid_key(self, api_key: str) -> bool:
        """Return True if the key is recognised, even without credits."""
        return self.get_key_status(api_key) != KeyStatus.INVALID

    def get_quota(self, api_key: str) -> str:
        """Return the quota string exactly as the backend sent it.

        Invalid keys get an empty string.
        """
        return self._post_form(QUOTA_ENDPOINT, api_key).text

    def convert(self, request: ConversionRequest, api_key: str) -> bytes:
        """Convert a single image to WebP.

        Args:
            request: Conversion request
            api_key: EWWW API key

        Returns:
            Converted image bytes

        Raises:
            TransportError: If the request fails
            BackendError: If the backend returned an error object
            ProtocolAnomalyError: If the response is empty or not understood
            ConversionError: If the source image cannot be read
        """
        outcome = self._post_image(
            request, api_key, WEBP_ENABLED, self.settings.conversion_timeout
        )

        if isinstance(outcome, SuccessOutcome):
            return outcome.payload
        if isinstance(outcome, BackendErrorOutcome):
            raise BackendError(
                backend_code=outcome.error_code, raw_message=outcome.raw_message
            )
        raise ProtocolAnomalyError(_anomaly_message(outcome), raw_body=outcome.raw_body)

    def convert_to_file(
        self,
        request: ConversionRequest,
        api_key: str,
        destination: Union[str, Path],
    ) -> Path:
        """Convert an image and write the result to ``destination``.

        Nothing is written unless the conversion succeeded.

        Raises:
            PersistenceError: If the converted image could not be written
            ConversionError: As raised by convert()
        """
        payload = self.convert(request, api_key)

        destination = Path(destination)
        try:
            destination.write_bytes(payload)
        except OSError as e:
            raise PersistenceError() from e

        logger.debug("ewww_conversion_saved", size=len(payload))
        return destination

    def keep_alive(
        self,
        source: Union[str, Path, bytes],
        api_key: str,
        domain: str = "",
    ) -> KeepAliveResult:
        """Optimize an image without WebP output to keep the account active.

        EWWW closes accounts after six months of inactivity and WebP
        conversions do not seem to count. Failures are returned as a
        warning and never raised.
        """
        try:
            request = ConversionRequest(
                source=Path(source) if isinstance(source, str) else source,
                quality=self.settings.keep_alive_quality,
                metadata=MetadataPolicy.STRIP,
                domain=domain,
            )
            outcome = self._post_image(
                request, api_key, WEBP_DISABLED, self.settings.request_timeout
            )
        except EwwwError as e:
            return self._keep_alive_warning(e.message)
        except ValidationError:
            return self._keep_alive_warning("Invalid keep-alive source image")

        if isinstance(outcome, BackendErrorOutcome):
            return self._keep_alive_warning("The key is invalid")
        if isinstance(outcome, AnomalyOutcome):
            return self._keep_alive_warning(_anomaly_message(outcome))

        return KeepAliveResult(ok=True)

    def _keep_alive_warning(self, message: str) -> KeepAliveResult:
        logger.warning("ewww_keep_alive_failed", reason=message)
        return KeepAliveResult(ok=False, warning=message)


def _anomaly_message(outcome: AnomalyOutcome) -> str:
    if outcome.reason == EMPTY_RESPONSE:
        return "ewww api did not return anything"
    return (
        "ewww api did not return an image. It could be that the key is invalid. "
        f"Response: {outcome.raw_text}"
    )
