"""Conversion session: gate once, then convert many images."""

from pathlib import Path
from typing import Optional, Union

from .auth import CredentialStore
from .client import EwwwClient
from .models import ConversionRequest, MetadataPolicy
from .operationality import check_operationality
from .utils.logging import get_logger

logger = get_logger(__name__)


class EwwwConverter:
    """Converts images to WebP through the EWWW cloud for one session.

    The operationality check is a network round trip, so a successful check
    is remembered for the lifetime of the converter. Failures are not
    remembered: quota may be replenished between attempts.
    """

    def __init__(
        self,
        client: Optional[EwwwClient] = None,
        api_key: Optional[str] = None,
        domain: Optional[str] = None,
        credential_store: Optional[CredentialStore] = None,
    ):
        """Initialize converter.

        Args:
            client: EWWW client, created from environment settings if omitted
            api_key: API key; falls back to settings, then the OS keychain
            domain: Requesting domain; falls back to settings
            credential_store: Keychain access used for the key fallback
        """
        self.client = client or EwwwClient()
        settings = self.client.settings

        if not api_key:
            api_key = settings.api_key
        if not api_key:
            api_key = (credential_store or CredentialStore()).retrieve("default")

        self.api_key = api_key
        self.domain = domain if domain is not None else settings.domain
        self._operational = False

    def check_operationality(self) -> None:
        """Run the operationality check unless it already passed.

        Raises:
            NotOperationalError: See operationality.check_operationality
        """
        if self._operational:
            return
        check_operationality(self.client, self.api_key)
        self._operational = True
        logger.debug("ewww_operational")

    def convert(
        self,
        source: Union[str, Path, bytes],
        destination: Union[str, Path],
        quality: int = 85,
        metadata: MetadataPolicy = MetadataPolicy.STRIP,
    ) -> Path:
        """Convert one image and save it to ``destination``.

        Args:
            source: Path to the source image, or its bytes
            destination: Where to write the WebP image
            quality: Quality setting (0-100)
            metadata: Keep or strip metadata

        Returns:
            Destination path

        Raises:
            NotOperationalError: If the backend is not usable
            ConversionError: If the conversion failed
            PersistenceError: If the result could not be written
        """
        request = ConversionRequest(
            source=Path(source) if isinstance(source, str) else source,
            quality=quality,
            metadata=metadata,
            domain=self.domain,
        )
        self.check_operationality()
        return self.client.convert_to_file(request, self.api_key, destination)
