"""API key storage in the OS keychain."""

from typing import Optional

import keyring
from keyring.errors import KeyringError

from .utils.logging import get_logger

logger = get_logger(__name__)


class CredentialStore:
    """Stores EWWW API keys in the OS keychain."""

    SERVICE_NAME = "ewww-cloud-client"
    KEY_PREFIX = "EWWW_API_"

    def __init__(self, service_name: str = SERVICE_NAME):
        """Initialize credential store.

        Args:
            service_name: Keychain service name
        """
        self.service_name = service_name

    def _username(self, key_name: str) -> str:
        return f"{self.KEY_PREFIX}{key_name}"

    def store(self, key_name: str, api_key: str) -> bool:
        """Store API key in the OS keychain.

        Args:
            key_name: Name/identifier for the key
            api_key: The API key to store

        Returns:
            True if stored successfully
        """
        try:
            keyring.set_password(self.service_name, self._username(key_name), api_key)
        except KeyringError as e:
            logger.debug("keychain_store_failed", key_name=key_name, error=str(e))
            return False
        return True

    def retrieve(self, key_name: str = "default") -> Optional[str]:
        """Retrieve API key from the OS keychain.

        Returns:
            API key if found, None otherwise
        """
        try:
            return keyring.get_password(self.service_name, self._username(key_name))
        except KeyringError as e:
            logger.debug("keychain_retrieve_failed", key_name=key_name, error=str(e))
            return None

    def delete(self, key_name: str) -> bool:
        """Delete API key from the OS keychain.

        Returns:
            True if deleted successfully
        """
        try:
            keyring.delete_password(self.service_name, self._username(key_name))
        except KeyringError as e:
            logger.debug("keychain_delete_failed", key_name=key_name, error=str(e))
            return False
        return True
