"""Tests for keychain-backed credential storage."""

from unittest.mock import patch

from keyring.errors import NoKeyringError, PasswordDeleteError

from ewww_client.auth import CredentialStore


class TestCredentialStore:
    def test_store_and_retrieve(self):
        store = CredentialStore()
        vault = {}

        def set_password(service, username, password):
            vault[(service, username)] = password

        def get_password(service, username):
            return vault.get((service, username))

        with patch("keyring.set_password", side_effect=set_password), patch(
            "keyring.get_password", side_effect=get_password
        ):
            assert store.store("default", "k" * 32)
            assert store.retrieve("default") == "k" * 32
            assert store.retrieve("other") is None

        assert ("ewww-cloud-client", "EWWW_API_default") in vault

    def test_no_keychain_backend(self):
        store = CredentialStore()

        with patch("keyring.get_password", side_effect=NoKeyringError()), patch(
            "keyring.set_password", side_effect=NoKeyringError()
        ):
            assert store.retrieve("default") is None
            assert store.store("default", "k" * 32) is False

    def test_delete(self):
        store = CredentialStore(service_name="ewww-test")

        with patch("keyring.delete_password") as delete_password:
            assert store.delete("default") is True
        delete_password.assert_called_once_with("ewww-test", "EWWW_API_default")

        with patch("keyring.delete_password", side_effect=PasswordDeleteError()):
            assert store.delete("default") is False
