"""Tests for the conversion session."""

from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from ewww_client import EwwwClient, EwwwConverter
from ewww_client.auth import CredentialStore
from ewww_client.exceptions import ConfigurationError, NotOperationalError
from tests.helpers import (
    CONVERT_URL,
    VERIFY_URL,
    WEBP_BYTES,
    CountingTransport,
    form_field,
)

OCTET_STREAM = {"Content-Type": "application/octet-stream"}


class TestEwwwConverter:
    """Gate once, convert many."""

    def test_convert_checks_then_writes(
        self, client, api_key, sample_image, tmp_path, httpx_mock
    ):
        httpx_mock.add_response(url=VERIFY_URL, method="POST", json={"status": "great"})
        httpx_mock.add_response(
            url=CONVERT_URL, method="POST", headers=OCTET_STREAM, content=WEBP_BYTES
        )
        converter = EwwwConverter(client=client, api_key=api_key)
        destination = tmp_path / "out.webp"

        converter.convert(sample_image, destination, quality=75)

        assert destination.read_bytes() == WEBP_BYTES
        convert_request = httpx_mock.get_requests(url=CONVERT_URL)[0]
        body = convert_request.read()
        assert form_field("quality", "75") in body
        assert form_field("domain", "example.com") in body

    def test_successful_check_is_cached(
        self, client, api_key, sample_image, tmp_path, httpx_mock
    ):
        httpx_mock.add_response(url=VERIFY_URL, method="POST", json={"status": "great"})
        httpx_mock.add_response(
            url=CONVERT_URL, method="POST", headers=OCTET_STREAM, content=WEBP_BYTES
        )
        httpx_mock.add_response(
            url=CONVERT_URL, method="POST", headers=OCTET_STREAM, content=WEBP_BYTES
        )
        converter = EwwwConverter(client=client, api_key=api_key)

        converter.convert(sample_image, tmp_path / "a.webp")
        converter.convert(str(sample_image), tmp_path / "b.webp")

        assert len(httpx_mock.get_requests(url=VERIFY_URL)) == 1
        assert len(httpx_mock.get_requests(url=CONVERT_URL)) == 2

    def test_failed_check_is_not_cached(
        self, client, api_key, sample_image, tmp_path, httpx_mock
    ):
        httpx_mock.add_response(
            url=VERIFY_URL, method="POST", json={"status": "exceeded"}
        )
        httpx_mock.add_response(url=VERIFY_URL, method="POST", json={"status": "great"})
        httpx_mock.add_response(
            url=CONVERT_URL, method="POST", headers=OCTET_STREAM, content=WEBP_BYTES
        )
        converter = EwwwConverter(client=client, api_key=api_key)

        with pytest.raises(NotOperationalError):
            converter.convert(sample_image, tmp_path / "a.webp")
        assert not (tmp_path / "a.webp").exists()

        converter.convert(sample_image, tmp_path / "a.webp")

        assert len(httpx_mock.get_requests(url=VERIFY_URL)) == 2

    def test_key_from_settings(self, client, settings):
        settings.api_key = "s" * 32

        converter = EwwwConverter(client=client)

        assert converter.api_key == "s" * 32
        assert converter.domain == "example.com"

    def test_key_from_keychain(self, client):
        store = Mock(spec=CredentialStore)
        store.retrieve.return_value = "k" * 32

        converter = EwwwConverter(client=client, credential_store=store)

        assert converter.api_key == "k" * 32
        store.retrieve.assert_called_once_with("default")

    def test_missing_key_fails_without_network(self, settings, sample_image, tmp_path):
        transport = CountingTransport()
        store = Mock(spec=CredentialStore)
        store.retrieve.return_value = None
        converter = EwwwConverter(
            client=EwwwClient(settings=settings, transport=transport),
            credential_store=store,
        )

        with pytest.raises(ConfigurationError):
            converter.convert(sample_image, tmp_path / "out.webp")

        assert transport.requests == []

    @pytest.mark.parametrize("quality", [-1, 101])
    def test_invalid_request_fails_before_verify(
        self, settings, api_key, sample_image, tmp_path, quality
    ):
        transport = CountingTransport()
        converter = EwwwConverter(
            client=EwwwClient(settings=settings, transport=transport), api_key=api_key
        )

        with pytest.raises(ValidationError):
            converter.convert(sample_image, tmp_path / "out.webp", quality=quality)

        assert transport.requests == []

    def test_explicit_domain_overrides_settings(self, client, api_key):
        converter = EwwwConverter(client=client, api_key=api_key, domain="cdn.test")

        assert converter.domain == "cdn.test"
