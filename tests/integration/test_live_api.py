"""Smoke tests against the live EWWW API (require a real key)."""

import os

import pytest

from ewww_client import EwwwClient, EwwwSettings, KeyStatus

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not (os.environ.get("RUN_INTEGRATION_TESTS") and os.environ.get("EWWW_API_KEY")),
        reason="Integration tests require RUN_INTEGRATION_TESTS and EWWW_API_KEY",
    ),
]


@pytest.fixture
def live_client():
    return EwwwClient(settings=EwwwSettings())


@pytest.fixture
def live_key():
    return os.environ["EWWW_API_KEY"]


class TestLiveAPI:
    def test_key_status(self, live_client, live_key):
        assert live_client.get_key_status(live_key) in list(KeyStatus)

    def test_bogus_key_is_invalid(self, live_client):
        assert live_client.get_key_status("x" * 32) == KeyStatus.INVALID

    def test_quota_is_text(self, live_client, live_key):
        assert isinstance(live_client.get_quota(live_key), str)
