"""Pytest fixtures for EWWW cloud client tests."""

from pathlib import Path

import pytest

from ewww_client import EwwwClient, EwwwSettings
from tests.helpers import BASE_URL, JPEG_BYTES


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: tests that talk to the live EWWW API"
    )


@pytest.fixture
def settings():
    """Settings isolated from the developer's environment and .env file."""
    return EwwwSettings(
        _env_file=None,
        base_url=BASE_URL,
        api_key=None,
        domain="example.com",
        verify_ssl=False,
    )


@pytest.fixture
def client(settings):
    return EwwwClient(settings=settings)


@pytest.fixture
def api_key():
    """A well-formed 32 character key."""
    return "abcdef0123456789abcdef0123456789"


@pytest.fixture
def sample_image(tmp_path) -> Path:
    path = tmp_path / "photo.jpg"
    path.write_bytes(JPEG_BYTES)
    return path
