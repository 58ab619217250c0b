"""Local sanity checks on API keys. No network access."""

from typing import Optional

from .constants import EXPECTED_KEY_LENGTH, MIN_KEY_LENGTH
from .exceptions import ConfigurationError


def validate_key(key: Optional[str]) -> None:
    """Check that an API key is present and plausibly long.

    Args:
        key: API key to check

    Raises:
        ConfigurationError: If the key is empty or shorter than MIN_KEY_LENGTH
    """
    if not key:
        raise ConfigurationError("Missing API key.", error_code="missing_key")

    if len(key) < MIN_KEY_LENGTH:
        # Usually a truncated copy-paste
        raise ConfigurationError(
            f"Key is invalid. Keys are supposed to be {EXPECTED_KEY_LENGTH} "
            "characters long - your key is much shorter",
            error_code="key_too_short",
        )
