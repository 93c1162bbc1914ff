"""Secure random values for reddit OAuth2 requests.

Provides the CSRF state parameter, the fallback installed-app device id and
constant-time state validation.
"""

from __future__ import annotations

import secrets
import string

from reddit_oauth2.constants import DEVICE_ID_MAX_LENGTH, STATE_LENGTH
from reddit_oauth2.models.errors import StateValidationError

_ALPHANUMERIC = string.ascii_letters + string.digits


def _random_token(length: int) -> str:
    return "".join(secrets.choice(_ALPHANUMERIC) for _ in range(length))


def generate_state() -> str:
    """Generate cryptographically secure state parameter.

    The state parameter provides CSRF protection by ensuring the callback
    matches the original authorization request.

    Returns:
        Random state string of 32 alphanumeric characters
    """
    return _random_token(STATE_LENGTH)


def generate_device_id() -> str:
    """Generate a random device id for installed-app grants.

    Always ASCII and of the maximum accepted length, so it passes
    device id validation.
    """
    return _random_token(DEVICE_ID_MAX_LENGTH)


def validate_state(expected: str, actual: str) -> None:
    """Validate state parameter matches expected value.

    Args:
        expected: State parameter from original authorization request
        actual: State parameter from callback URL

    Raises:
        StateValidationError: If state parameters don't match
    """
    if not secrets.compare_digest(expected.encode(), actual.encode()):
        raise StateValidationError("State parameter mismatch - possible CSRF attack")
