"""Format checks for reddit's request conformance rules.

reddit rejects or throttles clients with generic User-Agent strings and
requires installed apps to send a bounded ASCII device id.
"""

from __future__ import annotations

import re

from reddit_oauth2.constants import DEVICE_ID_MAX_LENGTH, DEVICE_ID_MIN_LENGTH
from reddit_oauth2.models.errors import InvalidFormatError

# <platform>:<app ID>:<version string> (by /u/<reddit username>)
USER_AGENT_PATTERN = re.compile(
    r"^(?P<platform>[^:\s]+):(?P<app_id>[^:\s]+):(?P<version>[^:\s()]+)"
    r"(?: \(by /u/(?P<username>[\w-]+)\))?$"
)


def is_valid_user_agent(value: str | None) -> bool:
    if not isinstance(value, str):
        return False
    return bool(value) and USER_AGENT_PATTERN.match(value) is not None


def validate_user_agent(value: str | None) -> None:
    """Validate a User-Agent against reddit's descriptive format.

    Raises:
        InvalidFormatError: If the value is empty or not of the form
            ``<platform>:<app ID>:<version> (by /u/<username>)``
    """
    if not is_valid_user_agent(value):
        raise InvalidFormatError(
            f"User-Agent {value!r} must look like "
            "'<platform>:<app ID>:<version> (by /u/<reddit username>)'"
        )


def validate_device_id(value: str | None) -> None:
    """Validate an installed-app device id.

    ``None`` and the empty string mean "not provided" and pass; the caller
    is expected to generate a replacement.

    Raises:
        InvalidFormatError: If the id is not ASCII or not 20-30 characters long
    """
    if not value:
        return

    if not isinstance(value, str):
        raise InvalidFormatError(
            f"device_id must be a string, got {type(value).__name__}"
        )

    if not value.isascii():
        raise InvalidFormatError("device_id must only contain ASCII characters")

    if not DEVICE_ID_MIN_LENGTH <= len(value) <= DEVICE_ID_MAX_LENGTH:
        raise InvalidFormatError(
            f"device_id must be {DEVICE_ID_MIN_LENGTH}-{DEVICE_ID_MAX_LENGTH} "
            f"characters long, got {len(value)}"
        )
