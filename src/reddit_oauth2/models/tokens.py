"""Access token models for the reddit OAuth2 client.

Contains the immutable access token handed to callers and the raw token
endpoint response it is parsed from.
"""

from __future__ import annotations

import time
from dataclasses import dataclass

from pydantic import BaseModel

from reddit_oauth2.constants import DEFAULT_TOKEN_LIFETIME


@dataclass(frozen=True)
class AccessToken:
    """Issued access token.

    Only the token string and its absolute expiry are used to build
    requests; the remaining fields are kept for callers.
    """

    access_token: str
    expires: int  # Unix timestamp
    token_type: str = "bearer"
    refresh_token: str | None = None
    scope: str | None = None

    def __post_init__(self) -> None:
        if not self.access_token:
            raise ValueError("access_token must not be empty")

    def has_expired(self, now: float | None = None) -> bool:
        """Check if the token expiry has passed."""
        current = time.time() if now is None else now
        return current >= self.expires

    def __str__(self) -> str:
        return self.access_token


class TokenResponse(BaseModel):
    """Token endpoint response.

    reddit answers failed grants with HTTP 200 and an ``error`` field as
    often as with a 4xx status, so both shapes are modelled here.
    """

    # Success response fields
    access_token: str | None = None
    token_type: str = "bearer"
    expires_in: int | None = None  # Seconds until expiry
    refresh_token: str | None = None
    scope: str | None = None

    # Error response fields
    error: str | int | None = None
    error_description: str | None = None
    message: str | None = None

    def is_success(self) -> bool:
        """Check if token response indicates success."""
        return self.error is None and bool(self.access_token)

    def is_error(self) -> bool:
        """Check if token response indicates an error."""
        return self.error is not None

    def calculate_expires(self, now: float | None = None) -> int:
        """Calculate absolute expiry timestamp from expires_in."""
        current = time.time() if now is None else now
        lifetime = (
            self.expires_in if self.expires_in is not None else DEFAULT_TOKEN_LIFETIME
        )
        return int(current) + lifetime

    def to_access_token(self) -> AccessToken:
        """Convert successful token response to an AccessToken.

        Raises:
            ValueError: If response is not successful
        """
        if not self.is_success():
            raise ValueError("Cannot convert error response to AccessToken")

        return AccessToken(
            access_token=self.access_token,
            expires=self.calculate_expires(),
            token_type=self.token_type,
            refresh_token=self.refresh_token,
            scope=self.scope,
        )
