"""Exception hierarchy for reddit OAuth2 client errors.

Request-construction errors are raised before any network call is made.
Transport errors wrap failures of the token and resource-owner requests.
"""

from __future__ import annotations


class RedditOAuth2Error(Exception):
    """Base exception for all reddit OAuth2 related errors."""

    pass


class InvalidArgumentError(RedditOAuth2Error, ValueError):
    """Raised when a caller-supplied value can never produce a valid request."""

    pass


class InvalidFormatError(InvalidArgumentError):
    """Raised when a User-Agent or device id breaks reddit's format rules."""

    pass


class MissingConfigurationError(InvalidArgumentError):
    """Raised when client_id, client_secret or redirect_uri is missing."""

    pass


class MissingParameterError(InvalidArgumentError):
    """Raised when a grant-specific required option is absent or empty."""

    pass


class AuthorizationError(RedditOAuth2Error):
    """Raised when reddit reports an error on the authorization redirect."""

    pass


class StateValidationError(AuthorizationError):
    """Raised when OAuth state parameter validation fails.

    This indicates either a missing state parameter or a state mismatch,
    which could indicate a CSRF attack.
    """

    pass


class TokenError(RedditOAuth2Error):
    """Raised when the token request fails or returns an error payload."""

    pass


class ResourceOwnerError(RedditOAuth2Error):
    """Raised when fetching the authenticated user's profile fails."""

    pass
