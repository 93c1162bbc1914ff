"""Token request body construction for each supported reddit grant."""

from __future__ import annotations

import logging

from reddit_oauth2.models.config import ProviderConfig
from reddit_oauth2.models.errors import InvalidArgumentError
from reddit_oauth2.models.grants import (
    AuthorizationCodeGrant,
    ClientCredentialsGrant,
    InstalledClientGrant,
    PasswordGrant,
    TokenGrant,
)
from reddit_oauth2.services.security import generate_device_id
from reddit_oauth2.services.validation import validate_device_id

logger = logging.getLogger(__name__)

_SUPPORTED_GRANTS = (
    ClientCredentialsGrant,
    PasswordGrant,
    AuthorizationCodeGrant,
    InstalledClientGrant,
)


def resolve_device_id(device_id: str | None) -> str:
    """Return a valid device id, generating one when none was given.

    Raises:
        InvalidFormatError: If a non-empty device id is malformed
    """
    if not device_id:
        logger.debug("No device_id provided, generating one")
        return generate_device_id()

    validate_device_id(device_id)
    return device_id


def build_token_params(config: ProviderConfig, grant: TokenGrant) -> dict[str, str]:
    """Build the form body of a token request.

    The client itself is identified by the Basic-auth header, so client
    credentials never appear in the body.

    Args:
        config: Provider configuration
        grant: Grant to request a token with

    Returns:
        Form fields for the token endpoint

    Raises:
        InvalidArgumentError: If the grant cannot produce a valid request
        TypeError: If ``grant`` is not a supported grant
    """
    if not isinstance(grant, _SUPPORTED_GRANTS):
        raise TypeError(f"Unsupported grant: {type(grant).__name__}")

    params = {"grant_type": grant.grant_type}

    if isinstance(grant, PasswordGrant):
        params["username"] = grant.username
        params["password"] = grant.password
    elif isinstance(grant, AuthorizationCodeGrant):
        if grant.redirect_uri and grant.redirect_uri != config.redirect_uri:
            raise InvalidArgumentError(
                "redirect_uri must match the one the authorization code was "
                "requested with"
            )
        params["code"] = grant.code
        params["redirect_uri"] = config.redirect_uri
    elif isinstance(grant, InstalledClientGrant):
        params["device_id"] = resolve_device_id(grant.device_id)

    logger.debug(
        f"Token request: grant_type={params['grant_type']}, "
        f"client_id={config.client_id}"
    )
    return params
