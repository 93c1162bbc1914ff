"""Authorization URL construction and callback handling for reddit.

Builds the "authorization code" redirect URL and validates the redirect
reddit sends back.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qs, urlencode, urlparse

from reddit_oauth2.constants import AUTHORIZE_URL
from reddit_oauth2.models.config import ProviderConfig
from reddit_oauth2.models.errors import AuthorizationError, StateValidationError
from reddit_oauth2.models.flow import AuthorizationRequest, AuthorizationResponse
from reddit_oauth2.services.security import generate_state, validate_state

logger = logging.getLogger(__name__)


def _scope_value(config: ProviderConfig, options: Mapping[str, Any]) -> str:
    scope = options.get("scope")
    if scope is None:
        return ",".join(config.scopes)
    if isinstance(scope, str):
        return scope
    return ",".join(scope)


def build_authorization_params(
    config: ProviderConfig, options: Mapping[str, Any] | None = None
) -> dict[str, str]:
    """Build the query parameters of the authorization URL.

    ``duration`` is passed through unchanged when set; reddit decides
    which values it accepts. A fresh state is generated on every call.

    Args:
        config: Provider configuration
        options: Optional ``duration`` and ``scope`` override

    Returns:
        Ordered query parameters
    """
    options = options or {}

    params = {
        "client_id": config.client_id,
        "redirect_uri": config.redirect_uri,
        "response_type": "code",
        "approval_prompt": "auto",
        "scope": _scope_value(config, options),
    }

    if options.get("duration") is not None:
        params["duration"] = options["duration"]

    params["state"] = generate_state()
    return params


def build_authorization_url(params: Mapping[str, str]) -> str:
    """Join the authorize endpoint with the encoded query.

    Commas stay literal so the scope list reads ``identity,read``.
    """
    return f"{AUTHORIZE_URL}?{urlencode(params, safe=',')}"


def start_authorization(
    config: ProviderConfig, options: Mapping[str, Any] | None = None
) -> AuthorizationRequest:
    params = build_authorization_params(config, options)
    url = build_authorization_url(params)

    logger.debug(
        f"Generated authorization URL for client {config.client_id} "
        f"with scope {params['scope']!r}"
    )
    return AuthorizationRequest(url=url, state=params["state"], params=params)


def parse_authorization_callback(
    callback_url: str, expected_state: str
) -> AuthorizationResponse:
    """Parse and check the redirect reddit sends after authorization.

    Args:
        callback_url: Full callback URL received on the redirect URI
        expected_state: State stored when the authorization URL was built

    Returns:
        AuthorizationResponse carrying the authorization code

    Raises:
        StateValidationError: If the state is missing or does not match
        AuthorizationError: If reddit reports an error or sends no code
    """
    query_params = parse_qs(urlparse(callback_url).query)

    def get_single_param(key: str) -> str | None:
        values = query_params.get(key, [])
        return values[0] if values else None

    response = AuthorizationResponse(
        code=get_single_param("code"),
        state=get_single_param("state"),
        error=get_single_param("error"),
        error_description=get_single_param("error_description"),
    )

    if response.state is None:
        raise StateValidationError("Authorization callback missing state parameter")

    validate_state(expected_state, response.state)

    if response.is_error():
        logger.warning(f"Authorization callback contained error: {response.error}")
        raise AuthorizationError(f"Authorization failed: {response.error}")

    if not response.is_success():
        raise AuthorizationError("Authorization callback missing code")

    return response
