"""Request header construction for reddit API calls."""

from __future__ import annotations

import base64
import logging

from reddit_oauth2.models.config import ProviderConfig
from reddit_oauth2.models.errors import InvalidFormatError
from reddit_oauth2.models.tokens import AccessToken
from reddit_oauth2.services.validation import validate_user_agent

logger = logging.getLogger(__name__)


def resolve_user_agent(
    config: ProviderConfig, ambient_user_agent: str | None = None
) -> str:
    """Pick the configured User-Agent, falling back to the ambient one."""
    return config.user_agent or ambient_user_agent or ""


def basic_credentials(config: ProviderConfig) -> str:
    raw = f"{config.client_id}:{config.client_secret}".encode()
    return base64.b64encode(raw).decode("ascii")


def build_headers(
    config: ProviderConfig,
    token: AccessToken | None = None,
    ambient_user_agent: str | None = None,
) -> dict[str, str]:
    """Build the headers sent on every request to reddit.

    Without a token the request authenticates the application with HTTP
    Basic; with a token it presents the token as Bearer.

    Args:
        config: Provider configuration
        token: Access token of the user, if any
        ambient_user_agent: User-Agent of the surrounding context, used when
            the configuration has none (e.g. the inbound request's header)

    Returns:
        Mapping with ``User-Agent`` and ``Authorization``

    Raises:
        InvalidFormatError: If the resolved User-Agent is missing or malformed
    """
    user_agent = resolve_user_agent(config, ambient_user_agent)

    try:
        validate_user_agent(user_agent)
    except InvalidFormatError:
        logger.warning(
            f"Rejected request headers for client {config.client_id}: "
            "invalid User-Agent"
        )
        raise

    if token is None:
        authorization = f"Basic {basic_credentials(config)}"
    else:
        authorization = f"Bearer {token.access_token}"

    return {
        "User-Agent": user_agent,
        "Authorization": authorization,
    }
