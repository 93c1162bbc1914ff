"""reddit OAuth2 provider.

Composes the authorization, header and token request builders and hands
the finished requests to the HTTP transport.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from pydantic import ValidationError

from reddit_oauth2.models.config import ProviderConfig
from reddit_oauth2.models.errors import InvalidArgumentError, ResourceOwnerError
from reddit_oauth2.models.flow import AuthorizationRequest, AuthorizationResponse
from reddit_oauth2.models.grants import TokenGrant, grant_from_options
from reddit_oauth2.models.resource_owner import RedditUser
from reddit_oauth2.models.tokens import AccessToken
from reddit_oauth2.services import flow, grants, headers
from reddit_oauth2.services.transport import OAuth2Transport

logger = logging.getLogger(__name__)


class ProviderHooks(Protocol):
    """Extension points an OAuth2 provider supplies to the request flow."""

    def build_authorization_params(
        self, options: Mapping[str, Any] | None = None
    ) -> dict[str, str]: ...

    def build_headers(
        self, token: AccessToken | None = None, ambient_user_agent: str | None = None
    ) -> dict[str, str]: ...

    def build_token_params(self, grant: TokenGrant) -> dict[str, str]: ...

    def map_resource_owner(self, data: Mapping[str, Any]) -> RedditUser: ...


class RedditProvider:
    """OAuth2 client provider for reddit.

    Every request is built and validated before the transport is used, so
    a request reddit would reject never reaches the network.
    """

    def __init__(
        self,
        config: ProviderConfig,
        transport: OAuth2Transport | None = None,
        ambient_user_agent: str | None = None,
    ):
        """Initialize the provider.

        Args:
            config: Application configuration
            transport: HTTP transport; created lazily when omitted
            ambient_user_agent: Default User-Agent fallback used when the
                configuration has none
        """
        self.config = config
        self.ambient_user_agent = ambient_user_agent
        self._transport = transport

    @classmethod
    def from_options(
        cls,
        *,
        transport: OAuth2Transport | None = None,
        ambient_user_agent: str | None = None,
        **options: Any,
    ) -> RedditProvider:
        """Create a provider from ``clientId``/``client_id`` style options."""
        return cls(
            ProviderConfig.from_options(**options),
            transport=transport,
            ambient_user_agent=ambient_user_agent,
        )

    @property
    def transport(self) -> OAuth2Transport:
        if self._transport is None:
            self._transport = OAuth2Transport()
        return self._transport

    # Hooks

    def build_authorization_params(
        self, options: Mapping[str, Any] | None = None
    ) -> dict[str, str]:
        return flow.build_authorization_params(self.config, options)

    def build_headers(
        self, token: AccessToken | None = None, ambient_user_agent: str | None = None
    ) -> dict[str, str]:
        return headers.build_headers(
            self.config, token, ambient_user_agent or self.ambient_user_agent
        )

    def build_token_params(self, grant: TokenGrant) -> dict[str, str]:
        return grants.build_token_params(self.config, grant)

    def map_resource_owner(self, data: Mapping[str, Any]) -> RedditUser:
        try:
            return RedditUser.model_validate(dict(data))
        except ValidationError as e:
            raise ResourceOwnerError(f"Invalid resource owner data: {e}") from e

    # Public API

    def start_authorization(
        self, options: Mapping[str, Any] | None = None
    ) -> AuthorizationRequest:
        """Build the authorization URL and return it with its state.

        The caller stores ``state`` and checks it on the redirect.
        """
        return flow.start_authorization(self.config, options)

    def get_authorization_url(self, options: Mapping[str, Any] | None = None) -> str:
        return self.start_authorization(options).url

    def handle_authorization_callback(
        self, callback_url: str, expected_state: str
    ) -> AuthorizationResponse:
        return flow.parse_authorization_callback(callback_url, expected_state)

    def get_headers(
        self, token: AccessToken | None = None, ambient_user_agent: str | None = None
    ) -> dict[str, str]:
        return self.build_headers(token, ambient_user_agent)

    async def get_access_token(
        self,
        grant: TokenGrant | str,
        options: Mapping[str, Any] | None = None,
        ambient_user_agent: str | None = None,
    ) -> AccessToken:
        """Request an access token from reddit.

        Args:
            grant: Grant object, or a grant type name used with ``options``
            options: Grant fields when ``grant`` is a name; must be empty
                when ``grant`` is a grant object
            ambient_user_agent: User-Agent fallback for this request

        Returns:
            AccessToken: Issued token

        Raises:
            InvalidArgumentError: If the request is invalid (raised before
                any network call)
            TokenError: If the token request fails
        """
        if isinstance(grant, str):
            grant = grant_from_options(grant, options)
        elif options:
            raise InvalidArgumentError(
                "options can only be given together with a grant type name"
            )

        form_data = self.build_token_params(grant)
        request_headers = self.build_headers(ambient_user_agent=ambient_user_agent)

        token = await self.transport.request_token(request_headers, form_data)
        logger.info(f"Obtained {grant.name} token for client {self.config.client_id}")
        return token

    async def get_resource_owner(
        self, token: AccessToken, ambient_user_agent: str | None = None
    ) -> RedditUser:
        """Fetch the reddit account the token was issued for.

        Raises:
            InvalidArgumentError: If the User-Agent is invalid
            ResourceOwnerError: If the request fails
        """
        request_headers = self.build_headers(token, ambient_user_agent)
        data = await self.transport.fetch_resource_owner(request_headers)
        return self.map_resource_owner(data)

    async def close(self) -> None:
        if self._transport is not None:
            await self._transport.close()

    async def __aenter__(self) -> RedditProvider:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
