"""HTTP transport for reddit token and profile requests.

Sends the headers and form bodies produced by the request builders and
parses the JSON answers. Holds no request-construction rules of its own.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import ValidationError

from reddit_oauth2.constants import ACCESS_TOKEN_URL, RESOURCE_OWNER_URL
from reddit_oauth2.models.errors import ResourceOwnerError, TokenError
from reddit_oauth2.models.tokens import AccessToken, TokenResponse

logger = logging.getLogger(__name__)


class OAuth2Transport:
    """Performs reddit's token endpoint and ``/api/v1/me`` requests.

    Token requests use application/x-www-form-urlencoded encoding as
    required by the token endpoint.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        token_url: str = ACCESS_TOKEN_URL,
        resource_owner_url: str = RESOURCE_OWNER_URL,
    ):
        """Initialize the transport.

        Args:
            timeout: HTTP request timeout in seconds
            token_url: Token endpoint
            resource_owner_url: Endpoint returning the authenticated user
        """
        self.timeout = timeout
        self.token_url = token_url
        self.resource_owner_url = resource_owner_url
        self._http_client = httpx.AsyncClient(timeout=timeout)

    async def request_token(
        self, headers: Mapping[str, str], form_data: Mapping[str, str]
    ) -> AccessToken:
        """Exchange a grant for an access token.

        Args:
            headers: Request headers, including Basic authorization
            form_data: Grant-specific form fields

        Returns:
            AccessToken: Parsed token

        Raises:
            TokenError: If the request fails or reddit returns an error
        """
        logger.debug(
            f"Requesting token at {self.token_url} "
            f"with grant_type={form_data.get('grant_type')}"
        )

        try:
            response = await self._http_client.post(
                self.token_url,
                data=dict(form_data),
                headers={**headers, "Accept": "application/json"},
            )
        except httpx.HTTPError as e:
            raise TokenError(f"HTTP error during token request: {e}") from e

        token_response = self._parse_token_response(response)

        if not token_response.is_success():
            logger.warning(
                f"Token request failed with {response.status_code}: "
                f"{token_response.error} - "
                f"{token_response.error_description or token_response.message}"
            )
            raise TokenError(
                f"Token request failed: {token_response.error or response.status_code}"
            )

        logger.info("Token request successful")
        return token_response.to_access_token()

    async def fetch_resource_owner(self, headers: Mapping[str, str]) -> dict[str, Any]:
        """Fetch the profile of the user the bearer token belongs to.

        Raises:
            ResourceOwnerError: If the request fails or the body is not JSON
        """
        logger.debug(f"Fetching resource owner from {self.resource_owner_url}")

        try:
            response = await self._http_client.get(
                self.resource_owner_url, headers=dict(headers)
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(
                f"Resource owner request failed with {e.response.status_code}"
            )
            raise ResourceOwnerError(
                f"Resource owner request failed: {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise ResourceOwnerError(
                f"HTTP error during resource owner request: {e}"
            ) from e
        except ValueError as e:
            raise ResourceOwnerError(f"Invalid resource owner response: {e}") from e

        if not isinstance(data, dict):
            raise ResourceOwnerError("Resource owner response is not a JSON object")
        return data

    def _parse_token_response(self, response: httpx.Response) -> TokenResponse:
        """Parse token endpoint response into TokenResponse.

        Raises:
            TokenError: If response cannot be parsed
        """
        try:
            response_data = response.json()
        except ValueError as e:
            raise TokenError(
                f"Invalid token response format (status {response.status_code}): {e}"
            ) from e

        if not isinstance(response_data, dict):
            raise TokenError("Token response is not a JSON object")

        try:
            return TokenResponse(**response_data)
        except ValidationError as e:
            raise TokenError(f"Invalid token response format: {e}") from e

    async def close(self) -> None:
        """Close the HTTP client and clean up resources."""
        await self._http_client.aclose()
