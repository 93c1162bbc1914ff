"""Grant models for reddit token requests.

The supported grants form a closed set. Each grant carries the fields its
token request needs and checks that required fields are present.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from reddit_oauth2.constants import INSTALLED_CLIENT_GRANT_TYPE
from reddit_oauth2.models.errors import InvalidArgumentError, MissingParameterError


def _require(grant: str, **fields: str | None) -> None:
    missing = [name for name, value in fields.items() if not value]
    if missing:
        raise MissingParameterError(
            f"{grant} grant requires: {', '.join(missing)}"
        )


@dataclass(frozen=True)
class ClientCredentialsGrant:
    """Application-only grant, identified by the Basic-auth header alone."""

    name: ClassVar[str] = "client_credentials"
    grant_type: ClassVar[str] = "client_credentials"


@dataclass(frozen=True)
class PasswordGrant:
    """Script-app grant using the account's own credentials."""

    name: ClassVar[str] = "password"
    grant_type: ClassVar[str] = "password"

    username: str
    password: str

    def __post_init__(self) -> None:
        _require(self.name, username=self.username, password=self.password)


@dataclass(frozen=True)
class AuthorizationCodeGrant:
    """Web-app grant exchanging the code received on the redirect.

    ``redirect_uri`` is optional; when given it must equal the configured
    redirect URI the code was obtained with.
    """

    name: ClassVar[str] = "authorization_code"
    grant_type: ClassVar[str] = "authorization_code"

    code: str
    redirect_uri: str | None = None

    def __post_init__(self) -> None:
        _require(self.name, code=self.code)


@dataclass(frozen=True)
class InstalledClientGrant:
    """Installed-app grant. An empty device id means "generate one"."""

    name: ClassVar[str] = "installed_client"
    grant_type: ClassVar[str] = INSTALLED_CLIENT_GRANT_TYPE

    device_id: str | None = None


TokenGrant = Union[
    ClientCredentialsGrant, PasswordGrant, AuthorizationCodeGrant, InstalledClientGrant
]


def grant_from_options(
    grant_type: str, options: Mapping[str, Any] | None = None
) -> TokenGrant:
    """Build a grant from its name and an options mapping.

    Args:
        grant_type: One of ``client_credentials``, ``password``,
            ``authorization_code`` or ``installed_client``
        options: Grant-specific fields

    Raises:
        MissingParameterError: If a required option is absent or empty
        InvalidArgumentError: If the grant type is not supported
    """
    options = options or {}

    if grant_type == ClientCredentialsGrant.name:
        return ClientCredentialsGrant()
    if grant_type == PasswordGrant.name:
        return PasswordGrant(
            username=options.get("username") or "",
            password=options.get("password") or "",
        )
    if grant_type == AuthorizationCodeGrant.name:
        return AuthorizationCodeGrant(
            code=options.get("code") or "",
            redirect_uri=options.get("redirect_uri"),
        )
    if grant_type in (InstalledClientGrant.name, InstalledClientGrant.grant_type):
        return InstalledClientGrant(device_id=options.get("device_id"))

    raise InvalidArgumentError(f"Unsupported grant type: {grant_type}")
