"""Provider configuration for the reddit OAuth2 client.

Contains the immutable configuration assembled once at provider construction
and helpers to load it from keyword options or the environment.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from dotenv import dotenv_values

from reddit_oauth2.models.errors import MissingConfigurationError

_CONFIG_FIELDS = (
    "client_id",
    "client_secret",
    "redirect_uri",
    "user_agent",
    "scopes",
)

_OPTION_ALIASES = {
    "clientId": "client_id",
    "clientSecret": "client_secret",
    "redirectUri": "redirect_uri",
    "userAgent": "user_agent",
}


def _normalize_scopes(scopes: str | Iterable[str] | None) -> tuple[str, ...]:
    if scopes is None:
        return ()
    if isinstance(scopes, str):
        return tuple(s for s in re.split(r"[\s,]+", scopes) if s)
    return tuple(scopes)


@dataclass(frozen=True)
class ProviderConfig:
    """Immutable reddit application configuration.

    ``user_agent`` may be left empty, in which case the User-Agent is
    resolved per request from the caller's ambient value. ``scopes`` keeps
    insertion order because it decides the serialized scope list.
    """

    client_id: str
    client_secret: str
    redirect_uri: str
    user_agent: str = ""
    scopes: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        """Validate the identity fields are present."""
        missing = [
            name
            for name in ("client_id", "client_secret", "redirect_uri")
            if not getattr(self, name)
        ]
        if missing:
            raise MissingConfigurationError(
                f"Missing required provider configuration: {', '.join(missing)}"
            )

        # Frozen dataclass, so normalize through object.__setattr__
        object.__setattr__(self, "scopes", _normalize_scopes(self.scopes))
        object.__setattr__(self, "user_agent", self.user_agent or "")

    @classmethod
    def from_options(cls, **options: Any) -> ProviderConfig:
        """Build a config from keyword options.

        Accepts both ``clientId`` and ``client_id`` style names. Unknown
        options are ignored.
        """
        values: dict[str, Any] = {}
        for key, value in options.items():
            name = _OPTION_ALIASES.get(key, key)
            if name in _CONFIG_FIELDS:
                values[name] = value

        return cls(
            client_id=values.get("client_id", ""),
            client_secret=values.get("client_secret", ""),
            redirect_uri=values.get("redirect_uri", ""),
            user_agent=values.get("user_agent", ""),
            scopes=values.get("scopes"),
        )

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        env_file: str | os.PathLike[str] | None = None,
        prefix: str = "REDDIT_",
    ) -> ProviderConfig:
        """Build a config from environment variables.

        Reads ``<prefix>CLIENT_ID``, ``<prefix>CLIENT_SECRET``,
        ``<prefix>REDIRECT_URI``, ``<prefix>USER_AGENT`` and
        ``<prefix>SCOPES``. Values from ``env_file`` are used as defaults and
        are overridden by ``environ`` (``os.environ`` when not given).

        Raises:
            MissingConfigurationError: If a required variable is unset
        """
        values: dict[str, str] = {}
        if env_file is not None:
            values.update(
                {k: v for k, v in dotenv_values(env_file).items() if v is not None}
            )
        values.update(os.environ if environ is None else environ)

        return cls(
            client_id=values.get(f"{prefix}CLIENT_ID", ""),
            client_secret=values.get(f"{prefix}CLIENT_SECRET", ""),
            redirect_uri=values.get(f"{prefix}REDIRECT_URI", ""),
            user_agent=values.get(f"{prefix}USER_AGENT", ""),
            scopes=values.get(f"{prefix}SCOPES"),
        )
