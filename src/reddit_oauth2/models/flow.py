"""Authorization flow models for the reddit OAuth2 client.

Contains the built authorization request and the parsed redirect callback.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AuthorizationRequest:
    """Authorization URL together with the state the caller must keep."""

    url: str
    state: str
    params: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class AuthorizationResponse:
    code: str | None = None
    state: str | None = None
    error: str | None = None
    error_description: str | None = None

    def is_success(self) -> bool:
        return self.error is None and self.code is not None

    def is_error(self) -> bool:
        return self.error is not None
