"""Tests for access token models."""

import time

import pytest

from reddit_oauth2.models.tokens import AccessToken, TokenResponse


class TestAccessToken:
    def test_has_expired(self):
        token = AccessToken(access_token="abc123", expires=1_000)

        assert token.has_expired(now=1_000)
        assert not token.has_expired(now=999)

    def test_empty_token_rejected(self):
        with pytest.raises(ValueError):
            AccessToken(access_token="", expires=1_000)

    def test_str_is_token_string(self):
        assert str(AccessToken(access_token="abc123", expires=1_000)) == "abc123"


class TestTokenResponse:
    def test_conversion_computes_absolute_expiry(self):
        # Arrange
        response = TokenResponse(
            access_token="abc123", token_type="bearer", expires_in=3600, scope="*"
        )
        before = int(time.time())

        # Act
        token = response.to_access_token()

        # Assert
        assert token.access_token == "abc123"
        assert before + 3600 <= token.expires <= int(time.time()) + 3600
        assert token.scope == "*"
        assert token.refresh_token is None

    def test_missing_expires_in_uses_default_lifetime(self):
        response = TokenResponse(access_token="abc123")

        assert response.calculate_expires(now=1_000) == 4_600

    def test_error_response(self):
        # Arrange
        response = TokenResponse(error="invalid_grant")

        # Assert
        assert response.is_error()
        assert not response.is_success()
        with pytest.raises(ValueError):
            response.to_access_token()

    def test_numeric_error_from_reddit(self):
        response = TokenResponse(error=401, message="Unauthorized")

        assert response.is_error()
