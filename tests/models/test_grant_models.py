"""Tests for parsing grant names and options into grant objects."""

import pytest

from reddit_oauth2.models.errors import InvalidArgumentError, MissingParameterError
from reddit_oauth2.models.grants import (
    AuthorizationCodeGrant,
    ClientCredentialsGrant,
    InstalledClientGrant,
    PasswordGrant,
    grant_from_options,
)


class TestGrantFromOptions:
    def test_client_credentials(self):
        assert grant_from_options("client_credentials") == ClientCredentialsGrant()

    def test_password(self):
        grant = grant_from_options(
            "password", {"username": "spez", "password": "hunter2"}
        )

        assert grant == PasswordGrant(username="spez", password="hunter2")

    def test_password_missing_username(self):
        with pytest.raises(MissingParameterError, match="username"):
            grant_from_options("password", {"password": "hunter2"})

    def test_authorization_code(self):
        grant = grant_from_options("authorization_code", {"code": "abc"})

        assert grant == AuthorizationCodeGrant(code="abc")

    def test_authorization_code_missing_code(self):
        with pytest.raises(MissingParameterError):
            grant_from_options("authorization_code", {})

    @pytest.mark.parametrize(
        "name",
        ["installed_client", "https://oauth.reddit.com/grants/installed_client"],
    )
    def test_installed_client_names(self, name):
        grant = grant_from_options(name, {"device_id": "x" * 20})

        assert grant == InstalledClientGrant(device_id="x" * 20)

    def test_installed_client_without_options(self):
        assert grant_from_options("installed_client") == InstalledClientGrant()

    def test_unknown_grant_type(self):
        with pytest.raises(InvalidArgumentError, match="refresh_token"):
            grant_from_options("refresh_token", {"refresh_token": "abc"})
