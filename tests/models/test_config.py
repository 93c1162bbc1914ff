"""Tests for provider configuration loading and validation."""

import dataclasses

import pytest

from reddit_oauth2.models.config import ProviderConfig
from reddit_oauth2.models.errors import InvalidArgumentError, MissingConfigurationError


class TestProviderConfig:
    @pytest.mark.parametrize("missing", ["client_id", "client_secret", "redirect_uri"])
    def test_missing_identity_field_raises(self, missing):
        # Arrange
        values = {
            "client_id": "_ID_",
            "client_secret": "_SECRET_",
            "redirect_uri": "_URI_",
        }
        values[missing] = ""

        # Act / Assert
        with pytest.raises(MissingConfigurationError, match=missing):
            ProviderConfig(**values)

    def test_missing_configuration_is_invalid_argument(self):
        with pytest.raises(InvalidArgumentError):
            ProviderConfig(client_id="", client_secret="", redirect_uri="")

    def test_config_is_immutable(self, config):
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.client_id = "other"

    def test_scopes_keep_order(self):
        config = ProviderConfig(
            client_id="_ID_",
            client_secret="_SECRET_",
            redirect_uri="_URI_",
            scopes=["read", "identity"],
        )

        assert config.scopes == ("read", "identity")

    def test_user_agent_defaults_to_empty(self, config_without_user_agent):
        assert config_without_user_agent.user_agent == ""


class TestFromOptions:
    def test_camel_case_options(self):
        # Act
        config = ProviderConfig.from_options(
            clientId="_ID_",
            clientSecret="_SECRET_",
            redirectUri="_URI_",
            userAgent="pytest:reddit-oauth2:test (by /u/oauth2)",
            scopes=["identity", "read"],
        )

        # Assert
        assert config.client_id == "_ID_"
        assert config.client_secret == "_SECRET_"
        assert config.redirect_uri == "_URI_"
        assert config.user_agent == "pytest:reddit-oauth2:test (by /u/oauth2)"
        assert config.scopes == ("identity", "read")

    def test_missing_option_raises(self):
        with pytest.raises(MissingConfigurationError, match="redirect_uri"):
            ProviderConfig.from_options(clientId="_ID_", clientSecret="_SECRET_")


class TestFromEnv:
    def test_reads_prefixed_variables(self):
        # Arrange
        environ = {
            "REDDIT_CLIENT_ID": "_ID_",
            "REDDIT_CLIENT_SECRET": "_SECRET_",
            "REDDIT_REDIRECT_URI": "_URI_",
            "REDDIT_SCOPES": "identity, read history",
        }

        # Act
        config = ProviderConfig.from_env(environ)

        # Assert
        assert config.client_id == "_ID_"
        assert config.user_agent == ""
        assert config.scopes == ("identity", "read", "history")

    def test_environment_overrides_env_file(self, tmp_path):
        # Arrange
        env_file = tmp_path / ".env"
        env_file.write_text(
            "REDDIT_CLIENT_ID=file-id\n"
            "REDDIT_CLIENT_SECRET=file-secret\n"
            "REDDIT_REDIRECT_URI=https://myapp.com/callback\n"
            "REDDIT_USER_AGENT=web:myapp:1.0 (by /u/someone)\n"
        )

        # Act
        config = ProviderConfig.from_env(
            {"REDDIT_CLIENT_ID": "env-id"}, env_file=env_file
        )

        # Assert
        assert config.client_id == "env-id"
        assert config.client_secret == "file-secret"
        assert config.redirect_uri == "https://myapp.com/callback"
        assert config.user_agent == "web:myapp:1.0 (by /u/someone)"

    def test_missing_variables_raise(self):
        with pytest.raises(MissingConfigurationError):
            ProviderConfig.from_env({})
