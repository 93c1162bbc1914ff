import pytest

from reddit_oauth2.models.config import ProviderConfig

USER_AGENT = "pytest:reddit-oauth2:test (by /u/oauth2)"


@pytest.fixture
def config() -> ProviderConfig:
    # Placeholder credentials, not a real application
    return ProviderConfig(
        client_id="_ID_",
        client_secret="_SECRET_",
        redirect_uri="_URI_",
        user_agent=USER_AGENT,
        scopes=("identity", "read"),
    )


@pytest.fixture
def config_without_user_agent() -> ProviderConfig:
    return ProviderConfig(
        client_id="_ID_",
        client_secret="_SECRET_",
        redirect_uri="_URI_",
        scopes=("identity", "read"),
    )
