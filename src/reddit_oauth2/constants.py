"""Fixed reddit endpoints and platform limits."""

AUTHORIZE_URL = "https://ssl.reddit.com/api/v1/authorize"
ACCESS_TOKEN_URL = "https://ssl.reddit.com/api/v1/access_token"
RESOURCE_OWNER_URL = "https://oauth.reddit.com/api/v1/me"

INSTALLED_CLIENT_GRANT_TYPE = "https://oauth.reddit.com/grants/installed_client"

# reddit documents device ids as 20-30 ASCII characters
DEVICE_ID_MIN_LENGTH = 20
DEVICE_ID_MAX_LENGTH = 30

STATE_LENGTH = 32

# Applied when a token response carries no expires_in
DEFAULT_TOKEN_LIFETIME = 3600
