from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "https://api.uber.com"


class DirectSettings(BaseSettings):
    # API origin; a trailing slash is tolerated
    base_url: str = DEFAULT_BASE_URL

    # Direct customer/organization ID used in every path
    customer_id: str = ""

    # OAuth2 client_credentials token, scope "eats.deliveries"
    access_token: str = ""

    # Only applies to the httpx client the SDK creates itself
    timeout_seconds: float = 30.0

    model_config = {
        "env_prefix": "UBER_DIRECT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
