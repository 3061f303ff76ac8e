from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    SUPABASE_URL: str = Field(min_length=1)
    SUPABASE_SERVICE_ROLE: str = Field(min_length=1)
    SUPABASE_TABLE: str = "messages"
    STORE_TIMEOUT_SECONDS: float = 10.0

    ALLOWED_ORIGIN: str = "*"
    HOST: str = "0.0.0.0"
    PORT: int = 8787

    RATE_LIMIT_WINDOW_SECONDS: float = 15 * 60
    RATE_LIMIT_MAX: int = 100
    TRUST_PROXY_HEADERS: bool = False

    MAX_BODY_BYTES: int = 10 * 1024
    MESSAGE_MAX_LENGTH: int = 5000

    STATIC_DIR: str | None = None
    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Resolve settings once. Raises pydantic.ValidationError when the store URL or credential is missing."""
    return Settings()
