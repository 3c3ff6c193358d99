"""Settings loaded from environment variables (pydantic-settings).

Flat structure, one field per variable, no nesting. Product rules that
never vary between deployments (timeout bounds, page sizes, featured
count) are constants in ``apihub/core/constants.py``.

Required variables:
    DATABASE_URL     postgresql+asyncpg://... or sqlite+aiosqlite://...
    ENCRYPTION_KEY   32 bytes, AES-256 key for the API key vault
    API_BASE_URL     prefix of problem-details ``type`` URIs
    CORS_ORIGINS     comma-separated origins

Usage:
    from apihub.core.config import settings

    if settings.is_development:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from apihub.core.enums import Environment

AES_256_KEY_BYTES = 32


class Settings(BaseSettings):
    """APIHub settings.

    Environment variables win over defaults; secrets and URLs have no
    default and must be provided.
    """

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")

    # Runtime
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="development, testing, ci or production",
    )
    debug: bool = Field(default=False, description="FastAPI debug mode")
    log_level: str = Field(default="INFO", description="Minimum log level")

    # Service identity
    app_name: str = Field(default="APIHub")
    app_version: str = Field(default="0.1.0")

    # Persistence
    database_url: str = Field(description="Async SQLAlchemy URL")
    db_echo: bool = Field(default=False, description="Echo SQL statements")

    # API key vault
    encryption_key: str = Field(description="AES-256 key, exactly 32 bytes")

    # HTTP surface
    api_base_url: str = Field(
        description="Base for problem type URIs, e.g. https://apihub.dev",
    )
    api_v1_prefix: str = Field(default="/api/v1")
    cors_origins: str = Field(description="Comma-separated allowed origins")
    cors_allow_credentials: bool = Field(default=True)

    # Outbound test requests
    test_request_follow_redirects: bool = Field(
        default=True,
        description="Follow 3xx responses when sending test requests",
    )

    @field_validator("encryption_key")
    @classmethod
    def validate_encryption_key(cls, v: str) -> str:
        """Reject keys that are not exactly 32 bytes once UTF-8 encoded.

        Raises:
            ValueError: On any other length.
        """
        if len(v.encode("utf-8")) != AES_256_KEY_BYTES:
            raise ValueError(f"encryption_key must be exactly {AES_256_KEY_BYTES} bytes")
        return v

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def cors_origin_list(self) -> list[str]:
        """CORS_ORIGINS split on commas, blanks dropped."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_development(self) -> bool:
        return self.environment is Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        return self.environment is Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """Build Settings once per process."""
    return Settings()  # type: ignore[call-arg]


settings = get_settings()
