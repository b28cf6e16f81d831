from typing import Annotated
from urllib.parse import quote_plus

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables (and `.env`).
    """

    # API Configuration
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Storefront API"
    PROJECT_DESCRIPTION: str = "Multi-tenant store, catalog, cart and order backend"
    VERSION: str = "0.1.0"

    # Application Settings
    DEBUG: bool = Field(False, description="Debug mode")
    ENVIRONMENT: str = Field("production", description="Runtime environment")

    # Database Settings
    DATABASE_URL: str | None = Field(None, description="Full async database URL (overrides DB_* parts)")
    DB_HOST: str = Field("localhost", description="PostgreSQL host")
    DB_PORT: int = Field(5432, description="PostgreSQL port")
    DB_NAME: str = Field("storefront", description="Database name")
    DB_USER: str = Field("postgres", description="PostgreSQL user")
    DB_PASSWORD: str | None = Field(None, description="PostgreSQL password")
    DB_ECHO: bool = Field(False, description="Log SQL statements")
    DB_CREATE_TABLES: bool = Field(False, description="Create missing tables on startup")

    # Database connection pool settings
    DB_POOL_SIZE: int = Field(20, description="Connection pool size")
    DB_MAX_OVERFLOW: int = Field(30, description="Maximum pool overflow")
    DB_POOL_RECYCLE: int = Field(3600, description="Recycle connections after X seconds")
    DB_POOL_TIMEOUT: int = Field(30, description="Seconds to wait for a pooled connection")

    # Session / credential settings
    JWT_SECRET_KEY: str = Field(..., description="Secret used to sign session tokens")
    JWT_ALGORITHM: str = Field("HS256", description="Session token signing algorithm")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(60 * 24, description="Session lifetime in minutes")
    SESSION_COOKIE_NAME: str = Field("storefront_session", description="Session cookie name")
    SESSION_COOKIE_SECURE: bool = Field(False, description="Only send the session cookie over HTTPS")
    BCRYPT_ROUNDS: int = Field(12, description="bcrypt work factor")

    # HTTP
    CORS_ORIGINS: Annotated[list[str], NoDecode] = Field(default=["http://localhost:5173"], description="Allowed CORS origins")

    # Logging
    LOG_LEVEL: str = Field("INFO", description="Root log level")
    LOG_JSON: bool = Field(False, description="Emit structured JSON log lines")

    # Sentry Configuration
    SENTRY_DSN: str | None = Field(None, description="Sentry DSN for error tracking")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, value):
        """Accept a JSON array or a comma-separated string."""
        import json

        if isinstance(value, str):
            value = value.strip()
            if value.startswith("[") and value.endswith("]"):
                try:
                    parsed = json.loads(value)
                    if isinstance(parsed, list):
                        return [str(origin).strip() for origin in parsed if origin]
                except json.JSONDecodeError:
                    pass
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("DB_POOL_SIZE")
    @classmethod
    def validate_pool_size(cls, v):
        if v < 1:
            raise ValueError("DB_POOL_SIZE must be at least 1")
        if v > 100:
            raise ValueError("DB_POOL_SIZE should not exceed 100")
        return v

    @field_validator("DB_MAX_OVERFLOW")
    @classmethod
    def validate_max_overflow(cls, v):
        if v < 0:
            raise ValueError("DB_MAX_OVERFLOW must be 0 or greater")
        if v > 200:
            raise ValueError("DB_MAX_OVERFLOW should not exceed 200")
        return v

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v):
        if not 4 <= v <= 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return v

    @computed_field
    @property
    def async_database_url(self) -> str:
        """Async SQLAlchemy URL (asyncpg unless DATABASE_URL says otherwise)."""
        if self.DATABASE_URL:
            return self.DATABASE_URL

        encoded_user = quote_plus(self.DB_USER)
        if self.DB_PASSWORD:
            encoded_password = quote_plus(self.DB_PASSWORD)
            return f"postgresql+asyncpg://{encoded_user}:{encoded_password}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        return f"postgresql+asyncpg://{encoded_user}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"


# Singleton
_settings_instance = None


def get_settings() -> Settings:
    """
    Return the cached settings instance.

    Environment variables are read only once per process.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
