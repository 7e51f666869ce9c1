"""Configuration management using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from APIARY_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="APIARY_",
        case_sensitive=False,
        extra="ignore",
    )

    database_url: str = Field(default="sqlite:///./apiary.db", description="SQLAlchemy database URL")
    log_level: str = Field(default="INFO", description="Logging level")
    default_timeout_ms: int = Field(default=30000, description="Timeout for saved request execution", ge=1)
    default_follow_redirects: bool = Field(default=True, description="Follow redirects for saved requests")
    default_max_redirects: int = Field(default=10, description="Redirect limit for saved requests", ge=0)
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")


@lru_cache
def get_settings() -> Settings:
    """Get the application settings instance."""
    return Settings()
