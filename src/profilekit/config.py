"""Application configuration from environment variables."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="PROFILEKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Synthetic profiles
    min_age: int = Field(default=18, ge=1, description="Lowest generated age")
    max_age: int = Field(default=90, ge=1, description="Highest generated age")
    random_seed: int | None = Field(
        default=None,
        description="Seed for name/age generators; unset for non-deterministic output",
    )

    # HTTP server
    host: str = Field(default="127.0.0.1", description="Bind address for the API server")
    port: int = Field(default=8000, description="Port for the API server")

    # Application
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode; forces DEBUG logging")

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()

    @model_validator(mode="after")
    def _check_age_range(self) -> "Settings":
        if self.min_age > self.max_age:
            raise ValueError("min_age must not exceed max_age")
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
