"""
mockrand Configuration

Loads configuration from environment variables and an optional .env file.
Only Random.from_env_or_random() consults it; a plain Random() never
reads the environment.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """mockrand settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MOCKRAND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Replay seed. Digits parse as an int, anything else stays a string seed.
    seed: int | str | None = Field(default=None, union_mode="left_to_right")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
