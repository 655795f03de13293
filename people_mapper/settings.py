from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database settings, read from PEOPLE_MAPPER_* environment variables."""

    database_url: str = Field(default="sqlite://")
    async_database_url: str = Field(default="sqlite+aiosqlite://")
    echo: bool = Field(default=False)
    log_level: str = Field(default="WARNING")

    model_config = SettingsConfigDict(
        env_prefix="PEOPLE_MAPPER_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_settings():
    return DatabaseSettings()
