"""Application configuration utilities."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings derived from environment variables."""

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    seed_demo_data: bool = Field(default=True, alias="ROSTER_SEED_DEMO_DATA")
    id_strategy: Literal["uuid", "counter"] = Field(
        default="uuid", alias="ROSTER_ID_STRATEGY"
    )
    default_age: int = Field(default=18, alias="ROSTER_DEFAULT_AGE")
    age_min: int = Field(default=16, alias="ROSTER_AGE_MIN")
    age_max: int = Field(default=100, alias="ROSTER_AGE_MAX")

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def age_hint(self) -> tuple[int, int]:
        """Return the (min, max) age range suggested to form inputs."""

        return self.age_min, self.age_max


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


__all__ = ["Settings", "get_settings"]
