"""Application configuration module."""

from __future__ import annotations

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .voices import DEFAULT_MODEL, DEFAULT_VOICE

load_dotenv()


class Settings(BaseSettings):
    """Centralised application settings."""

    app_host: str = Field("0.0.0.0", alias="APP_HOST")
    app_port: int = Field(8000, alias="APP_PORT")
    log_level: str = Field("info", alias="LOG_LEVEL")
    gemini_api_key: SecretStr | None = Field(default=None, alias="GEMINI_API_KEY")
    default_model: str = Field(DEFAULT_MODEL, alias="DEFAULT_MODEL")
    default_voice: str = Field(DEFAULT_VOICE, alias="DEFAULT_VOICE")
    default_sample_rate: int = Field(24000, ge=1, alias="DEFAULT_SAMPLE_RATE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def has_api_key(self) -> bool:
        """Return whether a non-empty provider credential is configured."""

        return bool(self.gemini_api_key and self.gemini_api_key.get_secret_value())


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


__all__ = ["Settings", "get_settings"]
