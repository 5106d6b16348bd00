# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    APP_NAME: str = "Helpdesk Tickets"
    APP_DESC: str = "In-memory helpdesk ticketing API"
    APP_VERSION: str = "1.0.0"

    HOST: str = "0.0.0.0"
    PORT: int = Field(default=3000, ge=1, le=65535)
    LOG_LEVEL: str = "INFO"

    # CORS origins, comma separated
    CORS_ORIGINS: str = "*"

    # served at / when the directory exists
    STATIC_DIR: str = "public"

    SEED_FAKE_DATA: bool = True
    REQUIRE_OPERATION_TAG: bool = False

    # Pydantic v2 style config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
