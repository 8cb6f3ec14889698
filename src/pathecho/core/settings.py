"""Application settings using Pydantic Settings."""
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    environment: str = Field(default="dev", description="Deployment environment")
    debug: bool = Field(default=False, description="Enable debug features")
    api_prefix: str = Field(default="", description="Router mount prefix, e.g. /api")
    log_level: str = Field(default="INFO", description="Root logger level")

    # Server
    host: str = Field(default="127.0.0.1", description="Bind host for run-server")
    port: int = Field(default=8080, description="Bind port for run-server")

    model_config = SettingsConfigDict(
        env_prefix="PATHECHO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("api_prefix")
    @classmethod
    def normalize_api_prefix(cls, value: str) -> str:
        """Leading slash, no trailing slash; "/" and "" both mean no prefix."""
        value = value.strip().strip("/")
        return f"/{value}" if value else ""


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
