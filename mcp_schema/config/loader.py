"""Configuration loading from environment variables and ``.env``."""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Codec and logging settings, read from ``MCP_SCHEMA_*`` variables."""

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Include the raw message text in decode-failure logs
    log_payloads: bool = False

    # Indentation of serialized messages; None renders compact JSON
    json_indent: int | None = None

    model_config = SettingsConfigDict(
        env_prefix="MCP_SCHEMA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
