"""
Configuration settings for dualmode.

Uses Pydantic Settings to read logging, output and test-mode options from
the environment (or a local `.env`). The builder itself takes no
configuration; these settings only shape the CLI and the script harness.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

OutputFormat = Literal["json", "table"]


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    test_mode: bool = Field(False, alias="APP_TEST_MODE")

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="LOG_JSON")

    # Output
    output_format: OutputFormat = Field("json", alias="OUTPUT_FORMAT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the cached Settings instance.
    """
    return Settings()


__all__ = ["OutputFormat", "Settings", "get_settings"]
