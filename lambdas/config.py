"""
Configuration settings for the Lambdas Tour.

Uses Pydantic Settings to load environment variables for logging, the
captured-value sample, the supplier sample and background task lifetime.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="LOG_JSON")

    # Captured-value sample
    captured_number: int = Field(65, alias="CAPTURED_NUMBER")
    capture_delay_seconds: float = Field(8.0, ge=0.0, alias="CAPTURE_DELAY_SECONDS")

    # Supplier sample
    supplier_bound: int = Field(1000, gt=0, alias="SUPPLIER_BOUND")
    supplier_samples: int = Field(10, ge=0, alias="SUPPLIER_SAMPLES")
    random_seed: Optional[int] = Field(None, alias="RANDOM_SEED")

    # Background tasks
    daemon_tasks: bool = Field(False, alias="DAEMON_TASKS")
    task_join_timeout_seconds: float = Field(30.0, gt=0.0, alias="TASK_JOIN_TIMEOUT_SECONDS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
