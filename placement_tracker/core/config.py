"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_name: str = "Placement Tracker"
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    # Aggregation
    # True: an application pointing at an unknown student aborts the request.
    # False: the application is skipped and a warning is logged.
    strict_references: bool = True

    # Dashboards
    student_recent_limit: int = 3
    tpo_recent_limit: int = 5

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
