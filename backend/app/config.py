"""Application configuration."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Application
    app_name: str = "Paddock"
    app_version: str = "0.1.0"
    debug: bool = True
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:5173"]  # Vite dev server

    # Database
    database_url: str = "sqlite:///./data/paddock.db"

    # Horse defaults (hours)
    default_max_work_hours: float = 4.0
    default_rest_after_work: float = 1.0

    # What the advisory pre-check reports when the store cannot be read.
    # "allow" lets the form submit without objection, "block" refuses it.
    welfare_on_infra_error: Literal["block", "allow"] = "block"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
