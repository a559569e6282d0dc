"""Configuration management - settings from environment and .env."""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from momandme.models import StoryDraft


class Settings(BaseSettings):
    """Application settings from environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8000, description="Bind port")
    reload: bool = Field(default=False, description="Auto-reload on code changes (development)")
    log_level: str = Field(default="INFO", description="Root log level")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173"],
        description="Frontend origins allowed to call the stories API",
    )

    # Data
    data_dir: Path = Field(default=Path("data"), description="Directory for JSON persistence")
    redis_url: str | None = Field(default=None, description="Redis URL for cloud persistence (e.g. Upstash)")
    mongodb_uri: str | None = Field(default=None, description="MongoDB connection string")
    mongodb_db: str = Field(default="momandme", description="MongoDB database name")
    mongodb_collection: str = Field(default="stories", description="MongoDB collection for stories")

    # Static library content imported on startup when the store is empty
    seed_file: Path | None = Field(default=None, description="YAML file with stories to seed")


def load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load YAML config file."""
    if not config_path.exists():
        return {}
    with config_path.open() as f:
        return yaml.safe_load(f) or {}


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()


def load_seed_drafts(seed_path: Path) -> list[StoryDraft]:
    """
    Load static stories to seed from YAML:

        stories:
          - title: The Kind Fox
            content: ...
            ageGroup: {min: 4, max: 6}
    """
    data = load_yaml_config(seed_path)
    return [StoryDraft.model_validate(item) for item in data.get("stories", [])]
