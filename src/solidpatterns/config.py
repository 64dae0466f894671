"""Configuration via pydantic-settings, loaded from env vars / .env file."""
from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """solidpatterns configuration."""

    model_config = SettingsConfigDict(env_prefix="SOLIDPATTERNS_", env_file=".env")

    journal_path: Path = Field(default=Path("journal.txt"), description="Default file for saved journals")
    overwrite: bool = Field(default=False, description="Replace an existing journal file on save")
    shared_entry_ids: bool = Field(
        default=False, description="Number entries across all logs from one process-wide sequence"
    )
    log_level: str = Field(default="WARNING", description="Log level for the CLI handler")


settings = Settings()
