"""Application configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `DRAFTDESK_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """DraftDesk settings.

    All fields are environment-configurable. Prefix is `DRAFTDESK_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="DRAFTDESK_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    app_env: Literal["dev", "prod"] = Field(default="dev")
    log_level: str = Field(default="INFO")

    # LLM
    openai_api_key: str | None = Field(default=None)
    openai_base_url: str | None = Field(default=None)
    openai_model: str = Field(default="gpt-4o-mini")
    openai_timeout_s: float = Field(default=180.0, ge=1.0)
    temperature: float = Field(default=0.4, ge=0.0, le=2.0)

    # Drafting
    document_language: str = Field(default="Academic Turkish")
    # Shown to the user for every failed turn, whatever the cause
    error_message: str = Field(default="Connection Interrupted.")


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("DRAFTDESK_ENV_FILE")
    if env_file_override:
        env_path = Path(env_file_override)
        return Settings(_env_file=env_path)

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
