"""Environment settings - loads runtime overrides from the environment / .env file.

This module ONLY handles credentials and environment-specific overrides.
The desired state (checks, filters, common config) lives in the config file
loaded by pingsync.core.config.
"""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_PATH = Path.cwd() / ".env"

DEFAULT_API_URL = "https://api.pingdom.com/api/3.1"


class EnvSettings(BaseSettings):
    """Environment variables (prefix PINGSYNC_) for the Pingdom connection."""

    model_config = SettingsConfigDict(
        env_prefix="PINGSYNC_",
        env_file=str(ENV_FILE_PATH),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ============================================
    # Pingdom API
    # ============================================
    api_url: str = DEFAULT_API_URL
    api_token: str = ""  # Used when the config file has no apiToken
    request_timeout: float = 30.0

    # ============================================
    # Logging
    # ============================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


settings = EnvSettings()
