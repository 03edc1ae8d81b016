"""CLI configuration settings."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from support.portal import DEFAULT_PORTAL_URL


class Settings(BaseSettings):
    """Settings loaded from environment variables, overridden by flags."""

    # Alias configuration
    config_dir: Path = Field(default_factory=lambda: Path.home() / ".mcadm")

    # Output
    json_output: bool = False
    no_color: bool = False
    debug: bool = False

    # Support portal
    airgapped: bool = False
    portal_url: str = DEFAULT_PORTAL_URL

    # HTTP
    request_timeout: float = 30.0  # seconds

    # Logging
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    class Config:
        env_prefix = "MCADM_"
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def config_file(self) -> Path:
        return self.config_dir / "config.yaml"


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def init_settings(**kwargs) -> Settings:
    """Initialize settings with custom values."""
    global _settings
    _settings = Settings(**kwargs)
    return _settings
