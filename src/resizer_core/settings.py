"""Settings management for Resizer Core."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

DuplicatePolicyName = Literal["reject", "replace", "allow"]


class ResizerSettings(BaseSettings):
    """Host settings loaded from environment variables."""

    # Configuration document holding the <resizer> section
    config_file: Path | None = None

    # How a Config's plugin registry treats two plugins with the same name
    duplicate_plugins: DuplicatePolicyName = "reject"

    # Logging
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "RESIZER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Global settings instance
_settings: ResizerSettings | None = None


def get_settings() -> ResizerSettings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = ResizerSettings()
    return _settings


def set_settings(settings: ResizerSettings | None) -> None:
    """Set the global settings instance. Passing None forces a reload."""
    global _settings
    _settings = settings
