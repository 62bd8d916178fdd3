"""
Configuration management for verbnav.
Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_VERBS_PATH = "~/.config/verbnav/conf.toml"


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: str = Field(default="INFO")
    file_path: Optional[str] = Field(default=None)

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    class Config:
        env_prefix = "LOG_"


class VerbSettings(BaseSettings):
    """Where verbs come from."""

    config_path: str = Field(default=DEFAULT_VERBS_PATH)
    use_defaults: bool = Field(default=True)

    @property
    def resolved_path(self) -> Path:
        return Path(self.config_path).expanduser()

    class Config:
        env_prefix = "VERBS_"


class TreeSettings(BaseSettings):
    """Initial display options of the tree view."""

    show_hidden: bool = Field(default=False)

    class Config:
        env_prefix = "TREE_"


class Settings(BaseSettings):
    """Main application settings combining all configuration sections."""

    app_name: str = Field(default="verbnav")
    app_version: str = Field(default="0.1.0")

    # Sub-configurations
    logging: LoggingSettings = LoggingSettings()
    verbs: VerbSettings = VerbSettings()
    tree: TreeSettings = TreeSettings()

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
