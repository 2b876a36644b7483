"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use HOT_ prefix (e.g., HOT_DEBUG_MODE=true).

Settings can also be loaded from a .env file in the project root.
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use HOT_ prefix.

    Examples:
        HOT_SOURCE_EXTENSION=hot
        HOT_DEBUG_MODE=true
        HOT_DEFAULT_FILES=./**/*.hot
    """

    model_config = SettingsConfigDict(
        env_prefix="HOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Language configuration
    source_extension: str = Field(
        default="hot",
        description="Extension of source-language files (and of extension-less hot imports)",
    )

    output_extension: str = Field(
        default="html",
        description="Extension given to compiled output files",
    )

    # Project configuration
    config_filenames: List[str] = Field(
        default=["hotconfig.json", "hotconfig.yaml", "hotconfig.yml"],
        description="Project configuration files looked up in a compiled directory, first match wins",
    )

    default_files: str = Field(
        default="./*.hot",
        description="Glob compiled in a directory that has no project configuration",
    )

    # Compilation configuration
    debug_mode: bool = Field(
        default=False,
        description="Log full tracebacks for failed compiles",
    )


# Singleton instance - import this in your code
appsettings = AppSettings()
