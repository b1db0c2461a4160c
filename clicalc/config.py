"""
Shell configuration from environment variables.

All variables use the CLI_CALC_ prefix, e.g. CLI_CALC_DEBUG=1.
"""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    # Prompt
    prompt: str = ">> "
    prompt_color: str = "yellow"

    # Print the parsed AST before each result
    debug: bool = False

    # Logging
    log_level: LogLevel = "WARNING"

    model_config = SettingsConfigDict(env_prefix="CLI_CALC_", env_file=".env", extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value
