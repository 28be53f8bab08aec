"""
Configuration management for the Code Cleanup MCP Server
"""

from functools import lru_cache
from pathlib import Path
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from ..utils.errors import ConfigurationError
from .constants import (
    DEFAULT_MAX_OUTPUT_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_SYSTEM_INSTRUCTION,
    DEFAULT_TEMPERATURE,
    STASH_DIR_NAME,
)

# Load environment variables
load_dotenv()


class Settings(BaseSettings):
    """Application settings with environment variable support"""
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Codebase Settings
    codebase_path: Path = Field(..., validation_alias="CODEBASE_PATH")

    # Gemini API Settings
    google_api_key: str = Field(..., validation_alias="GOOGLE_API_KEY")
    model: str = Field(default=DEFAULT_MODEL, validation_alias="MODEL")
    system_instruction: str = Field(default=DEFAULT_SYSTEM_INSTRUCTION, validation_alias="SYSTEM_INSTRUCTION")
    temperature: float = Field(default=DEFAULT_TEMPERATURE, ge=0.0, le=2.0, validation_alias="CLEANUP_TEMPERATURE")
    max_output_tokens: int = Field(default=DEFAULT_MAX_OUTPUT_TOKENS, gt=0, validation_alias="CLEANUP_MAX_OUTPUT_TOKENS")

    # Feature Flags
    strip_code_fences: bool = Field(default=False, validation_alias="STRIP_CODE_FENCES")

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @field_validator("codebase_path", mode="before")
    @classmethod
    def resolve_codebase_path(cls, value):
        if value is None or not str(value).strip():
            raise ValueError("CODEBASE_PATH environment variable is not set.")
        return (Path.cwd() / str(value).strip()).resolve()

    @field_validator("google_api_key", mode="before")
    @classmethod
    def require_api_key(cls, value):
        if value is None or not str(value).strip():
            raise ValueError("GOOGLE_API_KEY environment variable is not set.")
        return str(value).strip()

    @field_validator("system_instruction", mode="before")
    @classmethod
    def default_empty_instruction(cls, value):
        # An empty override falls back to the built-in instruction
        if value is None or not str(value).strip():
            return DEFAULT_SYSTEM_INSTRUCTION
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def stash_path(self) -> Path:
        """Directory holding file backups"""
        return self.codebase_path / STASH_DIR_NAME


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance

    Returns:
        Singleton Settings instance

    Raises:
        ConfigurationError: if CODEBASE_PATH or GOOGLE_API_KEY is missing, or a value is invalid
    """
    try:
        return Settings()  # type: ignore[call-arg]
    except ValidationError as e:
        raise ConfigurationError(describe_validation_error(e), field=_first_field(e)) from e


def describe_validation_error(error: ValidationError) -> str:
    """Readable one-line summary of a settings validation error"""
    messages = []
    for item in error.errors():
        field = _location(item)
        if item["type"] == "missing":
            messages.append(f"{field} environment variable is not set.")
        else:
            # Custom validators prefix their message with "Value error, "
            message = item["msg"].removeprefix("Value error, ")
            messages.append(message if message.startswith(field) else f"{field}: {message}")
    return " ".join(messages)


def _location(item) -> str:
    return ".".join(str(part) for part in item.get("loc", ())) or "settings"


def _first_field(error: ValidationError):
    errors = error.errors()
    return _location(errors[0]) if errors else None
