"""
Configuration management for the DocumentAtom SDK.
"""

from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.exceptions import ConfigurationError

DEFAULT_ENDPOINT = "http://localhost:8000"
DEFAULT_TIMEOUT_MS = 300000  # 5 minutes


class DocumentAtomSettings(BaseSettings):
    """Settings for connecting to a DocumentAtom server."""

    model_config = SettingsConfigDict(
        env_prefix="DOCUMENTATOM_",
        case_sensitive=False,
        extra="ignore",
    )

    endpoint: str = Field(DEFAULT_ENDPOINT, description="DocumentAtom server URL")
    access_key: Optional[str] = Field(None, description="Bearer token, if the server requires one")
    timeout_ms: int = Field(DEFAULT_TIMEOUT_MS, gt=0, description="Per-request timeout in milliseconds")
    log_requests: bool = Field(False, description="Log outgoing requests")
    log_responses: bool = Field(False, description="Log response statuses and bodies")
    log_level: str = Field("WARNING", description="Level for the package logger")

    @field_validator('endpoint')
    @classmethod
    def validate_endpoint(cls, v):
        if not v.startswith(('http://', 'https://')):
            raise ValueError('Endpoint must start with http:// or https://')
        return v.rstrip('/')

    @field_validator('access_key', mode='before')
    @classmethod
    def empty_access_key(cls, v):
        return v or None

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'Log level must be one of: {valid_levels}')
        return v.upper()

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "DocumentAtomSettings":
        """Create settings from environment variables and an optional .env file."""
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        try:
            return cls()
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid DocumentAtom configuration: {e}") from e
