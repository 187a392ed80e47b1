"""Settings for the SABnzbd client.

Values are read from the environment (``SABNZBD_*``) or an optional ``.env``
file, and can be overridden explicitly through :func:`build_settings`.
"""

import enum
import typing as t

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Seconds a single command may stay outstanding before it is failed.
DEFAULT_TIMEOUT: t.Final[float] = 30.0


class Environment(enum.StrEnum):
    """Runtime environment, drives the logging format."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(enum.StrEnum):
    """Log levels understood by loguru."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Client and logging configuration.

    ``url`` and ``api_key`` are optional here so the settings object can be
    built for logging-only use; building a client from settings requires both.
    """

    model_config = SettingsConfigDict(
        env_prefix="SABNZBD_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    url: str | None = Field(default=None, description="SABnzbd base URL")
    api_key: str | None = Field(default=None, description="SABnzbd API key")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        description="Per-command timeout in seconds",
    )
    environment: Environment = Field(default=Environment.PRODUCTION)
    log_level: LogLevel = Field(default=LogLevel.INFO)


def build_settings(**overrides: t.Any) -> Settings:
    """Build Settings, ignoring overrides that are None.

    Lets callers forward optional values straight through without clobbering
    environment-provided defaults.
    """
    return Settings(**{k: v for k, v in overrides.items() if v is not None})
