"""Configuration - environment-driven settings."""

from .settings import DEFAULT_TIMEOUT, Environment, LogLevel, Settings, build_settings

__all__ = ["DEFAULT_TIMEOUT", "Environment", "LogLevel", "Settings", "build_settings"]
