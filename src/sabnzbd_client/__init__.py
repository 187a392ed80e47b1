"""sabnzbd_client - asyncio client for the SABnzbd HTTP API."""

from .app import App, create_app
from .client import SABnzbdClient
from .config import Environment, LogLevel, Settings, build_settings
from .dispatch import CommandDispatcher
from .domain import (
    ClientNotInitialisedError,
    CommandError,
    Endpoint,
    InvalidIdentifierError,
    PostProcessing,
    Priority,
    RequestTimeoutError,
    ResponseFormatError,
    SABnzbdClientError,
    TransportError,
    UnwrapRule,
    ValidationError,
    priority_from_token,
)

__all__ = [
    # Client
    "SABnzbdClient",
    "CommandDispatcher",
    "Endpoint",
    "UnwrapRule",
    # Values
    "Priority",
    "PostProcessing",
    "priority_from_token",
    # App and configuration
    "App",
    "create_app",
    "Settings",
    "Environment",
    "LogLevel",
    "build_settings",
    # Exceptions
    "SABnzbdClientError",
    "ClientNotInitialisedError",
    "ValidationError",
    "InvalidIdentifierError",
    "CommandError",
    "TransportError",
    "RequestTimeoutError",
    "ResponseFormatError",
]
