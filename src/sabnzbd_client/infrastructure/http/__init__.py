"""HTTP transport - aiohttp client and connector factories."""

from .base import BaseHttpClient
from .client import AiohttpClient
from .factories import create_secure_connector, create_ssl_context

__all__ = [
    "BaseHttpClient",
    "AiohttpClient",
    "create_secure_connector",
    "create_ssl_context",
]
