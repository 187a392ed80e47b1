"""Factories for TLS-enabled aiohttp connectors."""

import ssl as ssl_module
import typing as t

import aiohttp
import certifi


def create_ssl_context() -> ssl_module.SSLContext:
    """Create an SSL context backed by certifi's CA bundle.

    Gives portable certificate verification across platforms and Python
    builds, e.g. macOS interpreters that ship without system CA certs.
    Reads the bundle from disk, so call it off the event loop.
    """
    return ssl_module.create_default_context(cafile=certifi.where())


def create_secure_connector(
    ssl: ssl_module.SSLContext | None = None, **connector_kwargs: t.Any
) -> aiohttp.TCPConnector:
    """Create a TCPConnector using ``ssl`` or a fresh certifi context."""
    return aiohttp.TCPConnector(ssl=ssl or create_ssl_context(), **connector_kwargs)
