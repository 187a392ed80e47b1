"""aiohttp-backed HTTP transport."""

import asyncio
import typing as t

import aiohttp

from ...domain.exceptions import ClientNotInitialisedError
from .base import BaseHttpClient
from .factories import create_secure_connector, create_ssl_context


class AiohttpClient(BaseHttpClient):
    """Transport wrapping an ``aiohttp.ClientSession``.

    A session passed in is borrowed: it is used as is and never closed.
    Without one, a session with a certifi-backed connector is created on
    ``open()`` and closed again on ``close()``.

    Usage:
        async with AiohttpClient() as client:
            async with client.post(url, params=query) as response:
                ...
    """

    def __init__(self, session: aiohttp.ClientSession | None = None) -> None:
        self._session = session
        self._owns_session = session is None

    async def open(self) -> None:
        if self._session is not None and not self._session.closed:
            return
        # Loading the CA bundle is file I/O, keep it off the event loop.
        ssl_context = await asyncio.to_thread(create_ssl_context)
        self._session = aiohttp.ClientSession(
            connector=create_secure_connector(ssl=ssl_context)
        )
        self._owns_session = True

    async def close(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()

    @property
    def closed(self) -> bool:
        return self._session is None or self._session.closed

    @property
    def session(self) -> aiohttp.ClientSession:
        """The underlying session.

        Raises:
            ClientNotInitialisedError: If no session was provided and
                ``open()`` has not been called, or the session is closed.
        """
        if self._session is None:
            raise ClientNotInitialisedError(
                "HTTP client not initialised: use it as an async context "
                "manager, call open(), or provide a ClientSession"
            )
        if self._session.closed:
            raise ClientNotInitialisedError(
                "HTTP client not initialised: its session is closed, "
                "call open() again or provide an open ClientSession"
            )
        return self._session

    def post(
        self, url: str, **kwargs: t.Any
    ) -> t.AsyncContextManager[aiohttp.ClientResponse]:
        return self.session.post(url, **kwargs)
