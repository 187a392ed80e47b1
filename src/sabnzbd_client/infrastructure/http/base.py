"""Base interface for the HTTP transport."""

import typing as t
from abc import ABC, abstractmethod

import aiohttp


class BaseHttpClient(ABC):
    """Abstract transport the dispatcher sends commands through.

    Implementations own (or borrow) a connection pool and expose a single
    request primitive. The dispatcher treats the transport as a black box:
    anything it raises is classified there, not here.
    """

    @abstractmethod
    async def open(self) -> None:
        """Prepare the transport for requests. Must be idempotent."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release resources owned by the transport."""
        pass

    @property
    @abstractmethod
    def closed(self) -> bool:
        pass

    @abstractmethod
    def post(
        self, url: str, **kwargs: t.Any
    ) -> t.AsyncContextManager[aiohttp.ClientResponse]:
        """Start a POST request; use as ``async with client.post(...) as resp``."""
        pass

    async def __aenter__(self) -> t.Self:
        await self.open()
        return self

    async def __aexit__(self, *args: t.Any) -> None:
        await self.close()
