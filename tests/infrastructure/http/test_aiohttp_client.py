"""Tests for AiohttpClient implementation."""

import pytest
from aiohttp import ClientSession

from sabnzbd_client.domain.exceptions import ClientNotInitialisedError
from sabnzbd_client.infrastructure.http import AiohttpClient


class TestAiohttpClientLifecycle:
    @pytest.mark.asyncio
    async def test_creates_session_on_enter(self) -> None:
        client = AiohttpClient()
        assert client._session is None
        async with client:
            assert client._session is not None

    @pytest.mark.asyncio
    async def test_closes_session_on_exit(self) -> None:
        async with AiohttpClient() as client:
            assert not client.closed
        assert client.closed

    @pytest.mark.asyncio
    async def test_open_is_idempotent(self) -> None:
        client = AiohttpClient()
        await client.open()
        session1 = client._session
        await client.open()
        assert client._session is session1
        await client.close()

    @pytest.mark.asyncio
    async def test_uses_provided_session(self) -> None:
        provided = ClientSession()
        try:
            async with AiohttpClient(session=provided) as client:
                assert client._session is provided
        finally:
            await provided.close()

    @pytest.mark.asyncio
    async def test_does_not_close_provided_session(self) -> None:
        provided = ClientSession()
        try:
            async with AiohttpClient(session=provided):
                pass
            assert not provided.closed
        finally:
            await provided.close()

    def test_closed_before_open(self) -> None:
        assert AiohttpClient().closed


class TestAiohttpClientPost:
    def test_raises_if_not_initialised(self) -> None:
        client = AiohttpClient()
        with pytest.raises(ClientNotInitialisedError, match="not initialised"):
            client.post("http://example.com")

    @pytest.mark.asyncio
    async def test_post_delegates_to_session(self, mocker) -> None:
        session = mocker.Mock(spec=ClientSession)
        session.closed = False
        client = AiohttpClient(session=session)

        client.post("http://example.com/api", params={"a": "1"})

        session.post.assert_called_once_with(
            "http://example.com/api", params={"a": "1"}
        )

    @pytest.mark.asyncio
    async def test_raises_after_close(self) -> None:
        client = AiohttpClient()
        await client.open()
        await client.close()
        with pytest.raises(ClientNotInitialisedError, match="session is closed"):
            client.post("http://example.com")

    @pytest.mark.asyncio
    async def test_reopen_after_close(self) -> None:
        client = AiohttpClient()
        await client.open()
        await client.close()
        await client.open()
        try:
            assert not client.session.closed
        finally:
            await client.close()
