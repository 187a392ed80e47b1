"""Pytest configuration and fixtures for sabnzbd_client tests."""

import re
import typing as t

import loguru
import pytest
import pytest_asyncio
from aiohttp import ClientSession
from aioresponses import aioresponses
from blockbuster import BlockBuster, blockbuster_ctx

from sabnzbd_client.app import create_app
from sabnzbd_client.client import SABnzbdClient
from sabnzbd_client.config.settings import Environment, LogLevel, Settings
from sabnzbd_client.dispatch import CommandDispatcher
from sabnzbd_client.domain.endpoint import Endpoint
from sabnzbd_client.infrastructure.http import AiohttpClient
from sabnzbd_client.infrastructure.logging import reset_logging

SAB_URL = "http://sab.test:8080"
API_URL = f"{SAB_URL}/sabnzbd/api"
API_KEY = "0123456789abcdef"

# Matches the API URL with any query string appended.
API_URL_PATTERN = re.compile(rf"^{re.escape(API_URL)}(\?.*)?$")


def sent_query(mock: aioresponses) -> dict[str, str]:
    """Return the query parameters of the single request recorded by ``mock``."""
    (calls,) = mock.requests.values()
    return calls[-1].kwargs["params"]


def sent_kwargs(mock: aioresponses) -> dict[str, t.Any]:
    """Return all request kwargs of the single request recorded by ``mock``."""
    (calls,) = mock.requests.values()
    return calls[-1].kwargs


@pytest.fixture(autouse=True)
def blockbuster() -> t.Iterator[BlockBuster]:
    """Detect blocking calls in async event loop during tests."""
    with blockbuster_ctx(
        scanned_modules=["sabnzbd_client"],
    ) as bb:
        # Third party modules use these functions, so we deactivate them
        # for now
        bb.functions["os.path.abspath"].deactivate()

        yield bb


@pytest.fixture
def test_settings():
    """Provide test-specific settings."""
    return Settings(
        url=SAB_URL,
        api_key=API_KEY,
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
    )


@pytest.fixture
def test_app(test_settings):
    """Provide a test app with clean logging state."""
    reset_logging()
    app = create_app(settings=test_settings)
    yield app
    reset_logging()


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest_asyncio.fixture
async def aio_client():
    """Provide a real aiohttp ClientSession for integration testing."""
    session = ClientSession()
    yield session
    await session.close()


@pytest.fixture
def endpoint() -> Endpoint:
    return Endpoint(url=SAB_URL, api_key=API_KEY)


@pytest.fixture
def dispatcher(endpoint, aio_client, mock_logger) -> CommandDispatcher:
    """Provide a CommandDispatcher borrowing the test session."""
    return CommandDispatcher(
        endpoint,
        http_client=AiohttpClient(session=aio_client),
        logger=mock_logger,
    )


@pytest.fixture
def sab(aio_client, mock_logger) -> SABnzbdClient:
    """Provide a SABnzbdClient borrowing the test session."""
    return SABnzbdClient(SAB_URL, API_KEY, session=aio_client, logger=mock_logger)


@pytest.fixture
def mock_api() -> t.Iterator[aioresponses]:
    """Intercept aiohttp requests for the duration of a test."""
    with aioresponses() as mock:
        yield mock
