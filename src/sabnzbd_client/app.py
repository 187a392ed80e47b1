"""Application wiring: settings and logging bootstrap."""

from dataclasses import dataclass

import aiohttp

from .client import SABnzbdClient
from .config.settings import Settings
from .infrastructure.logging import get_logger, setup_logging


@dataclass(frozen=True)
class App:
    """Application wiring container.

    Holds the cross-cutting configuration so scripts and tests can build
    clients from one explicit `Settings` object.
    """

    settings: Settings

    def create_client(
        self, session: aiohttp.ClientSession | None = None
    ) -> SABnzbdClient:
        """Build a client from the app's settings."""
        return SABnzbdClient.from_settings(
            self.settings, session=session, logger=get_logger("sabnzbd_client")
        )


def create_app(settings: Settings | None = None) -> App:
    """Create an `App` with provided settings or defaults, configuring logging.

    Keep logic here minimal so boot is predictable and test-friendly.
    """
    settings = settings or Settings()
    setup_logging(settings)
    return App(settings=settings)
