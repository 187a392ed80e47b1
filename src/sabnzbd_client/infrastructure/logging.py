"""Logging setup built on loguru.

Library modules call :func:`get_logger` at import time. If nothing has
configured logging yet, that call applies the defaults so log calls never go
to an unconfigured sink. Applications call :func:`setup_logging` (or
:func:`create_app`) to apply their own Settings.
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import Environment, LogLevel, Settings

if t.TYPE_CHECKING:
    import loguru

_DEVELOPMENT_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)

_configured = False


def configure_logger(
    level: LogLevel = LogLevel.INFO,
    environment: Environment = Environment.DEVELOPMENT,
) -> None:
    """Replace loguru's sinks with one suited to the environment.

    Production logs are serialised as JSON lines; other environments get a
    coloured, human-readable format.
    """
    global _configured

    logger.remove()
    logger.configure(extra={"name": "sabnzbd_client"})

    if environment == Environment.PRODUCTION:
        logger.add(sys.stderr, level=str(level), serialize=True)
    else:
        logger.add(
            sys.stderr,
            level=str(level),
            format=_DEVELOPMENT_FORMAT,
            colorize=environment == Environment.DEVELOPMENT,
            backtrace=environment == Environment.DEVELOPMENT,
            diagnose=False,
        )

    _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from application settings."""
    configure_logger(level=settings.log_level, environment=settings.environment)


def get_logger(name: str) -> "loguru.Logger":
    """Return a logger bound to ``name``, configuring defaults on first use."""
    if not _configured:
        configure_logger()
    return logger.bind(name=name)


def is_configured() -> bool:
    return _configured


def reset_logging() -> None:
    """Drop all sinks and mark logging as unconfigured. Used by tests."""
    global _configured

    logger.remove()
    _configured = False
