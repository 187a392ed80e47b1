"""Command dispatcher - the single path every SABnzbd command goes through.

Builds the protocol query (``mode``, ``apikey``, ``output=json`` plus extra
parameters), performs exactly one POST, and classifies the outcome:

1. transport failure      -> TransportError (RequestTimeoutError on timeout)
2. non-JSON content type  -> ResponseFormatError
3. otherwise              -> the decoded JSON body, unvalidated
"""

import asyncio
import typing as t

import aiohttp
from aiohttp import hdrs

from ..config.settings import DEFAULT_TIMEOUT
from ..domain.endpoint import Endpoint
from ..domain.exceptions import (
    RequestTimeoutError,
    ResponseFormatError,
    TransportError,
    ValidationError,
)
from ..domain.params import Params, normalize_params, to_query_value
from ..infrastructure.http import AiohttpClient, BaseHttpClient
from ..infrastructure.logging import get_logger

if t.TYPE_CHECKING:
    import loguru

JSON_CONTENT_TYPE: t.Final = "application/json"
JSON_HEADERS: t.Final[dict[str, str]] = {
    "Accept": JSON_CONTENT_TYPE,
    "Content-Type": JSON_CONTENT_TYPE,
}
RESERVED_PARAMS: t.Final = frozenset({"mode", "apikey", "output"})


class CommandDispatcher:
    """Sends commands to one SABnzbd endpoint and returns decoded payloads.

    Holds no per-call state, so concurrent ``execute`` calls are independent.
    No retries: a failed call fails immediately and callers decide whether to
    re-issue it.
    """

    def __init__(
        self,
        endpoint: Endpoint,
        http_client: BaseHttpClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        logger: "loguru.Logger" = get_logger(__name__),
    ) -> None:
        """Initialise the dispatcher.

        Args:
            endpoint: URL and API key of the SABnzbd instance.
            http_client: Transport to send requests through. If None, an
                AiohttpClient owning its own session is created; it must be
                opened (``open()`` or ``async with``) before use.
            timeout: Seconds a single command may take in total.
            logger: Logger for request tracing and failures.
        """
        if timeout <= 0:
            raise ValidationError(f"Timeout must be positive, got {timeout}")
        self.endpoint = endpoint
        self.http_client = http_client or AiohttpClient()
        self.timeout = timeout
        self.logger = logger

    async def open(self) -> None:
        await self.http_client.open()

    async def close(self) -> None:
        await self.http_client.close()

    async def __aenter__(self) -> "CommandDispatcher":
        await self.open()
        return self

    async def __aexit__(self, *args: t.Any) -> None:
        await self.close()

    def build_query(self, command: str, params: Params | None = None) -> dict[str, str]:
        """Merge the reserved triad with the non-None extra parameters.

        Extra parameters are applied last and would override ``mode``,
        ``apikey`` or ``output``; callers must not pass those keys.
        """
        if not command:
            raise ValidationError("Command name must be a non-empty string")

        extra = normalize_params(params)
        overridden = RESERVED_PARAMS.intersection(extra)
        if overridden:
            self.logger.warning(
                f"Extra parameters override reserved keys: {sorted(overridden)}"
            )

        query = {
            "mode": command,
            "apikey": self.endpoint.api_key,
            "output": "json",
            **extra,
        }
        return {key: to_query_value(value) for key, value in query.items()}

    async def execute(self, command: str, params: Params | None = None) -> t.Any:
        """Run a command and return its decoded JSON body.

        Args:
            command: Protocol command tag, sent as ``mode``.
            params: Extra protocol fields. None values are dropped.

        Returns:
            The decoded JSON payload exactly as the server sent it.

        Raises:
            ValidationError: If ``command`` is empty.
            ClientNotInitialisedError: If the transport has no session.
            RequestTimeoutError: If no reply arrives within ``timeout``.
            TransportError: For any other connection-level failure.
            ResponseFormatError: If the reply is not JSON.
        """
        query = self.build_query(command, params)
        self.logger.debug(f"Sending command '{command}': {self._redact(query)}")

        try:
            async with self.http_client.post(
                self.endpoint.url,
                params=query,
                headers=JSON_HEADERS,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as response:
                payload = await self._decode(command, response)

        # Timeouts are checked first: aiohttp's timeout errors are also
        # ClientErrors.
        except asyncio.TimeoutError as exc:
            self.logger.error(
                f"Command '{command}' timed out after {self.timeout:g}s "
                f"({self.endpoint.url})"
            )
            raise RequestTimeoutError(command, exc, self.timeout) from exc

        except aiohttp.ClientError as exc:
            self.logger.error(
                f"Command '{command}' failed to reach {self.endpoint.url}: {exc}"
            )
            raise TransportError(command, exc) from exc

        self.logger.debug(f"Command '{command}' completed")
        return payload

    async def _decode(self, command: str, response: aiohttp.ClientResponse) -> t.Any:
        """Decode a response body, rejecting anything that is not JSON.

        The content type is checked regardless of status code: SABnzbd may
        serve an HTML error page or a plain-text message with a 200.
        """
        content_type = response.headers.get(hdrs.CONTENT_TYPE)
        if content_type is not None and JSON_CONTENT_TYPE not in content_type.lower():
            self.logger.error(
                f"Command '{command}' returned non-JSON content "
                f"(HTTP {response.status}, {content_type})"
            )
            raise ResponseFormatError(command, content_type)

        try:
            return await response.json(content_type=None)
        except ValueError as exc:
            self.logger.error(f"Command '{command}' returned an undecodable body")
            raise ResponseFormatError(command, content_type) from exc

    @staticmethod
    def _redact(query: dict[str, str]) -> dict[str, str]:
        return {**query, "apikey": "***"}
