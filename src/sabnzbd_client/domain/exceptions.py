"""Custom exceptions for the SABnzbd client."""


class SABnzbdClientError(Exception):
    """Base exception for all client errors."""

    pass


class ClientNotInitialisedError(SABnzbdClientError):
    """Raised when a request is attempted before an HTTP session exists.

    Either enter the client as an async context manager, call ``open()``, or
    provide an ``aiohttp.ClientSession`` at construction.
    """

    pass


class ValidationError(SABnzbdClientError):
    """Raised when caller input cannot be turned into a valid command."""

    pass


class InvalidIdentifierError(ValidationError):
    """Raised when a job/history identifier set has an unsupported shape."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            "Identifiers must be a string or a list/tuple of strings, "
            f"got {type(value).__name__}: {value!r}"
        )


class CommandError(SABnzbdClientError):
    """Base exception for a command that could not produce a JSON payload."""

    def __init__(self, command: str, message: str) -> None:
        self.command = command
        super().__init__(message)


class TransportError(CommandError):
    """Raised when the HTTP exchange itself fails (connection, DNS, timeout).

    The underlying aiohttp/asyncio exception is available as ``cause`` and is
    chained as ``__cause__``.
    """

    def __init__(
        self, command: str, cause: BaseException, message: str | None = None
    ) -> None:
        self.cause = cause
        if message is None:
            detail = str(cause) or type(cause).__name__
            message = f"Request for '{command}' failed: {detail}"
        super().__init__(command, message)


class RequestTimeoutError(TransportError):
    """Raised when a command does not complete within the configured timeout."""

    def __init__(self, command: str, cause: BaseException, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(
            command, cause, f"Request for '{command}' timed out after {timeout:g}s"
        )


class ResponseFormatError(CommandError):
    """Raised when the server answers with something other than JSON.

    SABnzbd can return an HTML error page or a plain-text message with a 200
    status, which the transport does not flag as an error.
    """

    MESSAGE = "Response was not in the expected JSON format"

    def __init__(self, command: str, content_type: str | None = None) -> None:
        self.content_type = content_type
        message = self.MESSAGE
        if content_type:
            message = f"{message} (got '{content_type}')"
        super().__init__(command, message)
