"""Domain models - endpoint, value normalisation, response rules and errors."""

from .endpoint import API_PATH, Endpoint
from .exceptions import (
    ClientNotInitialisedError,
    CommandError,
    InvalidIdentifierError,
    RequestTimeoutError,
    ResponseFormatError,
    SABnzbdClientError,
    TransportError,
    ValidationError,
)
from .params import flag, join_identifiers, normalize_params, to_query_value
from .priority import PostProcessing, Priority, priority_from_token
from .responses import UnwrapRule

__all__ = [
    # Endpoint
    "API_PATH",
    "Endpoint",
    # Value normalisation
    "Priority",
    "PostProcessing",
    "priority_from_token",
    "normalize_params",
    "join_identifiers",
    "flag",
    "to_query_value",
    # Responses
    "UnwrapRule",
    # Exceptions
    "SABnzbdClientError",
    "ClientNotInitialisedError",
    "ValidationError",
    "InvalidIdentifierError",
    "CommandError",
    "TransportError",
    "RequestTimeoutError",
    "ResponseFormatError",
]
