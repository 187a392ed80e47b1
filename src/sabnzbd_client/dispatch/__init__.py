"""Command dispatch - request building, execution and classification."""

from .dispatcher import JSON_HEADERS, RESERVED_PARAMS, CommandDispatcher

__all__ = ["CommandDispatcher", "JSON_HEADERS", "RESERVED_PARAMS"]
