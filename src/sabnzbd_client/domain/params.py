"""Parameter normalisation for outgoing commands.

``None`` is the only "absent" marker: a parameter set to ``None`` is dropped
from the request, while falsy values such as ``0`` or ``""`` are sent.
"""

import typing as t
from collections.abc import Mapping

from .exceptions import InvalidIdentifierError

ParamValue = str | int | float | bool | list[t.Any] | tuple[t.Any, ...] | None
Params = Mapping[str, ParamValue]

IdentifierSet = str | list[str] | tuple[str, ...]


def normalize_params(params: Params | None) -> dict[str, ParamValue]:
    """Return a new dict without the entries whose value is None."""
    if not params:
        return {}
    return {key: value for key, value in params.items() if value is not None}


def join_identifiers(
    ids: IdentifierSet | None, default: str | None = None
) -> str:
    """Turn an identifier set into the single ``value`` token SABnzbd expects.

    Lists and tuples are comma-joined, strings (including the ``all`` and
    ``failed`` tokens) pass through. ``None`` resolves to ``default`` when one
    is given.

    Raises:
        InvalidIdentifierError: For any other shape, or non-string members.
    """
    if default is not None and ids in (None, ""):
        return default
    if isinstance(ids, str):
        return ids
    if isinstance(ids, list | tuple) and all(isinstance(i, str) for i in ids):
        return ",".join(ids)
    raise InvalidIdentifierError(ids)


def flag(value: t.Any, *, absent: int | None = None) -> int | None:
    """Encode a boolean option as ``1``, or ``absent`` when not set."""
    return 1 if value else absent


def to_query_value(value: ParamValue) -> str:
    """Render a parameter value for the query string."""
    match value:
        case bool():
            return "1" if value else "0"
        case int():
            return str(int(value))
        case list() | tuple():
            return ",".join(to_query_value(item) for item in value)
        case _:
            return str(value)
