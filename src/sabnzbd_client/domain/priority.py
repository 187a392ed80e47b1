"""Priority and post-processing values used by the SABnzbd API."""

import enum
import math
import typing as t


class Priority(enum.IntEnum):
    """Job priorities in protocol units."""

    DEFAULT = -100  # use the category's priority
    PAUSED = -2
    LOW = -1
    NORMAL = 0
    HIGH = 1
    FORCE = 2


class PostProcessing(enum.IntEnum):
    """Post-processing options accepted by ``pp``/``change_opts``."""

    DEFAULT = -1  # use the category's setting
    NONE = 0
    REPAIR = 1
    REPAIR_UNPACK = 2
    REPAIR_UNPACK_DELETE = 3


PriorityToken = int | float | str | None

_PRIORITY_NAMES: t.Final[dict[str, Priority]] = {
    "paused": Priority.PAUSED,
    "low": Priority.LOW,
    "normal": Priority.NORMAL,
    "high": Priority.HIGH,
    "forced": Priority.FORCE,
    "force": Priority.FORCE,
}


def _is_numeric(token: object) -> bool:
    if isinstance(token, bool):
        return False
    if isinstance(token, int):
        return True
    if isinstance(token, float):
        return math.isfinite(token)
    if isinstance(token, str):
        # float() also accepts "nan", "inf" and "1_000"; none is a priority.
        if "_" in token:
            return False
        try:
            return math.isfinite(float(token))
        except ValueError:
            return False
    return False


def priority_from_token(token: PriorityToken) -> int | float | str:
    """Translate a caller-supplied priority into the value sent on the wire.

    Numbers, including numeric strings, are assumed to already be protocol
    values and are returned unchanged. Names are matched case-sensitively
    against ``paused``, ``low``, ``normal``, ``high`` and ``forced``/``force``.
    Anything else, ``None`` included, falls back to the category default
    (-100). Never raises.

    Example:
        ```python
        priority_from_token("high")  # 1
        priority_from_token("2")  # "2"
        priority_from_token(None)  # -100
        ```
    """
    if _is_numeric(token):
        return t.cast(int | float | str, token)
    if isinstance(token, str):
        return int(_PRIORITY_NAMES.get(token, Priority.DEFAULT))
    return int(Priority.DEFAULT)
