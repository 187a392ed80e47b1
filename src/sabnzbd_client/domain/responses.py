"""Unwrap rules for SABnzbd responses.

The API is inconsistent about where the useful part of a reply lives: some
commands return ``{"queue": {...}}``, others a flat ``{"status": true}``, and
some failures come back as ``{"status": false, "error": "..."}`` with a 200.
Each operation picks one rule; the rule returns the first expected field that
is present, or the whole body when none is. Failures are not detected here.
"""

import enum
import typing as t


class UnwrapRule(enum.Enum):
    """Closed set of response shapes, each listing its candidate fields."""

    VERSION = ("version",)
    QUEUE = ("queue",)
    STATUS = ("status",)
    FILES = ("files",)
    NZO_IDS = ("nzo_ids", "status")
    RAW = ()

    @property
    def fields(self) -> tuple[str, ...]:
        return self.value

    def apply(self, payload: t.Any) -> t.Any:
        if isinstance(payload, dict):
            for field in self.fields:
                if field in payload:
                    return payload[field]
        return payload
