"""Endpoint configuration for a SABnzbd instance."""

import typing as t

from pydantic import BaseModel, ConfigDict, Field, field_validator

API_PATH: t.Final = "/sabnzbd/api"


class Endpoint(BaseModel):
    """Immutable (URL, API key) pair a client talks to.

    The URL always addresses the API entry path: a bare host such as
    ``http://localhost:8080`` becomes ``http://localhost:8080/sabnzbd/api``.
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(min_length=1, description="Full URL of the API entry path")
    api_key: str = Field(description="SABnzbd API key")

    @field_validator("url")
    @classmethod
    def _ensure_api_path(cls, value: str) -> str:
        value = value.strip()
        if API_PATH in value:
            return value
        return value.rstrip("/") + API_PATH
