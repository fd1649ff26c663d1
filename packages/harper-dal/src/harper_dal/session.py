"""Session and connection settings."""

import os
from collections.abc import Callable
from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from harper_dal.clients.httpx_client import HttpxClient
from harper_dal.codec import PydanticCodec
from harper_dal.jobs import MessageJobIdExtractor
from harper_dal.protocols import HttpClient, JobIdExtractor, JsonCodec

DEFAULT_URL = "http://localhost:9925"
"""Endpoint used when a session does not name one. Never modified at runtime."""

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class HarperCredentials(BaseModel, frozen=True):
    """Credentials for issuing an operation token."""

    url: str = DEFAULT_URL
    """Operations API endpoint (e.g., 'http://localhost:9925')."""

    username: str

    password: str


class Session(BaseModel):
    """Caller-held configuration reused across calls.

    Sessions are immutable. To rotate the token derive a new one with
    `with_token`; calls already running keep the session they were given.
    Several sessions may run concurrently as long as their `client` is
    safe for concurrent use. Each carries its own `url`.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    client: HttpClient
    """HTTP transport, typically an `HttpxClient`."""

    url: str = DEFAULT_URL

    auth_token: str | None = None
    """Bearer token. When empty no Authorization header is sent."""

    schema_name: str | None = None
    """Default schema for mutation, read and bulk-load commands."""

    debug: bool = False
    """Echo pretty-printed request and response bodies to `sink`."""

    sink: Callable[[str], None] | None = None
    """Debug output. Defaults to the `harper_dal.transport` logger."""

    codec: JsonCodec = Field(default_factory=PydanticCodec)

    job_ids: JobIdExtractor = Field(default_factory=MessageJobIdExtractor)
    """Extracts job identifiers from bulk-load status messages."""

    @classmethod
    def from_env(cls, client: HttpClient | None = None) -> Self:
        """Build a session from HARPER_URL, HARPER_TOKEN, HARPER_SCHEMA and HARPER_DEBUG."""
        return cls(
            client=client if client is not None else HttpxClient(),
            url=os.environ.get("HARPER_URL") or DEFAULT_URL,
            auth_token=os.environ.get("HARPER_TOKEN") or None,
            schema_name=os.environ.get("HARPER_SCHEMA") or None,
            debug=os.environ.get("HARPER_DEBUG", "").strip().lower() in _TRUTHY,
        )

    def with_token(self, token: str | None) -> Self:
        return self.model_copy(update={"auth_token": token})
