"""Shared fixtures: an in-memory HTTP client that records requests."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import pytest

from harper_dal import Session

TEST_URL = "http://harper.test:9925"


@dataclass
class SentRequest:
    method: str
    url: str
    headers: dict[str, str]
    body: bytes

    @property
    def payload(self) -> dict[str, Any]:
        return json.loads(self.body)


class FakeResponse:
    def __init__(self, status_code: int, body: bytes, read_error: Exception | None = None) -> None:
        self.status_code = status_code
        self.body = body
        self.read_error = read_error
        self.closed = False

    def read(self) -> bytes:
        if self.read_error is not None:
            raise self.read_error
        return self.body

    def close(self) -> None:
        self.closed = True


class FakeClient:
    """Records every request and replays queued responses in order."""

    def __init__(self) -> None:
        self.requests: list[SentRequest] = []
        self.responses: list[FakeResponse] = []
        self.error: Exception | None = None

    def respond(
        self,
        body: Any = None,
        status: int = 200,
        read_error: Exception | None = None,
    ) -> FakeResponse:
        raw = body if isinstance(body, bytes) else json.dumps({} if body is None else body).encode()
        response = FakeResponse(status, raw, read_error)
        self.responses.append(response)
        return response

    def fail(self, error: Exception) -> None:
        self.error = error

    def send(self, method: str, url: str, headers: Any, body: bytes) -> FakeResponse:
        self.requests.append(SentRequest(method, url, dict(headers), body))
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)

    @property
    def last(self) -> SentRequest:
        return self.requests[-1]


@pytest.fixture
def client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def session(client: FakeClient) -> Session:
    return Session(client=client, url=TEST_URL, auth_token="op-token", schema_name="dev")
