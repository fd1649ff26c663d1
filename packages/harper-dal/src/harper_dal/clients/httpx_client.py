"""HTTP client backed by httpx."""

from collections.abc import Mapping
from types import TracebackType
from typing import ClassVar, Self

import httpx

DEFAULT_TIMEOUT = 30.0


class HttpxClient:
    """Adapts `httpx.Client` to the `HttpClient` protocol.

    Responses are returned unread (streamed) so the caller decides when to
    read and close them. `httpx.Client` is safe to share between threads;
    timeouts, TLS and pooling are configured on it.
    """

    __slots__: ClassVar[tuple[str]] = ("_client",)

    _client: httpx.Client

    def __init__(self, client: httpx.Client | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes,
    ) -> httpx.Response:
        request = self._client.build_request(method, url, headers=dict(headers), content=body)
        return self._client.send(request, stream=True)

    def close(self) -> None:
        """Close the pooled connections."""
        self._client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


Client = HttpxClient
