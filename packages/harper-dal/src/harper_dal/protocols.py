"""Collaborator protocols consumed by the command pipeline."""

from collections.abc import Mapping
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class HttpResponse(Protocol):
    """Response handle returned by an `HttpClient` before the body is read."""

    @property
    def status_code(self) -> int: ...

    def read(self) -> bytes:
        """Read the full body."""
        ...

    def close(self) -> None:
        """Release the underlying stream."""
        ...


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for the HTTP transport.

    Implementations must be safe for concurrent use if sessions sharing
    them are used from several threads.
    """

    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes,
    ) -> HttpResponse:
        """Send a request and return the unread response.

        Raises on connection failures and timeouts.
        """
        ...


@runtime_checkable
class JsonCodec(Protocol):
    """Protocol for JSON serialization."""

    def encode(self, value: Any) -> bytes: ...

    def decode(self, raw: bytes, target: type[T]) -> T: ...


@runtime_checkable
class JobIdExtractor(Protocol):
    """Protocol for pulling a job identifier out of a bulk-load status message."""

    def extract(self, message: str) -> str: ...
