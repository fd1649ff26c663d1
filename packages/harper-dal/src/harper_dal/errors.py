"""Error types for command execution."""

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from harper_dal.models.results import MutationResult


class ErrorKind(StrEnum):
    """Classification of command errors."""

    ENCODING = "encoding"
    TRANSPORT = "transport"
    REMOTE = "remote"
    DECODING = "decoding"
    PARTIAL_FAILURE = "partial_failure"


class HarperError(Exception):
    """Base error for all command operations."""

    kind: ErrorKind = ErrorKind.REMOTE

    def __init__(
        self,
        message: str,
        kind: ErrorKind | None = None,
        source: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind
        self.source = source

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, kind={self.kind!r})"


class EncodingError(HarperError):
    """The command could not be serialized. Nothing was sent."""

    kind = ErrorKind.ENCODING


class TransportError(HarperError):
    """The request could not be sent or the response body could not be read."""

    kind = ErrorKind.TRANSPORT

    def __init__(
        self,
        message: str,
        source: BaseException | None = None,
        body: bytes | None = None,
    ) -> None:
        super().__init__(message, source=source)
        self.body = body


class RemoteError(HarperError):
    """The remote answered with a non-success HTTP status."""

    kind = ErrorKind.REMOTE

    def __init__(self, message: str, status: int, body: bytes | None = None) -> None:
        super().__init__(message)
        self.status = status
        self.body = body

    def __repr__(self) -> str:
        return f"RemoteError({self.message!r}, status={self.status})"


class DecodingError(HarperError):
    """The response body did not match the expected result shape.

    The undecoded bytes stay available on `raw`.
    """

    kind = ErrorKind.DECODING

    def __init__(self, message: str, raw: bytes, source: BaseException | None = None) -> None:
        super().__init__(message, source=source)
        self.raw = raw


class PartialFailure(HarperError):
    """A mutation succeeded on the wire but skipped some records."""

    kind = ErrorKind.PARTIAL_FAILURE

    def __init__(self, message: str, result: "MutationResult") -> None:
        super().__init__(message)
        self.result = result

    @property
    def skipped(self) -> list[str]:
        return self.result.skipped_hashes
