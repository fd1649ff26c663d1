"""Client for the HarperDB operations API."""

from harper_dal.errors import (
    DecodingError,
    EncodingError,
    ErrorKind,
    HarperError,
    PartialFailure,
    RemoteError,
    TransportError,
)
from harper_dal.jobs import JOB_ID_NOT_FOUND, MessageJobIdExtractor
from harper_dal.protocols import HttpClient, HttpResponse, JobIdExtractor, JsonCodec
from harper_dal.session import DEFAULT_URL, HarperCredentials, Session
from harper_dal.transport import execute

__all__ = [
    "DEFAULT_URL",
    "JOB_ID_NOT_FOUND",
    "DecodingError",
    "EncodingError",
    "ErrorKind",
    "HarperCredentials",
    "HarperError",
    "HttpClient",
    "HttpResponse",
    "JobIdExtractor",
    "JsonCodec",
    "MessageJobIdExtractor",
    "PartialFailure",
    "RemoteError",
    "Session",
    "TransportError",
    "execute",
]
