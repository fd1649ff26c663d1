"""Command execution over the operations API.

Every command is POSTed as JSON to the session endpoint. Calls block for
the whole round trip and are never retried.
"""

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from harper_dal.codec import pretty
from harper_dal.errors import DecodingError, EncodingError, RemoteError, TransportError

if TYPE_CHECKING:
    from harper_dal.protocols import HttpResponse
    from harper_dal.session import Session

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _echo(session: "Session", label: str, raw: bytes) -> None:
    sink = session.sink or logger.info
    sink(f"--- {label} ---\n{pretty(raw)}")


def _read_best_effort(response: "HttpResponse") -> bytes | None:
    try:
        return response.read()
    except Exception:  # noqa: BLE001
        return None


def execute(session: "Session", command: Any) -> bytes:
    """Send `command` and return the raw response body.

    Raises:
        EncodingError: the command could not be serialized, nothing was sent.
        TransportError: the request failed or the body could not be read.
        RemoteError: the remote answered with a non-2xx status.
    """
    try:
        content = session.codec.encode(command)
    except Exception as e:
        logger.warning("Failed to encode command: %s", e)
        msg = f"Failed to encode command: {e}"
        raise EncodingError(msg, source=e) from e

    if session.debug:
        _echo(session, "REQUEST", content)

    headers = {"Content-Type": "application/json"}
    if session.auth_token:
        headers["Authorization"] = f"Bearer {session.auth_token}"

    try:
        response = session.client.send("POST", session.url, headers, content)
    except Exception as e:
        msg = f"Request to {session.url} failed: {e}"
        raise TransportError(msg, source=e) from e

    try:
        status = response.status_code
        if not 200 <= status < 300:
            body = _read_best_effort(response)
            if session.debug and body:
                _echo(session, "RESPONSE", body)
            logger.warning(
                "%s request failed with status %d", getattr(command, "operation", "unknown"), status
            )
            detail = pretty(body)[:500] if body else ""
            msg = f"Request failed with status {status}: {detail}"
            raise RemoteError(msg, status=status, body=body)
        try:
            result = response.read()
        except Exception as e:
            logger.warning("Failed to read response: %s", e)
            msg = f"Failed to read response: {e}"
            raise TransportError(msg, source=e) from e
    finally:
        response.close()

    if session.debug:
        _echo(session, "RESPONSE", result)
    return result


def decode(session: "Session", raw: bytes, target: type[T]) -> T:
    """Decode a response body into `target`.

    Raises:
        DecodingError: the body does not match `target`; the bytes are kept on the error.
    """
    try:
        return session.codec.decode(raw, target)
    except Exception as e:
        msg = f"Failed to decode response: {e}"
        raise DecodingError(msg, raw=raw, source=e) from e


def run(session: "Session", command: Any, target: type[T]) -> T:
    """Execute `command` and decode the response into `target`."""
    return decode(session, execute(session, command), target)
