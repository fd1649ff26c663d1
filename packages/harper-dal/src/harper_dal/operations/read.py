"""Lookups and queries.

Read responses have no fixed shape: they depend on the requested
attributes or the query projection. Every operation takes the `target`
type to decode into, defaulting to a list of JSON documents.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, TypeVar

from harper_dal.models.commands import ReadCommand, ReadOperation
from harper_dal.models.datatypes import Document
from harper_dal.transport import run

if TYPE_CHECKING:
    from harper_dal.session import Session

T = TypeVar("T")

ALL_ATTRIBUTES = ("*",)


def process_read(session: "Session", command: ReadCommand, target: type[T]) -> T:
    """Send a read command and decode the response into `target`.

    An empty `schema` on the command is filled in from the session before
    sending; the change stays on the caller's command.
    """
    if not command.schema_:
        command.schema_ = session.schema_name
    return run(session, command, target)


def get(
    session: "Session",
    table: str,
    ids: Sequence[str],
    target: Any = list[Document],
) -> Any:
    """Fetch records by identifier with all attributes."""
    command = ReadCommand(
        operation=ReadOperation.SEARCH_BY_HASH,
        table=table,
        hash_values=list(ids),
        get_attributes=list(ALL_ATTRIBUTES),
    )
    return process_read(session, command, target)


def search_by_value(
    session: "Session",
    table: str,
    attribute: str,
    value: str,
    target: Any = list[Document],
    attributes: Sequence[str] = ALL_ATTRIBUTES,
) -> Any:
    """Fetch records whose `attribute` matches `value` (``*`` wildcards allowed)."""
    command = ReadCommand(
        operation=ReadOperation.SEARCH_BY_VALUE,
        table=table,
        search_attribute=attribute,
        search_value=value,
        get_attributes=list(attributes),
    )
    return process_read(session, command, target)


def select(session: "Session", sql: str, target: Any = list[Document]) -> Any:
    """Run a SELECT statement. The query names its own schema and table."""
    return process_read(session, ReadCommand(operation=ReadOperation.SQL, sql=sql), target)
