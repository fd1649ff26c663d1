"""Insert, update, upsert and delete operations."""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from harper_dal.errors import PartialFailure
from harper_dal.models.commands import MutationCommand, MutationOperation
from harper_dal.models.results import MutationResult
from harper_dal.transport import run

if TYPE_CHECKING:
    from harper_dal.session import Session

logger = logging.getLogger(__name__)


def process_mutation(session: "Session", command: MutationCommand) -> MutationResult:
    """Send a mutation and decode its result.

    An empty `schema` on the command is filled in from the session before
    sending; the change stays on the caller's command.

    Raises:
        PartialFailure: the remote skipped records. The decoded result is
            available on the error.
    """
    if not command.schema_:
        command.schema_ = session.schema_name
    result = run(session, command, MutationResult)
    if result.skipped_hashes:
        logger.warning(
            "%s on %s skipped %d records", command.operation, command.table, len(result.skipped_hashes)
        )
        msg = f"{len(result.skipped_hashes)} records skipped: {result.message}"
        raise PartialFailure(msg, result)
    return result


def _records(
    session: "Session", operation: MutationOperation, table: str, records: Sequence[Any]
) -> MutationResult:
    command = MutationCommand(operation=operation, table=table, records=records)
    return process_mutation(session, command)


def insert(session: "Session", table: str, records: Sequence[Any]) -> MutationResult:
    return _records(session, MutationOperation.INSERT, table, records)


def insert_one(session: "Session", table: str, record: Any) -> MutationResult:
    """Insert a single record. The API requires an array, so it is wrapped in one."""
    return _records(session, MutationOperation.INSERT, table, [record])


def update(session: "Session", table: str, records: Sequence[Any]) -> MutationResult:
    return _records(session, MutationOperation.UPDATE, table, records)


def update_one(session: "Session", table: str, record: Any) -> MutationResult:
    """Update a single record. The API requires an array, so it is wrapped in one."""
    return _records(session, MutationOperation.UPDATE, table, [record])


def upsert(session: "Session", table: str, records: Sequence[Any]) -> MutationResult:
    return _records(session, MutationOperation.UPSERT, table, records)


def upsert_one(session: "Session", table: str, record: Any) -> MutationResult:
    return _records(session, MutationOperation.UPSERT, table, [record])


def update_sql(session: "Session", sql: str) -> MutationResult:
    """Run an INSERT, UPDATE or DELETE statement."""
    return process_mutation(session, MutationCommand(operation=MutationOperation.SQL, sql=sql))


def delete(session: "Session", table: str, ids: Sequence[str]) -> MutationResult:
    """Delete records by identifier."""
    command = MutationCommand(operation=MutationOperation.DELETE, table=table, hash_values=list(ids))
    return process_mutation(session, command)
