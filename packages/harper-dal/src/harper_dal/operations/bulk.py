"""Bulk CSV ingestion."""

import csv
import io
import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from harper_dal.models.commands import BulkAction, BulkLoadCommand
from harper_dal.models.results import BulkLoadResult, StatusMessage
from harper_dal.transport import run

if TYPE_CHECKING:
    from harper_dal.session import Session

logger = logging.getLogger(__name__)


def to_csv(rows: Iterable[Sequence[object]]) -> str:
    """Render rows as CSV text.

    Fields containing the delimiter, a quote or a line break are quoted and
    inner quotes doubled. Lines end with ``\\n``.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerows(rows)
    return buffer.getvalue()


def process_bulk_load(session: "Session", command: BulkLoadCommand) -> BulkLoadResult:
    """Submit a bulk load and extract the job identifier from the status message."""
    if not command.schema_:
        command.schema_ = session.schema_name
    status = run(session, command, StatusMessage)
    job_id = session.job_ids.extract(status.message)
    logger.debug("Bulk %s on %s started job %s", command.action, command.table, job_id)
    return BulkLoadResult(message=status.message, job_id=job_id)


def csv_data_load(
    session: "Session",
    table: str,
    action: BulkAction | str,
    rows: Iterable[Sequence[object]],
) -> str:
    """Load `rows` into `table` and return the job identifier.

    The first row is usually the header naming the attributes. Returns
    `JOB_ID_NOT_FOUND` when the status message carries no identifier.
    """
    command = BulkLoadCommand(action=BulkAction(action), table=table, data=to_csv(rows))
    return process_bulk_load(session, command).job_id
