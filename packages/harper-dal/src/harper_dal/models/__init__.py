"""Command and result models for the operations API."""

from harper_dal.models.commands import (
    AdminCommand,
    AdminOperation,
    BulkAction,
    BulkLoadCommand,
    Command,
    MutationCommand,
    MutationOperation,
    ReadCommand,
    ReadOperation,
)
from harper_dal.models.datatypes import Document, JsonValue, RecordId
from harper_dal.models.results import (
    AuthTokens,
    BulkLoadResult,
    MutationResult,
    OperationToken,
    StatusMessage,
)

__all__ = [
    # Commands
    "AdminCommand",
    "AdminOperation",
    "BulkAction",
    "BulkLoadCommand",
    "Command",
    "MutationCommand",
    "MutationOperation",
    "ReadCommand",
    "ReadOperation",
    # Results
    "AuthTokens",
    "BulkLoadResult",
    "MutationResult",
    "OperationToken",
    "StatusMessage",
    # Data types
    "Document",
    "JsonValue",
    "RecordId",
]
