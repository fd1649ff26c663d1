"""Command envelopes.

Every request is one JSON document posted to the same endpoint and
distinguished by its `operation` field. Commands come in four families:
- `AdminCommand` for schema, table, user and role lifecycle
- `MutationCommand` for insert, update, upsert, delete and sql writes
- `ReadCommand` for lookups and queries
- `BulkLoadCommand` for CSV ingestion

Optional fields that are unset (None, empty text, empty list) are left out
of the wire form: the remote treats a present-but-empty field differently
from an absent one.
"""

from collections.abc import Sequence
from enum import StrEnum
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer

from harper_dal.models.datatypes import RecordId


class AdminOperation(StrEnum):
    """Administrative operations with helpers in `harper_dal.operations.admin`."""

    CREATE_SCHEMA = "create_schema"
    DROP_SCHEMA = "drop_schema"
    CREATE_TABLE = "create_table"
    DROP_TABLE = "drop_table"
    DESCRIBE_TABLE = "describe_table"
    DESCRIBE_ALL = "describe_all"
    CREATE_ATTRIBUTE = "create_attribute"
    ADD_USER = "add_user"
    ALTER_USER = "alter_user"
    DROP_USER = "drop_user"
    USER_INFO = "user_info"
    LIST_USERS = "list_users"
    GET_JOB = "get_job"
    CREATE_AUTHENTICATION_TOKENS = "create_authentication_tokens"
    REFRESH_OPERATION_TOKEN = "refresh_operation_token"


class MutationOperation(StrEnum):
    INSERT = "insert"
    UPDATE = "update"
    UPSERT = "upsert"
    DELETE = "delete"
    SQL = "sql"


class ReadOperation(StrEnum):
    SEARCH_BY_HASH = "search_by_hash"
    SEARCH_BY_VALUE = "search_by_value"
    SQL = "sql"


class BulkAction(StrEnum):
    """How rows of a bulk load are applied."""

    INSERT = "insert"
    UPDATE = "update"
    UPSERT = "upsert"


def _is_unset(value: object) -> bool:
    if value is None:
        return True
    return isinstance(value, str | list | tuple | dict) and not value


class Command(BaseModel):
    """Base for all command envelopes."""

    model_config = ConfigDict(populate_by_name=True)

    keep_empty: ClassVar[frozenset[str]] = frozenset()
    """Wire keys sent even when empty, as long as they are not None."""

    @model_serializer(mode="wrap")
    def omit_unset(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data: dict[str, Any] = handler(self)
        required = {
            field.alias or name
            for name, field in type(self).model_fields.items()
            if field.is_required()
        }
        return {
            k: v
            for k, v in data.items()
            if k in required or (k in self.keep_empty and v is not None) or not _is_unset(v)
        }


class AdminCommand(Command):
    """Request body for administrative operations.

    The session's default schema is never applied: operations that need
    a schema must carry it explicitly.
    """

    operation: str
    """Operation name, usually an `AdminOperation`."""

    schema_: str | None = Field(default=None, alias="schema")

    table: str | None = None

    attribute: str | None = None

    hash_attribute: str | None = None
    """Primary key attribute of a new table."""

    role: str | None = None

    username: str | None = None

    password: str | None = None

    active: bool | None = None
    """User status; `False` is sent, only `None` is omitted."""

    id: str | None = None
    """Job identifier for `get_job`."""

    refresh_token: str | None = None


class MutationCommand(Command):
    """Request body for data updates, by records or by sql."""

    keep_empty: ClassVar[frozenset[str]] = frozenset({"records"})

    operation: MutationOperation

    schema_: str | None = Field(default=None, alias="schema")
    """Defaults to the session schema when empty."""

    table: str | None = None

    records: Sequence[Any] | None = None
    """Records to write. Always a sequence, even for a single record.

    An empty sequence is sent as `[]`; only None leaves the key out.
    """

    hash_values: list[RecordId] | None = None
    """Identifiers of records to delete."""

    sql: str | None = None


class ReadCommand(Command):
    """Request body for lookups and queries.

    The response shape depends on the requested attributes or the query
    projection, so it is decoded into a type chosen by the caller.
    """

    operation: ReadOperation

    schema_: str | None = Field(default=None, alias="schema")
    """Defaults to the session schema when empty."""

    table: str | None = None

    hash_values: list[RecordId] | None = None

    get_attributes: list[str] | None = None

    search_attribute: str | None = None

    search_value: str | None = None

    sql: str | None = None


class BulkLoadCommand(Command):
    """Request body for a CSV data load.

    Kept apart from the other families: `action`, `table` and `data` are
    required here and always sent.
    """

    operation: Literal["csv_data_load"] = "csv_data_load"

    action: BulkAction

    table: str

    data: str
    """CSV text, one line per record."""

    schema_: str | None = Field(default=None, alias="schema")
