"""Result documents decoded from responses."""

from pydantic import BaseModel, Field

from harper_dal.models.datatypes import RecordId


class MutationResult(BaseModel):
    """Result of an insert, update, upsert, delete or sql write.

    Identifier lists keep the order the remote reported them in.
    """

    message: str = ""

    inserted_hashes: list[RecordId] = Field(default_factory=list)

    update_hashes: list[RecordId] = Field(default_factory=list)

    upserted_hashes: list[RecordId] = Field(default_factory=list)

    deleted_hashes: list[RecordId] = Field(default_factory=list)

    skipped_hashes: list[RecordId] = Field(default_factory=list)
    """Records the remote did not apply. Non-empty means partial failure."""


class StatusMessage(BaseModel):
    """Plain `{"message": ...}` response."""

    message: str = ""


class BulkLoadResult(StatusMessage):
    """Result of a bulk load: a status message carrying the job identifier."""

    job_id: str = ""
    """Identifier extracted from `message`, or `JOB_ID_NOT_FOUND`."""


class AuthTokens(BaseModel):
    """Tokens issued by `create_authentication_tokens`."""

    operation_token: str

    refresh_token: str = ""


class OperationToken(BaseModel):
    """Token issued by `refresh_operation_token`."""

    operation_token: str
