"""Schema, table, user and token operations.

Administrative commands never inherit the session's default schema:
several of them are schema-less, so every schema is passed explicitly.
"""

from typing import TYPE_CHECKING, Any

from harper_dal.clients.httpx_client import HttpxClient
from harper_dal.models.commands import AdminCommand, AdminOperation
from harper_dal.models.datatypes import Document, JsonValue
from harper_dal.models.results import AuthTokens, OperationToken, StatusMessage
from harper_dal.session import HarperCredentials, Session
from harper_dal.transport import run

if TYPE_CHECKING:
    from harper_dal.protocols import HttpClient


def process_admin(session: Session, command: AdminCommand, target: Any = JsonValue) -> Any:
    """Send an administrative command and decode the response into `target`."""
    return run(session, command, target)


def _status(session: Session, command: AdminCommand) -> StatusMessage:
    return process_admin(session, command, StatusMessage)


def create_schema(session: Session, schema: str) -> StatusMessage:
    return _status(session, AdminCommand(operation=AdminOperation.CREATE_SCHEMA, schema=schema))


def drop_schema(session: Session, schema: str) -> StatusMessage:
    return _status(session, AdminCommand(operation=AdminOperation.DROP_SCHEMA, schema=schema))


def create_table(session: Session, schema: str, table: str, hash_attribute: str = "id") -> StatusMessage:
    command = AdminCommand(
        operation=AdminOperation.CREATE_TABLE,
        schema=schema,
        table=table,
        hash_attribute=hash_attribute,
    )
    return _status(session, command)


def drop_table(session: Session, schema: str, table: str) -> StatusMessage:
    command = AdminCommand(operation=AdminOperation.DROP_TABLE, schema=schema, table=table)
    return _status(session, command)


def create_attribute(session: Session, schema: str, table: str, attribute: str) -> StatusMessage:
    command = AdminCommand(
        operation=AdminOperation.CREATE_ATTRIBUTE,
        schema=schema,
        table=table,
        attribute=attribute,
    )
    return _status(session, command)


def describe_table(session: Session, schema: str, table: str) -> Document:
    command = AdminCommand(operation=AdminOperation.DESCRIBE_TABLE, schema=schema, table=table)
    return process_admin(session, command, Document)


def describe_all(session: Session) -> Document:
    return process_admin(session, AdminCommand(operation=AdminOperation.DESCRIBE_ALL), Document)


def add_user(
    session: Session,
    username: str,
    password: str,
    role: str,
    active: bool = True,
) -> StatusMessage:
    command = AdminCommand(
        operation=AdminOperation.ADD_USER,
        username=username,
        password=password,
        role=role,
        active=active,
    )
    return _status(session, command)


def alter_user(
    session: Session,
    username: str,
    password: str | None = None,
    role: str | None = None,
    active: bool | None = None,
) -> StatusMessage:
    """Change a user. Arguments left as None are not sent."""
    command = AdminCommand(
        operation=AdminOperation.ALTER_USER,
        username=username,
        password=password,
        role=role,
        active=active,
    )
    return _status(session, command)


def drop_user(session: Session, username: str) -> StatusMessage:
    return _status(session, AdminCommand(operation=AdminOperation.DROP_USER, username=username))


def user_info(session: Session) -> Document:
    """Describe the user owning the session token."""
    return process_admin(session, AdminCommand(operation=AdminOperation.USER_INFO), Document)


def list_users(session: Session) -> list[Document]:
    return process_admin(session, AdminCommand(operation=AdminOperation.LIST_USERS), list[Document])


def get_job(session: Session, job_id: str) -> list[Document]:
    """Fetch the status of an asynchronous job, such as a bulk load."""
    command = AdminCommand(operation=AdminOperation.GET_JOB, id=job_id)
    return process_admin(session, command, list[Document])


def create_authentication_tokens(session: Session, username: str, password: str) -> AuthTokens:
    """Issue an operation token and a refresh token.

    Sent without an Authorization header even when the session has a token.
    """
    command = AdminCommand(
        operation=AdminOperation.CREATE_AUTHENTICATION_TOKENS,
        username=username,
        password=password,
    )
    return process_admin(session.with_token(None), command, AuthTokens)


def refresh_operation_token(session: Session, refresh_token: str) -> OperationToken:
    command = AdminCommand(operation=AdminOperation.REFRESH_OPERATION_TOKEN, refresh_token=refresh_token)
    return process_admin(session, command, OperationToken)


def connect(
    credentials: HarperCredentials,
    client: "HttpClient | None" = None,
    schema_name: str | None = None,
    debug: bool = False,
) -> Session:
    """Issue an operation token and return a session carrying it."""
    session = Session(
        client=client if client is not None else HttpxClient(),
        url=credentials.url,
        schema_name=schema_name,
        debug=debug,
    )
    tokens = create_authentication_tokens(session, credentials.username, credentials.password)
    return session.with_token(tokens.operation_token)
