# =============================================================================
# tests/test_admin.py - Administrative Operation Tests
# =============================================================================

from __future__ import annotations

import pytest

from harper_dal import HarperCredentials, RemoteError
from harper_dal.models import AdminCommand, AdminOperation, StatusMessage
from harper_dal.operations import (
    add_user,
    alter_user,
    connect,
    create_authentication_tokens,
    create_attribute,
    create_schema,
    create_table,
    describe_all,
    describe_table,
    drop_schema,
    drop_table,
    drop_user,
    get_job,
    list_users,
    process_admin,
    refresh_operation_token,
    user_info,
)


class TestSchemaNotInherited:
    """Test administrative commands never take the session schema."""

    def test_describe_all_sends_no_schema(self, session, client):
        client.respond({"dev": {"dog": {}}})

        result = describe_all(session)

        assert client.last.payload == {"operation": "describe_all"}
        assert result == {"dev": {"dog": {}}}

    def test_process_admin_leaves_schema_empty(self, session, client):
        client.respond({"username": "hdb"})
        command = AdminCommand(operation=AdminOperation.USER_INFO)

        process_admin(session, command)

        assert command.schema_ is None
        assert "schema" not in client.last.payload

    def test_explicit_schema_is_sent(self, session, client):
        client.respond({"message": "table 'prod.dog' successfully created."})

        result = create_table(session, "prod", "dog", hash_attribute="dog_id")

        assert client.last.payload == {
            "operation": "create_table",
            "schema": "prod",
            "table": "dog",
            "hash_attribute": "dog_id",
        }
        assert isinstance(result, StatusMessage)
        assert result.message.startswith("table 'prod.dog'")


class TestSchemaAndTable:
    def test_create_schema(self, session, client):
        client.respond({"message": "schema 'prod' successfully created"})
        create_schema(session, "prod")
        assert client.last.payload == {"operation": "create_schema", "schema": "prod"}

    def test_drop_table(self, session, client):
        client.respond({"message": "successfully deleted table 'prod.dog'"})
        drop_table(session, "prod", "dog")
        assert client.last.payload == {"operation": "drop_table", "schema": "prod", "table": "dog"}

    def test_drop_schema(self, session, client):
        client.respond({"message": "successfully deleted schema 'prod'"})
        drop_schema(session, "prod")
        assert client.last.payload == {"operation": "drop_schema", "schema": "prod"}

    def test_create_attribute(self, session, client):
        client.respond({"message": "attribute 'prod.dog.breed' successfully created."})
        create_attribute(session, "prod", "dog", "breed")
        assert client.last.payload == {
            "operation": "create_attribute",
            "schema": "prod",
            "table": "dog",
            "attribute": "breed",
        }

    def test_describe_table(self, session, client):
        client.respond({"name": "dog", "hash_attribute": "id", "record_count": 3})

        result = describe_table(session, "dev", "dog")

        assert result["record_count"] == 3


class TestUsers:
    def test_add_user_sends_active(self, session, client):
        client.respond({"message": "hdb successfully added"})

        add_user(session, "hdb", "secret", "super_user")

        assert client.last.payload == {
            "operation": "add_user",
            "username": "hdb",
            "password": "secret",
            "role": "super_user",
            "active": True,
        }

    def test_alter_user_sends_only_changes(self, session, client):
        client.respond({"message": "updated 1 of 1 records"})
        alter_user(session, "hdb", active=False)
        assert client.last.payload == {"operation": "alter_user", "username": "hdb", "active": False}

    def test_drop_user(self, session, client):
        client.respond({"message": "hdb successfully deleted"})
        drop_user(session, "hdb")
        assert client.last.payload == {"operation": "drop_user", "username": "hdb"}

    def test_list_users(self, session, client):
        client.respond([{"username": "hdb", "active": True}])
        assert list_users(session) == [{"username": "hdb", "active": True}]

    def test_user_info(self, session, client):
        client.respond({"username": "hdb", "role": {"permission": {"super_user": True}}})
        assert user_info(session)["username"] == "hdb"


class TestJobs:
    def test_get_job(self, session, client):
        client.respond([{"id": "job-1", "status": "COMPLETE"}])

        jobs = get_job(session, "job-1")

        assert client.last.payload == {"operation": "get_job", "id": "job-1"}
        assert jobs[0]["status"] == "COMPLETE"


class TestTokens:
    """Test token issuance and session setup."""

    def test_create_tokens_without_authorization(self, session, client):
        client.respond({"operation_token": "op-2", "refresh_token": "re-2"})

        tokens = create_authentication_tokens(session, "hdb", "secret")

        assert "Authorization" not in client.last.headers
        assert client.last.payload == {
            "operation": "create_authentication_tokens",
            "username": "hdb",
            "password": "secret",
        }
        assert tokens.operation_token == "op-2"
        assert tokens.refresh_token == "re-2"
        assert session.auth_token == "op-token"

    def test_failed_login_does_not_log_password(self, session, client, caplog):
        """Test a rejected login logs the operation and status but not the credentials."""
        client.respond({"error": "Login failed"}, status=401)

        with caplog.at_level("DEBUG"), pytest.raises(RemoteError):
            create_authentication_tokens(session, "hdb", "s3cr3t-pw")

        assert "create_authentication_tokens" in caplog.text
        assert "401" in caplog.text
        assert "s3cr3t-pw" not in caplog.text

    def test_refresh_operation_token(self, session, client):
        client.respond({"operation_token": "op-3"})

        token = refresh_operation_token(session, "re-2")

        assert client.last.payload == {"operation": "refresh_operation_token", "refresh_token": "re-2"}
        assert token.operation_token == "op-3"

    def test_connect(self, client):
        client.respond({"operation_token": "op-1", "refresh_token": "re-1"})
        credentials = HarperCredentials(url="http://harper.test:9925", username="hdb", password="secret")

        session = connect(credentials, client=client, schema_name="dev")

        assert session.auth_token == "op-1"
        assert session.url == "http://harper.test:9925"
        assert session.schema_name == "dev"
        assert client.last.url == "http://harper.test:9925"
