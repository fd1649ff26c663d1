"""One-call helpers for each command family.

Each helper builds a command, sends it through the transport and decodes
the matching result:
- admin: schema, table, user, job and token operations
- mutation: insert, update, upsert, delete and sql writes
- read: lookups by identifier or value, and sql queries
- bulk: CSV data loads
"""

from harper_dal.operations.admin import (
    add_user,
    alter_user,
    connect,
    create_attribute,
    create_authentication_tokens,
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
from harper_dal.operations.bulk import csv_data_load, process_bulk_load, to_csv
from harper_dal.operations.mutation import (
    delete,
    insert,
    insert_one,
    process_mutation,
    update,
    update_one,
    update_sql,
    upsert,
    upsert_one,
)
from harper_dal.operations.read import get, process_read, search_by_value, select

__all__ = [
    # Admin
    "add_user",
    "alter_user",
    "connect",
    "create_attribute",
    "create_authentication_tokens",
    "create_schema",
    "create_table",
    "describe_all",
    "describe_table",
    "drop_schema",
    "drop_table",
    "drop_user",
    "get_job",
    "list_users",
    "process_admin",
    "refresh_operation_token",
    "user_info",
    # Mutation
    "delete",
    "insert",
    "insert_one",
    "process_mutation",
    "update",
    "update_one",
    "update_sql",
    "upsert",
    "upsert_one",
    # Read
    "get",
    "process_read",
    "search_by_value",
    "select",
    # Bulk
    "csv_data_load",
    "process_bulk_load",
    "to_csv",
]
