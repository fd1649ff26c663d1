"""Shared value types for commands and results."""

from typing import Annotated

from pydantic import BeforeValidator
from typing_extensions import TypeAliasType

# JSON-compatible value type
JsonValue = TypeAliasType(
    "JsonValue", str | int | float | bool | None | list["JsonValue"] | dict[str, "JsonValue"]
)

# A record as sent in `records` or returned by a read.
Document = TypeAliasType("Document", dict[str, JsonValue])


def _as_text(value: object) -> object:
    # bool is an int subclass and is never a valid identifier
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


RecordId = Annotated[str, BeforeValidator(_as_text)]
"""Record identifier (hash value).

Always text. Auto-generated identifiers are alphanumeric, and tables
keyed by integers return them as JSON numbers, which are rendered as
their decimal text rather than kept numeric.
"""
