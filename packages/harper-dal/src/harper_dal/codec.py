"""JSON codec backed by pydantic."""

from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter
from pydantic_core import from_json, to_json

T = TypeVar("T")


class PydanticCodec:
    """Default `JsonCodec`.

    Models are dumped by alias so wire keys like `schema` are used.
    """

    __slots__ = ()

    def encode(self, value: Any) -> bytes:
        if isinstance(value, BaseModel):
            return value.model_dump_json(by_alias=True).encode()
        return to_json(value, by_alias=True)

    def decode(self, raw: bytes, target: type[T]) -> T:
        return TypeAdapter(target).validate_json(raw)


def pretty(raw: bytes) -> str:
    """Indent a JSON body for display, falling back to the raw text."""
    try:
        return to_json(from_json(raw), indent=2).decode()
    except ValueError:
        return raw.decode(errors="replace")
