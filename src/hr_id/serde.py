"""Serialization adapters for Id.

An Id serializes as a bare string token. Decoding always re-runs the
grammar checker; invalid tokens are rejected, never coerced or truncated.

Inside pydantic models ``Id`` is an ordinary field type (see
``Id.__get_pydantic_core_schema__``); the helpers here cover standalone use.
"""

from __future__ import annotations

from pydantic import TypeAdapter

from hr_id.domain.ids import Id

IdAdapter: TypeAdapter[Id] = TypeAdapter(Id)


def encode(id_: Id) -> str:
    """Return the string token for *id_*."""
    return id_.as_str()


def decode(token: str) -> Id:
    """Validate a string token and return the Id.

    Raises:
        TypeError: *token* is not a ``str``.
        hr_id.errors.ValidationError: *token* fails the grammar.
    """
    if not isinstance(token, str):
        msg = f"Id token must be str, not {type(token).__name__}"
        raise TypeError(msg)
    return Id(token)


def dumps(id_: Id) -> str:
    """Encode *id_* as a JSON string literal."""
    return IdAdapter.dump_json(id_).decode("utf-8")


def loads(data: str | bytes) -> Id:
    """Decode a JSON string literal into an Id.

    Raises ``pydantic.ValidationError`` for non-string JSON or grammar
    violations; for the latter the original ``hr_id.errors.ValidationError``
    is available under ``exc.errors()[0]["ctx"]["error"]``.
    """
    return IdAdapter.validate_json(data)
