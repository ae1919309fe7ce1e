"""The Id value type and constant Labels.

INVARIANT: Every Id holds text that passed the grammar checker at
construction. Ids are immutable; a "modified" id is a new, re-validated Id.

Equality, ordering, and hashing delegate to the underlying text, so an Id
compares equal to (and hashes like) the plain ``str`` it wraps.
"""

from __future__ import annotations

import sys
import uuid
from typing import TYPE_CHECKING, Any

from pydantic_core import core_schema

from hr_id import hashing
from hr_id.domain.grammar import check_id, is_valid_id, validate_id

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler


def _text_of(value: object) -> str | None:
    if isinstance(value, _TextValue):
        return value._text
    if isinstance(value, str):
        return value
    return None


class _TextValue:
    """Shared read-only behaviour of Id and Label, delegated to the text."""

    __slots__ = ("_text",)

    _text: str

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._text,))

    def as_str(self) -> str:
        """The underlying text."""
        return self._text

    @property
    def text(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._text!r})"

    def __format__(self, format_spec: str) -> str:
        return format(self._text, format_spec)

    def __len__(self) -> int:
        return len(self._text)

    def __hash__(self) -> int:
        return hash(self._text)

    def __eq__(self, other: object) -> bool:
        text = _text_of(other)
        if text is None:
            return NotImplemented
        return self._text == text

    def __ne__(self, other: object) -> bool:
        text = _text_of(other)
        if text is None:
            return NotImplemented
        return self._text != text

    def __lt__(self, other: object) -> bool:
        text = _text_of(other)
        if text is None:
            return NotImplemented
        return self._text < text

    def __le__(self, other: object) -> bool:
        text = _text_of(other)
        if text is None:
            return NotImplemented
        return self._text <= text

    def __gt__(self, other: object) -> bool:
        text = _text_of(other)
        if text is None:
            return NotImplemented
        return self._text > text

    def __ge__(self, other: object) -> bool:
        text = _text_of(other)
        if text is None:
            return NotImplemented
        return self._text >= text


class Label(_TextValue):
    """A constant label, not checked until it becomes an Id.

    Meant for module-level constants whose text is known to be legal::

        HELLO = label("hello")
    """

    __slots__ = ()

    def __init__(self, text: str) -> None:
        object.__setattr__(self, "_text", text)

    def to_id(self) -> Id:
        """Validate this label and return it as an Id."""
        return Id(self._text)


def label(text: str) -> Label:
    """Return a :class:`Label` for *text* without validating it."""
    return Label(text)


class Id(_TextValue):
    """A human-readable id, safe to use as a URL segment or path component.

    Examples:
        >>> Id("my-service")
        Id('my-service')
        >>> str(Id.from_uuid(uuid.UUID("F47AC10B-58CC-4372-A567-0E02B2C3D479")))
        'f47ac10b-58cc-4372-a567-0e02b2c3d479'
    """

    __slots__ = ()

    def __init__(self, text: str | Label | Id) -> None:
        if isinstance(text, _TextValue):
            text = text._text
        object.__setattr__(self, "_text", validate_id(text))

    # --- Construction ---

    @classmethod
    def from_text(cls, text: str) -> Id:
        """Validate *text* and wrap it. Raises ValidationError on failure."""
        return cls(text)

    @classmethod
    def from_uuid(cls, value: uuid.UUID | str) -> Id:
        """Wrap the canonical lowercase hyphenated form of a UUID.

        A ``str`` is parsed as a UUID first, so any of the forms accepted
        by :class:`uuid.UUID` normalize to the same Id.
        """
        if not isinstance(value, uuid.UUID):
            value = uuid.UUID(value)
        return cls(str(value))

    @classmethod
    def from_int(cls, value: int) -> Id:
        """Wrap the decimal text of a non-negative integer."""
        if isinstance(value, bool) or not isinstance(value, int):
            msg = f"expected int, not {type(value).__name__}"
            raise TypeError(msg)
        if value < 0:
            msg = f"Id.from_int requires a non-negative integer, got {value}"
            raise ValueError(msg)
        return cls(str(value))

    @classmethod
    def new(cls) -> Id:
        """A fresh Id backed by a random (version 4) UUID."""
        return cls.from_uuid(uuid.uuid4())

    @classmethod
    def try_from(cls, text: str) -> Id | None:
        """Return an Id for *text*, or None if it fails the grammar."""
        if check_id(text) is not None:
            return None
        return cls(text)

    @classmethod
    def can_cast(cls, text: str) -> bool:
        """Whether :meth:`try_from` would succeed for *text*."""
        return is_valid_id(text)

    # --- Conversion ---

    def to_owned_string(self) -> str:
        """The underlying text as a plain ``str``."""
        return str(self._text)

    def as_int(self) -> int | None:
        """Parse this id as a non-negative decimal integer, if it is one."""
        if self._text.isascii() and self._text.isdigit():
            return int(self._text)
        return None

    def starts_with(self, prefix: str) -> bool:
        return self._text.startswith(prefix)

    def get_size(self) -> int:
        """Approximate memory footprint: object overhead plus UTF-8 payload."""
        return sys.getsizeof(self) + len(self._text.encode("utf-8"))

    # --- Content hashing ---

    def hash_into(self, hasher: hashing.Hasher) -> None:
        """Feed this id's length-framed UTF-8 bytes into *hasher*."""
        hashing.update_hash(hasher, self)

    def content_hash(self, algorithm: str = hashing.DEFAULT_ALGORITHM) -> bytes:
        """Stable digest of this id under the named hashlib *algorithm*."""
        return hashing.content_hash(self, algorithm)

    # --- Pydantic integration ---

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_str = core_schema.no_info_after_validator_function(
            cls, core_schema.str_schema(strict=True)
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [
                    core_schema.is_instance_schema(cls),
                    core_schema.no_info_after_validator_function(
                        cls, core_schema.is_instance_schema(Label)
                    ),
                    from_str,
                ]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.as_str, return_schema=core_schema.str_schema()
            ),
        )
