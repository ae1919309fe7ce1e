"""A human-readable id which supports Unicode, safe for URLs and file paths.

Example::

    from hr_id import Id, label

    HELLO = label("hello")  # unchecked until converted
    world = Id("world")
    assert f"{HELLO}, {world}!" == "hello, world!"
"""

from __future__ import annotations

from hr_id.domain.grammar import Violation, check_id, is_valid_id, validate_id
from hr_id.domain.ids import Id, Label, label
from hr_id.domain.rules import RESERVED_CHARS, Rule
from hr_id.errors import DecodeError, ValidationError

__version__ = "0.5.1"

__all__ = [
    "RESERVED_CHARS",
    "DecodeError",
    "Id",
    "Label",
    "Rule",
    "ValidationError",
    "Violation",
    "check_id",
    "is_valid_id",
    "label",
    "validate_id",
]
