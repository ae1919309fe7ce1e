"""Grammar checker for human-readable ids.

A legal id is any non-empty string containing none of:
- ASCII control characters (code point < 32)
- the substring ``..``
- a reserved punctuation character (see ``RESERVED_CHARS``)
- Unicode whitespace

Accepted text is kept verbatim: no case folding, trimming, or normalization.
"""

from __future__ import annotations

from pydantic import BaseModel

from hr_id.domain.rules import (
    CONTROL_LIMIT,
    ECHO_LIMIT,
    PATH_TRAVERSAL,
    RESERVED_CHARS,
    WHITESPACE_RE,
    Rule,
)
from hr_id.errors import ValidationError


def _echo(text: str) -> str:
    if len(text) <= ECHO_LIMIT:
        return repr(text)
    return repr(text[:ECHO_LIMIT]) + "..."


class Violation(BaseModel):
    """A single failed grammar rule.

    Attributes:
        rule: Which rule failed.
        text: The full rejected input.
        found: The character or substring that triggered the rule
            (empty for ``Rule.EMPTY``).
    """

    model_config = {"frozen": True}

    rule: Rule
    text: str
    found: str = ""

    @property
    def message(self) -> str:
        """Human-readable diagnostic with the input truncated for display."""
        echo = _echo(self.text)
        if self.rule is Rule.EMPTY:
            return "cannot construct an empty Id"
        if self.rule is Rule.CONTROL_CHARACTER:
            return f"Id {echo} contains ASCII control character {ord(self.found)}"
        if self.rule is Rule.PATH_TRAVERSAL_SUBSTRING:
            return f"Id {echo} contains disallowed pattern {self.found}"
        if self.rule is Rule.RESERVED_CHARACTER:
            return f"Id {echo} contains reserved character {self.found}"
        return f"Id {echo} is not allowed to contain whitespace {self.found!r}"


def check_id(text: str) -> Violation | None:
    """Return the first violated rule for *text*, or None if it is a legal id.

    Examples:
        >>> check_id("my-service") is None
        True
        >>> check_id("a..b").rule
        <Rule.PATH_TRAVERSAL_SUBSTRING: 'path_traversal_substring'>
    """
    if not isinstance(text, str):
        msg = f"Id must be constructed from str, not {type(text).__name__}"
        raise TypeError(msg)

    if not text:
        return Violation(rule=Rule.EMPTY, text=text)

    for char in text:
        if ord(char) < CONTROL_LIMIT:
            return Violation(rule=Rule.CONTROL_CHARACTER, text=text, found=char)

    if PATH_TRAVERSAL in text:
        return Violation(rule=Rule.PATH_TRAVERSAL_SUBSTRING, text=text, found=PATH_TRAVERSAL)

    for char in text:
        if char in RESERVED_CHARS:
            return Violation(rule=Rule.RESERVED_CHARACTER, text=text, found=char)

    match = WHITESPACE_RE.search(text)
    if match is not None:
        return Violation(rule=Rule.WHITESPACE, text=text, found=match.group())

    return None


def is_valid_id(text: str) -> bool:
    """Check whether *text* satisfies the id grammar."""
    return check_id(text) is None


def validate_id(text: str) -> str:
    """Return *text* unchanged if it is a legal id, else raise ValidationError."""
    violation = check_id(text)
    if violation is not None:
        raise ValidationError(violation)
    return text
