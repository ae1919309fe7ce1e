"""Error types raised by hr_id.

ValidationError is what every grammar rejection raises, whether from
construction, serde decoding, or (as the cause of a DecodeError) the
stream codec. DecodeError additionally covers stream framing problems.
Passing a non-``str`` where text is expected, a negative int to
``Id.from_int``, or a malformed UUID string to ``Id.from_uuid`` raises
the usual TypeError/ValueError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hr_id.domain.grammar import Violation
    from hr_id.domain.rules import Rule


class ValidationError(ValueError):
    """A candidate string failed the identifier grammar.

    Attributes:
        violation: The structured violation produced by the grammar checker.
        rule: Shortcut for ``violation.rule``.
        offending_text: The full rejected input.
    """

    def __init__(self, violation: Violation) -> None:
        super().__init__(violation.message)
        self.violation = violation

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.violation,))

    @property
    def rule(self) -> Rule:
        return self.violation.rule

    @property
    def offending_text(self) -> str:
        return self.violation.text


class DecodeError(ValueError):
    """A serialized token could not be decoded into an Id.

    When the token decoded to a string but failed the grammar, ``violation``
    holds the grammar violation and the ValidationError is chained as
    ``__cause__``. Framing problems leave ``violation`` as None.
    """

    def __init__(self, message: str, violation: Violation | None = None) -> None:
        super().__init__(message)
        self.violation = violation

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (str(self), self.violation))
