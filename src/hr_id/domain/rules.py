"""Rule taxonomy and the constant tables the grammar checker consults.

All tables are built once at import and never mutated.
"""

from __future__ import annotations

import re
from enum import StrEnum


class Rule(StrEnum):
    """The grammar rule an identifier candidate violated."""

    EMPTY = "empty"
    CONTROL_CHARACTER = "control_character"
    PATH_TRAVERSAL_SUBSTRING = "path_traversal_substring"
    RESERVED_CHARACTER = "reserved_character"
    WHITESPACE = "whitespace"


RESERVED_CHARS: frozenset[str] = frozenset(
    ["/", "~", "$", "`", "&", "|", "=", "^", "{", "}", "<", ">"]
    + ["'", "\"", "\\", "?", ":", "@", "#", "(", ")"]
)

PATH_TRAVERSAL = ".."

# Code points below this value are ASCII control characters.
CONTROL_LIMIT = 32

WHITESPACE_RE: re.Pattern[str] = re.compile(r"\s")

# Longest slice of offending text echoed back in diagnostics.
ECHO_LIMIT = 64
