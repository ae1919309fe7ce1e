"""Stable content-hash contribution for ids.

An id contributes ``len(utf8) as 8-byte big-endian`` followed by its UTF-8
bytes. The length prefix keeps adjacent fields of a composite structure
from running together: ("ab", "c") and ("a", "bc") hash differently.
"""

from __future__ import annotations

import hashlib
import struct
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from hr_id.domain.ids import Id

DEFAULT_ALGORITHM = "sha256"

_LENGTH = struct.Struct(">Q")


class Hasher(Protocol):
    """Anything with a hashlib-style ``update(bytes)`` method."""

    def update(self, data: bytes, /) -> None: ...


def framed_bytes(id_: Id) -> bytes:
    """Return the exact byte sequence *id_* feeds into a hash."""
    payload = id_.as_str().encode("utf-8")
    return _LENGTH.pack(len(payload)) + payload


def update_hash(hasher: Hasher, id_: Id) -> None:
    """Feed the framed bytes of *id_* into *hasher*."""
    hasher.update(framed_bytes(id_))


def content_hash(id_: Id, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """Digest of *id_* alone under the named hashlib *algorithm*."""
    hasher = hashlib.new(algorithm)
    update_hash(hasher, id_)
    return hasher.digest()


def content_hash_hex(id_: Id, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """Hex form of :func:`content_hash`."""
    return content_hash(id_, algorithm).hex()
