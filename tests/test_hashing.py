"""Tests for content-hash contribution."""

from __future__ import annotations

import hashlib

import pytest

from hr_id import Id
from hr_id.hashing import content_hash, content_hash_hex, framed_bytes, update_hash


class TestFraming:
    def test_length_prefix(self) -> None:
        assert framed_bytes(Id("ab")) == b"\x00\x00\x00\x00\x00\x00\x00\x02ab"

    def test_prefix_counts_utf8_bytes(self) -> None:
        framed = framed_bytes(Id("日"))
        assert framed[:8] == (3).to_bytes(8, "big")
        assert framed[8:] == "日".encode()

    def test_concatenation_is_unambiguous(self) -> None:
        left = hashlib.sha256()
        update_hash(left, Id("ab"))
        update_hash(left, Id("c"))
        right = hashlib.sha256()
        update_hash(right, Id("a"))
        update_hash(right, Id("bc"))
        assert left.digest() != right.digest()


class TestContentHash:
    def test_known_digest(self) -> None:
        expected = hashlib.sha256(b"\x00" * 7 + b"\x0amy-service").hexdigest()
        assert content_hash_hex(Id("my-service")) == expected

    def test_deterministic(self) -> None:
        assert content_hash(Id("x")) == content_hash(Id("x"))
        assert Id("x").content_hash() == content_hash(Id("x"))

    def test_other_algorithm(self) -> None:
        digest = content_hash(Id("x"), "blake2b")
        assert digest == hashlib.blake2b(framed_bytes(Id("x"))).digest()

    def test_unknown_algorithm(self) -> None:
        with pytest.raises(ValueError):
            content_hash(Id("x"), "not-a-hash")

    def test_hash_into(self) -> None:
        hasher = hashlib.sha256()
        Id("x").hash_into(hasher)
        assert hasher.digest() == content_hash(Id("x"))
