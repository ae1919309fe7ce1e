"""Tests for the Id value type and Labels."""

from __future__ import annotations

import copy
import pickle
import uuid

import pytest

from hr_id import Id, Label, Rule, ValidationError, label


class TestConstruction:
    def test_from_text(self) -> None:
        id_ = Id.from_text("my-service")
        assert id_.as_str() == "my-service"

    def test_non_ascii(self) -> None:
        assert Id("日本語").as_str() == "日本語"

    @pytest.mark.parametrize(
        "text,rule",
        [
            ("a..b", Rule.PATH_TRAVERSAL_SUBSTRING),
            ("has space", Rule.WHITESPACE),
            ("name#1", Rule.RESERVED_CHARACTER),
            ("", Rule.EMPTY),
            ("line\nbreak", Rule.CONTROL_CHARACTER),
        ],
    )
    def test_rejected(self, text: str, rule: Rule) -> None:
        with pytest.raises(ValidationError) as excinfo:
            Id.from_text(text)
        assert excinfo.value.rule is rule
        assert excinfo.value.offending_text == text

    def test_from_uuid(self) -> None:
        u = uuid.UUID("F47AC10B-58CC-4372-A567-0E02B2C3D479")
        assert Id.from_uuid(u).as_str() == "f47ac10b-58cc-4372-a567-0e02b2c3d479"

    def test_from_uuid_string(self) -> None:
        id_ = Id.from_uuid("{F47AC10B-58CC-4372-A567-0E02B2C3D479}")
        assert id_ == "f47ac10b-58cc-4372-a567-0e02b2c3d479"

    def test_from_uuid_random(self) -> None:
        for _ in range(20):
            u = uuid.uuid4()
            assert str(Id.from_uuid(u)) == str(u)

    def test_new_is_uuid_backed(self) -> None:
        id_ = Id.new()
        assert str(uuid.UUID(id_.as_str())) == id_.as_str()
        assert Id.new() != id_

    def test_from_int(self) -> None:
        assert Id.from_int(42) == "42"
        assert Id.from_int(0) == "0"

    def test_from_int_rejects_negative(self) -> None:
        with pytest.raises(ValueError):
            Id.from_int(-1)

    def test_from_int_rejects_bool(self) -> None:
        with pytest.raises(TypeError):
            Id.from_int(True)

    def test_try_from(self) -> None:
        assert Id.try_from("ok") == Id("ok")
        assert Id.try_from("not ok") is None

    def test_can_cast(self) -> None:
        assert Id.can_cast("ok")
        assert not Id.can_cast("a/b")

    def test_copy_constructor(self) -> None:
        original = Id("abc")
        assert Id(original) == original


class TestReadAccess:
    def test_text_forms_agree(self) -> None:
        id_ = Id("my-service")
        assert id_.as_str() == id_.text == id_.to_owned_string() == str(id_)
        assert type(id_.to_owned_string()) is str

    def test_display_has_no_quoting(self) -> None:
        assert f"<{Id('quote-me')}>" == "<quote-me>"

    def test_format_spec(self) -> None:
        assert f"{Id('ab'):>4}" == "  ab"

    def test_repr(self) -> None:
        assert repr(Id("abc")) == "Id('abc')"

    def test_len_counts_codepoints(self) -> None:
        assert len(Id("日本語")) == 3

    def test_starts_with(self) -> None:
        id_ = Id("service-a")
        assert id_.starts_with("service")
        assert not id_.starts_with("a")

    def test_as_int(self) -> None:
        assert Id("123").as_int() == 123
        assert Id("12a").as_int() is None
        assert Id("-1").as_int() is None
        assert Id("١٢").as_int() is None

    def test_get_size_counts_utf8(self) -> None:
        assert Id("日本").get_size() - Id("ab").get_size() == 4


class TestImmutability:
    def test_cannot_set_attribute(self) -> None:
        id_ = Id("abc")
        with pytest.raises(AttributeError):
            id_._text = "a b"  # type: ignore[misc]
        with pytest.raises(AttributeError):
            id_.other = 1  # type: ignore[attr-defined]
        assert id_ == "abc"

    def test_cannot_delete_attribute(self) -> None:
        with pytest.raises(AttributeError):
            del Id("abc")._text

    def test_pickle_round_trip(self) -> None:
        id_ = Id("pickled")
        restored = pickle.loads(pickle.dumps(id_))
        assert restored == id_
        assert type(restored) is Id

    def test_copy(self) -> None:
        id_ = Id("copied")
        assert copy.copy(id_) == id_
        assert copy.deepcopy(id_) == id_


class TestComparison:
    def test_equality_by_text(self) -> None:
        assert Id("a") == Id("a")
        assert Id("a") != Id("b")

    def test_equality_with_str(self) -> None:
        assert Id("a") == "a"
        assert "a" == Id("a")
        assert Id("a") != "b"

    def test_not_equal_to_other_types(self) -> None:
        assert Id("1") != 1
        assert Id("a") != None  # noqa: E711

    def test_ordering_matches_text(self) -> None:
        words = ["b", "a", "Z", "日本", "ab", "a-"]
        ids = sorted(Id(w) for w in words)
        assert [i.as_str() for i in ids] == sorted(words)

    def test_ordering_with_str(self) -> None:
        assert Id("a") < "b"
        assert Id("b") > "a"
        assert Id("a") <= "a"
        assert Id("a") >= "a"

    def test_ordering_with_other_types_raises(self) -> None:
        with pytest.raises(TypeError):
            Id("a") < 1  # noqa: B015

    def test_hash_consistent_with_equality(self) -> None:
        assert hash(Id("same")) == hash(Id("same"))
        assert hash(Id("same")) == hash("same")

    def test_dict_lookup_by_str(self) -> None:
        table = {Id("key"): 1}
        assert table["key"] == 1
        assert Id("key") in {"key"}

    def test_repeated_construction_deterministic(self) -> None:
        ids = {Id("stable") for _ in range(5)}
        assert len(ids) == 1


class TestLabel:
    def test_label_is_unchecked(self) -> None:
        assert isinstance(label("not valid"), Label)

    def test_label_display(self) -> None:
        hello = label("hello")
        world = Id("world")
        assert f"{hello}, {world}!" == "hello, world!"

    def test_label_equals_id(self) -> None:
        assert label("hello") == Id("hello")
        assert Id("hello") == label("hello")
        assert label("hello") == "hello"

    def test_label_to_id(self) -> None:
        assert label("hello").to_id() == Id("hello")
        assert Id(label("hello")) == "hello"

    def test_label_to_id_validates(self) -> None:
        with pytest.raises(ValidationError):
            label("has space").to_id()
        with pytest.raises(ValidationError):
            Id(label(""))

    def test_label_ordering(self) -> None:
        assert label("a") < label("b")
        assert label("a") < Id("b")
