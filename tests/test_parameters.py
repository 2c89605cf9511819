"""Tests for wren.http.parameters — immutable Parameters and MutableParameters."""

import pytest

from wren.http.parameters import MutableParameters, Parameters


class TestParameters:
    def test_getitem(self) -> None:
        p = Parameters.from_query_string("q=hello&page=2")
        assert p["q"] == "hello"
        assert p["page"] == "2"

    def test_missing_key_raises(self) -> None:
        with pytest.raises(KeyError):
            Parameters.from_query_string("q=hello")["missing"]

    def test_case_sensitive(self) -> None:
        p = Parameters([("Q", "1")])
        assert "Q" in p
        assert "q" not in p

    def test_get_list(self) -> None:
        p = Parameters.from_query_string("tag=python&tag=rust&q=hello")
        assert p.get_list("tag") == ["python", "rust"]
        assert p.get_list("missing") == []

    def test_get_with_default(self) -> None:
        p = Parameters([("q", "hello")])
        assert p.get("q") == "hello"
        assert p.get("missing") is None
        assert p.get("missing", "fallback") == "fallback"

    def test_blank_value_preserved(self) -> None:
        assert Parameters.from_query_string("flag=")["flag"] == ""

    def test_len_and_iter(self) -> None:
        p = Parameters([("a", "1"), ("b", "2"), ("a", "3")])
        assert len(p) == 2
        assert list(p) == ["a", "b"]

    def test_to_query_string(self) -> None:
        p = Parameters([("a", "alpha"), ("b", "bravo two"), ("a", "apple")])
        assert p.to_query_string() == "a=alpha&a=apple&b=bravo%20two"

    def test_to_query_string_encodes_names(self) -> None:
        assert Parameters([("a&b", "c=d")]).to_query_string() == "a%26b=c%3Dd"

    def test_to_query_string_empty(self) -> None:
        assert Parameters().to_query_string() == ""

    def test_from_mapping(self) -> None:
        p = Parameters.from_mapping({"a": ["1", "2"]})
        assert p.get_list("a") == ["1", "2"]

    def test_equality(self) -> None:
        assert Parameters([("a", "1")]) == Parameters.from_query_string("a=1")

    def test_repr(self) -> None:
        assert "hello" in repr(Parameters([("q", "hello")]))


class TestMutableParameters:
    def test_mutable_copy_round_trip(self) -> None:
        p = Parameters([("a", "1"), ("b", "2"), ("a", "3")])
        assert p.mutable_copy().freeze() == p

    def test_mutable_copy_is_independent(self) -> None:
        p = Parameters([("a", "1")])
        mutable = p.mutable_copy()
        mutable.add("a", "2")
        assert p.get_list("a") == ["1"]
        assert isinstance(mutable, MutableParameters)

    def test_keys_are_case_sensitive(self) -> None:
        mutable = MutableParameters({"a": ["1"]})
        mutable.add("A", "2")
        assert mutable.to_dict() == {"a": ["1"], "A": ["2"]}
