"""Coercion helpers and the case-insensitive mapping."""
from lingopress.utils.coerce import (
    CaseInsensitiveDict,
    to_case_insensitive_map,
    to_flat_array,
    to_string_or_empty,
)


def test_to_string_or_empty():
    assert to_string_or_empty(None) == ""
    assert to_string_or_empty("A") == "A"
    assert to_string_or_empty(1) == "1"
    assert to_string_or_empty(b"bytes") == "bytes"


def test_to_flat_array_defaults_compact_and_dedup():
    assert to_flat_array(["ABC", [1, None]]) == ["ABC", "1"]
    assert to_flat_array([" a ", ["a", "b"], ""]) == ["a", "b"]
    assert to_flat_array(None) == []


def test_to_flat_array_without_compact_or_dedup():
    assert to_flat_array([None, " a ", "a"], compact=False, dedup=False) == ["", "a", "a"]


def test_to_flat_array_with_splitter():
    split = lambda s: s.split(",")
    assert to_flat_array(["1", ["2", "3"], "3, 4,5"], splitter=split) == ["1", "2", "3", "4", "5"]


def test_case_insensitive_dict_keeps_first_key_spelling():
    d = CaseInsensitiveDict({"It,Es": 1})
    assert d["it,es"] == 1
    assert "IT,ES" in d

    d["IT,ES"] = 2
    assert list(d) == ["It,Es"]
    assert d["it,es"] == 2

    assert d.pop("it,ES") == 2
    assert len(d) == 0


def test_case_insensitive_dict_compares_as_mapping():
    d = CaseInsensitiveDict(a=1, b=2)
    assert d == {"a": 1, "b": 2}
    assert d.copy() == d
    assert d.copy() is not d


def test_to_case_insensitive_map_is_recursive():
    m = to_case_insensitive_map({"a": {"b": "c"}, "list": [{"X": 1}]})
    assert isinstance(m, CaseInsensitiveDict)
    assert isinstance(m["A"], CaseInsensitiveDict)
    assert m["A"]["B"] == "c"
    assert m["LIST"][0]["x"] == 1


def test_to_case_insensitive_map_sanitizer_and_non_mappings():
    m = to_case_insensitive_map({"en": None, "es": "ABC", "it": 1}, sanitizer=to_string_or_empty)
    assert dict(m) == {"en": "", "es": "ABC", "it": "1"}

    assert to_case_insensitive_map("RAW") == {}
    assert to_case_insensitive_map(None) == {}
