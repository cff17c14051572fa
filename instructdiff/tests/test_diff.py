# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

import pytest

from instructdiff import diff
from instructdiff.diff_format import Missing
from instructdiff.diffing.generic import merged_keys

from .utils import check_no_diff, check_symmetric_diff_detected


def test_diff_no_changes(old_document):
    # Empty
    check_no_diff({})
    check_no_diff([])
    # Primitives
    check_no_diff(None)
    check_no_diff(True)
    check_no_diff(0)
    check_no_diff("text")
    # Nested
    check_no_diff({"a": [1, {"b": [None, False, 2.5, "x"]}], "c": {}})
    # A full document
    check_no_diff(old_document)


def test_diff_deep_copy_of_deep_nesting():
    a = value = {}
    for i in range(100):
        value["level"] = {"items": [i, {}]}
        value = value["level"]["items"][1]
    assert diff(a, copy.deepcopy(a)) == {}


def test_diff_added_key():
    assert diff({"a": 1}, {"a": 1, "b": 2}) == {"b": {"old": Missing, "new": 2}}


def test_diff_removed_key():
    assert diff({"a": 1, "b": 2}, {"a": 1}) == {"b": {"old": 2, "new": Missing}}


def test_diff_changed_primitive():
    assert diff({"a": 1}, {"a": 2}) == {"a": {"old": 1, "new": 2}}


def test_diff_nested_path():
    a = {"steps": [{"title": "x"}]}
    b = {"steps": [{"title": "y"}]}
    assert diff(a, b) == {"steps[0].title": {"old": "x", "new": "y"}}


def test_diff_nested_index_path():
    a = {"steps": [{"warnings": ["a", "b"]}, {"warnings": ["c", "d"]}]}
    b = {"steps": [{"warnings": ["a", "b"]}, {"warnings": ["c", "e"]}]}
    assert diff(a, b) == {"steps[1].warnings[1]": {"old": "d", "new": "e"}}


def test_diff_array_length_mismatch_is_wholesale():
    d = diff({"tags": ["a"]}, {"tags": ["a", "b"]})
    assert d == {"tags": {"old": ["a"], "new": ["a", "b"]}}

    # Even when the common prefix differs, no items are compared
    d = diff({"tags": ["x", "y", "z"]}, {"tags": ["q"]})
    assert d == {"tags": {"old": ["x", "y", "z"], "new": ["q"]}}


def test_diff_type_change_short_circuits():
    assert diff({"x": "5"}, {"x": 5}) == {"x": {"old": "5", "new": 5}}
    assert diff({"x": [1]}, {"x": {"0": 1}}) == {"x": {"old": [1], "new": {"0": 1}}}
    assert diff({"x": None}, {"x": {}}) == {"x": {"old": None, "new": {}}}
    assert diff({"x": {"a": 1}}, {"x": "a"}) == {"x": {"old": {"a": 1}, "new": "a"}}


def test_diff_booleans_are_not_numbers():
    assert diff({"x": 1}, {"x": True}) == {"x": {"old": 1, "new": True}}
    assert diff({"x": False}, {"x": 0}) == {"x": {"old": False, "new": 0}}
    assert diff([1], [True]) == {"[0]": {"old": 1, "new": True}}
    assert diff(0, False) == {"": {"old": 0, "new": False}}


def test_diff_int_and_float_are_both_numbers():
    assert diff({"x": 1}, {"x": 1.0}) == {}
    assert diff({"x": 1}, {"x": 1.5}) == {"x": {"old": 1, "new": 1.5}}


def test_diff_null_is_not_missing():
    # An explicit null is a value, not an absent key
    assert diff({"a": None}, {}) == {"a": {"old": None, "new": Missing}}
    assert diff({}, {"a": None}) == {"a": {"old": Missing, "new": None}}
    assert diff({"a": None}, {"a": None}) == {}
    assert diff({"a": None}, {"a": 0}) == {"a": {"old": None, "new": 0}}


def test_diff_root_values():
    assert diff(1, 2) == {"": {"old": 1, "new": 2}}
    assert diff("a", None) == {"": {"old": "a", "new": None}}
    assert diff({"a": 1}, [1]) == {"": {"old": {"a": 1}, "new": [1]}}
    assert diff([1, 2], [1]) == {"": {"old": [1, 2], "new": [1]}}
    assert diff([1, 2], [1, 3]) == {"[1]": {"old": 2, "new": 3}}
    assert diff([{"a": 1}], [{"a": 2}]) == {"[0].a": {"old": 1, "new": 2}}


def test_diff_does_not_modify_inputs(old_document, new_document):
    a = copy.deepcopy(old_document)
    b = copy.deepcopy(new_document)
    diff(a, b)
    assert a == old_document
    assert b == new_document


def test_diff_is_deterministic(old_document, new_document):
    d1 = diff(old_document, new_document)
    d2 = diff(old_document, new_document)
    assert d1 == d2
    assert list(d1) == list(d2)


def test_diff_document(old_document, new_document):
    d = diff(old_document, new_document)
    assert list(d.items()) == [
        ("header.revision", {"old": "A", "new": "B"}),
        ("header.date", {"old": "2024-01-10", "new": "2024-02-01"}),
        ("header.tags", {"old": ["gearbox", "assembly"],
                         "new": ["gearbox", "assembly", "torque"]}),
        ("parts[1].quantity", {"old": 4, "new": 6}),
        ("parts[1].notes", {"old": "Grade 8.8", "new": Missing}),
        ("steps[0].warnings[0]", {"old": "Wear gloves", "new": "Wear safety gloves"}),
        ("steps[1].duration", {"old": Missing, "new": 10}),
    ]


def test_diff_key_order_old_keys_first():
    a = {"c": 1, "a": 1, "b": 1}
    b = {"d": 2, "b": 2, "a": 2, "e": 2}
    d = diff(a, b)
    assert list(d) == ["c", "a", "b", "d", "e"]
    assert list(merged_keys(a, b)) == ["c", "a", "b", "d", "e"]


@pytest.mark.parametrize("a, b", [
    ({}, {"a": 1}),
    ({"a": 1}, {"a": "1"}),
    ([], [None]),
    ([1, 2], [2, 1]),
    ({"a": [1, {"b": 2}]}, {"a": [1, {"b": 3}]}),
    ({"a": [1, {"b": 2}]}, {"a": [1, {"b": 2}, 3]}),
    (None, False),
    ("", []),
])
def test_diff_detected_in_both_directions(a, b):
    check_symmetric_diff_detected(a, b)


def test_diff_reverse_swaps_old_and_new(old_document, new_document):
    forward = diff(old_document, new_document)
    backward = diff(new_document, old_document)
    assert list(forward) == list(backward)
    for path, e in forward.items():
        assert backward[path] == {"old": e.new, "new": e.old}


def test_diff_entry_attributes():
    d = diff({"a": 1, "b": 2}, {"b": 3, "c": 4})
    assert d["a"].removed and not d["a"].added
    assert d["c"].added and not d["c"].removed
    assert not d["b"].added and not d["b"].removed
    assert (d["b"].old, d["b"].new) == (2, 3)


def test_diff_dotted_key_collides_with_nested_path():
    # Paths are not escaped, the entry found last wins
    a = {"a": {"b": 1}, "a.b": 1}
    b = {"a": {"b": 2}, "a.b": 3}
    assert diff(a, b) == {"a.b": {"old": 1, "new": 3}}
