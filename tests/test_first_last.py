"""Tests for FirstLastComparator: explicit values sorted first or last."""

from functools import cmp_to_key

import pytest

from miscutils.first_last import FirstLastComparator

SENTENCE = "The quick brown fox jumps over the lazy dog"


def _sort_string(order, characters, use_compare=False):
    key = cmp_to_key(order.compare) if use_compare else order
    return "".join(sorted(characters, key=key))


@pytest.fixture(params=[False, True], ids=["key", "compare"])
def use_compare(request):
    """Run each ordering test both as sort key and as cmp function."""
    return request.param


class TestFirstLastOrdering:
    def test_delegates_without_values(self, use_compare):
        assert _sort_string(FirstLastComparator.compare_first([]), "cbda", use_compare) == "abcd"
        assert _sort_string(FirstLastComparator.compare_last([]), "cbda", use_compare) == "abcd"

    def test_single_value_first(self, use_compare):
        order = FirstLastComparator.compare_first(["o"])
        assert _sort_string(order, SENTENCE, use_compare) == "oooo        Tabcdeeefghhijklmnpqrrstuuvwxyz"

    def test_single_value_last_with_reverse_delegate(self, use_compare):
        order = FirstLastComparator.compare_last(["o"], key=lambda ch: -ord(ch))
        assert _sort_string(order, SENTENCE, use_compare) == "zyxwvuutsrrqpnmlkjihhgfeeedcbaT        oooo"

    def test_first_values_in_given_order(self, use_compare):
        order = FirstLastComparator.compare_first(["o", "r", "a"])
        assert _sort_string(order, SENTENCE, use_compare) == "oooorra        Tbcdeeefghhijklmnpqstuuvwxyz"

    def test_last_values_in_given_order(self, use_compare):
        order = FirstLastComparator.compare_last(["o", "r", "a"])
        assert _sort_string(order, SENTENCE, use_compare) == "        Tbcdeeefghhijklmnpqstuuvwxyzoooorra"

    def test_case_insensitive_delegate(self):
        order = FirstLastComparator.compare_last(["Always last"], key=str.casefold)
        names = ["bob", "Always last", "alice", "Carol"]
        assert sorted(names, key=order) == ["alice", "bob", "Carol", "Always last"]

    def test_none_as_explicit_value(self):
        values = ["zzzz", None, "last", "aaaa", "first", None, "    "]
        assert sorted(values, key=FirstLastComparator.compare_first([None, "first"])) == [
            None, None, "first", "    ", "aaaa", "last", "zzzz",
        ]
        assert sorted(values, key=FirstLastComparator.compare_last(["last", None])) == [
            "    ", "aaaa", "first", "zzzz", "last", None, None,
        ]

    def test_unhashable_values(self):
        order = FirstLastComparator.compare_first([[2]])
        assert sorted([[3], [2], [1]], key=order) == [[2], [1], [3]]


class TestFirstLastCompare:
    def test_compare_signs(self):
        order = FirstLastComparator.compare_first(["x", "y"])
        assert order.compare("x", "a") < 0
        assert order.compare("a", "x") > 0
        assert order.compare("x", "y") < 0
        assert order.compare("y", "x") > 0
        assert order.compare("x", "x") == 0
        assert order.compare("a", "b") < 0
        assert order.compare("b", "a") > 0
        assert order.compare("a", "a") == 0

    def test_compare_last_signs(self):
        order = FirstLastComparator.compare_last(["x"])
        assert order.compare("x", "a") > 0
        assert order.compare("a", "x") < 0


class TestFirstLastFactories:
    def test_values_are_required(self):
        with pytest.raises(TypeError, match="first values must not be None"):
            FirstLastComparator.compare_first(None)
        with pytest.raises(TypeError, match="last values must not be None"):
            FirstLastComparator.compare_last(None)

    def test_values_are_copied(self):
        values = ["a"]
        order = FirstLastComparator.compare_first(values)
        values.append("z")
        assert sorted(["z", "b", "a"], key=order) == ["a", "b", "z"]

    def test_repr(self):
        assert repr(FirstLastComparator.compare_last(["x"])) == "FirstLastComparator(last=['x'])"
