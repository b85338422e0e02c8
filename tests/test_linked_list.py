"""Tests for construction, mutation, query and conversion (core/linked_list.py).

Covers:

* The ``[1, 2, 3]`` walk-through scenario
* Structure sharing by ``prepend`` and in-place ``append`` / ``remove``
* The empty-list identity results
* Algebraic properties over a handful of sample lists
"""

from __future__ import annotations

from typing import Any

import pytest

from chainlist.core import (
    append,
    contains,
    empty,
    from_array,
    iterate,
    length,
    prepend,
    reduce,
    remove,
    to_array,
)
from chainlist.core.models import Node

SAMPLES: list[list[Any]] = [
    [],
    [1],
    [1, 2, 3],
    ["a", "b", "a"],
    [0, None, 0.5, "x", (1, 2)],
]


# ---------------------------------------------------------------------------
# Walk-through scenario
# ---------------------------------------------------------------------------

class TestScenario:
    def test_round_trip(self, one_two_three: Node[int]) -> None:
        assert to_array(one_two_three) == [1, 2, 3]

    def test_prepend(self, one_two_three: Node[int]) -> None:
        assert to_array(prepend(one_two_three, 0)) == [0, 1, 2, 3]

    def test_append(self, one_two_three: Node[int]) -> None:
        assert to_array(append(one_two_three, 4)) == [1, 2, 3, 4]

    def test_remove(self, one_two_three: Node[int]) -> None:
        assert to_array(remove(one_two_three, 2)) == [1, 3]

    def test_empty_round_trip(self) -> None:
        assert empty() is None
        assert to_array(empty()) == []


# ---------------------------------------------------------------------------
# Construction & mutation
# ---------------------------------------------------------------------------

class TestPrepend:
    def test_on_empty(self) -> None:
        head = prepend(empty(), "x")
        assert to_array(head) == ["x"]
        assert head.next is None

    def test_does_not_change_input(self, one_two_three: Node[int]) -> None:
        prepend(one_two_three, 0)
        assert to_array(one_two_three) == [1, 2, 3]

    def test_shares_tail(self, one_two_three: Node[int]) -> None:
        new_head = prepend(one_two_three, 0)
        assert new_head.next is one_two_three

    def test_mutation_through_old_handle_is_visible(self, one_two_three: Node[int]) -> None:
        new_head = prepend(one_two_three, 0)
        append(one_two_three, 4)
        remove(one_two_three, 2)
        assert to_array(new_head) == [0, 1, 3, 4]

    def test_two_prepends_share_one_suffix(self, one_two_three: Node[int]) -> None:
        left = prepend(one_two_three, "l")
        right = prepend(one_two_three, "r")
        one_two_three.next.value = 20  # type: ignore[union-attr]
        assert to_array(left) == ["l", 1, 20, 3]
        assert to_array(right) == ["r", 1, 20, 3]


class TestAppend:
    def test_on_empty_returns_new_node(self) -> None:
        head = append(empty(), 1)
        assert isinstance(head, Node)
        assert to_array(head) == [1]

    def test_on_non_empty_returns_same_head(self, one_two_three: Node[int]) -> None:
        assert append(one_two_three, 4) is one_two_three

    def test_original_handle_observes_element(self, one_two_three: Node[int]) -> None:
        append(one_two_three, 4)
        assert to_array(one_two_three) == [1, 2, 3, 4]

    def test_ignoring_return_value_on_empty_loses_element(self) -> None:
        head = empty()
        append(head, 1)
        assert head is None

    def test_repeated_appends_keep_order(self) -> None:
        head = empty()
        for value in "abc":
            head = append(head, value)
        assert to_array(head) == ["a", "b", "c"]


class TestRemove:
    def test_from_empty(self) -> None:
        assert remove(empty(), 1) is None

    def test_absent_value_returns_same_head(self, one_two_three: Node[int]) -> None:
        assert remove(one_two_three, 9) is one_two_three
        assert to_array(one_two_three) == [1, 2, 3]

    def test_head_match_returns_next(self, one_two_three: Node[int]) -> None:
        second = one_two_three.next
        assert remove(one_two_three, 1) is second

    def test_head_match_leaves_removed_node_linked(self, one_two_three: Node[int]) -> None:
        remove(one_two_three, 1)
        assert to_array(one_two_three) == [1, 2, 3]

    def test_interior_match_mutates_in_place(self, one_two_three: Node[int]) -> None:
        assert remove(one_two_three, 2) is one_two_three
        assert to_array(one_two_three) == [1, 3]

    def test_tail_match(self, one_two_three: Node[int]) -> None:
        remove(one_two_three, 3)
        assert to_array(one_two_three) == [1, 2]
        assert one_two_three.next.next is None  # type: ignore[union-attr]

    def test_only_first_occurrence(self) -> None:
        head = from_array([1, 2, 1, 2])
        assert to_array(remove(head, 2)) == [1, 1, 2]

    def test_single_element_list(self) -> None:
        assert remove(from_array(["only"]), "only") is None

    def test_uses_value_equality(self) -> None:
        head = from_array([(1, 2), (3, 4)])
        assert to_array(remove(head, (3, 4))) == [(1, 2)]


# ---------------------------------------------------------------------------
# Query & traversal
# ---------------------------------------------------------------------------

class TestContains:
    def test_empty(self) -> None:
        assert contains(empty(), 1) is False

    def test_present_and_absent(self, one_two_three: Node[int]) -> None:
        assert contains(one_two_three, 3) is True
        assert contains(one_two_three, 4) is False

    def test_value_equality(self) -> None:
        assert contains(from_array([[1], [2]]), [2]) is True

    def test_short_circuits(self) -> None:
        seen: list[int] = []

        class Probe:
            def __init__(self, tag: int) -> None:
                self.tag = tag

            def __eq__(self, other: object) -> bool:
                seen.append(self.tag)
                return self.tag == 1

        assert contains(from_array([Probe(0), Probe(1), Probe(2)]), object()) is True
        assert seen == [0, 1]


class TestLength:
    def test_empty(self) -> None:
        assert length(empty()) == 0

    def test_counts_nodes(self, one_two_three: Node[int]) -> None:
        assert length(one_two_three) == 3

    def test_not_cached(self, one_two_three: Node[int]) -> None:
        append(one_two_three, 4)
        assert length(one_two_three) == 4


class TestIterate:
    def test_empty_makes_no_calls(self) -> None:
        calls: list[object] = []
        iterate(empty(), calls.append)
        assert calls == []

    def test_traversal_order(self, one_two_three: Node[int]) -> None:
        calls: list[int] = []
        iterate(one_two_three, calls.append)
        assert calls == [1, 2, 3]

    def test_returns_none(self, one_two_three: Node[int]) -> None:
        assert iterate(one_two_three, lambda _value: 42) is None

    def test_callback_errors_propagate(self, one_two_three: Node[int]) -> None:
        def boom(value: int) -> None:
            raise RuntimeError(value)

        with pytest.raises(RuntimeError):
            iterate(one_two_three, boom)


class TestReduce:
    def test_empty_returns_init(self) -> None:
        sentinel = object()
        assert reduce(empty(), lambda acc, _value: acc, sentinel) is sentinel

    def test_left_fold_order(self, one_two_three: Node[int]) -> None:
        assert reduce(one_two_three, lambda acc, value: acc + [value], []) == [1, 2, 3]
        assert reduce(one_two_three, lambda acc, value: f"({acc}{value})", "") == "(((1)2)3)"

    def test_sum(self, one_two_three: Node[int]) -> None:
        assert reduce(one_two_three, lambda acc, value: acc + value, 0) == 6


class TestConversions:
    def test_to_array_is_independent_storage(self, one_two_three: Node[int]) -> None:
        values = to_array(one_two_three)
        values.append(99)
        assert to_array(one_two_three) == [1, 2, 3]

    def test_from_empty_sequence(self) -> None:
        assert from_array([]) is None
        assert from_array(()) is None

    def test_from_tuple_and_string(self) -> None:
        assert to_array(from_array((1, 2))) == [1, 2]
        assert to_array(from_array("ab")) == ["a", "b"]

    def test_from_array_builds_new_nodes(self) -> None:
        source = [1, 2]
        head = from_array(source)
        source.append(3)
        assert to_array(head) == [1, 2]


# ---------------------------------------------------------------------------
# Properties over sample lists
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("values", SAMPLES)
class TestProperties:
    def test_round_trip(self, values: list[Any]) -> None:
        assert to_array(from_array(values)) == values

    def test_prepend_adds_one_and_contains(self, values: list[Any]) -> None:
        head = from_array(values)
        extended = prepend(head, "new")
        assert contains(extended, "new")
        assert length(extended) == length(head) + 1

    def test_append_adds_one_at_the_end(self, values: list[Any]) -> None:
        before = len(values)
        head = append(from_array(values), "new")
        assert length(head) == before + 1
        assert to_array(head)[-1] == "new"

    def test_reduce_counts_like_length(self, values: list[Any]) -> None:
        head = from_array(values)
        assert reduce(head, lambda acc, _value: acc + 1, 0) == length(head)

    def test_removing_absent_value_changes_nothing(self, values: list[Any]) -> None:
        head = from_array(values)
        assert to_array(remove(head, "absent")) == values


class TestRemoveUniqueValue:
    @pytest.mark.parametrize("target", [1, 2, 3])
    def test_length_drops_and_value_is_gone(self, target: int) -> None:
        head = from_array([1, 2, 3])
        result = remove(head, target)
        assert length(result) == 2
        assert not contains(result, target)
