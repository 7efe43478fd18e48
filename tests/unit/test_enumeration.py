"""
Tests for exhaustive assignment enumeration.

"""

from __future__ import annotations

import math

import pytest

from fair_lottery.library.exceptions import AssignmentError, EnumerationLimitError
from fair_lottery.library.lottery import (
    Pick,
    build_candidate_sets,
    count_assignments,
    enumerate_assignments,
)
from fair_lottery.library.lottery.candidates import CandidateSet


class TestEnumerateAssignments:
    """Test the Cartesian product over candidate sets."""

    def test_mixed_items(self, mixed_items, mixed_people):
        """Three-way A, claimed B and unwanted C give three assignments."""
        sets = build_candidate_sets(mixed_items, mixed_people)
        assignments = list(enumerate_assignments(sets))

        assert len(assignments) == 3
        for assignment in assignments:
            assert [pick.item for pick in assignment] == ["A", "B"]
            assert assignment[1] == Pick("B", "P1")
        assert [a[0].assignee for a in assignments] == ["P1", "P2", "P3"]

    def test_membership(self, mixed_items, mixed_people):
        """Every pick's assignee belongs to that item's candidate set."""
        sets = build_candidate_sets(mixed_items, mixed_people)
        candidates = {cs.item: cs.candidates for cs in sets}
        for assignment in enumerate_assignments(sets):
            for pick in assignment:
                assert pick.assignee in candidates[pick.item]

    def test_count_is_product_of_set_sizes(self):
        sets = [
            CandidateSet("a", ("p", "q")),
            CandidateSet("b", ()),
            CandidateSet("c", ("p", "q", "r")),
            CandidateSet("d", ("q",), mandatory=True),
            CandidateSet("e", ("p", "r")),
        ]
        assignments = list(enumerate_assignments(sets))
        assert count_assignments(sets) == 12
        assert len(assignments) == 12
        assert len(set(assignments)) == 12

    def test_first_item_varies_slowest(self):
        sets = [CandidateSet("a", ("p", "q")), CandidateSet("b", ("p", "q"))]
        assignments = [
            tuple(pick.assignee for pick in a) for a in enumerate_assignments(sets)
        ]
        assert assignments == [("p", "p"), ("p", "q"), ("q", "p"), ("q", "q")]

    def test_no_feasible_items_gives_one_empty_assignment(self):
        sets = [CandidateSet("a", ()), CandidateSet("b", ())]
        assert list(enumerate_assignments(sets)) == [()]
        assert count_assignments(sets) == 1

    def test_many_items_do_not_recurse(self):
        """Long item lists are handled without deep call stacks."""
        sets = [CandidateSet(f"item{i}", ("p",)) for i in range(5000)]
        (assignment,) = list(enumerate_assignments(sets))
        assert len(assignment) == 5000


class TestEnumerationLimit:
    """Test the bound on the search space."""

    def test_raises_before_generating(self):
        """The limit is checked when called, not when iterated."""
        sets = [CandidateSet(f"item{i}", ("p", "q", "r")) for i in range(3)]
        with pytest.raises(EnumerationLimitError, match="27") as excinfo:
            enumerate_assignments(sets, max_assignments=10)
        assert excinfo.value.n_assignments == 27
        assert excinfo.value.max_assignments == 10
        assert isinstance(excinfo.value, AssignmentError)

    def test_limit_is_inclusive(self):
        sets = [CandidateSet(f"item{i}", ("p", "q", "r")) for i in range(3)]
        assert len(list(enumerate_assignments(sets, max_assignments=27))) == 27

    def test_huge_space_counted_without_enumerating(self):
        sets = [CandidateSet(f"item{i}", ("p", "q")) for i in range(64)]
        assert count_assignments(sets) == 2**64
        with pytest.raises(EnumerationLimitError):
            enumerate_assignments(sets, max_assignments=math.factorial(10))
