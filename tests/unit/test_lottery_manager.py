"""
Tests for the lottery manager and the run_assignment entry point.

"""

from __future__ import annotations

import logging
from collections import Counter
from unittest.mock import patch

import numpy as np
import pandas as pd
import pytest
from conftest import STANDARD_SEED, make_people

from fair_lottery.library.config import LotteryConfig
from fair_lottery.library.exceptions import (
    ConfigurationError,
    EnumerationLimitError,
    InputValidationError,
)
from fair_lottery.library.lottery import (
    AssignmentResult,
    Item,
    LotteryManager,
    Person,
    Pick,
    run_assignment,
)

ALGORITHMS = [
    "uniform-random-per-item",
    "fairness-only",
    "consolidation-then-fairness",
]


class TestRunAssignment:
    """Test the single entry point."""

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_postconditions(self, algorithm, mixed_items, mixed_people, rng):
        """At most one pick per feasible item, each to an eligible person."""
        assignment = run_assignment(mixed_items, mixed_people, algorithm, rng=rng)
        assert [pick.item for pick in assignment] == ["A", "B"]
        assert assignment[0].assignee in {"P1", "P2", "P3"}
        assert assignment[1] == Pick("B", "P1")

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_mandatory_claim_honoured(self, algorithm, rng):
        """A claimed item stays with its claimant whatever others want."""
        people = make_people({"P1": [], "P2": ["B"], "P3": ["B"]})
        items = [Item("B", mandatory_assignee="P1")]
        for _ in range(10):
            assert run_assignment(items, people, algorithm, rng=rng) == (
                Pick("B", "P1"),
            )

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_degenerate_inputs(self, algorithm):
        assert run_assignment([], [], algorithm) == ()
        assert run_assignment([Item("A")], [], algorithm) == ()
        assert run_assignment([], make_people({"P1": []}), algorithm) == ()

    def test_consolidation_then_fairness(
        self, consolidation_items, consolidation_people
    ):
        assignment = run_assignment(
            consolidation_items, consolidation_people, "consolidation-then-fairness"
        )
        assert assignment == (Pick("X", "P1"), Pick("Y", "P1"))

    def test_fairness_only_tie_break(self):
        people = make_people({"P1": ["X"], "P2": ["X"]})
        rng = np.random.default_rng(STANDARD_SEED)
        n_runs = 1000
        counts = Counter(
            run_assignment([Item("X")], people, "fairness-only", rng=rng)[0].assignee
            for _ in range(n_runs)
        )
        assert counts["P1"] / n_runs == pytest.approx(0.5, abs=0.06)

    def test_does_not_mutate_inputs(self, mixed_items, mixed_people):
        items, people = list(mixed_items), list(mixed_people)
        run_assignment(items, people, "fairness-only")
        assert items == mixed_items
        assert people == mixed_people

    def test_max_assignments_bound(self):
        people = make_people({"P1": list("abcd"), "P2": list("abcd")})
        items = [Item(name) for name in "abcd"]
        with pytest.raises(EnumerationLimitError):
            run_assignment(items, people, "fairness-only", max_assignments=15)
        assert len(run_assignment(items, people, "fairness-only", max_assignments=16)) == 4

    def test_default_bound_applies(self):
        names = [f"i{n}" for n in range(21)]
        people = make_people({"P1": names, "P2": names})
        with pytest.raises(EnumerationLimitError, match="2,097,152"):
            run_assignment([Item(name) for name in names], people, "fairness-only")

    def test_none_removes_bound(self):
        names = [f"i{n}" for n in range(21)]
        people = make_people({"P1": names, "P2": names})
        only = tuple(Pick(name, "P1") for name in names)
        with patch(
            "fair_lottery.library.lottery.strategies.optimizing.enumerate_assignments",
            return_value=iter([only]),
        ) as enumerate_mock:
            assignment = run_assignment(
                [Item(name) for name in names],
                people,
                "fairness-only",
                max_assignments=None,
            )
        assert assignment == only
        assert enumerate_mock.call_args.args[1] is None

    def test_unknown_algorithm(self, mixed_items, mixed_people):
        with pytest.raises(ConfigurationError):
            run_assignment(mixed_items, mixed_people, "loudest")

    def test_duplicate_people_rejected(self):
        people = [Person("P1"), Person("P1")]
        with pytest.raises(InputValidationError, match="Duplicate person names"):
            run_assignment([Item("A")], people, "random")

    def test_empty_item_name_rejected(self):
        with pytest.raises(InputValidationError, match="Empty item name"):
            run_assignment([Item("")], [Person("P1")], "random")


class TestLotteryManager:
    """Test the manager and its results."""

    def test_result_metadata(self, mixed_items, mixed_people):
        manager = LotteryManager(LotteryConfig(algorithm="minimum-pickups", seed=3))
        result = manager.run_assignment(mixed_items, mixed_people)

        assert isinstance(result, AssignmentResult)
        assert result.algorithm == "consolidation-then-fairness"
        assert result.parameters == {
            "scoring_order": ["minimize-pickups", "minimize-gini"],
            "seed": 3,
            "max_assignments": 1_000_000,
        }
        assert result.infeasible_items == ("C",)
        assert result.as_mapping() == {"A": "P1", "B": "P1"}

    def test_algorithm_argument_overrides_config(self, mixed_items, mixed_people):
        manager = LotteryManager(LotteryConfig(algorithm="fairness-only"))
        result = manager.run_assignment(mixed_items, mixed_people, algorithm="random")
        assert result.algorithm == "uniform-random-per-item"
        assert result.parameters["scoring_order"] == []

    def test_seed_makes_runs_reproducible(self):
        people = make_people({f"P{i}": list("abcdef") for i in range(4)})
        items = [Item(name) for name in "abcdef"]
        manager = LotteryManager(LotteryConfig(seed=11))
        first = manager.run_assignment(items, people)
        second = manager.run_assignment(items, people)
        assert first.assignment == second.assignment

    def test_random_algorithm_ignores_enumeration_bound(self):
        """Random draws never enumerate, so the bound does not apply."""
        people = make_people({f"P{i}": list("abcdefgh") for i in range(4)})
        items = [Item(name) for name in "abcdefgh"]
        manager = LotteryManager(LotteryConfig(max_assignments=10))
        assert len(manager.run_assignment(items, people)) == 8

    def test_warns_about_infeasible_items(self, mixed_items, mixed_people, caplog):
        with caplog.at_level(logging.WARNING):
            LotteryManager().run_assignment(mixed_items, mixed_people)
        assert "left out: ['C']" in caplog.text


class TestAssignmentResult:
    """Test the result container."""

    @pytest.fixture
    def result(self):
        return AssignmentResult(
            algorithm="fairness-only",
            parameters={},
            assignment=[Pick("a", "P1"), Pick("b", "P1"), Pick("c", "P2")],
        )

    def test_lookups(self, result):
        assert len(result) == 3
        assert result.as_mapping() == {"a": "P1", "b": "P1", "c": "P2"}
        assert result.items_for("P1") == ["a", "b"]
        assert result.items_for("P3") == []

    def test_distribution(self, result):
        people = make_people({"P1": [], "P2": [], "P3": []})
        assert result.assignee_counts(people) == {"P1": 2, "P2": 1, "P3": 0}
        # |2-1| + |2-0| + |1-0| = 4, doubled for ordered pairs, over 2 * 9 * 1
        assert result.gini(people) == pytest.approx(8 / 18)

    def test_to_dataframe(self, result):
        expected = pd.DataFrame(
            {"item": ["a", "b", "c"], "assignee": ["P1", "P1", "P2"]}
        )
        pd.testing.assert_frame_equal(result.to_dataframe(), expected)

    def test_empty_dataframe_has_columns(self):
        result = AssignmentResult(algorithm="random", parameters={}, assignment=())
        assert list(result.to_dataframe().columns) == ["item", "assignee"]

    def test_repeated_item_rejected(self):
        from fair_lottery.library.exceptions import InternalConsistencyError

        with pytest.raises(InternalConsistencyError, match="more than once"):
            AssignmentResult(
                algorithm="random",
                parameters={},
                assignment=[Pick("a", "P1"), Pick("a", "P2")],
            )
