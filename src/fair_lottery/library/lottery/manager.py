"""
Manager for orchestrating lottery runs.

This module provides the single entry point used by callers: given items,
people and an algorithm identifier, it derives the candidate sets, runs the
selected algorithm and returns the resulting assignment.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
from attrs import define, field

from fair_lottery.library.config import DEFAULT_MAX_ASSIGNMENTS, LotteryConfig
from fair_lottery.library.lottery.candidates import (
    build_candidate_sets,
    infeasible_items,
)
from fair_lottery.library.lottery.models import Assignment, Item, Person
from fair_lottery.library.lottery.registry import (
    get_function,
    get_scoring_order,
    resolve_algorithm,
)
from fair_lottery.library.lottery.results import AssignmentResult
from fair_lottery.library.utils import filter_function_parameters
from fair_lottery.library.validation import (
    validate_assignment,
    validate_lottery_inputs,
)

logger = logging.getLogger(__name__)


@define
class LotteryManager:
    """
    Manager for lottery runs with validation and result handling.

    Supported Algorithms
    --------------------
    - ``uniform-random-per-item``: each item goes to one of its interested
      people, drawn independently and uniformly
    - ``fairness-only``: among all feasible assignments, those with the lowest
      Gini coefficient of items per person; ties drawn uniformly
    - ``consolidation-then-fairness``: fewest distinct winners first, then
      lowest Gini; ties drawn uniformly

    Items claimed by a known person always go to that person. Items nobody
    can receive are left out of the assignment.

    Examples
    --------
    >>> from fair_lottery.library.lottery import Item, LotteryManager, Person
    >>> manager = LotteryManager(LotteryConfig(algorithm="fairness-only", seed=1))
    >>> result = manager.run_assignment(
    ...     items=[Item("lamp"), Item("rug", mandatory_assignee="ann")],
    ...     people=[Person("ann", {"lamp"}), Person("bob", {"lamp"})],
    ... )
    >>> result.as_mapping()
    {'lamp': 'bob', 'rug': 'ann'}
    """

    config: LotteryConfig = field(factory=LotteryConfig)

    def run_assignment(
        self,
        items: Sequence[Item],
        people: Sequence[Person],
        algorithm: str | None = None,
        rng: np.random.Generator | None = None,
    ) -> AssignmentResult:
        """
        Run a single lottery.

        Parameters
        ----------
        items
            Items to hand out, with optional mandatory claims
        people
            Everyone taking part, with the items they are interested in
        algorithm
            Algorithm identifier or alias; defaults to the configured one
        rng
            Random source for the run; defaults to one seeded from the config

        Returns
        -------
        AssignmentResult
            The selected assignment and the settings used to produce it

        Raises
        ------
        ConfigurationError
            If the algorithm is not recognized
        InputValidationError
            If item or person names are empty or duplicated
        EnumerationLimitError
            If an optimizing algorithm would exceed ``config.max_assignments``
        """
        algorithm = resolve_algorithm(algorithm or self.config.algorithm)
        validate_lottery_inputs(items, people)

        candidate_sets = build_candidate_sets(items, people)
        dropped = infeasible_items(candidate_sets)
        if dropped:
            logger.warning(
                "%d item(s) have no eligible recipient and are left out: %s",
                len(dropped),
                dropped,
            )

        if rng is None:
            rng = self.config.make_rng()

        assignment_func = get_function(algorithm)
        func_args = {
            "candidate_sets": candidate_sets,
            "people": people,
            "rng": rng,
            "max_assignments": self.config.max_assignments,
        }
        assignment = assignment_func(
            **filter_function_parameters(assignment_func, func_args)
        )
        validate_assignment(assignment, candidate_sets)

        logger.info(
            "Assigned %d of %d item(s) among %d people with %s",
            len(assignment),
            len(items),
            len(people),
            algorithm,
        )
        return AssignmentResult(
            algorithm=algorithm,
            parameters={
                "scoring_order": list(get_scoring_order(algorithm)),
                "seed": self.config.seed,
                "max_assignments": self.config.max_assignments,
            },
            assignment=assignment,
            infeasible_items=dropped,
        )


def run_assignment(
    items: Sequence[Item],
    people: Sequence[Person],
    algorithm: str,
    rng: np.random.Generator | None = None,
    max_assignments: int | None = DEFAULT_MAX_ASSIGNMENTS,
) -> Assignment:
    """
    Assign items to people with the given algorithm.

    Convenience wrapper around :meth:`LotteryManager.run_assignment` that
    returns the bare assignment.

    Parameters
    ----------
    items
        Items to hand out, with optional mandatory claims
    people
        Everyone taking part, with the items they are interested in
    algorithm
        One of ``uniform-random-per-item``, ``fairness-only``,
        ``consolidation-then-fairness`` (or an alias)
    rng
        Random source; a fresh unseeded generator when omitted
    max_assignments
        Bound on the search space of the optimizing algorithms; None removes
        the bound

    Returns
    -------
    Assignment
        One pick per feasible item, in item order
    """
    manager = LotteryManager(
        LotteryConfig(algorithm=algorithm, max_assignments=max_assignments)
    )
    return manager.run_assignment(items, people, rng=rng).assignment
