"""
Exhaustive search with lexicographic scoring and uniform tie-breaking.

"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from fair_lottery.library.lottery.candidates import CandidateSet
from fair_lottery.library.lottery.enumeration import enumerate_assignments
from fair_lottery.library.lottery.models import Assignment, Person
from fair_lottery.library.lottery.scoring import (
    ScoringFunction,
    resolve_scoring_functions,
)

logger = logging.getLogger(__name__)

# Scores come from exact integer counts, so ties are exact up to rounding
SCORE_TOLERANCE = 1e-12


def select_best(
    candidates: list[Assignment],
    people: Sequence[Person],
    scoring_function: ScoringFunction,
) -> list[Assignment]:
    """Keep the candidates that reach the maximum score."""
    scores = np.array([scoring_function(people, a) for a in candidates], dtype=float)
    best = np.isclose(scores, scores.max(), rtol=0.0, atol=SCORE_TOLERANCE)
    return [a for a, keep in zip(candidates, best) if keep]


def optimizing_assignment(
    candidate_sets: Sequence[CandidateSet],
    people: Sequence[Person],
    scoring_functions: Sequence[str | ScoringFunction],
    rng: np.random.Generator,
    max_assignments: int | None = None,
) -> Assignment:
    """
    Pick the best assignment under an ordered list of scoring functions.

    Every feasible assignment is enumerated. Each scoring function in turn
    narrows the field to the assignments with the highest score; later
    functions only break ties left by earlier ones, and scoring stops as soon
    as a single assignment remains. Whatever is left at the end is drawn from
    uniformly, so equally good outcomes are equally likely. The random source
    is only used when there is a tie to break.

    Parameters
    ----------
    candidate_sets
        Candidate sets in item order.
    people
        Everyone taking part, including people who may receive nothing.
    scoring_functions
        Scoring functions or their registered names, highest priority first.
        With an empty list the result is a uniform draw over all feasible
        assignments.
    rng
        Random source for the tie-break.
    max_assignments
        Optional bound on the number of assignments to enumerate.

    Returns
    -------
    Assignment
        The selected assignment; empty when no item is feasible.

    Raises
    ------
    EnumerationLimitError
        If the search space exceeds ``max_assignments``.
    """
    resolved = resolve_scoring_functions(scoring_functions)
    candidates = list(enumerate_assignments(candidate_sets, max_assignments))
    logger.debug("Enumerated %d feasible assignments", len(candidates))

    for scoring_function in resolved:
        if len(candidates) == 1:
            break
        candidates = select_best(candidates, people, scoring_function)
        logger.debug(
            "%d assignments left after %s",
            len(candidates),
            getattr(scoring_function, "__name__", repr(scoring_function)),
        )

    if len(candidates) == 1:
        return candidates[0]
    logger.debug("Breaking a %d-way tie at random", len(candidates))
    return candidates[int(rng.integers(len(candidates)))]
