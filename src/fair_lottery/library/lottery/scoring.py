"""
Scoring functions for ranking candidate assignments.

Every scoring function takes ``(people, assignment)`` and returns a float
where higher is better. The optimizing strategy applies them in order, each
one only breaking the ties left by the ones before it.
"""

from __future__ import annotations

from typing import Callable, Sequence

from fair_lottery.library.error_messages import format_error, suggest_similar
from fair_lottery.library.exceptions import ConfigurationError, UnknownAssigneeError
from fair_lottery.library.lottery.models import Assignment, Person
from fair_lottery.library.utils.math import fairness_score

ScoringFunction = Callable[[Sequence[Person], Assignment], float]


def assignee_counts(people: Sequence[Person], assignment: Assignment) -> dict[str, int]:
    """
    Count the items each person receives.

    Every person appears in the result, with 0 when they receive nothing.

    Raises
    ------
    UnknownAssigneeError
        If a pick names someone who is not in ``people``.
    """
    counts = {person.name: 0 for person in people}
    for pick in assignment:
        if pick.assignee not in counts:
            raise UnknownAssigneeError(pick.assignee)
        counts[pick.assignee] += 1
    return counts


def minimize_gini(people: Sequence[Person], assignment: Assignment) -> float:
    """Score ``1 - Gini`` of the items-per-person distribution."""
    return fairness_score(list(assignee_counts(people, assignment).values()))


def minimize_pickups(people: Sequence[Person], assignment: Assignment) -> float:
    """
    Reward concentrating items on fewer people.

    Score is the number of people who receive nothing: the total number of
    people minus the number of distinct assignees.
    """
    distinct_assignees = {pick.assignee for pick in assignment}
    return float(len(people) - len(distinct_assignees))


def get_scoring_functions() -> dict[str, ScoringFunction]:
    """
    Get the scoring function registry.

    Returns
    -------
    dict[str, ScoringFunction]
        Dictionary mapping scoring function names to scoring functions
    """
    return {
        "minimize-gini": minimize_gini,
        "minimize-pickups": minimize_pickups,
    }


def get_scoring_function(name: str) -> ScoringFunction:
    """
    Get scoring function by name.

    Raises
    ------
    ConfigurationError
        If the name is not registered
    """
    scoring_functions = get_scoring_functions()
    if name not in scoring_functions:
        raise ConfigurationError(
            format_error(
                "unknown_scoring_function",
                name=name,
                suggestion=suggest_similar(name, list(scoring_functions)),
            )
        )
    return scoring_functions[name]


def resolve_scoring_functions(
    scoring_functions: Sequence[str | ScoringFunction],
) -> list[ScoringFunction]:
    """Turn a mix of registered names and callables into callables."""
    return [
        get_scoring_function(f) if isinstance(f, str) else f for f in scoring_functions
    ]
