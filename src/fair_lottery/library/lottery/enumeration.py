"""
Exhaustive enumeration of feasible assignments.

The search space is the Cartesian product of the per-item candidate sets.
Mandatory items contribute a single branch and infeasible items contribute
none, so only items with several interested people multiply the count.
"""

from __future__ import annotations

import math
from typing import Iterator, Sequence

from fair_lottery.library.error_messages import format_error
from fair_lottery.library.exceptions import EnumerationLimitError
from fair_lottery.library.lottery.candidates import CandidateSet
from fair_lottery.library.lottery.models import Assignment, Pick


def count_assignments(candidate_sets: Sequence[CandidateSet]) -> int:
    """
    Number of assignments :func:`enumerate_assignments` would produce.

    Parameters
    ----------
    candidate_sets
        Candidate sets in item order. Infeasible sets are ignored.

    Returns
    -------
    int
        Product of the sizes of the feasible candidate sets. A run with no
        feasible items has exactly one (empty) assignment.
    """
    return math.prod(len(cs) for cs in candidate_sets if cs.is_feasible)


def check_enumeration_limit(
    candidate_sets: Sequence[CandidateSet], max_assignments: int | None
) -> int:
    """
    Count the assignments and refuse runs above ``max_assignments``.

    Returns
    -------
    int
        The assignment count.

    Raises
    ------
    EnumerationLimitError
        If ``max_assignments`` is set and the count exceeds it.
    """
    n_assignments = count_assignments(candidate_sets)
    if max_assignments is not None and n_assignments > max_assignments:
        raise EnumerationLimitError(
            format_error(
                "enumeration_limit_exceeded",
                n_assignments=n_assignments,
                max_assignments=max_assignments,
            ),
            n_assignments=n_assignments,
            max_assignments=max_assignments,
        )
    return n_assignments


def enumerate_assignments(
    candidate_sets: Sequence[CandidateSet], max_assignments: int | None = None
) -> Iterator[Assignment]:
    """
    Generate every feasible assignment.

    Items are processed in order. A mandatory item adds its single pick
    without branching, an infeasible item is skipped without adding a pick,
    and an item with N candidates branches N ways. Assignments come out in
    lexicographic order of candidate position, first item varying slowest.

    Parameters
    ----------
    candidate_sets
        Candidate sets in item order.
    max_assignments
        Optional bound on the number of assignments. Checked before any
        assignment is generated.

    Returns
    -------
    Iterator[Assignment]
        Lazily generated assignments.

    Raises
    ------
    EnumerationLimitError
        If the number of assignments exceeds ``max_assignments``. Raised when
        this function is called, not when the iterator is first advanced.

    Examples
    --------
    >>> from fair_lottery.library.lottery.candidates import CandidateSet
    >>> sets = [CandidateSet("lamp", ("ann", "bob")), CandidateSet("rug", ())]
    >>> [[(p.item, p.assignee) for p in a] for a in enumerate_assignments(sets)]
    [[('lamp', 'ann')], [('lamp', 'bob')]]
    """
    feasible = [cs for cs in candidate_sets if cs.is_feasible]
    check_enumeration_limit(feasible, max_assignments)
    return _iter_assignments(feasible)


def _iter_assignments(feasible: list[CandidateSet]) -> Iterator[Assignment]:
    # Explicit stack of (next item index, partial assignment)
    stack: list[tuple[int, Assignment]] = [(0, ())]
    while stack:
        depth, partial = stack.pop()
        if depth == len(feasible):
            yield partial
            continue
        candidate_set = feasible[depth]
        # Reversed so the first candidate is popped first
        for person in reversed(candidate_set.candidates):
            stack.append((depth + 1, (*partial, Pick(candidate_set.item, person))))
