"""
Output validation for lottery runs.

"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Sequence

from fair_lottery.library.exceptions import InternalConsistencyError

if TYPE_CHECKING:
    from fair_lottery.library.lottery.candidates import CandidateSet
    from fair_lottery.library.lottery.models import Assignment


def validate_unique_picks(assignment: Assignment) -> None:
    """
    Validate that no item appears in more than one pick.

    Raises
    ------
    InternalConsistencyError
        If an item is assigned more than once
    """
    repeated = sorted(item for item, n in Counter(p.item for p in assignment).items() if n > 1)
    if repeated:
        raise InternalConsistencyError(f"Items assigned more than once: {repeated}")


def validate_assignment(
    assignment: Assignment, candidate_sets: Sequence[CandidateSet]
) -> None:
    """
    Validate an assignment against the candidate sets it was drawn from.

    Every pick must be for a feasible item, and its assignee must be one of
    that item's candidates. Each item may appear at most once.

    Raises
    ------
    InternalConsistencyError
        If any of the above does not hold
    """
    validate_unique_picks(assignment)
    candidates_by_item = {cs.item: cs.candidates for cs in candidate_sets}
    for pick in assignment:
        allowed = candidates_by_item.get(pick.item, ())
        if pick.assignee not in allowed:
            raise InternalConsistencyError(
                f"Item '{pick.item}' was assigned to '{pick.assignee}', "
                f"who is not one of its candidates {list(allowed)}."
            )
