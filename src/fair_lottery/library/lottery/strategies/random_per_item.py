"""
Independent uniform draw per item.

"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from fair_lottery.library.lottery.candidates import CandidateSet
from fair_lottery.library.lottery.models import Assignment, Pick


def random_assignment(
    candidate_sets: Sequence[CandidateSet], rng: np.random.Generator
) -> Assignment:
    """
    Give each item to one of its candidates, chosen uniformly at random.

    Draws are independent per item, so this does not enumerate and runs in
    time linear in the number of items. Mandatory items go to their claimant
    without a draw; infeasible items are left out.

    Parameters
    ----------
    candidate_sets
        Candidate sets in item order.
    rng
        Random source for the draws.

    Returns
    -------
    Assignment
        One pick per feasible item, in item order.
    """
    picks = []
    for candidate_set in candidate_sets:
        if not candidate_set.is_feasible:
            continue
        if candidate_set.mandatory:
            assignee = candidate_set.candidates[0]
        else:
            assignee = candidate_set.candidates[int(rng.integers(len(candidate_set)))]
        picks.append(Pick(candidate_set.item, assignee))
    return tuple(picks)
