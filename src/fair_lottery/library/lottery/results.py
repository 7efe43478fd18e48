"""
Result container for lottery runs.

"""

from __future__ import annotations

from typing import Sequence

import pandas as pd
from attrs import define, field

from fair_lottery.library.lottery.models import Assignment, Person
from fair_lottery.library.lottery.scoring import assignee_counts
from fair_lottery.library.utils.math import gini_coefficient
from fair_lottery.library.validation import validate_unique_picks


@define
class AssignmentResult:
    """Container for the outcome of a lottery run.

    Attributes
    ----------
    algorithm
        Canonical identifier of the algorithm that produced the assignment.
    parameters
        Settings used for the run (scoring order, seed, enumeration bound),
        kept so a run can be described and reproduced.
    assignment
        The selected picks, one per feasible item, in item order.
    infeasible_items
        Items that nobody could receive and were therefore left out.
    """

    algorithm: str
    parameters: dict
    assignment: Assignment = field(converter=tuple)
    infeasible_items: tuple[str, ...] = field(factory=tuple, converter=tuple, kw_only=True)

    def __attrs_post_init__(self):
        """Initialize and validate the result."""
        self.validate()

    def validate(self) -> None:
        """Check that no item is assigned twice."""
        validate_unique_picks(self.assignment)

    def __len__(self) -> int:
        return len(self.assignment)

    def as_mapping(self) -> dict[str, str]:
        """Item name to assignee name."""
        return {pick.item: pick.assignee for pick in self.assignment}

    def items_for(self, person: str) -> list[str]:
        """Items won by ``person``, in item order."""
        return [pick.item for pick in self.assignment if pick.assignee == person]

    def assignee_counts(self, people: Sequence[Person]) -> dict[str, int]:
        """Number of items each person receives, zeros included."""
        return assignee_counts(people, self.assignment)

    def gini(self, people: Sequence[Person]) -> float:
        """Gini coefficient of the items-per-person distribution."""
        return gini_coefficient(list(self.assignee_counts(people).values()))

    def to_dataframe(self) -> pd.DataFrame:
        """
        Results table with one row per pick.

        Returns
        -------
        pd.DataFrame
            Columns ``item`` and ``assignee``, in item order.
        """
        return pd.DataFrame(
            [(pick.item, pick.assignee) for pick in self.assignment],
            columns=["item", "assignee"],
        )
