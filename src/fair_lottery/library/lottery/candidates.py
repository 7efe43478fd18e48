"""
Candidate sets: who may receive each item.

"""

from __future__ import annotations

from typing import Sequence

from attrs import define, field

from fair_lottery.library.lottery.models import Item, Person


@define(frozen=True)
class CandidateSet:
    """
    The people eligible to receive a single item.

    Attributes
    ----------
    item
        Name of the item.
    candidates
        Eligible people, in the order the people were supplied.
    mandatory
        True when the item was claimed by a known person, in which case
        ``candidates`` holds exactly that person.
    """

    item: str
    candidates: tuple[str, ...] = field(converter=tuple)
    mandatory: bool = False

    @property
    def is_feasible(self) -> bool:
        return len(self.candidates) > 0

    @property
    def branching(self) -> int:
        """Number of ways this item can go (1 for infeasible items)."""
        return max(len(self.candidates), 1)

    def __len__(self) -> int:
        return len(self.candidates)


def build_candidate_set(item: Item, people: Sequence[Person]) -> CandidateSet:
    """
    Derive the candidate set of one item.

    A mandatory claim reduces the set to the claimant, provided the claimant
    is one of ``people``; a claim naming nobody known makes the item
    infeasible. Otherwise everyone interested in the item is a candidate.
    """
    if item.mandatory_assignee is not None:
        known = any(p.name == item.mandatory_assignee for p in people)
        if known:
            return CandidateSet(item.name, (item.mandatory_assignee,), mandatory=True)
        return CandidateSet(item.name, ())

    return CandidateSet(item.name, tuple(p.name for p in people if p.wants(item.name)))


def build_candidate_sets(
    items: Sequence[Item], people: Sequence[Person]
) -> list[CandidateSet]:
    """Candidate sets for every item, in item order (infeasible items included)."""
    return [build_candidate_set(item, people) for item in items]


def infeasible_items(candidate_sets: Sequence[CandidateSet]) -> list[str]:
    """Names of items nobody can receive."""
    return [cs.item for cs in candidate_sets if not cs.is_feasible]
