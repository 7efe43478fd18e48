"""
Records exchanged between the lottery engine and its callers.

All records are frozen: a run works on an immutable snapshot of the items and
people it was given and only ever produces new values.
"""

from __future__ import annotations

from attrs import define, field


@define(frozen=True)
class Item:
    """
    A discrete, indivisible thing to hand out.

    Attributes
    ----------
    name
        Unique, non-empty name within a run.
    mandatory_assignee
        Name of the person who has already claimed the item. When this names
        someone taking part in the run, the item always goes to them. When it
        names nobody known, the item cannot be assigned and is left out.
    """

    name: str
    mandatory_assignee: str | None = None


@define(frozen=True)
class Person:
    """
    Someone taking part in the lottery.

    Attributes
    ----------
    name
        Unique, non-empty name within a run.
    interests
        Names of the items this person is willing to receive.
    """

    name: str
    interests: frozenset[str] = field(factory=frozenset, converter=frozenset)

    def wants(self, item_name: str) -> bool:
        return item_name in self.interests


@define(frozen=True)
class Pick:
    """One item going to one person."""

    item: str
    assignee: str


# One pick per feasible item, in item order. Infeasible items have no pick.
Assignment = tuple[Pick, ...]
