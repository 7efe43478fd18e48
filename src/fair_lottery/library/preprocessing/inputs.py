"""
Cleaning raw lottery input into validated items and people.

Raw input is what a form or a YAML file provides: names that may be blank,
padded or repeated, and interests that may be recorded on the person, on the
item, or both.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from attrs import evolve

from fair_lottery.library.exceptions import InputValidationError
from fair_lottery.library.lottery.candidates import build_candidate_sets
from fair_lottery.library.lottery.models import Assignment, Item, Person
from fair_lottery.library.validation import validate_lottery_inputs


def clean_names(names: Iterable[Any]) -> list[str]:
    """
    Strip names and drop blanks and repeats, keeping first occurrence order.

    Examples
    --------
    >>> clean_names([" ann", "", "bob", "ann", None])
    ['ann', 'bob']
    """
    cleaned: list[str] = []
    for name in names:
        if name is None:
            continue
        name = str(name).strip()
        if name and name not in cleaned:
            cleaned.append(name)
    return cleaned


def _as_record(entry: Any, record_type: str) -> dict[str, Any]:
    if isinstance(entry, Mapping):
        return dict(entry)
    if entry is None or isinstance(entry, (str, int, float, bool)):
        return {"name": entry}
    raise InputValidationError(
        f"Each {record_type} must be a name or a mapping with a 'name' key, "
        f"got {type(entry).__name__}."
    )


def _as_list(value: Any, field_name: str) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Iterable):
        return list(value)
    raise InputValidationError(
        f"'{field_name}' must be a list of names, got {type(value).__name__}."
    )


def prepare_people(raw_people: Iterable[Any]) -> list[Person]:
    """
    Build people from raw entries.

    Each entry is either a name or a mapping with ``name`` and optional
    ``interests``. Blank names are dropped. When a name occurs more than once
    the entries are merged, with interests combined.

    Returns
    -------
    list[Person]
        People in first occurrence order
    """
    interests: dict[str, set[str]] = {}
    for entry in raw_people:
        record = _as_record(entry, "person")
        names = clean_names([record.get("name")])
        if not names:
            continue
        wanted = clean_names(_as_list(record.get("interests"), "interests"))
        interests.setdefault(names[0], set()).update(wanted)
    return [Person(name, frozenset(wanted)) for name, wanted in interests.items()]


def prepare_items(
    raw_items: Iterable[Any], people: Sequence[Person]
) -> tuple[list[Item], list[Person]]:
    """
    Build items from raw entries and fold item-side interest into people.

    Each entry is either a name or a mapping with ``name`` and optional
    ``mandatory_assignee`` and ``people``. ``people`` lists who is interested
    in the item; names that are not among ``people`` are ignored. Blank and
    repeated item names are dropped, keeping the first entry. A blank
    mandatory assignee counts as no claim; a claim naming an unknown person
    is kept, and the engine will leave that item out.

    Returns
    -------
    tuple[list[Item], list[Person]]
        The items, and the people with their interests extended by the
        item-side interest and restricted to known items
    """
    known_people = {person.name for person in people}
    items: list[Item] = []
    interested: dict[str, set[str]] = {person.name: set() for person in people}

    for entry in raw_items:
        record = _as_record(entry, "item")
        names = clean_names([record.get("name")])
        if not names or any(item.name == names[0] for item in items):
            continue
        name = names[0]

        claim = clean_names([record.get("mandatory_assignee")])
        items.append(Item(name, claim[0] if claim else None))

        for person in clean_names(_as_list(record.get("people"), "people")):
            if person in known_people:
                interested[person].add(name)

    item_names = {item.name for item in items}
    people = [
        evolve(p, interests=(p.interests | interested[p.name]) & item_names)
        for p in people
    ]
    return items, people


def build_lottery_inputs(raw: Mapping[str, Any]) -> tuple[list[Item], list[Person]]:
    """
    Build validated items and people from a raw mapping.

    Parameters
    ----------
    raw
        Mapping with ``people`` and ``items`` lists, as read from a YAML
        file or a form submission. See :func:`prepare_people` and
        :func:`prepare_items` for the accepted entry shapes.

    Returns
    -------
    tuple[list[Item], list[Person]]
        Items and people ready for :func:`run_assignment`

    Examples
    --------
    >>> items, people = build_lottery_inputs(
    ...     {
    ...         "people": ["ann", "bob", ""],
    ...         "items": [{"name": "lamp", "people": ["ann", "zoe"]}, ""],
    ...     }
    ... )
    >>> [item.name for item in items]
    ['lamp']
    >>> [(p.name, sorted(p.interests)) for p in people]
    [('ann', ['lamp']), ('bob', [])]
    """
    people = prepare_people(_as_list(raw.get("people"), "people"))
    items, people = prepare_items(_as_list(raw.get("items"), "items"), people)
    validate_lottery_inputs(items, people)
    return items, people


def can_run_lottery(items: Sequence[Item], people: Sequence[Person]) -> bool:
    """True when there is someone to draw for and at least one item can be assigned."""
    if not people:
        return False
    return any(cs.is_feasible for cs in build_candidate_sets(items, people))


def claim_items(
    items: Sequence[Item], assignment: Assignment, item_names: Iterable[str]
) -> list[Item]:
    """
    Turn lottery picks into mandatory claims.

    Items named in ``item_names`` that have a pick in ``assignment`` get the
    pick's assignee as their mandatory assignee, so later runs keep them with
    the same person. Other items are returned unchanged.

    Returns
    -------
    list[Item]
        New item records, in the original order
    """
    to_claim = set(item_names)
    winners = {pick.item: pick.assignee for pick in assignment}
    return [
        evolve(item, mandatory_assignee=winners[item.name])
        if item.name in to_claim and item.name in winners
        else item
        for item in items
    ]
