"""
Input validation for lottery runs.

"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Iterable, Sequence

from fair_lottery.library.error_messages import format_error
from fair_lottery.library.exceptions import InputValidationError

if TYPE_CHECKING:
    from fair_lottery.library.lottery.models import Item, Person


def validate_names(names: Iterable[str], record_type: str) -> None:
    """
    Validate that names are non-empty and unique.

    Parameters
    ----------
    names
        Names to check, in input order
    record_type
        What the names belong to ("item" or "person"), used in messages

    Raises
    ------
    InputValidationError
        If a name is empty or blank, or a name occurs more than once
    """
    names = list(names)
    for position, name in enumerate(names):
        if not isinstance(name, str) or not name.strip():
            raise InputValidationError(
                format_error("empty_name", record_type=record_type, position=position)
            )

    duplicates = sorted(name for name, count in Counter(names).items() if count > 1)
    if duplicates:
        raise InputValidationError(
            format_error(
                "duplicate_names", record_type=record_type, duplicates=duplicates
            )
        )


def validate_lottery_inputs(items: Sequence[Item], people: Sequence[Person]) -> None:
    """
    Validate items and people before a run.

    A mandatory assignee who is not among ``people`` is not an error: the
    item simply cannot be assigned.

    Raises
    ------
    InputValidationError
        If item or person names are empty or duplicated
    """
    validate_names((item.name for item in items), "item")
    validate_names((person.name for person in people), "person")
