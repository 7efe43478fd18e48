"""
Algorithm registry and lookup functions.

This module provides the central registry mapping algorithm identifiers to
assignment functions, along with helper functions for querying the registry.
"""

from __future__ import annotations

from functools import partial
from typing import Callable

from fair_lottery.library.error_messages import format_error, suggest_similar
from fair_lottery.library.exceptions import ConfigurationError
from fair_lottery.library.lottery.models import Assignment
from fair_lottery.library.lottery.strategies import (
    optimizing_assignment,
    random_assignment,
)

# Scoring order for each optimizing algorithm, highest priority first
SCORING_ORDERS: dict[str, tuple[str, ...]] = {
    "fairness-only": ("minimize-gini",),
    "consolidation-then-fairness": ("minimize-pickups", "minimize-gini"),
}

# Names used by earlier releases of the web form
ALGORITHM_ALIASES: dict[str, str] = {
    "random": "uniform-random-per-item",
    "fairest": "fairness-only",
    "minimum-pickups": "consolidation-then-fairness",
}


def get_algorithm_functions() -> dict[str, Callable[..., Assignment]]:
    """
    Get the algorithm function registry.

    Returns
    -------
    dict[str, Callable]
        Dictionary mapping canonical algorithm identifiers to functions

    Notes
    -----
    ``uniform-random-per-item`` draws each item independently and never
    enumerates. The other algorithms run the same exhaustive search and differ
    only in the order of their scoring functions (see ``SCORING_ORDERS``).
    """
    functions: dict[str, Callable[..., Assignment]] = {
        "uniform-random-per-item": random_assignment,
    }
    for name, scoring_order in SCORING_ORDERS.items():
        functions[name] = partial(optimizing_assignment, scoring_functions=scoring_order)
    return functions


def resolve_algorithm(algorithm: str) -> str:
    """
    Map an algorithm identifier or alias to its canonical identifier.

    Matching ignores case and surrounding whitespace.

    Raises
    ------
    ConfigurationError
        If the identifier is not recognized
    """
    key = algorithm.strip().lower()
    key = ALGORITHM_ALIASES.get(key, key)
    available = list(get_algorithm_functions())
    if key not in available:
        raise ConfigurationError(
            format_error(
                "unknown_algorithm",
                algorithm=algorithm,
                suggestion=suggest_similar(key, available + list(ALGORITHM_ALIASES)),
            )
        )
    return key


def get_function(algorithm: str) -> Callable[..., Assignment]:
    """
    Get assignment function by algorithm identifier.

    Parameters
    ----------
    algorithm : str
        Algorithm identifier or alias (e.g., "fairness-only", "fairest")

    Returns
    -------
    Callable
        The function implementing the algorithm

    Raises
    ------
    ConfigurationError
        If the identifier is not recognized
    """
    return get_algorithm_functions()[resolve_algorithm(algorithm)]


def get_scoring_order(algorithm: str) -> tuple[str, ...]:
    """Scoring functions applied by an algorithm; empty for random draws."""
    return SCORING_ORDERS.get(resolve_algorithm(algorithm), ())


def is_optimizing_algorithm(algorithm: str) -> bool:
    """True when the algorithm enumerates every feasible assignment."""
    return resolve_algorithm(algorithm) in SCORING_ORDERS
