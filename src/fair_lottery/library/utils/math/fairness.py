"""
Inequality measures over per-person resource counts.

"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from fair_lottery.library.error_messages import format_error
from fair_lottery.library.exceptions import InputValidationError


def gini_coefficient(values: Iterable[float]) -> float:
    """
    Calculate the Gini coefficient of a distribution.

    Uses the mean absolute difference form

        G = sum_i sum_j |x_i - x_j| / (2 * n^2 * mean)

    which is 0 for a perfectly equal distribution and approaches 1 as a
    single member holds everything. With ``n`` members and one member holding
    every unit, ``G = (n - 1) / n``.

    Parameters
    ----------
    values
        Non-negative values, one per member of the population. Members that
        hold nothing must be included as zeros.

    Returns
    -------
    float
        Gini coefficient in [0, 1]. Returns 0.0 for an empty distribution,
        a single member, or a distribution where every value is zero.

    Raises
    ------
    InputValidationError
        If any value is negative.

    Examples
    --------
    >>> gini_coefficient([1, 1, 1])
    0.0
    >>> round(gini_coefficient([3, 0, 0]), 4)
    0.6667
    """
    x = np.asarray(list(values), dtype=float)
    n = x.size
    if n < 2:
        return 0.0

    negative = int((x < 0).sum())
    if negative:
        raise InputValidationError(
            format_error("negative_values", dataset_name="Gini input", count=negative)
        )

    mean = x.mean()
    if mean == 0:
        return 0.0

    # O(n^2) pairwise differences, n is the number of people in a run
    abs_diff_sum = np.abs(x[:, np.newaxis] - x[np.newaxis, :]).sum()
    return float(abs_diff_sum / (2 * n**2 * mean))


def fairness_score(values: Iterable[float]) -> float:
    """Fairness of a distribution, ``1 - gini_coefficient(values)``."""
    return 1.0 - gini_coefficient(values)
