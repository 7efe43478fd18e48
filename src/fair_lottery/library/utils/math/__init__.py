"""
Mathematical utilities for the fair-lottery library.

"""

from fair_lottery.library.utils.math.fairness import fairness_score, gini_coefficient

__all__ = ["fairness_score", "gini_coefficient"]
